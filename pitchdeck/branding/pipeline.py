"""Branding extraction pipeline.

``extract_branding`` runs the stages in order:

    validate → fetch → parse → {logo, colors, fonts, metadata} → assemble

Validation errors propagate unchanged as :class:`InvalidInput`.  Every other
failure is wrapped in :class:`BrandExtractionFailed`; no partial result is
ever returned.
"""

from __future__ import annotations

import logging

from pitchdeck.branding.assembler import assemble_branding
from pitchdeck.branding.colors import extract_colors
from pitchdeck.branding.errors import BrandExtractionFailed, InvalidInput
from pitchdeck.branding.fetcher import fetch_page
from pitchdeck.branding.fonts import extract_fonts
from pitchdeck.branding.logo import extract_logo
from pitchdeck.branding.metadata import extract_metadata
from pitchdeck.branding.models import ExtractedBranding, FetchedPage
from pitchdeck.branding.parser import parse_document
from pitchdeck.branding.validator import validate_url

logger = logging.getLogger(__name__)


def extract_from_page(page: FetchedPage) -> ExtractedBranding:
    """Run the parse, extract and assemble stages over an already fetched page."""
    doc = parse_document(page)
    base_url = page.url.base_url
    return assemble_branding(
        logo=extract_logo(doc, base_url),
        colors=extract_colors(doc),
        fonts=extract_fonts(doc),
        metadata=extract_metadata(doc, base_url),
    )


def extract_branding(url: str) -> ExtractedBranding:
    """Fetch *url* and derive its logo, palette, fonts and metadata.

    Raises:
        InvalidInput: *url* is malformed or not http(s).  No request is made.
        BrandExtractionFailed: The fetch failed, or anything else went wrong.
    """
    try:
        validated = validate_url(url)
        page = fetch_page(validated)
        branding = extract_from_page(page)
    except InvalidInput:
        raise
    except Exception as exc:
        logger.warning("branding extraction failed for %s: %s", url, exc)
        raise BrandExtractionFailed(
            f"Failed to extract branding: {str(exc) or 'Unknown error'}"
        ) from exc

    logger.info(
        "extracted branding for %s (logo=%s, primary=%s)",
        validated.base_url,
        "yes" if branding.logo else "no",
        branding.colors.primary,
    )
    return branding
