"""Heading/body font detection from Google Fonts stylesheet links."""

from __future__ import annotations

import re
from urllib.parse import unquote

from pitchdeck.config import settings
from pitchdeck.branding.models import BrandFonts, ParsedDocument

_FAMILY_PATTERN = re.compile(r"family=([^:&]+)")


def parse_font_family(href: str) -> str | None:
    """Return the first ``family=`` name in a Google Fonts *href*.

    ``Open+Sans:wght@400`` → ``"Open Sans"``.
    """
    match = _FAMILY_PATTERN.search(href)
    if not match:
        return None
    return unquote(match.group(1).replace("+", " ")) or None


def extract_fonts(doc: ParsedDocument) -> BrandFonts:
    """First family found becomes the heading font, the next one the body font."""
    heading: str | None = None
    body: str | None = None

    for link in doc.select('link[href*="fonts.googleapis.com"]'):
        family = parse_font_family(link.get("href") or "")
        if not family:
            continue
        if not heading:
            heading = family
        elif not body:
            body = family

    return BrandFonts(
        heading=heading or settings.default_font,
        body=body or settings.default_font,
    )
