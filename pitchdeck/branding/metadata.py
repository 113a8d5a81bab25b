"""Title, description and favicon extraction."""

from __future__ import annotations

from pitchdeck.branding.logo import find_favicon_href
from pitchdeck.branding.models import BrandMetadata, ParsedDocument

DEFAULT_FAVICON_PATH = "/favicon.ico"


def _title(doc: ParsedDocument) -> str | None:
    title = doc.select_first("title")
    text = title.get_text().strip() if title is not None else ""
    return text or doc.attr('meta[property="og:title"]', "content")


def extract_metadata(doc: ParsedDocument, base_url: str) -> BrandMetadata:
    description = (
        doc.attr('meta[name="description"]', "content")
        or doc.attr('meta[property="og:description"]', "content")
    )

    favicon = find_favicon_href(doc) or DEFAULT_FAVICON_PATH
    if favicon.startswith("/"):
        favicon = f"{base_url}{favicon}"

    return BrandMetadata(title=_title(doc), description=description, favicon=favicon)
