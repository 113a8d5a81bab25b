"""Logo detection."""

from __future__ import annotations

import logging

from pitchdeck.branding.models import ParsedDocument

logger = logging.getLogger(__name__)

# Tried in order; the first selector that matches anything decides.
LOGO_SELECTORS = (
    'img[class*="logo"]',
    'img[id*="logo"]',
    'a[class*="logo"] img',
    "header img",
    ".navbar-brand img",
    '[class*="brand"] img',
)

FAVICON_SELECTORS = (
    'link[rel="icon"]',
    'link[rel="shortcut icon"]',
)


def resolve_logo_url(src: str, base_url: str) -> str:
    """Make a logo ``src`` absolute against *base_url*.

    ``//host/x`` gets ``https:``, ``/x`` gets the base prepended, anything
    already starting with ``http`` is kept, and every other value is treated
    as relative to the site root.
    """
    if src.startswith("//"):
        return f"https:{src}"
    if src.startswith("/"):
        return f"{base_url}{src}"
    if not src.startswith("http"):
        return f"{base_url}/{src}"
    return src


def find_favicon_href(doc: ParsedDocument) -> str | None:
    """Return the first ``icon`` / ``shortcut icon`` link href, if any."""
    for selector in FAVICON_SELECTORS:
        href = doc.attr(selector, "href")
        if href:
            return href
    return None


def extract_logo(doc: ParsedDocument, base_url: str) -> str | None:
    """Return an absolute logo URL, falling back to the favicon link.

    Only the first selector with a match is consulted; when its first element
    has no ``src`` the favicon fallback is used directly.
    """
    for selector in LOGO_SELECTORS:
        el = doc.select_first(selector)
        if el is None:
            continue
        src = el.get("src")
        if src:
            logger.debug("logo matched %r", selector)
            return resolve_logo_url(src, base_url)
        break

    # Unlike logo sources, only root-relative favicon hrefs are resolved.
    favicon = find_favicon_href(doc)
    if favicon:
        if favicon.startswith("/"):
            return f"{base_url}{favicon}"
        return favicon
    return None
