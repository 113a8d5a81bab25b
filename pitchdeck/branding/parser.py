"""Markup parsing: raw HTML → :class:`ParsedDocument`."""

from __future__ import annotations

from bs4 import BeautifulSoup

from pitchdeck.branding.models import FetchedPage, ParsedDocument


def parse_markup(html: str) -> ParsedDocument:
    """Parse *html* with the lenient stdlib ``html.parser`` backend.

    Never raises on malformed markup; unclosed tags and a missing doctype
    simply produce whatever partial tree is recoverable.
    """
    return ParsedDocument(soup=BeautifulSoup(html, "html.parser"))


def parse_document(page: FetchedPage) -> ParsedDocument:
    return parse_markup(page.html)
