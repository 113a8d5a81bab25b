"""HTTP fetcher for branding extraction."""

from __future__ import annotations

import logging
import time

import httpx
from bs4 import UnicodeDammit

from pitchdeck.config import settings
from pitchdeck.branding.errors import FetchFailure
from pitchdeck.branding.models import FetchedPage, ValidatedUrl

logger = logging.getLogger(__name__)


def _decode(body: bytes, charset: str | None) -> str:
    """Decode *body* to text.

    A charset from the ``Content-Type`` header wins; otherwise the document's
    own ``<meta charset>`` (or BOM) is sniffed before falling back to UTF-8.
    """
    dammit = UnicodeDammit(
        body,
        known_definite_encodings=[charset] if charset else [],
        is_html=True,
    )
    if dammit.unicode_markup is not None:
        return dammit.unicode_markup
    return body.decode("utf-8", errors="replace")


def fetch_page(url: ValidatedUrl) -> FetchedPage:
    """GET *url* and return its markup as a :class:`FetchedPage`.

    A single attempt is made with the identifying ``settings.user_agent``.
    ``settings.request_timeout`` bounds each connect/read step and also the
    request as a whole, so a server trickling bytes cannot hold the fetch
    open.  The body is streamed and capped at ``settings.max_body_bytes``.

    Raises:
        FetchFailure: On any transport error, timeout, 4xx/5xx status, or a
            body larger than the cap.
    """
    headers = {"User-Agent": settings.user_agent}
    logger.debug("fetching %s", url.url)
    started = time.monotonic()

    try:
        with httpx.Client(
            headers=headers,
            timeout=settings.request_timeout,
            follow_redirects=True,
        ) as client:
            with client.stream("GET", url.url) as response:
                response.raise_for_status()
                body = bytearray()
                for chunk in response.iter_bytes():
                    body.extend(chunk)
                    if len(body) > settings.max_body_bytes:
                        raise FetchFailure(
                            f"Response body exceeds {settings.max_body_bytes} bytes"
                        )
                    if time.monotonic() - started > settings.request_timeout:
                        raise FetchFailure(
                            f"Request timed out after {settings.request_timeout:g}s"
                        )
                html = _decode(bytes(body), response.charset_encoding)
                status_code = response.status_code
    except httpx.HTTPError as exc:
        raise FetchFailure(str(exc) or exc.__class__.__name__) from exc

    logger.debug("fetched %s: HTTP %d, %d chars", url.url, status_code, len(html))
    return FetchedPage(url=url, html=html, status_code=status_code)
