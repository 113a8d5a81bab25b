"""URL validation: the only stage that runs before any network I/O."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from pitchdeck.branding.errors import InvalidInput
from pitchdeck.branding.models import ValidatedUrl

_ALLOWED_SCHEMES = ("http", "https")

# Characters that can never appear in a host name (":" is left for IPv6).
_FORBIDDEN_HOST_CHARS = re.compile(r"[\s<>^|%\\#/?@\[\]\"'`{}]")


def validate_url(raw: str) -> ValidatedUrl:
    """Parse *raw* and return a :class:`ValidatedUrl`.

    Raises:
        InvalidInput: If *raw* is not a string, does not parse as a URL with
            a host, or uses a scheme other than ``http``/``https``.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidInput("Invalid URL")

    try:
        parts = urlsplit(raw.strip())
        hostname = parts.hostname
        port = parts.port
    except ValueError as exc:
        raise InvalidInput(f"Invalid URL: {exc}") from exc

    # Scheme-less strings ("not-a-url", "example.com/x") parse with an empty
    # scheme and netloc and are malformed rather than disallowed.
    if not parts.scheme or not hostname:
        raise InvalidInput("Invalid URL")
    if _FORBIDDEN_HOST_CHARS.search(hostname) or not hostname.isprintable():
        raise InvalidInput("Invalid URL: malformed host")
    scheme = parts.scheme.lower()
    if scheme not in _ALLOWED_SCHEMES:
        raise InvalidInput("Invalid URL protocol")

    host = f"[{hostname}]" if ":" in hostname else hostname
    if port is not None:
        host = f"{host}:{port}"

    return ValidatedUrl(url=raw.strip(), scheme=scheme, host=host)
