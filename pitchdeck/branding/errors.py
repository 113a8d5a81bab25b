"""Exception hierarchy for the branding pipeline."""

from __future__ import annotations


class BrandingError(Exception):
    """Base class for every error the branding pipeline raises."""


class InvalidInput(BrandingError):
    """The input string is not an http(s) URL.  Raised before any network I/O."""


class FetchFailure(BrandingError):
    """The page could not be fetched (transport error, timeout, bad status, oversize body)."""


class BrandExtractionFailed(BrandingError):
    """Generic wrapper for every non-validation failure of an extraction run."""
