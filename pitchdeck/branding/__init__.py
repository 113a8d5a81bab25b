"""Branding package — derive a site's logo, palette, fonts and metadata."""

from pitchdeck.branding.errors import (
    BrandExtractionFailed,
    BrandingError,
    FetchFailure,
    InvalidInput,
)
from pitchdeck.branding.models import (
    BrandColors,
    BrandFonts,
    BrandMetadata,
    ExtractedBranding,
)
from pitchdeck.branding.pipeline import extract_branding

__all__ = [
    "extract_branding",
    "ExtractedBranding",
    "BrandColors",
    "BrandFonts",
    "BrandMetadata",
    "BrandingError",
    "InvalidInput",
    "FetchFailure",
    "BrandExtractionFailed",
]
