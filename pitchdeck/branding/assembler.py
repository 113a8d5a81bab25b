"""Final aggregation step of the pipeline."""

from __future__ import annotations

from pitchdeck.branding.models import BrandColors, BrandFonts, BrandMetadata, ExtractedBranding


def assemble_branding(
    logo: str | None,
    colors: BrandColors,
    fonts: BrandFonts,
    metadata: BrandMetadata,
) -> ExtractedBranding:
    return ExtractedBranding(logo=logo, colors=colors, fonts=fonts, metadata=metadata)
