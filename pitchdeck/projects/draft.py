"""Project drafts pre-filled from a website's branding.

A draft is what the new-project form holds before it is submitted: the
user's own values plus whatever branding was extracted from the website URL.
Storage of the final project lives elsewhere.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from pitchdeck.branding import ExtractedBranding, extract_branding


def _default_colors() -> dict[str, str]:
    return {
        "primary": "#6366f1",
        "secondary": "#f1f5f9",
        "accent": "#10b981",
        "background": "#ffffff",
        "text": "#1a1a1a",
    }


def _default_fonts() -> dict[str, str]:
    return {"heading": "Inter", "body": "Inter"}


@dataclass
class ProjectDraft:
    name: str = ""
    description: str = ""
    website_url: str = ""
    logo: str = ""
    colors: dict[str, str] = field(default_factory=_default_colors)
    fonts: dict[str, str] = field(default_factory=_default_fonts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "website_url": self.website_url,
            "logo": self.logo,
            "colors": dict(self.colors),
            "fonts": dict(self.fonts),
        }


def apply_branding(draft: ProjectDraft, branding: ExtractedBranding) -> ProjectDraft:
    """Return a copy of *draft* with *branding* merged in.

    Name and description the user already typed are kept; logo, colors and
    fonts are overwritten by every value the extraction found.
    """
    brand = branding.to_dict()
    metadata = brand.get("metadata", {})
    return replace(
        draft,
        name=draft.name or metadata.get("title") or "",
        description=draft.description or metadata.get("description") or "",
        logo=brand.get("logo") or draft.logo,
        colors={**draft.colors, **brand["colors"]},
        fonts={**draft.fonts, **brand["fonts"]},
    )


def prefill_project(website_url: str, draft: ProjectDraft | None = None) -> ProjectDraft:
    """Extract branding from *website_url* and merge it into *draft*.

    Raises the same errors as :func:`~pitchdeck.branding.extract_branding`.
    """
    draft = replace(draft or ProjectDraft(), website_url=website_url)
    return apply_branding(draft, extract_branding(website_url))
