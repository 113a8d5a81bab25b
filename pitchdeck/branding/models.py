"""Data models for the branding pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from bs4 import BeautifulSoup

DEFAULT_BACKGROUND = "#ffffff"
DEFAULT_TEXT = "#1a1a1a"


def _drop_none(values: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in values.items() if v is not None}


@dataclass(frozen=True)
class ValidatedUrl:
    """An http(s) URL that passed :func:`~pitchdeck.branding.validator.validate_url`."""

    url: str
    scheme: str
    host: str

    @property
    def base_url(self) -> str:
        """``scheme://host`` with no path, used to resolve relative references."""
        return f"{self.scheme}://{self.host}"


@dataclass(frozen=True)
class FetchedPage:
    """The raw markup returned for a :class:`ValidatedUrl`."""

    url: ValidatedUrl
    html: str
    status_code: int


@dataclass(frozen=True)
class ParsedDocument:
    """Parsed markup shared read-only by the signal extractors."""

    soup: BeautifulSoup

    def select(self, selector: str) -> list[Any]:
        return self.soup.select(selector)

    def select_first(self, selector: str) -> Any | None:
        return self.soup.select_one(selector)

    def attr(self, selector: str, name: str) -> str | None:
        """Return attribute *name* of the first match for *selector*.

        Empty strings count as missing.
        """
        el = self.soup.select_one(selector)
        if el is None:
            return None
        value = el.get(name)
        if isinstance(value, list):
            value = " ".join(value)
        return value or None


@dataclass(frozen=True)
class BrandColors:
    primary: str | None = None
    secondary: str | None = None
    accent: str | None = None
    background: str = DEFAULT_BACKGROUND
    text: str = DEFAULT_TEXT

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "primary": self.primary,
            "secondary": self.secondary,
            "accent": self.accent,
            "background": self.background,
            "text": self.text,
        })


@dataclass(frozen=True)
class BrandFonts:
    heading: str
    body: str

    def to_dict(self) -> dict[str, Any]:
        return {"heading": self.heading, "body": self.body}


@dataclass(frozen=True)
class BrandMetadata:
    title: str | None = None
    description: str | None = None
    favicon: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "title": self.title,
            "description": self.description,
            "favicon": self.favicon,
        })


@dataclass(frozen=True)
class ExtractedBranding:
    """Final result of one extraction run."""

    logo: str | None
    colors: BrandColors
    fonts: BrandFonts
    metadata: BrandMetadata

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the JSON payload returned by the API.

        Absent optional values are omitted rather than sent as ``null``.
        """
        return _drop_none({
            "logo": self.logo,
            "colors": self.colors.to_dict(),
            "fonts": self.fonts.to_dict(),
            "metadata": self.metadata.to_dict(),
        })
