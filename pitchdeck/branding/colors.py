"""Brand color palette extraction.

Colors are found by scanning ``<style>`` blocks and inline ``style``
attributes with a regular expression, not by resolving the CSS cascade.
Near-neutral colors are discarded and the rest are ranked by how often they
occur.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, Iterator

from pitchdeck.branding.models import DEFAULT_BACKGROUND, DEFAULT_TEXT, BrandColors, ParsedDocument

COLOR_PATTERN = re.compile(
    r"#[0-9a-fA-F]{3,6}|rgb\([^)]+\)|rgba\([^)]+\)|hsl\([^)]+\)"
)
_CHANNEL_PATTERN = re.compile(r"\d+")

# Channel spread below which a color counts as gray.
GRAYSCALE_THRESHOLD = 20


def normalize_color(token: str) -> str | None:
    """Convert a matched color token to lowercase ``#rrggbb``.

    Returns ``None`` for tokens that have no hex form here: ``hsl(...)``,
    hex runs that are neither 3 nor 6 digits, and ``rgb`` with fewer than
    three channels.
    """
    if token.startswith("#"):
        hex_digits = token[1:].lower()
        if len(hex_digits) == 3:
            return "#" + "".join(c * 2 for c in hex_digits)
        if len(hex_digits) == 6:
            return "#" + hex_digits
        return None

    if token.startswith("rgb"):
        channels = [min(int(c), 255) for c in _CHANNEL_PATTERN.findall(token)]
        if len(channels) >= 3:
            r, g, b = channels[:3]
            return f"#{r:02x}{g:02x}{b:02x}"

    return None


def is_grayscale(hex_color: str) -> bool:
    """True when the R, G and B channels of ``#rrggbb`` are within the threshold."""
    if not hex_color.startswith("#") or len(hex_color) != 7:
        return False
    r, g, b = (int(hex_color[i:i + 2], 16) for i in (1, 3, 5))
    return max(r, g, b) - min(r, g, b) < GRAYSCALE_THRESHOLD


def _css_sources(doc: ParsedDocument) -> Iterator[str]:
    for style in doc.select("style"):
        yield style.get_text()
    for el in doc.select("[style]"):
        yield el.get("style") or ""


def rank_colors(sources: Iterable[str]) -> list[str]:
    """Return chromatic colors from *sources*, most frequent first.

    Ties keep the order in which the colors were first seen.
    """
    counts: Counter[str] = Counter()
    for text in sources:
        for token in COLOR_PATTERN.findall(text):
            color = normalize_color(token)
            if color and not is_grayscale(color):
                counts[color] += 1
    return [color for color, _ in counts.most_common()]


def extract_colors(doc: ParsedDocument) -> BrandColors:
    top = rank_colors(_css_sources(doc))[:3] + [None, None, None]
    return BrandColors(
        primary=top[0],
        secondary=top[1],
        accent=top[2],
        background=DEFAULT_BACKGROUND,
        text=DEFAULT_TEXT,
    )
