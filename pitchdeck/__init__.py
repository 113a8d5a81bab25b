"""pitchdeck — backend for the pitch-deck authoring app (brand extraction)."""

__version__ = "0.1.0"
