"""Runtime settings for brand extraction and the HTTP API.

Every field reads an environment variable with a built-in default.  A `.env`
file at the repository root, if present, is read on import and never overrides
variables that are already set.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# .env sits next to pyproject.toml
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; PitchDeckBot/1.0; +https://pitchdeck.app)"


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Branding fetcher
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("BRANDING_REQUEST_TIMEOUT", "10.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get("BRANDING_USER_AGENT", _DEFAULT_USER_AGENT)
    )
    max_body_bytes: int = field(
        default_factory=lambda: int(os.environ.get("BRANDING_MAX_BODY_BYTES", str(5 * 1024 * 1024)))
    )

    # ------------------------------------------------------------------
    # Extraction defaults
    # ------------------------------------------------------------------
    default_font: str = field(
        default_factory=lambda: os.environ.get("BRANDING_DEFAULT_FONT", "Inter")
    )

    # ------------------------------------------------------------------
    # Logging / API
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO")
    )
    cors_origins: str = field(
        default_factory=lambda: os.environ.get("CORS_ORIGINS", "*")
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """``cors_origins`` split on commas, blanks dropped."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Shared instance; tests patch attributes on it directly.
settings = Settings()
