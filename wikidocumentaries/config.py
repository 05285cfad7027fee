"""Centralised settings for the Wikidocumentaries Wikipedia service.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Outbound identification
    # ------------------------------------------------------------------
    api_user_agent: str = field(
        default_factory=lambda: os.environ.get("WIKIDOCUMENTARIES_API_USER_AGENT", "")
    )

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("WIKIPEDIA_REQUEST_TIMEOUT", "10.0"))
    )
    retry_max: int = field(
        default_factory=lambda: int(os.environ.get("WIKIPEDIA_RETRY_MAX", "2"))
    )
    retry_base_delay: float = field(
        default_factory=lambda: float(os.environ.get("WIKIPEDIA_RETRY_BASE_DELAY", "0.5"))
    )

    @property
    def request_headers(self) -> dict[str, str]:
        """Headers sent with every request to Wikipedia."""
        return {"Api-User-Agent": self.api_user_agent}


# Module-level singleton — import this everywhere:
#   from wikidocumentaries.config import settings
settings = Settings()
