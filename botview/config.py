"""Centralised settings for botview.

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
    # Input / output locations
    # ------------------------------------------------------------------
    input_file: Path = field(
        default_factory=lambda: Path(os.environ.get("BOTVIEW_INPUT_FILE", "urls.txt"))
    )
    output_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("BOTVIEW_OUTPUT_DIR", "seo_reports"))
    )

    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    max_attempts: int = field(
        default_factory=lambda: int(os.environ.get("BOTVIEW_MAX_ATTEMPTS", "3"))
    )
    retry_delay: float = field(
        default_factory=lambda: float(os.environ.get("BOTVIEW_RETRY_DELAY", "5.0"))
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("BOTVIEW_REQUEST_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # Console / report language ("en" or "ru")
    # ------------------------------------------------------------------
    language: str = field(
        default_factory=lambda: os.environ.get("BOTVIEW_LANG", "en")
    )

    def ensure_output_dir(self) -> None:
        """Create the output directory if it does not exist."""
        self.output_dir.mkdir(parents=True, exist_ok=True)


# Module-level singleton — import this everywhere:
#   from botview.config import settings
settings = Settings()
