"""
config.py
Settings sourced from environment variables (.env supported) and logging setup.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class Settings:
    """Application configuration read once at start-up."""

    def __init__(self) -> None:
        load_dotenv()
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.app_title = os.getenv("APP_TITLE", "Subscription Manager")
        self.seed_sample_data = self._get_bool("SEED_SAMPLE_DATA", default=True)

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        value = value.strip().lower()
        if value in _TRUE:
            return True
        if value in _FALSE:
            return False
        raise RuntimeError(f"Environment variable {key} must be a boolean (true/false)")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
