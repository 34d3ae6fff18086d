"""
config/settings.py
──────────────────
Application configuration loaded from environment variables.
"""
import os
from dataclasses import dataclass
from pathlib import Path

_ROOT = Path(__file__).resolve().parent.parent


@dataclass
class Settings:
    # Server (demo app)
    DEBUG: bool = os.getenv("DEBUG", "true").lower() == "true"
    PORT: int = int(os.getenv("PORT", "8050"))
    HOST: str = os.getenv("HOST", "0.0.0.0")

    # i18n
    DEFAULT_LANG: str = os.getenv("DEFAULT_LANG", "en")
    LOCALES_DIR: Path = Path(os.getenv("LOCALES_DIR", str(_ROOT / "src" / "i18n" / "locales")))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
