"""
config.py — Environment configuration for the API.

Settings are read from environment variables; a ``.env`` file at the project
root is loaded first without overriding variables that are already set.
"""

import os
from functools import lru_cache
from pathlib import Path

from skeletonne import __version__
from skeletonne.dsl.schema import ExportFormat
from skeletonne.engine.ids import get_id_factory

# Load .env file if it exists
def _load_dotenv():
    env_path = Path(__file__).parent.parent.parent / ".env"
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    key = key.strip()
                    value = value.strip()
                    if key and value and key not in os.environ:
                        os.environ[key] = value

_load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        # App
        self.app_name: str = os.environ.get("APP_NAME", "Skeletonne")
        self.app_version: str = os.environ.get("APP_VERSION", __version__)
        self.api_prefix: str = os.environ.get("API_PREFIX", "/api")

        # Server settings
        self.host: str = os.environ.get("HOST", "0.0.0.0")
        self.port: int = int(os.environ.get("PORT", "8000"))
        self.debug: bool = os.environ.get("DEBUG", "false").lower() == "true"
        self.log_level: str = os.environ.get("LOG_LEVEL", "INFO").upper()

        # CORS settings
        self.cors_origins: list = os.environ.get(
            "CORS_ORIGINS",
            "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173"
        ).split(",")

        # Engine
        self.id_strategy: str = os.environ.get("ID_STRATEGY", "uuid")
        self.default_export_format: str = os.environ.get("DEFAULT_EXPORT_FORMAT", "tsx")

        # Unknown values raise ValueError here
        get_id_factory(self.id_strategy)
        ExportFormat(self.default_export_format)

    @property
    def allowed_origins(self) -> list:
        """CORS origins with blanks removed."""
        return [o.strip() for o in self.cors_origins if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
