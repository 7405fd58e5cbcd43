import os
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from openrouter_dashboard.core.errors import ConfigError

# .env values never override variables already present in the environment
load_dotenv(find_dotenv(".env", usecwd=True))

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

TOKEN_HINT = "Generate a secure token with: openssl rand -base64 32"


def _bool_env(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return str(v).lower() in ("1", "true", "yes", "on")


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except (TypeError, ValueError):
        return default


def _float_env(name: str) -> Optional[float]:
    v = os.getenv(name)
    if not v:
        return None
    try:
        return float(v)
    except ValueError:
        return None


class Settings:
    """Simple settings loader that reads from environment with sensible defaults.

    Values are read once when the object is created; the process treats them
    as read-only afterwards. Call `validate()` before serving.
    """

    def __init__(self) -> None:
        # Secrets
        self.OPENROUTER_API_KEY: Optional[str] = os.getenv("OPENROUTER_API_KEY")
        self.DASHBOARD_TOKEN: Optional[str] = os.getenv("DASHBOARD_TOKEN")

        # Server
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = _int_env("PORT", 3000)
        self.UVICORN_RELOAD: bool = _bool_env("UVICORN_RELOAD", False)

        # Upstream
        self.OPENROUTER_BASE_URL: str = os.getenv("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1").rstrip("/")
        self.UPSTREAM_TIMEOUT: Optional[float] = _float_env("UPSTREAM_TIMEOUT")

        # Dashboard assets
        self.STATIC_DIR: str = os.getenv("STATIC_DIR", os.path.join(_PACKAGE_DIR, "static"))
        self.INDEX_FILE: str = os.getenv("INDEX_FILE", "index.html")

        # Embedding policy; empty string disables the CSP header
        self.FRAME_ANCESTORS: str = os.getenv("FRAME_ANCESTORS", "*")

        # Logging
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
        self.LOG_TO_CONSOLE: bool = _bool_env("LOG_TO_CONSOLE", True)
        self.LOG_FILE: Optional[str] = os.getenv("LOG_FILE")
        self.LOG_FORMAT: str = os.getenv("LOG_FORMAT", "%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    def missing_secrets(self) -> List[str]:
        missing = []
        if not self.OPENROUTER_API_KEY:
            missing.append("OPENROUTER_API_KEY")
        if not self.DASHBOARD_TOKEN:
            missing.append("DASHBOARD_TOKEN")
        return missing

    def validate(self) -> None:
        """Raise `ConfigError` for the first required secret that is unset or empty."""
        missing = self.missing_secrets()
        if not missing:
            return
        name = missing[0]
        hints = ["Please set it in your .env file or environment variables"]
        if name == "DASHBOARD_TOKEN":
            hints.append(TOKEN_HINT)
        raise ConfigError(name, hints)

    @property
    def index_path(self) -> str:
        return os.path.join(self.STATIC_DIR, self.INDEX_FILE)


settings = Settings()
