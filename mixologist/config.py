"""Runtime configuration read from the environment."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_COCKTAILDB_URL = "https://www.thecocktaildb.com/api/json/v1/1"
DEFAULT_DB_PATH = Path.home() / ".mixologist" / "mixologist.db"

_ENV_PATHS = [
    Path.cwd() / ".env",
    Path(__file__).parent.parent / ".env",
]


def load_env_file() -> Path | None:
    """Load the first .env file found. Returns its path, or None."""
    for env_path in _ENV_PATHS:
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


def _is_configured(key: str) -> bool:
    """Placeholder values copied from .env.example count as unset."""
    return bool(key) and not key.startswith("your-")


def _get_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    ai_provider: str = "anthropic"
    ai_model: str | None = None
    anthropic_api_key: str = ""
    openai_api_key: str = ""
    image_generation: bool = True

    cocktaildb_base_url: str = DEFAULT_COCKTAILDB_URL
    request_timeout: float = 10.0
    ai_timeout: float = 60.0
    detail_fetch_limit: int = 8

    database_url: str = ""
    favorites_backend: str = "auto"
    favorites_retry_delay: float = 0.5

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, using defaults for missing values."""
        return cls(
            ai_provider=os.getenv("AI_PROVIDER", "anthropic").lower(),
            ai_model=os.getenv("AI_MODEL") or None,
            anthropic_api_key=os.getenv("ANTHROPIC_API_KEY", ""),
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            image_generation=_get_bool("IMAGE_GENERATION", "true"),
            cocktaildb_base_url=os.getenv("COCKTAILDB_BASE_URL", DEFAULT_COCKTAILDB_URL).rstrip("/"),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT", "10")),
            ai_timeout=float(os.getenv("AI_TIMEOUT", "60")),
            detail_fetch_limit=int(os.getenv("DETAIL_FETCH_LIMIT", "8")),
            database_url=os.getenv("DATABASE_URL", ""),
            favorites_backend=os.getenv("FAVORITES_BACKEND", "auto").lower(),
            favorites_retry_delay=float(os.getenv("FAVORITES_RETRY_DELAY", "0.5")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def ai_api_key(self) -> str | None:
        """API key for the selected recipe provider, or None when not configured."""
        if self.ai_provider == "anthropic":
            key = self.anthropic_api_key
        elif self.ai_provider == "openai":
            key = self.openai_api_key
        else:
            return None
        return key if _is_configured(key) else None

    @property
    def image_api_key(self) -> str | None:
        """Image generation only exists on OpenAI."""
        if not self.image_generation or not _is_configured(self.openai_api_key):
            return None
        return self.openai_api_key
