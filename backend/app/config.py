"""Runtime configuration read from the environment (and an optional .env file)."""
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_MODEL_NAME = "gemini-2.5-flash"
API_KEY_VARIABLES = ("GEMINI_API_KEY", "GOOGLE_API_KEY", "VITE_API_KEY")


@dataclass(frozen=True)
class Settings:
    """
    Central configuration for the service.

    The Gemini key is taken from the first of GEMINI_API_KEY, GOOGLE_API_KEY
    or VITE_API_KEY that is set. Everything else uses COPYCRAFT_* variables.
    """
    api_key: Optional[str] = None
    model_name: str = DEFAULT_MODEL_NAME
    log_dir: str = "logs"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


def _read_api_key() -> Optional[str]:
    for name in API_KEY_VARIABLES:
        value = os.getenv(name, "").strip()
        if value:
            return value
    return None


@lru_cache
def get_settings() -> Settings:
    return Settings(
        api_key=_read_api_key(),
        model_name=os.getenv("COPYCRAFT_MODEL", DEFAULT_MODEL_NAME),
        log_dir=os.getenv("COPYCRAFT_LOG_DIR", "logs"),
        log_level=os.getenv("COPYCRAFT_LOG_LEVEL", "INFO").upper(),
        host=os.getenv("COPYCRAFT_HOST", "0.0.0.0"),
        port=int(os.getenv("COPYCRAFT_PORT", "8000")),
    )
