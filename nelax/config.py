import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

OPENROUTER_CHAT_COMPLETIONS_URL = "https://openrouter.ai/api/v1/chat/completions"
DEFAULT_MODEL = "gpt-4o-mini"


@dataclass(frozen=True)
class Settings:
    openrouter_api_key: Optional[str] = None
    openrouter_api_url: str = OPENROUTER_CHAT_COMPLETIONS_URL
    openrouter_model: str = DEFAULT_MODEL
    openrouter_timeout: float = 60.0
    allowed_origins: tuple[str, ...] = ("*",)
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _env_number(name: str, default: str, kind: type):
    value = _env(name, default)
    try:
        return kind(value)
    except ValueError as exc:
        raise RuntimeError(f"Invalid {name}: {value!r} is not a valid {kind.__name__}") from exc


def load_settings() -> Settings:
    load_dotenv()
    origins = _env("ALLOWED_ORIGINS", "*")
    return Settings(
        openrouter_api_key=_env("OPENROUTER_API_KEY"),
        openrouter_api_url=_env("OPENROUTER_API_URL", OPENROUTER_CHAT_COMPLETIONS_URL),
        openrouter_model=_env("OPENROUTER_MODEL", DEFAULT_MODEL),
        openrouter_timeout=_env_number("OPENROUTER_TIMEOUT", "60", float),
        allowed_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        host=_env("HOST", "0.0.0.0"),
        port=_env_number("PORT", "3000", int),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
