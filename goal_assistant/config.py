"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

PROJECT_ROOT = Path(__file__).resolve().parent.parent
LOGS_DIR = PROJECT_ROOT / "logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

DEFAULT_MODEL = "claude-3-5-sonnet-20241022"
DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


PathLike = Union[str, Path]


def resolve_log_path(env_value: PathLike | None = None) -> Path:
    """Resolve LOG_FILE to an absolute path."""
    if not env_value:
        return DEFAULT_LOG_PATH

    candidate = Path(env_value)
    return candidate if candidate.is_absolute() else PROJECT_ROOT / candidate


def _split_origins(value: str | None) -> list[str]:
    if not value:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class Settings:
    """Runtime settings, read from the environment."""

    api_key: str | None = None
    model: str = DEFAULT_MODEL
    max_tokens: int = 4096
    llm_timeout: float = 45.0
    api_host: str = "localhost"
    api_port: int = 8000
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"
    log_file: Path = DEFAULT_LOG_PATH
    client_timeout: float = 60.0

    @property
    def api_url(self) -> str:
        return f"http://{self.api_host}:{self.api_port}"


def load_settings() -> Settings:
    """Build Settings from environment variables."""
    return Settings(
        # CLAUDE_API_KEY is accepted for older deployments
        api_key=os.getenv("ANTHROPIC_API_KEY") or os.getenv("CLAUDE_API_KEY"),
        model=os.getenv("LLM_MODEL", DEFAULT_MODEL),
        max_tokens=int(os.getenv("LLM_MAX_TOKENS", "4096")),
        llm_timeout=float(os.getenv("LLM_TIMEOUT_SECONDS", "45")),
        api_host=os.getenv("API_HOST", "localhost"),
        api_port=int(os.getenv("API_PORT", "8000")),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_file=resolve_log_path(os.getenv("LOG_FILE")),
        client_timeout=float(os.getenv("CLIENT_TIMEOUT_SECONDS", "60")),
    )
