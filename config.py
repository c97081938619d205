"""Application settings: single file, Pydantic-based.

Node selection:
  - NODE_API_URL points at the node's REST API (default local node on 5171)
  - NODE_API_USER / NODE_API_PASSWORD enable basic auth when both are set
"""

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _project_root() -> Path:
    """Project root. config.py lives at the repository root."""
    return Path(__file__).resolve().parent


def _ensure_env_loaded() -> None:
    """Load .env from project root (then its parent). Idempotent."""
    root: Path = _project_root()
    for candidate in (root / ".env", root.parent / ".env"):
        if candidate.exists():
            load_dotenv(candidate, override=False)


_ensure_env_loaded()


class NodeSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="NODE_",
        env_file=(str(_project_root() / ".env"), ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_url: str = Field(default="http://127.0.0.1:5171")
    api_user: str | None = Field(default=None)
    api_password: str | None = Field(default=None)
    timeout: float = Field(default=30.0, gt=0)

    @property
    def auth(self) -> tuple[str, str] | None:
        if self.api_user and self.api_password:
            return (self.api_user, self.api_password)
        return None

    def node_info_for_logging(self) -> str:
        user: str = f"{self.api_user}@" if self.auth else ""
        return f"{user}{self.api_url}"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="EXPLORER_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    environment: str = Field(default="development")
    debug: bool = Field(default=False)
    currency_symbol: str = Field(default="SEM")
    cors_origins: list[str] = Field(
        default=["http://localhost:5173", "http://127.0.0.1:5173"],
    )

    node: NodeSettings = Field(default_factory=NodeSettings)


@lru_cache
def get_settings() -> Settings:
    return Settings()
