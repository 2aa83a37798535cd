from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root (parent of highlight_qa/) for .env loading when running from a checkout
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Variable names match the deployment's existing .env files, so there is
    no prefix: LLM_PROVIDER, OPENAI_API_KEY, LOCAL_LLM_URL, LOCAL_LLM_MODEL.
    """

    # Core app settings
    app_name: str = Field(default="highlight_qa")

    # HTTP server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000)

    # Observability
    log_level: str = Field(default="INFO")

    # LLM provider selection ("openai" | "local" / "llama")
    llm_provider: Optional[str] = Field(
        default="openai",
        description="Backend used for every query. 'local' or 'llama' selects Ollama.",
    )

    # OpenAI (when provider is openai)
    openai_api_key: Optional[str] = Field(
        default=None,
        description="OpenAI API key. Required for the OpenAI provider; checked on first call.",
    )

    # Local Ollama-compatible server (when provider is local)
    local_llm_url: Optional[str] = Field(
        default=None,
        description="Full URL of the /api/generate endpoint.",
    )
    local_llm_model: Optional[str] = Field(
        default=None,
        description="Model name passed to the local server.",
    )

    # Outbound HTTP
    request_timeout_seconds: float = Field(default=120.0)

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return a cached settings instance for use as a dependency.
    """
    return Settings()
