from functools import lru_cache
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    google_api_key: str = Field(default="", alias="GOOGLE_GENERATIVE_AI_API_KEY")
    gemini_base_url: str = Field(default=GEMINI_OPENAI_BASE_URL, alias="GEMINI_BASE_URL")
    gemini_model: str = Field(default="gemini-1.5-flash", alias="GEMINI_MODEL")
    max_output_tokens: int = Field(default=1000, alias="MAX_OUTPUT_TOKENS")

    llm_provider: str = Field(default="gemini", alias="LLM_PROVIDER")
    static_text: str = Field(
        default="This is placeholder content from the static text generator.",
        alias="STATIC_TEXT",
    )

    app_env: str = Field(default="production", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    relay_url: str = Field(default="http://localhost:8000/api/generate", alias="RELAY_URL")

    def model_post_init(self, __context: Any) -> None:  # type: ignore[override]
        self.llm_provider = self.llm_provider.strip().lower() or "gemini"
        self.app_env = self.app_env.strip().lower() or "production"
        self.log_level = self.log_level.strip().upper() or "INFO"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
