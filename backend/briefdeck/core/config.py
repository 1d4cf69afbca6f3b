from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class ModeEnum(str, Enum):
    development = "development"
    production = "production"
    testing = "testing"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── App ───────────────────────────────────────────────────
    MODE: ModeEnum = ModeEnum.production
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "BRIEFDECK"
    LOG_LEVEL: str = "INFO"
    # Comma separated, "*" allows any origin
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:8000,http://127.0.0.1:8000"

    # ── OpenAI ────────────────────────────────────────────────
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_TEMPERATURE: float = 0.7

    # ── Pexels ────────────────────────────────────────────────
    PEXELS_API_KEY: str = ""
    PEXELS_API_URL: str = "https://api.pexels.com/v1"
    IMAGE_SEARCH_TIMEOUT: float = 10.0

    # ── reveal.js ─────────────────────────────────────────────
    REVEAL_CDN_URL: str = "https://cdn.jsdelivr.net/npm/reveal.js@5.1.0"

    @property
    def cors_origins(self) -> list[str]:
        if self.ALLOWED_ORIGINS.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

    @property
    def missing_credentials(self) -> list[str]:
        """Names of the upstream API keys that are not configured."""
        return [
            name
            for name, value in (
                ("OPENAI_API_KEY", self.OPENAI_API_KEY),
                ("PEXELS_API_KEY", self.PEXELS_API_KEY),
            )
            if not value.strip()
        ]

    @property
    def has_credentials(self) -> bool:
        return not self.missing_credentials


settings = Settings()
