from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "FitTrack API"
    VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # Postgres in deployment; SQLite works for local runs and tests
    DATABASE_URL: str = "sqlite:///./fittrack.db"

    # CORS (comma-separated, or "*")
    CORS_ORIGINS: str = "http://localhost:3000"

    # Docs exposure
    ENABLE_DOCS: bool = True

    # Auth
    SECRET_KEY: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 24 * 60
    BCRYPT_ROUNDS: int = 10

    # LLM calorie estimates (OpenAI); stats fall back safely without a key
    LLM_ENABLED: bool = True
    OPENAI_API_KEY: str | None = None
    LLM_MODEL: str = "gpt-4o"
    LLM_TIMEOUT: float = 10.0
    LLM_MAX_TOKENS: int = 50

    @property
    def cors_origins(self) -> List[str]:
        if self.CORS_ORIGINS.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
