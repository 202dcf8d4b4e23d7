from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_ENV: Literal["development", "production"] = "production"

    API_URL: str | None = None
    API_URL_DEVELOPMENT: str = "http://localhost:5155"
    API_URL_PRODUCTION: str = "https://appointment123456.azurewebsites.net"
    HTTP_TIMEOUT_SECONDS: float = 10.0

    REDIS_URL: str = "redis://localhost:6379/0"
    TEMPLATES_KEY_PREFIX: str = "providerTemplates"

    JWT_SECRET: str = ""
    JWT_ALGORITHM: str = "HS256"

    CORS_ORIGINS: list[str] = ["*"]

    CHAT_POLL_INTERVAL: float = 30.0

    @property
    def api_url(self) -> str:
        if self.API_URL:
            return self.API_URL.rstrip("/")
        if self.APP_ENV == "development":
            return self.API_URL_DEVELOPMENT
        return self.API_URL_PRODUCTION

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
