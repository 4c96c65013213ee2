from pydantic import BaseModel
import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

TEN_YEARS = 60 * 60 * 24 * 365 * 10
THREE_DAYS = 60 * 60 * 24 * 3


class Settings(BaseModel):
    database_url: str
    redis_url: str = "redis://127.0.0.1:6379"
    app_env: str = "development"
    session_cookie_name: str = "qid"
    session_max_age: int = TEN_YEARS
    reset_token_ttl: int = THREE_DAYS
    frontend_base_url: str = "http://localhost:3000"
    cors_origins: list[str] = ["http://localhost:3000"]
    smtp_host: str | None = None
    smtp_port: int = 587
    smtp_user: str | None = None
    smtp_pass: str | None = None
    smtp_from: str | None = None
    log_level: str = "INFO"
    port: int = 4000

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


_settings: Optional[Settings] = None


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings(
            database_url=os.getenv("DATABASE_URL", ""),
            redis_url=os.getenv("REDIS_URL", "redis://127.0.0.1:6379"),
            app_env=os.getenv("APP_ENV", "development"),
            session_cookie_name=os.getenv("SESSION_COOKIE_NAME", "qid"),
            session_max_age=int(os.getenv("SESSION_MAX_AGE", str(TEN_YEARS))),
            reset_token_ttl=int(os.getenv("RESET_TOKEN_TTL", str(THREE_DAYS))),
            frontend_base_url=os.getenv("FRONTEND_BASE_URL", "http://localhost:3000"),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "http://localhost:3000")),
            smtp_host=os.getenv("SMTP_HOST"),
            smtp_port=int(os.getenv("SMTP_PORT", "587")),
            smtp_user=os.getenv("SMTP_USER"),
            smtp_pass=os.getenv("SMTP_PASS"),
            smtp_from=os.getenv("SMTP_FROM"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            port=int(os.getenv("PORT", "4000")),
        )
    return _settings
