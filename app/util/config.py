from functools import lru_cache
import logging
import os
from typing import List

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _split_csv_env(value: str | None) -> List[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


class Settings:
    """
    Settings read from the environment (and a .env file when present).
    """

    def __init__(self) -> None:
        load_dotenv()

        self.database_url: str = os.getenv("DATABASE_URL", "sqlite:///./budget.db")
        self.secret_key: str = os.getenv("SECRET_KEY") or "change-me"
        self.algorithm: str = os.getenv("ALGORITHM", "HS256")
        self.access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60))
        self.cors_origins: List[str] = _split_csv_env(os.getenv("CORS_ORIGINS")) or ["*"]
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", 8000))

        if not os.getenv("SECRET_KEY"):
            logger.warning("SECRET_KEY is not set, falling back to an insecure default")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
