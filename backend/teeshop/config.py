from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # in-memory by default; the catalog is regenerated on every start
    DATABASE_URL: str = "sqlite://"
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 3000
    FRONTEND_ORIGINS: List[str] = ["http://localhost:3000"]
    MOCK_ITEM_COUNT: int = 1000
    MOCK_SEED: Optional[int] = None
    LOCK_TIMEOUT_SECONDS: float = 10.0
    DEFAULT_PAGE_LIMIT: int = 10
    MAX_PAGE_LIMIT: int = 100
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
