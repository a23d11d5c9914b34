"""
Application settings
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # Receipt store backend: "memory" (process lifetime) or "sql"
    RECEIPT_STORE: str = "memory"

    # Only used by the "sql" store
    DATABASE_URL: str = "sqlite:///./data/receipts.db"

    # Server (python -m app.main)
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Runtime
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # File storage
    DATA_DIR: str = "./data"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
