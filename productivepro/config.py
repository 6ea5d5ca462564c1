import os
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]
load_dotenv(ROOT_DIR / ".env")


class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./productivepro.db")
    AUTO_CREATE_SCHEMA: bool = os.getenv("AUTO_CREATE_SCHEMA", "0") == "1"
    SEED_DEMO_HABITS: bool = os.getenv("SEED_DEMO_HABITS", "0") == "1"
    APP_TIMEZONE: str = os.getenv("APP_TIMEZONE", "UTC").strip() or "UTC"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    LOG_FILE: str = os.getenv("LOG_FILE", "").strip()
    SQL_ECHO: bool = os.getenv("SQL_ECHO", "0") == "1"
    CORS_ORIGINS: list[str] = [
        item.strip()
        for item in os.getenv("CORS_ORIGINS", "*").split(",")
        if item.strip()
    ]


settings = Settings()
