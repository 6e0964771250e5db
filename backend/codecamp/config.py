"""Application settings and validation."""

import os
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent
DEFAULT_DB_URL = f"sqlite:///{BASE / 'codecamp.db'}"


class Settings:
    ENV: str
    DATABASE_URL: str
    SEED_DATA: bool
    ALLOW_DEV_CORS: bool
    ALLOW_SQLITE: bool
    LOG_LEVEL: str
    SQL_ECHO: bool

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.DATABASE_URL = os.getenv("DATABASE_URL", DEFAULT_DB_URL)
        self.SEED_DATA = os.getenv("SEED_DATA", "true").lower() == "true"
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self.ALLOW_SQLITE = os.getenv("ALLOW_SQLITE", "false").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"
        self._validate()

    def _validate(self):
        if self.ENV != "dev" and not self.ALLOW_SQLITE and self.DATABASE_URL == DEFAULT_DB_URL:
            raise RuntimeError("DATABASE_URL must point at a real database in non-dev environments")


settings = Settings()
