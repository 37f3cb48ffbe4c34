from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017/liquido")
    MONGO_DB: str | None = os.getenv("MONGO_DB") or None
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = int(os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "8000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def default_db_name(self) -> str:
        if self.MONGO_DB:
            return self.MONGO_DB
        path = self.MONGO_URI.rsplit("/", 1)[-1]
        return path.split("?", 1)[0] or "liquido"


config = Config()
