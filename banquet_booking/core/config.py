import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


@dataclass
class Settings:
    database_url: str = "sqlite:///./bookings.db"
    redis_url: Optional[str] = None
    cache_ttl: int = 60
    log_dir: str = "logs"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    port: int = 8000


def get_settings() -> Settings:
    """Build settings from the environment (and .env, if present)"""
    return Settings(
        database_url=os.getenv("DATABASE_URL", "sqlite:///./bookings.db"),
        redis_url=os.getenv("REDIS_URL") or None,
        cache_ttl=int(os.getenv("CACHE_TTL", 60)),
        log_dir=os.getenv("LOG_DIR", "logs"),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
        port=int(os.getenv("PORT", 8000)),
    )
