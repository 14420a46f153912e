"""
Settings read from the environment.

    MUAJAM_REDIS_HOST      localhost
    MUAJAM_REDIS_PORT      6379
    MUAJAM_REDIS_DB        0
    MUAJAM_DICTIONARIES    user,base   (ordered; the first one takes new entries)
    MUAJAM_NOTIFY_URL      webhook for write failures (unset: log only)
    MUAJAM_NOTIFY_TIMEOUT  5
    MUAJAM_LOG_LEVEL       INFO
    MUAJAM_API_URL         http://localhost:8000/api   (CLI)
"""

import os
from dataclasses import dataclass, field


def _split(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


@dataclass(frozen=True)
class Settings:
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    dictionaries: list[str] = field(default_factory=lambda: ["user", "base"])
    notify_url: str | None = None
    notify_timeout: float = 5.0
    log_level: str = "INFO"
    api_url: str = "http://localhost:8000/api"

    @classmethod
    def from_env(cls, env: dict | None = None) -> "Settings":
        env = os.environ if env is None else env
        defaults = cls()
        return cls(
            redis_host=env.get("MUAJAM_REDIS_HOST", defaults.redis_host),
            redis_port=int(env.get("MUAJAM_REDIS_PORT", defaults.redis_port)),
            redis_db=int(env.get("MUAJAM_REDIS_DB", defaults.redis_db)),
            dictionaries=_split(env.get("MUAJAM_DICTIONARIES", "")) or defaults.dictionaries,
            notify_url=env.get("MUAJAM_NOTIFY_URL") or None,
            notify_timeout=float(env.get("MUAJAM_NOTIFY_TIMEOUT", defaults.notify_timeout)),
            log_level=env.get("MUAJAM_LOG_LEVEL", defaults.log_level).upper(),
            api_url=env.get("MUAJAM_API_URL", defaults.api_url).rstrip("/"),
        )


settings = Settings.from_env()
