import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    min_delay_ms: int = 800
    max_delay_ms: int = 1500
    seed: Optional[int] = None
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False


def get_settings() -> Settings:
    """
    Read settings from the environment (and .env, if present).
    """
    seed = os.getenv("WANDERGUIDE_SEED")

    return Settings(
        min_delay_ms=int(os.getenv("WANDERGUIDE_MIN_DELAY_MS", "800")),
        max_delay_ms=int(os.getenv("WANDERGUIDE_MAX_DELAY_MS", "1500")),
        seed=int(seed) if seed else None,
        log_level=os.getenv("WANDERGUIDE_LOG_LEVEL", "INFO").upper(),
        host=os.getenv("WANDERGUIDE_HOST", "0.0.0.0"),
        port=int(os.getenv("WANDERGUIDE_PORT", "5000")),
        debug=os.getenv("WANDERGUIDE_DEBUG", "false").lower() in ("1", "true", "yes"),
    )
