# besttrade/config.py
import os
from dataclasses import dataclass
from dotenv import load_dotenv

# Loads variables from a local .env file into environment variables (dev only).
load_dotenv()


@dataclass(frozen=True)
class Settings:
    # App config
    app_env: str
    log_level: str

    # Calculation limits
    max_days: int


def get_settings() -> Settings:
    """
    Reads env vars and returns a Settings object.
    """
    raw_max_days = os.getenv("MAX_DAYS", "5000").strip()
    try:
        max_days = int(raw_max_days)
    except ValueError:
        raise RuntimeError(f"MAX_DAYS must be an integer, got '{raw_max_days}'")
    if max_days <= 0:
        raise RuntimeError(f"MAX_DAYS must be positive, got {max_days}")

    return Settings(
        app_env=os.getenv("APP_ENV", "local"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        max_days=max_days,
    )
