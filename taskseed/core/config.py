import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_TABLE = "chang.tasks"
DEFAULT_BATCHES = 1000
DEFAULT_BATCH_SIZE = 750
DEFAULT_KINDS = 100
DEFAULT_QUEUES = 20


@dataclass
class SeedSettings:
    table: str = DEFAULT_TABLE
    batches: int = DEFAULT_BATCHES
    batch_size: int = DEFAULT_BATCH_SIZE
    kinds: int = DEFAULT_KINDS
    queues: int = DEFAULT_QUEUES
    seed: Optional[int] = None
    include_ids: bool = False


def load_env() -> None:
    load_dotenv()


def get_database_url() -> str:
    load_env()
    dsn = os.getenv("DATABASE_URL")
    if not dsn:
        raise RuntimeError("DATABASE_URL is missing. Put it into .env (see env.example).")
    return dsn


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got: {raw!r}") from None


def get_seed_settings() -> SeedSettings:
    """Defaults for the seeder, overridable through SEED_* variables."""
    load_env()
    return SeedSettings(
        table=os.getenv("SEED_TABLE") or DEFAULT_TABLE,
        batches=_env_int("SEED_BATCHES", DEFAULT_BATCHES),
        batch_size=_env_int("SEED_BATCH_SIZE", DEFAULT_BATCH_SIZE),
        kinds=_env_int("SEED_KINDS", DEFAULT_KINDS),
        queues=_env_int("SEED_QUEUES", DEFAULT_QUEUES),
        seed=_env_int("SEED_RANDOM_SEED", None),
    )
