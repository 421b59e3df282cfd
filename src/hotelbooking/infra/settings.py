"""Runtime settings loaded from environment variables.

STORAGE_BACKEND  memory (default) | postgres
SEED_DEMO_DATA   1/true/yes to seed the in-memory store at startup

DATABASE_URL and DB_PASSWORD are read directly by hotelbooking.infra.db,
LOG_LEVEL by hotelbooking.observability.logging.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal

StorageBackend = Literal["memory", "postgres"]

_STORAGE_BACKENDS = ("memory", "postgres")
_TRUTHY = ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    storage_backend: StorageBackend = "memory"
    seed_demo_data: bool = False


def load_settings() -> Settings:
    """Build Settings from the current environment.

    Raises:
        ValueError: If STORAGE_BACKEND is not a known backend.
    """
    backend = os.environ.get("STORAGE_BACKEND", "memory").strip().lower()
    if backend not in _STORAGE_BACKENDS:
        raise ValueError(
            f"STORAGE_BACKEND must be one of {', '.join(_STORAGE_BACKENDS)}; got {backend!r}"
        )

    return Settings(
        storage_backend=backend,  # type: ignore[arg-type]
        seed_demo_data=os.environ.get("SEED_DEMO_DATA", "").strip().lower() in _TRUTHY,
    )
