"""Runtime configuration read from the environment.

A ``.env`` file in the working directory is loaded first when present;
variables already set in the environment take precedence.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    currency: str = "PEN"
    log_level: str = "WARNING"


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        data_dir=Path(os.getenv("POS_DATA_DIR", str(_DEFAULT_DATA_DIR))),
        currency=os.getenv("POS_CURRENCY", "PEN").upper(),
        log_level=os.getenv("POS_LOG_LEVEL", "WARNING").upper(),
    )
