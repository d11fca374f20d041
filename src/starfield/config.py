"""Runtime settings read from the environment (and a .env file, via the CLI)."""

import os
from dataclasses import dataclass
from pathlib import Path

from starfield.catalog import CATALOG_URL


@dataclass(frozen=True)
class Settings:
    catalog_url: str  # Where to fetch bsc5.dat.gz from
    data_dir: Path  # Directory holding bsc5.dat(.gz)
    output_path: Path  # Destination .glb
    log_level: str  # Name of a logging level ("INFO", "DEBUG", ...)


def load_settings() -> Settings:
    """Build Settings from STARFIELD_* environment variables, with defaults."""
    return Settings(
        catalog_url=os.environ.get("STARFIELD_CATALOG_URL", CATALOG_URL),
        data_dir=Path(os.environ.get("STARFIELD_DATA_DIR", ".")),
        output_path=Path(os.environ.get("STARFIELD_OUTPUT", "starfield.glb")),
        log_level=os.environ.get("STARFIELD_LOG_LEVEL", "INFO").upper(),
    )
