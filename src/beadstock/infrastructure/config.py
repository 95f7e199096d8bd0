"""Runtime settings, read from ``BEADSTOCK_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    store_file: Path
    seed_file: Path
    store_timeout: float = 5.0
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        data_dir = Path(env.get("BEADSTOCK_DATA_DIR", _DEFAULT_DATA_DIR))
        timeout_raw = env.get("BEADSTOCK_STORE_TIMEOUT", "5.0")
        try:
            timeout = float(timeout_raw)
        except ValueError:
            raise ValueError(
                f"BEADSTOCK_STORE_TIMEOUT must be a number, got {timeout_raw!r}"
            ) from None
        return cls(
            data_dir=data_dir,
            store_file=Path(
                env.get("BEADSTOCK_STORE_FILE", data_dir / "inventory.json")
            ),
            seed_file=Path(
                env.get("BEADSTOCK_SEED_FILE", data_dir / "color_codes.txt")
            ),
            store_timeout=timeout,
            log_level=env.get("BEADSTOCK_LOG_LEVEL", "WARNING").upper(),
        )
