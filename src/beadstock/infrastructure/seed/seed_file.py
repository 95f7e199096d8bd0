"""Plain-text seed asset: one code per line."""

from __future__ import annotations

from pathlib import Path

from beadstock.domain.exceptions import SeedNotFoundError, SeedUnreadableError
from beadstock.domain.repository.seed_source import SeedSource


class SeedFile(SeedSource):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def codes(self) -> list[str]:
        if not self._file_path.is_file():
            raise SeedNotFoundError(f"Seed file not found: {self._file_path}")
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SeedUnreadableError(
                f"Cannot read seed file {self._file_path}: {exc}"
            ) from exc
        return [line.strip() for line in text.splitlines() if line.strip()]
