"""Abstract source of canonical item codes."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SeedSource(ABC):

    @abstractmethod
    def codes(self) -> list[str]:
        """Return the canonical codes in their listed order.

        Raises SeedNotFoundError if the seed asset does not exist and
        SeedUnreadableError if it cannot be read.
        """
