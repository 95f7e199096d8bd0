"""Category index derived from code prefixes.

A code's category is its leading run of letters (``AB12`` -> ``AB``).
Nothing here is stored; the index is recomputed from whatever items are
passed in.
"""

from __future__ import annotations

from collections.abc import Iterable

from beadstock.domain.model.inventory import InventoryItem

OTHER_CATEGORY = "other"


def prefix(code: str) -> str:
    """Return the longest leading run of ASCII letters, or ``"other"``."""
    end = 0
    for ch in code:
        if not (ch.isascii() and ch.isalpha()):
            break
        end += 1
    return code[:end] if end else OTHER_CATEGORY


def category_index(items: Iterable[InventoryItem]) -> set[str]:
    return {prefix(item.code) for item in items}


def in_category(item: InventoryItem, category: str) -> bool:
    """Plain prefix match; ``"other"`` also selects codes with no letters."""
    if category == OTHER_CATEGORY and prefix(item.code) == OTHER_CATEGORY:
        return True
    return item.code.startswith(category)
