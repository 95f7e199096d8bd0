"""InventoryItem aggregate: one bead code and how many are in stock.

Codes look like ``<letters><digits>`` (``A1``, ``B12``).  The repository
guarantees a code is unique; the aggregate guarantees the quantity never
goes negative.
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from beadstock.domain.exceptions import InsufficientStockError, ValidationError


def _now() -> datetime:
    return datetime.now(timezone.utc)


def normalize_quantity(raw: object) -> int:
    """Coerce a caller-supplied quantity to a non-negative int.

    Anything that is not a finite number (or a numeric string) becomes 0,
    as does a negative value.  Fractions are truncated, so ``"5.5"`` is 5.
    """
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return max(raw, 0)
    if isinstance(raw, str):
        text = raw.strip()
        try:
            return max(int(text), 0)
        except ValueError:
            pass
        try:
            raw = float(text)
        except ValueError:
            return 0
    if not isinstance(raw, float) or not math.isfinite(raw):
        return 0
    return max(int(raw), 0)


def _parse_count(raw: object, what: str) -> int:
    if raw is None:
        raise ValidationError(f"{what} is required")
    if isinstance(raw, bool):
        raise ValidationError(f"{what} must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            pass
    raise ValidationError(f"{what} must be an integer, got {raw!r}")


def require_positive(amount: object) -> int:
    value = _parse_count(amount, "Amount")
    if value <= 0:
        raise ValidationError("Adjustment amount must be positive")
    return value


class AdjustDirection(Enum):
    INCREASE = "increase"
    DECREASE = "decrease"

    @classmethod
    def parse(cls, raw: object) -> AdjustDirection:
        """Accept ``increase``/``decrease`` and the older ``add``/``subtract``."""
        if isinstance(raw, cls):
            return raw
        aliases = {"add": cls.INCREASE, "subtract": cls.DECREASE}
        if isinstance(raw, str):
            key = raw.strip().lower()
            if key in aliases:
                return aliases[key]
            try:
                return cls(key)
            except ValueError:
                pass
        raise ValidationError(f"Unknown adjustment direction: {raw!r}")


@dataclass
class InventoryItem:
    """Aggregate root for a single bead code.

    Invariants:
    - ``quantity`` is always >= 0
    - ``id`` never changes once assigned
    """

    id: str
    code: str
    quantity: int = 0
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # --- Factory --------------------------------------------------------------

    @classmethod
    def create(cls, code: str, quantity: object = 0) -> InventoryItem:
        """Build a brand-new item with a fresh id.

        ``quantity`` is normalized rather than rejected.
        """
        code = code.strip() if isinstance(code, str) else ""
        if not code:
            raise ValidationError("Code must not be empty")
        now = _now()
        return cls(
            id=uuid.uuid4().hex,
            code=code,
            quantity=normalize_quantity(quantity),
            created_at=now,
            updated_at=now,
        )

    # --- Mutations ------------------------------------------------------------

    def set_quantity(self, quantity: object) -> None:
        value = _parse_count(quantity, "Quantity")
        if value < 0:
            raise ValidationError(f"Quantity cannot be negative, got {value}")
        self.quantity = value
        self.touch()

    def increase(self, amount: object) -> None:
        self.quantity += require_positive(amount)
        self.touch()

    def decrease(self, amount: object) -> None:
        amount = require_positive(amount)
        if amount > self.quantity:
            raise InsufficientStockError(
                f"Insufficient stock for {self.code} "
                f"(need {amount}, have {self.quantity})"
            )
        self.quantity -= amount
        self.touch()

    def adjust(self, direction: AdjustDirection, amount: object) -> None:
        if direction is AdjustDirection.INCREASE:
            self.increase(amount)
        else:
            self.decrease(amount)

    def touch(self) -> None:
        self.updated_at = _now()
