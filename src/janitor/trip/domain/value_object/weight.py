from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from janitor.shared.utils.validators import to_decimal


@dataclass(frozen=True, order=True)
class Weight:
    """重量（kg）

    Value Object として不変性を保証。
    float は str 経由で Decimal に変換されるため、1.01 は Decimal("1.01") になる。
    """

    value: Decimal

    def __post_init__(self) -> None:
        try:
            value = to_decimal(self.value)
        except InvalidOperation as e:
            raise ValueError(f"Invalid weight: {self.value!r}") from e
        if not value.is_finite():
            raise ValueError("Weight must be finite")
        if value < 0:
            raise ValueError("Weight cannot be negative")
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return f"{self.value} kg"

    def add(self, other: Weight) -> Weight:
        """重量を加算する"""
        return Weight(self.value + other.value)

    @classmethod
    def kg(cls, value: Decimal | int | float | str) -> Weight:
        """キログラム値から Weight を生成"""
        return cls(value)  # type: ignore[arg-type]

    @classmethod
    def zero(cls) -> Weight:
        return cls(Decimal("0"))
