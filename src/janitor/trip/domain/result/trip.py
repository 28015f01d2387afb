from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal

from janitor.trip.domain.entity.garbage_bag import GarbageBag
from janitor.trip.domain.value_object.weight import Weight


@dataclass(frozen=True)
class Trip:
    """1回の運搬でまとめて運ぶゴミ袋の組

    メンバー以外に同一性を持たない。
    """

    bags: tuple[GarbageBag, ...]

    def __post_init__(self) -> None:
        bags = tuple(self.bags)
        if not bags:
            raise ValueError("Trip must contain at least one bag")
        object.__setattr__(self, "bags", bags)

    def __len__(self) -> int:
        return len(self.bags)

    def __iter__(self) -> Iterator[GarbageBag]:
        return iter(self.bags)

    @property
    def weights(self) -> list[Decimal]:
        return [bag.weight.value for bag in self.bags]

    @property
    def total_weight(self) -> Weight:
        """運搬する合計重量"""
        total = Weight.zero()
        for bag in self.bags:
            total = total.add(bag.weight)
        return total
