from __future__ import annotations

from dataclasses import dataclass

from janitor.trip.domain.result.trip import Trip


@dataclass(frozen=True)
class PlanResult:
    """運搬計画の結果

    trip_groups はプランナーが出力した順序を保持する。
    """

    trip_groups: tuple[Trip, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "trip_groups", tuple(self.trip_groups))

    @property
    def total_trips(self) -> int:
        return len(self.trip_groups)
