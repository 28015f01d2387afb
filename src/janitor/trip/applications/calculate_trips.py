from collections.abc import Callable, Sequence

from janitor.trip.domain.entity import GarbageBag
from janitor.trip.domain.result import PlanResult
from janitor.trip.domain.service import plan

Planner = Callable[[Sequence[GarbageBag]], PlanResult]


class CalculateTripsService:
    """運搬回数計算ユースケース

    プランナーは関数として受け取る。
    """

    def __init__(self, planner: Planner = plan) -> None:
        self._planner = planner

    def calculate(self, bags: Sequence[GarbageBag]) -> PlanResult:
        """ゴミ袋の運搬計画を作成する"""
        return self._planner(bags)
