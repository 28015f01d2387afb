from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from janitor.shared.utils.validators import to_decimal
from janitor.trip.domain.entity import GarbageBag
from janitor.trip.domain.result import PlanResult, Trip

CAPACITY = Decimal("3.0")
# これを超える袋はどの袋とも組めないため、必ず単独で運ぶ
HEAVY_THRESHOLD = Decimal("1.99")


def plan(
    bags: Sequence[GarbageBag],
    capacity: Decimal = CAPACITY,
    heavy_threshold: Decimal = HEAVY_THRESHOLD,
) -> PlanResult:
    """ゴミ袋を運搬回数（Trip）に割り当てる

    1. heavy_threshold を超える袋は入力順のまま 1 袋ずつ Trip にする
    2. 残りの袋を重い順に安定ソートする
    3. 両端から 2 ポインタで走査する
       - 先頭（重い側）と末尾（軽い側）の合計が capacity 以下なら組にする
       - 超える場合は末尾の袋だけを単独の Trip にし、末尾側のみ進める

    貪欲法であり全体最適は保証しない。Trip の構成を利用側が参照するため、
    この手順と出力順は変えないこと。

    Args:
        bags: 検証済みのゴミ袋（読み取りのみ）
        capacity: 1 回の運搬で運べる最大重量
        heavy_threshold: 単独運搬になる重量の閾値（この値ちょうどは組める側）

    Returns:
        PlanResult: 重い袋の Trip、続いて走査順の Trip
    """
    capacity = to_decimal(capacity)
    heavy_threshold = to_decimal(heavy_threshold)

    heavy: list[GarbageBag] = []
    light: list[GarbageBag] = []
    for bag in bags:
        if bag.weight.value > heavy_threshold:
            heavy.append(bag)
        else:
            light.append(bag)

    trips = [Trip(bags=(bag,)) for bag in heavy]

    # reverse=True でも同じ重量の袋は入力順を保つ
    light.sort(key=lambda bag: bag.weight.value, reverse=True)

    left = 0
    right = len(light) - 1
    while left <= right:
        if left == right:
            trips.append(Trip(bags=(light[left],)))
            break

        if light[left].weight.value + light[right].weight.value <= capacity:
            trips.append(Trip(bags=(light[left], light[right])))
            left += 1
            right -= 1
        else:
            trips.append(Trip(bags=(light[right],)))
            right -= 1

    return PlanResult(trip_groups=tuple(trips))


class TripPlanner:
    """容量と閾値を固定した運搬プランナー

    ステートレスなので複数の呼び出し元から共有してよい。
    """

    def __init__(
        self,
        capacity: Decimal = CAPACITY,
        heavy_threshold: Decimal = HEAVY_THRESHOLD,
    ) -> None:
        self._capacity = to_decimal(capacity)
        self._heavy_threshold = to_decimal(heavy_threshold)

    @property
    def capacity(self) -> Decimal:
        return self._capacity

    @property
    def heavy_threshold(self) -> Decimal:
        return self._heavy_threshold

    def __call__(self, bags: Sequence[GarbageBag]) -> PlanResult:
        return plan(bags, self._capacity, self._heavy_threshold)
