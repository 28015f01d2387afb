from janitor.trip.domain.value_object.bag_id import BagId
from janitor.trip.domain.value_object.weight import Weight


class GarbageBag:
    """ゴミ袋エンティティ

    BagId で同一性を判定する。重量が同じでも BagId が異なれば別の袋。
    生成後は変更されない。
    """

    def __init__(self, id: BagId, weight: Weight) -> None:
        self._id = id
        self._weight = weight

    @property
    def id(self) -> BagId:
        return self._id

    @property
    def weight(self) -> Weight:
        return self._weight

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GarbageBag):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"GarbageBag(id={self._id.value!r}, weight={self._weight.value})"
