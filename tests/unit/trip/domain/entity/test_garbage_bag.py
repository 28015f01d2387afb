from janitor.trip.domain.entity import GarbageBag
from janitor.trip.domain.value_object import BagId, Weight


class TestGarbageBag:
    def test_bag_properties(self):
        bag = GarbageBag(id=BagId(value="bag-1"), weight=Weight.kg("1.5"))

        assert bag.id == BagId(value="bag-1")
        assert bag.weight == Weight.kg("1.5")

    def test_bags_with_same_id_are_equal(self):
        bag = GarbageBag(id=BagId(value="bag-1"), weight=Weight.kg("1.5"))
        same = GarbageBag(id=BagId(value="bag-1"), weight=Weight.kg("2.0"))

        assert bag == same
        assert hash(bag) == hash(same)

    def test_bags_with_same_weight_are_distinct(self):
        bag = GarbageBag(id=BagId(value="bag-1"), weight=Weight.kg("1.5"))
        other = GarbageBag(id=BagId(value="bag-2"), weight=Weight.kg("1.5"))

        assert bag != other

    def test_bag_is_not_equal_to_its_id(self):
        bag = GarbageBag(id=BagId(value="bag-1"), weight=Weight.kg("1.5"))

        assert bag != BagId(value="bag-1")
        assert bag != "bag-1"

    def test_bags_are_deduplicated_by_id(self):
        bags = {
            GarbageBag(id=BagId(value="bag-1"), weight=Weight.kg("1.5")),
            GarbageBag(id=BagId(value="bag-1"), weight=Weight.kg("2.0")),
            GarbageBag(id=BagId(value="bag-2"), weight=Weight.kg("1.5")),
        }

        assert {bag.id.value for bag in bags} == {"bag-1", "bag-2"}
