from .garbage_bag_factory import MAX_BAG_WEIGHT, MIN_BAG_WEIGHT, GarbageBagFactory

__all__ = ["GarbageBagFactory", "MIN_BAG_WEIGHT", "MAX_BAG_WEIGHT"]
