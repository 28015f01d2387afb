from .entity import GarbageBag
from .enum import InputError
from .exception import InvalidBagWeightException
from .factory import MAX_BAG_WEIGHT, MIN_BAG_WEIGHT, GarbageBagFactory
from .result import PlanResult, Trip
from .service import CAPACITY, HEAVY_THRESHOLD, TripPlanner, plan
from .value_object import BagId, Weight

__all__ = [
    "BagId",
    "Weight",
    "GarbageBag",
    "Trip",
    "PlanResult",
    "InputError",
    "InvalidBagWeightException",
    "GarbageBagFactory",
    "MIN_BAG_WEIGHT",
    "MAX_BAG_WEIGHT",
    "CAPACITY",
    "HEAVY_THRESHOLD",
    "TripPlanner",
    "plan",
]
