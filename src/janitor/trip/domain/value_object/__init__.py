from .bag_id import BagId
from .weight import Weight

__all__ = ["BagId", "Weight"]
