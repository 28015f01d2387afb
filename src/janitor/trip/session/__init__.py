from .intent import AddBag, CalculateTrips, ClearBags, ClearError, Intent
from .reducer import initial_state, reduce, replay
from .state import BagsLoaded, SessionError, SessionState

__all__ = [
    "AddBag",
    "CalculateTrips",
    "ClearBags",
    "ClearError",
    "Intent",
    "BagsLoaded",
    "SessionError",
    "SessionState",
    "initial_state",
    "reduce",
    "replay",
]
