from .plan_result import PlanResult
from .trip import Trip

__all__ = ["PlanResult", "Trip"]
