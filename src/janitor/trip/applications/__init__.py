from .calculate_trips import CalculateTripsService, Planner

__all__ = ["CalculateTripsService", "Planner"]
