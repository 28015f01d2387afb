from .trip_planner import CAPACITY, HEAVY_THRESHOLD, TripPlanner, plan

__all__ = ["CAPACITY", "HEAVY_THRESHOLD", "TripPlanner", "plan"]
