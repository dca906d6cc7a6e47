"""City itinerary planner."""

__version__ = "0.3.0"
