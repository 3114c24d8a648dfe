"""Dream Vacation Planner client"""
from planner.api_client import DestinationsClient
from planner.app import VacationPlanner
from planner.vacation_types import VacationType, VACATION_TYPES, vacation_emoji

__all__ = [
    "DestinationsClient", "VacationPlanner",
    "VacationType", "VACATION_TYPES", "vacation_emoji",
]
