"""
Pydantic models for Kilometer Trips.
"""

from core.models.trip import TripKey, TripPage, TripRecord

__all__ = ["TripKey", "TripPage", "TripRecord"]
