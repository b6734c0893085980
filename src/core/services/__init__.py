"""
Business services for Kilometer Trips.

- trips.py: request body parsing and the scan/put/delete operations on a TripStore
"""

__all__: list[str] = []
