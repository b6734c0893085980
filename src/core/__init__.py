"""
Core logic package for Kilometer Trips.

Data access, request parsing and error mapping live here.
The Lambda handler in src/handlers/ is a thin wrapper that calls into core/.
"""

__all__: list[str] = []
