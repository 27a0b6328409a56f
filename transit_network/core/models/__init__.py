"""
Core Models Package

Data models for the BRT network: stations, routes and trunk corridors.
"""

from .station import Station, OccupancyLevel, DEFAULT_WAIT_MINUTES
from .route import Route
from .trunk_corridor import TrunkCorridor

__all__ = [
    'Station',
    'OccupancyLevel',
    'DEFAULT_WAIT_MINUTES',
    'Route',
    'TrunkCorridor'
]
