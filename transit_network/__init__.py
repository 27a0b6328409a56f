"""
Transit Network

An in-memory registry of bus-rapid-transit stations, routes and trunk
corridors that answers wait-time, route-listing, stop-count and
direct-route queries.
"""

from ._version import __version__
from .core.models import Station, OccupancyLevel, Route, TrunkCorridor
from .core.services import TransitNetwork, ServiceFactory

__all__ = [
    '__version__',
    'Station',
    'OccupancyLevel',
    'Route',
    'TrunkCorridor',
    'TransitNetwork',
    'ServiceFactory'
]
