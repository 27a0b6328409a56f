"""
Core Services Package

Registry, query engine and factory services for the transit network.
"""

from .network_graph_builder import AdjacencyEdge, AdjacencyIndex
from .transit_network import TransitNetwork, DirectRouteOption, DirectRouteSearch, DEFAULT_SEGMENT_MINUTES
from .service_factory import ServiceFactory

__all__ = [
    'AdjacencyEdge',
    'AdjacencyIndex',
    'TransitNetwork',
    'DirectRouteOption',
    'DirectRouteSearch',
    'DEFAULT_SEGMENT_MINUTES',
    'ServiceFactory'
]
