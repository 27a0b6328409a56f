"""
Network Graph Builder

Maintains the adjacency index filled in while routes and trunk corridors
are registered. Each station maps to the edges leaving it, one per
neighbor and owning route.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..models.station import Station


@dataclass(frozen=True)
class AdjacencyEdge:
    """A connection from one station to a neighbor on a given route."""

    neighbor: Station
    minutes: float
    route_code: str


class AdjacencyIndex:
    """Bidirectional adjacency lists keyed by station id."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self._edges: Dict[str, List[AdjacencyEdge]] = {}

    def add_station(self, station: Station) -> None:
        """Create an empty neighbor list for a station if it has none."""
        self._edges.setdefault(station.station_id, [])

    def connect(self, from_station: Station, to_station: Station, minutes: float, route_code: str) -> None:
        """
        Record an edge in both directions.

        An existing edge between the same stations for the same route is
        replaced, so a later estimate overrides an earlier one.
        """
        self._put(from_station, AdjacencyEdge(to_station, minutes, route_code))
        self._put(to_station, AdjacencyEdge(from_station, minutes, route_code))
        self.logger.debug(f"Edge {from_station} <-> {to_station} on {route_code}: {minutes:.2f} min")

    def _put(self, station: Station, edge: AdjacencyEdge) -> None:
        edges = self._edges.setdefault(station.station_id, [])
        for i, existing in enumerate(edges):
            if existing.neighbor == edge.neighbor and existing.route_code == edge.route_code:
                edges[i] = edge
                return
        edges.append(edge)

    def neighbors_of(self, station_id: str) -> List[AdjacencyEdge]:
        """Get a copy of the edges leaving a station (empty if unknown)."""
        return list(self._edges.get(station_id, []))

    def edge_minutes(self, from_id: str, to_id: str, route_code: str) -> Optional[float]:
        """Get the travel time of one edge, or None if it does not exist."""
        for edge in self._edges.get(from_id, []):
            if edge.neighbor.station_id == to_id and edge.route_code == route_code:
                return edge.minutes
        return None

    @property
    def station_count(self) -> int:
        return len(self._edges)

    @property
    def edge_count(self) -> int:
        """Count directed edges."""
        return sum(len(edges) for edges in self._edges.values())
