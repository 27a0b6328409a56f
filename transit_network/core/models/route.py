"""
Route Model

Data model for BRT routes: a named, ordered sequence of stations served
without transfers, with a position index for constant-time lookups.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple, Any

from .station import Station
from ..exceptions import EmptyNameError, EqualStationsError, InternalInconsistencyError, StationNotOnRouteError


@dataclass(frozen=True)
class Route:
    """
    Immutable route with an inverse station index.

    A route may hold any number of stops on its own; the two-stop minimum
    is enforced when it is registered into a network. If a station appears
    more than once, its last offset is the one indexed.
    """

    code: str
    stops: Tuple[Station, ...] = ()
    _position_index: Dict[Station, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Validate the route code and build the position index."""
        if not isinstance(self.code, str) or not self.code.strip():
            raise EmptyNameError("route")
        object.__setattr__(self, 'code', self.code.strip())

        if not isinstance(self.stops, tuple):
            object.__setattr__(self, 'stops', tuple(self.stops))

        object.__setattr__(self, '_position_index',
                           {station: offset for offset, station in enumerate(self.stops)})

    @classmethod
    def from_stations(cls, code: str, stations: Iterable[Station]) -> 'Route':
        """Create a route from any iterable of stations."""
        return cls(code=code, stops=tuple(stations))

    @property
    def station_count(self) -> int:
        """Get the number of stops on this route."""
        return len(self.stops)

    @property
    def is_empty(self) -> bool:
        """Check if the route has no stops."""
        return not self.stops

    def contains_station(self, station: Station) -> bool:
        """Check if this route serves the given station."""
        return station in self._position_index

    def position_of(self, station: Station) -> int:
        """Get the offset of a station on this route, or -1 if absent."""
        return self._position_index.get(station, -1)

    def connects(self, origin: Station, destination: Station) -> bool:
        """Check if both stations are on this route, in any order."""
        return origin in self._position_index and destination in self._position_index

    def are_adjacent(self, first: Station, second: Station) -> bool:
        """Check if two stations are consecutive stops on this route."""
        if not self.connects(first, second):
            return False
        return abs(self.position_of(first) - self.position_of(second)) == 1

    def _endpoint_offsets(self, origin: Station, destination: Station) -> Tuple[int, int]:
        if origin == destination:
            raise EqualStationsError(origin.station_id)

        origin_offset = self._position_index.get(origin)
        if origin_offset is None:
            raise StationNotOnRouteError(self.code, origin.station_id, "origin")

        destination_offset = self._position_index.get(destination)
        if destination_offset is None:
            raise StationNotOnRouteError(self.code, destination.station_id, "destination")

        if origin_offset == destination_offset:
            raise InternalInconsistencyError(
                f"stations '{origin.station_id}' and '{destination.station_id}' share offset "
                f"{origin_offset} on route '{self.code}'"
            )
        return origin_offset, destination_offset

    def intermediate_stop_count(self, origin: Station, destination: Station) -> int:
        """
        Count the stops strictly between two stations on this route.

        Neither the origin nor the destination is counted, and the result
        is the same in both directions of travel.

        Args:
            origin: Boarding station
            destination: Alighting station

        Returns:
            Number of intermediate stops

        Raises:
            EqualStationsError: If origin and destination are the same station
            StationNotOnRouteError: If either station is not on this route
            InternalInconsistencyError: If the index maps both stations to one offset
        """
        origin_offset, destination_offset = self._endpoint_offsets(origin, destination)
        return abs(destination_offset - origin_offset) - 1

    def intermediate_stops(self, origin: Station, destination: Station) -> List[Station]:
        """Get the stations strictly between two stations, in travel order."""
        origin_offset, destination_offset = self._endpoint_offsets(origin, destination)
        if origin_offset < destination_offset:
            return list(self.stops[origin_offset + 1:destination_offset])
        return list(reversed(self.stops[destination_offset + 1:origin_offset]))

    def to_dict(self) -> Dict[str, Any]:
        """Convert route to dictionary representation."""
        return {
            "code": self.code,
            "stops": [station.station_id for station in self.stops],
            "station_count": self.station_count,
        }

    def __str__(self) -> str:
        return f"{self.code}: {' -> '.join(station.station_id for station in self.stops)}"
