"""
Transit Network Service

Registry of stations, routes and trunk corridors, together with the query
engine that answers wait-time, route-listing, stop-count and direct-route
queries over the registered data.
"""

import bisect
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from ..interfaces.i_network_query_service import INetworkQueryService
from ..models.route import Route
from ..models.station import Station
from ..models.trunk_corridor import TrunkCorridor
from ..exceptions import (
    DuplicateIdError,
    EmptyNameError,
    EqualStationsError,
    InsufficientStopsError,
    NoPathAvailableError,
    RegistrationClosedError,
    RouteDoesNotConnectError,
    RouteNotFoundError,
    StationNotFoundError,
    TransitNetworkError,
    TrunkNotFoundError,
)
from .network_graph_builder import AdjacencyEdge, AdjacencyIndex

DEFAULT_SEGMENT_MINUTES = 3.0


@dataclass(frozen=True)
class DirectRouteOption:
    """A route that serves both endpoints of a direct-route query."""

    route_code: str
    stop_count: int


@dataclass
class DirectRouteSearch:
    """Outcome of a direct-route search, including the candidates that were skipped."""

    origin_id: str
    destination_id: str
    options: List[DirectRouteOption] = field(default_factory=list)
    skipped: List[Tuple[str, TransitNetworkError]] = field(default_factory=list)

    @property
    def route_codes(self) -> List[str]:
        return [option.route_code for option in self.options]


class TransitNetwork(INetworkQueryService):
    """
    In-memory BRT network.

    The network is populated in a build phase (stations, then routes, then
    trunk corridors) and queried afterwards. Calling ``freeze`` ends the
    build phase; registries are never modified after that, so readers need
    no locking. A rejected registration leaves every index untouched.
    """

    def __init__(self, default_segment_minutes: float = DEFAULT_SEGMENT_MINUTES):
        """
        Initialize an empty network.

        Args:
            default_segment_minutes: Travel time assumed between consecutive
                route stops when no trunk corridor has a segment for them
        """
        self.logger = logging.getLogger(__name__)
        self.default_segment_minutes = default_segment_minutes

        self._stations: Dict[str, Station] = {}
        self._routes: Dict[str, Route] = {}
        self._sorted_route_codes: List[str] = []
        self._trunks: Dict[str, TrunkCorridor] = {}
        self._adjacency = AdjacencyIndex()
        self._frozen = False

        self.logger.info("Initialized TransitNetwork")

    # Build phase

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> 'TransitNetwork':
        """End the build phase; later registrations are rejected."""
        self._frozen = True
        self.logger.info(f"Network frozen with {len(self._stations)} stations, "
                         f"{len(self._routes)} routes and {len(self._trunks)} trunk corridors")
        return self

    def _ensure_open(self) -> None:
        if self._frozen:
            raise RegistrationClosedError("Transit network")

    def register_station(self, station: Station) -> None:
        """
        Add a station to the network.

        Raises:
            DuplicateIdError: If a station with the same id is registered
            RegistrationClosedError: If the network is frozen
        """
        self._ensure_open()
        if station.station_id in self._stations:
            raise DuplicateIdError("station", station.station_id)

        self._stations[station.station_id] = station
        self._adjacency.add_station(station)
        self.logger.debug(f"Registered station {station.station_id}")

    def register_route(self, route: Route) -> None:
        """
        Add a route to the network and index its consecutive stops.

        Each pair of consecutive stops is connected in the adjacency index
        with the travel time of the first trunk corridor (by name) that has
        a segment for it, or the default segment time otherwise.

        Raises:
            EmptyNameError: If the route code is blank
            InsufficientStopsError: If the route has fewer than 2 stops
            DuplicateIdError: If a route with the same code is registered
            RegistrationClosedError: If the network is frozen
        """
        self._ensure_open()
        code = route.code.strip() if isinstance(route.code, str) else ""
        if not code:
            raise EmptyNameError("route")
        if route.station_count < 2:
            raise InsufficientStopsError(code, route.station_count)
        if code in self._routes:
            raise DuplicateIdError("route", code)

        edges = [
            (from_station, to_station, self._estimate_segment_minutes(from_station, to_station))
            for from_station, to_station in zip(route.stops, route.stops[1:])
        ]

        self._routes[code] = route
        bisect.insort(self._sorted_route_codes, code)
        for from_station, to_station, minutes in edges:
            self._adjacency.connect(from_station, to_station, minutes, code)

        self.logger.info(f"Registered route {code} with {route.station_count} stops")

    def register_trunk(self, trunk: TrunkCorridor) -> None:
        """
        Add a trunk corridor and refine route edges with its travel times.

        For each consecutive pair of corridor stations joined by a segment,
        every registered route on which the two are consecutive stops gets its
        edge between them set to the corridor's travel time. Routes that
        serve both stations with other stops in between are left alone. The
        corridor is sealed.

        Raises:
            EmptyNameError: If the corridor name is blank
            DuplicateIdError: If a corridor with the same name is registered
            RegistrationClosedError: If the network is frozen
        """
        self._ensure_open()
        if not isinstance(trunk.name, str) or not trunk.name.strip():
            raise EmptyNameError("trunk corridor")
        if trunk.name in self._trunks:
            raise DuplicateIdError("trunk corridor", trunk.name)

        trunk.seal()
        self._trunks[trunk.name] = trunk

        stations = trunk.stations
        for from_station, to_station in zip(stations, stations[1:]):
            if not trunk.has_segment(from_station, to_station):
                self.logger.debug(f"Corridor {trunk.name}: no segment {from_station} <-> {to_station}, skipping")
                continue

            route_codes = [code for code in self._sorted_route_codes
                           if self._routes[code].are_adjacent(from_station, to_station)]
            if not route_codes:
                self.logger.debug(f"Corridor {trunk.name}: no route stops at {from_station} and {to_station} in a row")
                continue

            minutes = trunk.travel_time(from_station, to_station)
            for code in route_codes:
                self._adjacency.connect(from_station, to_station, minutes, code)

        self.logger.info(f"Registered trunk corridor {trunk.name} with {trunk.station_count} stations")

    def _estimate_segment_minutes(self, from_station: Station, to_station: Station) -> float:
        for name in sorted(self._trunks):
            trunk = self._trunks[name]
            if trunk.has_segment(from_station, to_station):
                return trunk.travel_time(from_station, to_station)
        return self.default_segment_minutes

    # Lookups

    @property
    def station_count(self) -> int:
        return len(self._stations)

    @property
    def route_count(self) -> int:
        return len(self._routes)

    @property
    def trunk_count(self) -> int:
        return len(self._trunks)

    def has_station(self, station_id: str) -> bool:
        return station_id in self._stations

    def get_station(self, station_id: str) -> Station:
        """
        Get a registered station.

        Raises:
            StationNotFoundError: If the station is not registered
        """
        station = self._stations.get(station_id)
        if station is None:
            raise StationNotFoundError(station_id)
        return station

    def get_route(self, route_code: str) -> Route:
        """
        Get a registered route.

        Raises:
            RouteNotFoundError: If the route is not registered
        """
        route = self._routes.get(route_code)
        if route is None:
            raise RouteNotFoundError(route_code)
        return route

    def get_trunk(self, name: str) -> TrunkCorridor:
        """
        Get a registered trunk corridor.

        Raises:
            TrunkNotFoundError: If the corridor is not registered
        """
        trunk = self._trunks.get(name)
        if trunk is None:
            raise TrunkNotFoundError(name)
        return trunk

    def neighbors_of(self, station_id: str) -> List[AdjacencyEdge]:
        """Get the adjacency edges leaving a station."""
        return self._adjacency.neighbors_of(station_id)

    # Queries

    def wait_time(self, station_id: str) -> int:
        """
        Get the current wait time at a station.

        Raises:
            StationNotFoundError: If the station is not registered
        """
        return self.get_station(station_id).current_wait_minutes()

    def route_names(self) -> List[str]:
        """Get all route codes in alphabetical order."""
        return list(self._sorted_route_codes)

    def stop_count(self, route_code: str, origin_id: str, destination_id: str) -> int:
        """
        Get the number of intermediate stops between two stations on a route.

        Raises:
            RouteNotFoundError: If the route is not registered
            EqualStationsError: If origin and destination are the same id
            RouteDoesNotConnectError: If a station is unknown to the network
            StationNotOnRouteError: If a known station is not on the route
        """
        route = self.get_route(route_code)
        if origin_id == destination_id:
            raise EqualStationsError(origin_id)

        for station_id in (origin_id, destination_id):
            if station_id not in self._stations:
                raise RouteDoesNotConnectError(route.code, station_id)

        return route.intermediate_stop_count(self._stations[origin_id], self._stations[destination_id])

    def search_direct_routes(self, origin_id: str, destination_id: str) -> DirectRouteSearch:
        """
        Rank every route that serves both stations.

        Candidates whose stop count cannot be computed are recorded in
        ``skipped`` instead of aborting the search.

        Raises:
            StationNotFoundError: If either station is not registered
            EqualStationsError: If origin and destination are the same id
        """
        origin = self.get_station(origin_id)
        destination = self.get_station(destination_id)
        if origin == destination:
            raise EqualStationsError(origin_id)

        search = DirectRouteSearch(origin_id=origin_id, destination_id=destination_id)
        for code in self._sorted_route_codes:
            route = self._routes[code]
            if not route.connects(origin, destination):
                continue
            try:
                stops = route.intermediate_stop_count(origin, destination)
            except TransitNetworkError as e:
                self.logger.warning(f"Skipping route {code} for {origin_id} -> {destination_id}: {e}")
                search.skipped.append((code, e))
                continue
            search.options.append(DirectRouteOption(code, stops))

        search.options.sort(key=lambda option: (option.stop_count, option.route_code))
        self.logger.debug(f"Direct routes {origin_id} -> {destination_id}: "
                          f"{len(search.options)} found, {len(search.skipped)} skipped")
        return search

    def direct_routes(self, origin_id: str, destination_id: str) -> List[str]:
        """
        Get the routes connecting two stations without transfers.

        Raises:
            StationNotFoundError: If either station is not registered
            EqualStationsError: If origin and destination are the same id
            NoPathAvailableError: If no route connects the two stations
        """
        search = self.search_direct_routes(origin_id, destination_id)
        if not search.options:
            raise NoPathAvailableError(origin_id, destination_id)
        return search.route_codes
