"""
Transit Network Exceptions

Typed error hierarchy for the network registry and its query services.
Every error keeps the offending identifiers as attributes so callers can
react without parsing the message.
"""

from typing import Any, Optional


class TransitNetworkError(Exception):
    """Base class for all network registry and query errors."""

    pass


class EntityNotFoundError(TransitNetworkError, LookupError):
    """A named entity is absent from its registry."""

    entity = "entity"

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"{self.entity.capitalize()} '{identifier}' not found in the network")


class StationNotFoundError(EntityNotFoundError):
    entity = "station"


class RouteNotFoundError(EntityNotFoundError):
    entity = "route"


class TrunkNotFoundError(EntityNotFoundError):
    entity = "trunk corridor"


class InvalidParameterError(TransitNetworkError, ValueError):
    """An argument is outside its allowed set of values."""

    def __init__(self, parameter: str, value: Any, reason: Optional[str] = None):
        self.parameter = parameter
        self.value = value
        message = f"Invalid value for {parameter}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class EqualStationsError(TransitNetworkError):
    """Origin and destination are the same station."""

    def __init__(self, station_id: str):
        self.station_id = station_id
        super().__init__(f"Origin and destination cannot be the same station: '{station_id}'")


class RouteDoesNotConnectError(TransitNetworkError):
    """The route does not connect the requested stations."""

    def __init__(self, route_code: str, station_id: str, message: Optional[str] = None):
        self.route_code = route_code
        self.station_id = station_id
        if message is None:
            message = f"Route '{route_code}' does not connect station '{station_id}': station is unknown to the network"
        super().__init__(message)


class StationNotOnRouteError(RouteDoesNotConnectError):
    """A known station is not part of the route's stop sequence."""

    def __init__(self, route_code: str, station_id: str, endpoint: str):
        self.endpoint = endpoint
        super().__init__(
            route_code,
            station_id,
            f"Route '{route_code}' does not contain the {endpoint} station '{station_id}'",
        )


class NoPathAvailableError(TransitNetworkError):
    """No route qualifies for a ranked search."""

    def __init__(self, origin_id: str, destination_id: str):
        self.origin_id = origin_id
        self.destination_id = destination_id
        super().__init__(f"No direct route available between '{origin_id}' and '{destination_id}'")


class EmptyNameError(TransitNetworkError, ValueError):
    """An identifier is empty or blank."""

    def __init__(self, entity: str):
        self.entity = entity
        super().__init__(f"{entity.capitalize()} name cannot be empty")


class DuplicateIdError(TransitNetworkError):
    """An identifier is already registered."""

    def __init__(self, entity: str, identifier: str):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity.capitalize()} '{identifier}' is already registered")


class InsufficientStopsError(TransitNetworkError):
    """A route needs at least two stops to be registered."""

    def __init__(self, route_code: str, stop_count: int):
        self.route_code = route_code
        self.stop_count = stop_count
        super().__init__(f"Route '{route_code}' must have at least 2 stops, got {stop_count}")


class SegmentNotFoundError(TransitNetworkError):
    """A trunk corridor has no segment between two stations."""

    def __init__(self, trunk_name: str, from_id: str, to_id: str):
        self.trunk_name = trunk_name
        self.from_id = from_id
        self.to_id = to_id
        super().__init__(f"Trunk corridor '{trunk_name}' has no segment between '{from_id}' and '{to_id}'")


class InternalInconsistencyError(TransitNetworkError):
    """An index invariant was violated."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Internal inconsistency detected: {detail}")


class RegistrationClosedError(TransitNetworkError):
    """A frozen network or sealed corridor was modified."""

    def __init__(self, target: str):
        self.target = target
        super().__init__(f"{target} no longer accepts modifications")
