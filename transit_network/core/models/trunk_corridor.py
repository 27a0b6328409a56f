"""
Trunk Corridor Model

Data model for trunk corridors: the physical infrastructure a route runs
on, with real distances between adjacent stations and a cruise speed.
"""

import logging
from typing import Dict, FrozenSet, List, Optional, Union, Any

from .station import Station
from ..exceptions import InvalidParameterError, RegistrationClosedError, SegmentNotFoundError

logger = logging.getLogger(__name__)

StationRef = Union[Station, str]


def _station_key(station: StationRef) -> str:
    return station.station_id if isinstance(station, Station) else station.strip()


class TrunkCorridor:
    """
    Represents a trunk corridor built incrementally before registration.

    Segment distances are symmetric: the distance from A to B is the
    distance from B to A. Once sealed by a network, the corridor rejects
    further changes.
    """

    def __init__(self, name: str, cruise_speed: float):
        """
        Initialize an empty corridor.

        Args:
            name: Corridor name
            cruise_speed: Average speed in distance units per minute

        Raises:
            InvalidParameterError: If the cruise speed is not positive
        """
        if isinstance(cruise_speed, bool) or not isinstance(cruise_speed, (int, float)) or cruise_speed <= 0:
            raise InvalidParameterError("cruise speed", cruise_speed, "must be greater than zero")

        self.name = name.strip() if isinstance(name, str) else name
        self.cruise_speed = float(cruise_speed)
        self._stations: List[Station] = []
        self._segments: Dict[FrozenSet[str], float] = {}
        self._sealed = False

    @property
    def stations(self) -> List[Station]:
        """Get a copy of the corridor's station sequence."""
        return list(self._stations)

    @property
    def station_count(self) -> int:
        return len(self._stations)

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        """Make the corridor read-only."""
        self._sealed = True

    def _ensure_open(self) -> None:
        if self._sealed:
            raise RegistrationClosedError(f"Trunk corridor '{self.name}'")

    def add_station(self, station: Station) -> None:
        """Append a station to the corridor topology."""
        self._ensure_open()
        self._stations.append(station)

    def add_segment(self, from_station: StationRef, to_station: StationRef, distance: float) -> None:
        """
        Record the distance between two adjacent stations, in both directions.

        Raises:
            InvalidParameterError: If the distance is negative or the endpoints are equal
        """
        self._ensure_open()
        from_id = _station_key(from_station)
        to_id = _station_key(to_station)
        if from_id == to_id:
            raise InvalidParameterError("segment endpoints", from_id, "a segment needs two different stations")
        if isinstance(distance, bool) or not isinstance(distance, (int, float)) or distance < 0:
            raise InvalidParameterError("segment distance", distance, "must be a non-negative number")

        self._segments[frozenset((from_id, to_id))] = float(distance)
        logger.debug(f"Corridor {self.name}: segment {from_id} <-> {to_id} = {distance}")

    def contains_station(self, station: StationRef) -> bool:
        """Check if the station is part of the corridor topology."""
        station_id = _station_key(station)
        return any(s.station_id == station_id for s in self._stations)

    def has_segment(self, from_station: StationRef, to_station: StationRef) -> bool:
        return self.distance_between(from_station, to_station) is not None

    def distance_between(self, from_station: StationRef, to_station: StationRef) -> Optional[float]:
        """Get the segment distance between two stations, or None if there is no segment."""
        return self._segments.get(frozenset((_station_key(from_station), _station_key(to_station))))

    def travel_time(self, from_station: StationRef, to_station: StationRef) -> float:
        """
        Get the travel time in minutes between two stations joined by a segment.

        Raises:
            SegmentNotFoundError: If no segment joins the two stations
        """
        distance = self.distance_between(from_station, to_station)
        if distance is None:
            raise SegmentNotFoundError(self.name, _station_key(from_station), _station_key(to_station))
        return distance / self.cruise_speed

    def to_dict(self) -> Dict[str, Any]:
        """Convert corridor to dictionary representation."""
        return {
            "name": self.name,
            "cruise_speed": self.cruise_speed,
            "stations": [station.station_id for station in self._stations],
            "segments": [
                {"stations": sorted(pair), "distance": distance}
                for pair, distance in self._segments.items()
            ],
        }

    def __repr__(self) -> str:
        return f"TrunkCorridor(name={self.name!r}, cruise_speed={self.cruise_speed}, stations={self.station_count})"
