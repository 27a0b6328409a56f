"""
Station Model

Data model for BRT stations. Stations are identified by their id only;
the occupancy level is the single field that changes after construction.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Mapping, Optional, Union

from ..exceptions import EmptyNameError, InvalidParameterError


class OccupancyLevel(Enum):
    """Occupancy levels reported for a station."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @classmethod
    def parse(cls, value: Union["OccupancyLevel", str]) -> "OccupancyLevel":
        """
        Resolve an occupancy level from a member or its exact string value.

        Raises:
            InvalidParameterError: If the value is not one of the levels
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidParameterError("occupancy level", value,
                                    f"expected one of {', '.join(level.value for level in cls)}")


DEFAULT_WAIT_MINUTES: Dict[OccupancyLevel, int] = {
    OccupancyLevel.LOW: 2,
    OccupancyLevel.MEDIUM: 5,
    OccupancyLevel.HIGH: 10,
}


@dataclass
class Station:
    """
    A stop in the network with an occupancy-dependent wait time.

    Equality and hashing use ``station_id`` only, so stations can be used
    as dictionary keys in route and corridor indexes.
    """

    station_id: str
    wait_by_occupancy: Optional[Mapping[Union[OccupancyLevel, str], int]] = field(default=None, compare=False)
    occupancy_level: Union[OccupancyLevel, str] = field(default=OccupancyLevel.LOW, compare=False)

    def __post_init__(self):
        """Validate station data after initialization."""
        if not isinstance(self.station_id, str) or not self.station_id.strip():
            raise EmptyNameError("station")
        self.station_id = self.station_id.strip()

        waits = dict(DEFAULT_WAIT_MINUTES)
        for level, minutes in (self.wait_by_occupancy or {}).items():
            level = OccupancyLevel.parse(level)
            # bool is an int subclass but never a wait time
            if isinstance(minutes, bool) or not isinstance(minutes, int) or minutes < 0:
                raise InvalidParameterError(f"wait time for {level.value}", minutes,
                                            "must be a non-negative integer")
            waits[level] = minutes
        self.wait_by_occupancy = waits

        self.occupancy_level = OccupancyLevel.parse(self.occupancy_level)

    def __hash__(self) -> int:
        return hash(self.station_id)

    def set_occupancy(self, level: Union[OccupancyLevel, str]) -> None:
        """
        Update the occupancy level.

        Args:
            level: An OccupancyLevel member or its string value

        Raises:
            InvalidParameterError: If the level is not a known occupancy level
        """
        self.occupancy_level = OccupancyLevel.parse(level)

    def current_wait_minutes(self) -> int:
        """Get the wait time for the current occupancy level."""
        return self.wait_by_occupancy[self.occupancy_level]

    def wait_minutes_for(self, level: Union[OccupancyLevel, str]) -> int:
        """Get the configured wait time for any occupancy level."""
        return self.wait_by_occupancy[OccupancyLevel.parse(level)]

    def to_dict(self) -> Dict[str, Any]:
        """Convert station to dictionary representation."""
        return {
            "station_id": self.station_id,
            "occupancy_level": self.occupancy_level.value,
            "wait_by_occupancy": {level.value: minutes for level, minutes in self.wait_by_occupancy.items()},
            "current_wait_minutes": self.current_wait_minutes(),
        }

    def __str__(self) -> str:
        return self.station_id
