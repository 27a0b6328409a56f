"""
Service Factory

Factory for creating stations and networks from the configuration.
"""

import logging
from typing import Mapping, Optional, Union

from ...managers.config_manager import NetworkConfig
from ...utils.helpers import apply_log_level
from ..models.station import OccupancyLevel, Station
from .transit_network import TransitNetwork


class ServiceFactory:
    """Factory for creating configured stations and networks."""

    def __init__(self, config: Optional[NetworkConfig] = None):
        """
        Initialize the service factory.

        Args:
            config: Network configuration, defaults to NetworkConfig()
        """
        self.logger = logging.getLogger(__name__)
        self.config = config if config is not None else NetworkConfig()
        apply_log_level(self.config.log_level)

        self.logger.info(f"Initialized ServiceFactory with default segment time "
                         f"{self.config.default_segment_minutes} min")

    def create_station(self, station_id: str,
                       wait_by_occupancy: Optional[Mapping[Union[OccupancyLevel, str], int]] = None) -> Station:
        """
        Create a station using the configured wait times and initial occupancy.

        Args:
            station_id: Station identifier
            wait_by_occupancy: Per-station overrides of the configured wait times
        """
        waits = self.config.wait_times.as_mapping()
        if wait_by_occupancy:
            waits.update({OccupancyLevel.parse(level): minutes for level, minutes in wait_by_occupancy.items()})

        return Station(
            station_id=station_id,
            wait_by_occupancy=waits,
            occupancy_level=self.config.initial_occupancy,
        )

    def create_network(self) -> TransitNetwork:
        """Create an empty network using the configured default segment time."""
        network = TransitNetwork(default_segment_minutes=self.config.default_segment_minutes)
        self.logger.debug("Created TransitNetwork instance")
        return network
