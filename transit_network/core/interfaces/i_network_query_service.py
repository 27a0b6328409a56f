"""
Network Query Service Interface

Interface for the four query services of a transit network.
"""

from abc import ABC, abstractmethod
from typing import List


class INetworkQueryService(ABC):
    """Interface for read-only network queries."""

    @abstractmethod
    def wait_time(self, station_id: str) -> int:
        """
        Get the current wait time at a station.

        Args:
            station_id: Station identifier

        Returns:
            Wait time in minutes for the station's current occupancy level
        """
        pass

    @abstractmethod
    def route_names(self) -> List[str]:
        """
        Get the codes of all registered routes.

        Returns:
            Route codes in ascending alphabetical order
        """
        pass

    @abstractmethod
    def stop_count(self, route_code: str, origin_id: str, destination_id: str) -> int:
        """
        Get the number of intermediate stops between two stations on a route.

        Args:
            route_code: Route to travel on
            origin_id: Boarding station identifier
            destination_id: Alighting station identifier

        Returns:
            Number of stops strictly between origin and destination
        """
        pass

    @abstractmethod
    def direct_routes(self, origin_id: str, destination_id: str) -> List[str]:
        """
        Find the routes that connect two stations without transfers.

        Args:
            origin_id: Boarding station identifier
            destination_id: Alighting station identifier

        Returns:
            Route codes ranked by stop count, then alphabetically
        """
        pass
