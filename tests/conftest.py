"""
Global pytest configuration and fixtures.
"""

import logging
import pytest

from transit_network.core.models import Route, Station, TrunkCorridor
from transit_network.core.services import TransitNetwork


@pytest.fixture
def stations():
    """Provide stations A to F keyed by id."""
    return {station_id: Station(station_id) for station_id in "ABCDEF"}


@pytest.fixture
def sample_network(stations):
    """
    Provide a network with R1 = A-B-C-D and R2 = A-C-D.

    Stations E and F are registered but served by no route.
    """
    network = TransitNetwork()
    for station in stations.values():
        network.register_station(station)

    network.register_route(Route("R1", (stations["A"], stations["B"], stations["C"], stations["D"])))
    network.register_route(Route("R2", (stations["A"], stations["C"], stations["D"])))
    return network


@pytest.fixture
def caracas_corridor(stations):
    """Provide an unregistered corridor A-B-C with real segment distances."""
    corridor = TrunkCorridor("Caracas", cruise_speed=400.0)
    for station_id in "ABC":
        corridor.add_station(stations[station_id])
    corridor.add_segment("A", "B", 1200.0)
    corridor.add_segment("B", "C", 2000.0)
    return corridor


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep library logging from cluttering test output."""
    logger = logging.getLogger("transit_network")
    previous = logger.level
    logger.setLevel(logging.WARNING)
    yield
    logger.setLevel(previous)
