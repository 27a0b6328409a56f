"""
Unit tests for the ServiceFactory.
"""

import json
import logging

import pytest

from transit_network.core.exceptions import InvalidParameterError
from transit_network.core.models import OccupancyLevel
from transit_network.core.services import ServiceFactory, TransitNetwork
from transit_network.managers.config_manager import ConfigManager, NetworkConfig, WaitTimeConfig


class TestServiceFactory:
    """Test creating configured stations and networks."""

    def test_default_config(self):
        factory = ServiceFactory()

        station = factory.create_station("A")
        assert station.current_wait_minutes() == 2
        assert station.wait_minutes_for("HIGH") == 10

    def test_configured_waits_and_occupancy(self):
        config = NetworkConfig(
            wait_times=WaitTimeConfig(low=1, medium=4, high=12),
            initial_occupancy="MEDIUM",
        )
        station = ServiceFactory(config).create_station("A")

        assert station.occupancy_level is OccupancyLevel.MEDIUM
        assert station.current_wait_minutes() == 4
        assert station.wait_minutes_for("HIGH") == 12

    def test_per_station_overrides(self):
        station = ServiceFactory().create_station("A", wait_by_occupancy={"LOW": 6})

        assert station.current_wait_minutes() == 6
        assert station.wait_minutes_for("MEDIUM") == 5

    def test_invalid_override(self):
        with pytest.raises(InvalidParameterError):
            ServiceFactory().create_station("A", wait_by_occupancy={"SOMETIMES": 6})

    def test_create_network(self):
        factory = ServiceFactory(NetworkConfig(default_segment_minutes=2.5))
        network = factory.create_network()

        assert isinstance(network, TransitNetwork)
        assert network.default_segment_minutes == 2.5
        assert network.route_names() == []

    def test_networks_are_independent(self):
        factory = ServiceFactory()
        first = factory.create_network()
        second = factory.create_network()

        first.register_station(factory.create_station("A"))
        assert second.station_count == 0


class TestServiceFactoryLogging:
    """Test that the configured log level reaches the package logger."""

    def test_log_level_applied(self):
        ServiceFactory(NetworkConfig(log_level="DEBUG")).create_network()

        assert logging.getLogger("transit_network").getEffectiveLevel() == logging.DEBUG
        assert logging.getLogger("transit_network.core.services").isEnabledFor(logging.DEBUG)

    def test_log_level_from_config_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"log_level": "error"}), encoding="utf-8")

        ServiceFactory(ConfigManager(str(path)).load_config())

        assert logging.getLogger("transit_network").getEffectiveLevel() == logging.ERROR

    def test_root_handlers_untouched(self):
        handlers = logging.getLogger().handlers[:]

        ServiceFactory(NetworkConfig(log_level="INFO"))

        assert logging.getLogger().handlers == handlers
