"""
Managers Package

Configuration management for the transit network.
"""

from .config_manager import ConfigManager, ConfigurationError, NetworkConfig, WaitTimeConfig

__all__ = [
    'ConfigManager',
    'ConfigurationError',
    'NetworkConfig',
    'WaitTimeConfig'
]
