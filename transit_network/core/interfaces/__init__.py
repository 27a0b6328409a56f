"""
Core Interfaces Package

Interface definitions for the transit network services.
"""

from .i_network_query_service import INetworkQueryService

__all__ = [
    'INetworkQueryService'
]
