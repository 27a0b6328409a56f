"""
Version information for the Transit Network library.

Centralized version management for the package and its configuration files.
"""

# Core application information
__version__ = "1.0.0"
__version_info__ = (1, 0, 0)
__app_name__ = "TransitNetwork"
__app_display_name__ = "Transit Network - BRT Station and Route Queries"
__description__ = "In-memory bus-rapid-transit network registry with wait-time, stop-count and direct-route queries"

# Feature information
__features__ = [
    "Occupancy-based wait times per station",
    "Alphabetical route listing",
    "Intermediate stop counts on a route",
    "Direct routes ranked by stop count",
    "Trunk corridor travel times",
]

__python_version_required__ = "3.9+"
__license__ = "GPL v3"


def get_version_string() -> str:
    """Get formatted version string."""
    return f"{__app_name__} v{__version__}"


def get_build_metadata() -> dict:
    """Get metadata for packaging."""
    return {
        "app_name": __app_name__,
        "version": __version__,
        "description": __description__,
        "features": list(__features__),
    }
