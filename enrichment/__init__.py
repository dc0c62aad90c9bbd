"""
enrichment package

External lookups that add context to an alert.
"""

from enrichment.geolocator import GeoLocator, UNKNOWN_LOCATION

__all__ = ["GeoLocator", "UNKNOWN_LOCATION"]
