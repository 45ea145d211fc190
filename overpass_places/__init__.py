"""
Overpass Places

Loads museums and lodging for administrative places from the Overpass API
and normalizes them into typed place features.
"""

from .models import GeoPosition, PlaceFeature, Place
from .collectors import OverpassCollector

__all__ = [
    "GeoPosition",
    "PlaceFeature",
    "Place",
    "OverpassCollector",
]
