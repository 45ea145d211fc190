"""
Data collectors for Overpass Places

- OverpassCollector: relation ids and museum/lodging features from OpenStreetMap
"""

from .overpass import OverpassCollector

__all__ = [
    "OverpassCollector",
]
