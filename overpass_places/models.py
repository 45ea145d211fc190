"""
Pydantic models for places and their point-of-interest features
"""

from typing import List, Dict, Optional
from pydantic import BaseModel, Field


class GeoPosition(BaseModel):
    latitude: float
    longitude: float


class PlaceFeature(BaseModel):
    """
    A normalized point of interest.

    ``tags["tourism"]`` always holds the normalized category ("museum" or
    "hotel"); "name" and "name:en" are copied from OSM when present.
    """
    position: GeoPosition
    tags: Dict[str, str] = Field(default_factory=dict)
    
    @property
    def category(self) -> str:
        return self.tags["tourism"]
    
    @property
    def name(self) -> Optional[str]:
        return self.tags.get("name")
    
    @property
    def name_en(self) -> Optional[str]:
        return self.tags.get("name:en")


class Place(BaseModel):
    """Place record owned by the caller; features are only ever appended"""
    name: Optional[str] = None
    relation_id: Optional[int] = None
    features: List[PlaceFeature] = Field(default_factory=list)
    
    def add_feature(self, feature: PlaceFeature) -> PlaceFeature:
        self.features.append(feature)
        return feature
