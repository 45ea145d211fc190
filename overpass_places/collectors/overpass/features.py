"""
Museum and lodging feature parsing

Classifies Overpass elements into museum/hotel features and appends them
to a Place. Category tags are normalized: every lodging sub-type
(guest_house, hostel, bed_and_breakfast, ...) is written as "hotel".
"""

from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from loguru import logger

from . import document
from .queries import ACCOMMODATION_TOURISM, ACCOMMODATION_AMENITY
from ...models import GeoPosition, Place, PlaceFeature

FeatureObserver = Callable[[PlaceFeature], None]

ELEMENT_KINDS = ("node", "way", "relation")


class FeatureCategory(Enum):
    MUSEUM = "museum"
    LODGING = "hotel"


class TagClassificationPolicy:
    """Classifies any element kind by its tourism and amenity tags"""
    name = "tourism_amenity"
    kinds = ELEMENT_KINDS
    
    def classify(self, tags: Dict[str, Any]) -> Optional[FeatureCategory]:
        tourism = document.get_string(tags, "tourism") or ""
        amenity = document.get_string(tags, "amenity") or ""
        
        if tourism == "museum":
            return FeatureCategory.MUSEUM
        if tourism in ACCOMMODATION_TOURISM or amenity in ACCOMMODATION_AMENITY:
            return FeatureCategory.LODGING
        return None


class NodeTourismPolicy:
    """Nodes only; tourism=museum or tourism=hotel"""
    name = "node_tourism"
    kinds = ("node",)
    
    def classify(self, tags: Dict[str, Any]) -> Optional[FeatureCategory]:
        tourism = document.get_string(tags, "tourism")
        if tourism == "museum":
            return FeatureCategory.MUSEUM
        if tourism == "hotel":
            return FeatureCategory.LODGING
        return None


CLASSIFICATION_POLICIES = {
    TagClassificationPolicy.name: TagClassificationPolicy,
    NodeTourismPolicy.name: NodeTourismPolicy,
}


def get_policy(name: str):
    """Look up a classification policy by name"""
    try:
        return CLASSIFICATION_POLICIES[name]()
    except KeyError:
        raise ValueError(
            f"Unknown classification policy {name!r}, "
            f"expected one of {sorted(CLASSIFICATION_POLICIES)}"
        ) from None


def log_feature(feature: PlaceFeature) -> None:
    """Observer that logs each added feature"""
    logger.info(
        f"Added feature: tourism={feature.category}, name={feature.name or ''}, "
        f"lat={feature.position.latitude}, lon={feature.position.longitude}"
    )


class FeatureProcessor:
    """Turns Overpass element lists into PlaceFeature records"""
    
    def __init__(self, policy=None, observer: Optional[FeatureObserver] = None):
        self.policy = policy or TagClassificationPolicy()
        self.observer = observer
    
    def add_features(self, text: str, place: Place) -> int:
        """
        Append classified features from a response to a place
        
        Empty or malformed responses leave the place untouched. Elements
        without coordinates, without tags or without a recognized
        category are dropped one by one.
        
        Args:
            text: Raw Overpass response text
            place: Place receiving the features
            
        Returns:
            Number of features appended
        """
        data = document.parse_document(text)
        if not document.has(data, "elements"):
            return 0
        
        added = []
        for element in document.iter_array(data, "elements"):
            feature = self.parse_element(element)
            if feature is None:
                continue
            place.add_feature(feature)
            added.append(feature)
        
        # Observers run after the pass so they cannot cut it short
        if self.observer is not None:
            for feature in added:
                self.observer(feature)
        return len(added)
    
    def parse_element(self, element: Any) -> Optional[PlaceFeature]:
        """Build a feature from a single element, or None if it doesn't qualify"""
        kind = document.get_string(element, "type")
        if kind not in ELEMENT_KINDS or kind not in self.policy.kinds:
            return None
        
        coords = self._resolve_coordinates(element, kind)
        if coords is None:
            return None
        
        tags = document.get(element, "tags")
        if not document.is_object(tags):
            return None
        
        category = self.policy.classify(tags)
        if category is None:
            return None
        
        feature_tags = {"tourism": category.value}
        for key in ("name", "name:en"):
            value = document.get_string(tags, key)
            if value is not None:
                feature_tags[key] = value
        
        lat, lon = coords
        return PlaceFeature(
            position=GeoPosition(latitude=lat, longitude=lon),
            tags=feature_tags,
        )
    
    @staticmethod
    def _resolve_coordinates(element: Any, kind: str) -> Optional[Tuple[float, float]]:
        # Nodes carry lat/lon directly, ways and relations a "center" from "out center"
        source = element if kind == "node" else document.get(element, "center")
        lat = document.get_double(source, "lat")
        lon = document.get_double(source, "lon")
        if lat is None or lon is None:
            return None
        return lat, lon
