"""
Overpass QL query templates

Templates are plain data keyed by QueryTemplate and filled positionally
with str.format. Parameters are substituted as-is; callers escape names
themselves when needed.
"""

from enum import Enum


class QueryTemplate(Enum):
    BY_NAME = "by_name"
    BY_COORDINATES = "by_coordinates"
    BY_RELATION_ID = "by_relation_id"


# Accommodation vocabularies shared with the feature classifier
ACCOMMODATION_TOURISM = (
    "hotel", "guest_house", "hostel", "apartment", "motel", "chalet", "alpine_hut",
)
ACCOMMODATION_AMENITY = (
    "hotel", "guest_house", "hostel", "apartment", "bed_and_breakfast",
)


def _alternation(values) -> str:
    return "^(" + "|".join(values) + ")$"


_TEMPLATES = {
    # Administrative boundary relations with exactly this name, ids only
    QueryTemplate.BY_NAME: (
        '[out:json];'
        'rel["name"="{0}"]["boundary"="administrative"];'
        'out ids;'
    ),
    # Areas containing the point, then their administrative or city/town/state relations
    QueryTemplate.BY_COORDINATES: (
        '[out:json];'
        'is_in({0},{1}) -> .areas;'
        '('
        'rel(pivot.areas)["boundary"="administrative"];'
        'rel(pivot.areas)["place"~"^(city|town|state)$"];'
        ');'
        'out ids;'
    ),
    # Museum and accommodation nodes inside the relation's area
    QueryTemplate.BY_RELATION_ID: (
        '[out:json];'
        'relation({0});'
        'map_to_area->.a;'
        '('
        '  node["tourism"="museum"](area.a);'
        '  node["tourism"~"' + _alternation(ACCOMMODATION_TOURISM) + '"](area.a);'
        '  node["amenity"~"' + _alternation(ACCOMMODATION_AMENITY) + '"](area.a);'
        ');'
        'out center tags;'
    ),
}


def render_query(template: QueryTemplate, *args) -> str:
    """
    Render an Overpass query
    
    Args:
        template: Which query to build
        *args: BY_NAME takes (name,), BY_COORDINATES takes (lat, lon),
            BY_RELATION_ID takes (relation_id,)
            
    Returns:
        Overpass QL text
    """
    return _TEMPLATES[template].format(*args)
