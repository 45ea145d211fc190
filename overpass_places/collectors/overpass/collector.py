"""
Main Overpass Collector

Combines query rendering, the API client and the response parsers
"""

from typing import List, Optional
from loguru import logger

from .api_client import OverpassAPIClient
from .parser import OverpassResponseParser
from .features import FeatureProcessor, FeatureObserver, get_policy, log_feature
from .queries import QueryTemplate, render_query
from ...config import get_config
from ...models import Place


class OverpassCollector:
    """
    Collect relation ids and points of interest from OpenStreetMap
    via Overpass API
    
    Every call makes exactly one request: no retries, no pagination.
    """
    
    def __init__(
        self,
        api_client: Optional[OverpassAPIClient] = None,
        policy=None,
        observer: Optional[FeatureObserver] = log_feature
    ):
        self.config = get_config()
        self.api_client = api_client or OverpassAPIClient()
        self.parser = OverpassResponseParser()
        self.feature_processor = FeatureProcessor(
            policy=policy or get_policy(self.config.classification_policy),
            observer=observer
        )
    
    def load_relation_ids_by_name(self, name: str) -> List[int]:
        """Relation ids of administrative boundaries named exactly `name`"""
        query = render_query(QueryTemplate.BY_NAME, name)
        response = self.api_client.post(query)
        relation_ids = self.parser.extract_relation_ids(response)
        logger.info(f"Found {len(relation_ids)} relations named {name!r}")
        return relation_ids
    
    def load_relation_ids_by_location(self, latitude: float, longitude: float) -> List[int]:
        """Relation ids of administrative / city / town / state areas containing a point"""
        query = render_query(QueryTemplate.BY_COORDINATES, latitude, longitude)
        response = self.api_client.post(query)
        relation_ids = self.parser.extract_relation_ids(response)
        logger.info(f"Found {len(relation_ids)} relations containing ({latitude}, {longitude})")
        return relation_ids
    
    def load_features_by_relation_id(self, relation_id: int, place: Place) -> Place:
        """
        Load museums and lodging inside a relation's area into a place
        
        Args:
            relation_id: OSM relation id
            place: Place receiving the features
            
        Returns:
            The same place, for chaining
        """
        query = render_query(QueryTemplate.BY_RELATION_ID, relation_id)
        response = self.api_client.post(query)
        added = self.feature_processor.add_features(response, place)
        logger.info(f"Added {added} features from relation {relation_id}")
        return place
