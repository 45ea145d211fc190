"""
Overpass data collection module

Components:
- API client: Overpass API communication
- Queries: Overpass QL templates
- Document: tolerant JSON field access
- Parser: relation id extraction
- Features: museum/lodging classification and normalization
- Collector: Main orchestrator class
"""

from .queries import QueryTemplate, render_query
from .parser import OverpassResponseParser
from .features import (
    FeatureCategory,
    FeatureProcessor,
    TagClassificationPolicy,
    NodeTourismPolicy,
    get_policy,
    log_feature,
)
from .collector import OverpassCollector

__all__ = [
    "QueryTemplate",
    "render_query",
    "OverpassResponseParser",
    "FeatureCategory",
    "FeatureProcessor",
    "TagClassificationPolicy",
    "NodeTourismPolicy",
    "get_policy",
    "log_feature",
    "OverpassCollector",
]
