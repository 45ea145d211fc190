"""
Configuration settings for Overpass Places
"""

from dataclasses import dataclass, field


@dataclass
class APIConfig:
    """API endpoints and configuration"""
    # Overpass API (OSM)
    # Options: overpass-api.de (main), lz4.overpass-api.de, z.overpass-api.de
    overpass_url: str = "https://overpass-api.de/api/interpreter"
    
    # Request settings (seconds)
    request_timeout: int = 60
    
    # User agent for API requests
    user_agent: str = "OverpassPlaces/1.0"


@dataclass
class OverpassConfig:
    """Collector configuration"""
    # API config
    api: APIConfig = field(default_factory=APIConfig)
    
    # Default classification policy: "tourism_amenity" or "node_tourism"
    classification_policy: str = "tourism_amenity"


# Global config instance
config = OverpassConfig()


def get_config() -> OverpassConfig:
    """Get global configuration"""
    return config


def validate_config(config: OverpassConfig) -> None:
    """
    Validate that all required configuration values are set.
    Raises ValueError if any required value is missing or invalid.
    """
    # Imported here to keep config importable without the collectors package
    from .collectors.overpass.features import CLASSIFICATION_POLICIES
    
    errors = []
    
    if not hasattr(config, 'api') or config.api is None:
        errors.append("api configuration is required but not set")
    else:
        if not config.api.overpass_url:
            errors.append("api.overpass_url is required but not set")
        if config.api.request_timeout is None or config.api.request_timeout <= 0:
            errors.append(f"api.request_timeout must be positive, got {config.api.request_timeout}")
        if not config.api.user_agent:
            errors.append("api.user_agent is required but not set")
    
    if config.classification_policy not in CLASSIFICATION_POLICIES:
        errors.append(
            f"classification_policy must be one of {sorted(CLASSIFICATION_POLICIES)}, "
            f"got {config.classification_policy!r}"
        )
    
    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)
