"""
Overpass API client

Posts queries to the Overpass interpreter. Transport failures are logged
and reported as an empty response.
"""

import requests
from loguru import logger

from ...config import get_config


class OverpassAPIClient:
    """Client for interacting with Overpass API"""
    
    def __init__(self):
        self.config = get_config()
        self.overpass_url = self.config.api.overpass_url
        self.timeout = self.config.api.request_timeout
    
    def post(self, query: str) -> str:
        """
        Execute an Overpass API query
        
        Args:
            query: Overpass QL query string
            
        Returns:
            Raw response text, or "" if the request failed
        """
        headers = {
            "User-Agent": self.config.api.user_agent,
            "Content-Type": "application/x-www-form-urlencoded"
        }
        
        try:
            response = requests.post(
                self.overpass_url,
                data={"data": query},
                headers=headers,
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.exceptions.Timeout:
            logger.error(f"Overpass request timed out after {self.timeout}s")
            return ""
        except requests.exceptions.HTTPError as e:
            logger.error(f"Overpass API failed: HTTP {e.response.status_code}")
            return ""
        except requests.exceptions.RequestException as e:
            logger.error(f"Overpass request failed: {e}")
            return ""
        
        if not response.text:
            logger.debug("Overpass returned an empty body")
        return response.text
