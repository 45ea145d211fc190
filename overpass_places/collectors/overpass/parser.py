"""
Overpass response parser

Extracts relation ids from Overpass "out ids" responses
"""

from typing import List

from . import document


class OverpassResponseParser:
    """Parses Overpass API responses"""
    
    @staticmethod
    def extract_relation_ids(text: str) -> List[int]:
        """
        Collect relation ids from a response
        
        Only elements whose type is exactly "relation" and that carry a
        non-null 64-bit id contribute. Document order is kept and duplicates
        are not removed.
        
        Args:
            text: Raw response text (may be empty or malformed)
            
        Returns:
            List of relation ids, empty when the response holds no data
        """
        data = document.parse_document(text)
        if not document.is_object(data):
            return []
        
        relation_ids = []
        for element in document.iter_array(data, "elements"):
            if document.get_string(element, "type") != "relation":
                continue
            relation_id = document.get_int64(element, "id")
            if relation_id is not None:
                relation_ids.append(relation_id)
        return relation_ids
