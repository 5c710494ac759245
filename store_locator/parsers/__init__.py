"""
Parsers module for store data sources and Places API responses.

- store_text.py: Extract store refs from a TypeScript stores module
- places.py: Extract candidates, photos and reviews from Places API JSON
"""

from .store_text import StoreRef, ExtractionResult, extract_store_refs, extract_store_refs_from_file
from .places import PlaceCandidate, PhotoRef, parse_first_candidate, parse_photo_refs, parse_reviews
