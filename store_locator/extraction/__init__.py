"""
Extraction module for Places API data.

- client.py: Shared request helper and status handling
- search.py: Find a store's place via text search
- enrichment.py: Place details and the bulk enrichment job
- photos.py: Photo URLs and the photo fetch job
- report.py: JSON report output
"""

from .search import find_place
from .enrichment import fetch_place_details, enrich_store, enrich_stores
from .photos import build_photo_url, build_photo_urls, fetch_photo_refs, fetch_store_photos
from .report import write_json_report
