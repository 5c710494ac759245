"""
Store Photos

Builds Places photo URLs and runs the photo fetch job for a single store.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional

import httpx
from loguru import logger

from ..config import PHOTO_URL_TEMPLATE, PHOTO_MAX_WIDTH, MAX_PHOTOS, PHOTO_DETAIL_FIELDS
from ..parsers.places import PhotoRef, parse_photo_refs
from .enrichment import fetch_place_details


def build_photo_url(reference: str, api_key: str, max_width: int = PHOTO_MAX_WIDTH) -> str:
    """Photo URL for a reference; reference and key are inserted verbatim."""
    return PHOTO_URL_TEMPLATE.format(max_width=max_width, reference=reference, key=api_key)


def build_photo_urls(
    refs: List[PhotoRef],
    api_key: str,
    max_photos: int = MAX_PHOTOS,
    max_width: int = PHOTO_MAX_WIDTH,
) -> List[str]:
    return [build_photo_url(ref.reference, api_key, max_width) for ref in refs[:max_photos]]


def fetch_photo_refs(
    place_id: str,
    api_key: str,
    max_photos: int = MAX_PHOTOS,
    client: Optional[httpx.Client] = None,
) -> Optional[List[PhotoRef]]:
    """Up to max_photos photo references for a place, or None if details failed."""
    details = fetch_place_details(place_id, api_key, fields=PHOTO_DETAIL_FIELDS, client=client)
    if details is None:
        return None
    return parse_photo_refs(details, limit=max_photos)


def fetch_store_photos(
    store_id: int,
    store_name: str,
    slug: str,
    place_id: str,
    api_key: str,
    photo_key: str = None,
    max_photos: int = MAX_PHOTOS,
    max_width: int = PHOTO_MAX_WIDTH,
    client: Optional[httpx.Client] = None,
) -> Optional[Dict]:
    """
    Fetch photo references for one store and build the photo report.

    Args:
        store_id: Store id recorded in the report
        store_name: Store name recorded in the report
        slug: Store slug recorded in the report
        place_id: Places place ID to fetch
        api_key: Places API key for the details call
        photo_key: Key embedded in photo URLs (defaults to api_key)
        max_photos: Maximum number of photos kept
        max_width: maxwidth for photo URLs
        client: Optional shared httpx client

    Returns:
        Report dict, or None when the call failed or the place has no photos
    """
    refs = fetch_photo_refs(place_id, api_key, max_photos=max_photos, client=client)
    if refs is None:
        return None
    if not refs:
        logger.warning("No photos found for place {}", place_id)
        return None

    urls = build_photo_urls(refs, photo_key or api_key, max_photos=max_photos, max_width=max_width)
    logger.info("Found {} photos for {}", len(urls), store_name)

    return {
        'storeId': store_id,
        'storeName': store_name,
        'slug': slug,
        'placeId': place_id,
        'photoCount': len(urls),
        'photos': urls,
        'photoReferences': [ref.to_dict() for ref in refs],
        'fetchedAt': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
    }
