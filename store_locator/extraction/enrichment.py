"""
Store Enrichment

Fetches place details and runs the bulk enrichment job: for every store
ref, find its place, pull rating/review count/Maps URL, and collect the
results. Stores are processed one at a time, spaced by a fixed-interval
gate; a store that fails is logged and skipped.
"""

from typing import Dict, Iterable, List, Optional

import httpx
from loguru import logger

from ..config import PLACE_DETAILS_URL, ENRICHMENT_DETAIL_FIELDS, DELAY_BETWEEN_STORES
from ..exceptions import PlacesAPIError
from ..parsers.places import safe_get
from ..parsers.store_text import StoreRef
from ..ratelimit import FixedIntervalGate
from .client import places_request
from .search import find_place


def fetch_place_details(
    place_id: str,
    api_key: str,
    fields: str = ENRICHMENT_DETAIL_FIELDS,
    client: Optional[httpx.Client] = None,
) -> Optional[Dict]:
    """
    Fetch the details "result" object for a place.

    Args:
        place_id: Places place ID
        api_key: Places API key
        fields: Comma-separated field mask
        client: Optional shared httpx client

    Returns:
        The result dict, or None on any failure (logged)
    """
    params = {'place_id': place_id, 'fields': fields}

    try:
        data = places_request(PLACE_DETAILS_URL, params, api_key, client=client)
    except PlacesAPIError as e:
        logger.warning("Place details failed for {}: {}", place_id, e)
        return None
    except (httpx.HTTPError, ValueError) as e:
        logger.error("Error getting place details for {}: {}", place_id, e)
        return None

    result = data.get('result')
    return result if isinstance(result, dict) else None


def enrich_store(
    ref: StoreRef,
    api_key: str,
    client: Optional[httpx.Client] = None,
) -> Optional[Dict]:
    """Enrich one store. Returns the result row, or None if it was skipped."""
    candidate = find_place(ref.name, ref.address, ref.city, api_key, client=client)
    if candidate is None or not candidate.place_id:
        return None

    details = fetch_place_details(candidate.place_id, api_key, client=client)
    if not details:
        return None

    lat = candidate.lat if candidate.lat is not None else safe_get(details, 'geometry', 'location', 'lat')
    lng = candidate.lng if candidate.lng is not None else safe_get(details, 'geometry', 'location', 'lng')

    return {
        'name': ref.name,
        'placeId': candidate.place_id,
        'rating': details.get('rating'),
        'totalReviews': details.get('user_ratings_total'),
        'lat': lat,
        'lng': lng,
        'googleUrl': details.get('url'),
    }


def enrich_stores(
    refs: Iterable[StoreRef],
    api_key: str,
    delay: float = DELAY_BETWEEN_STORES,
    client: Optional[httpx.Client] = None,
    gate: Optional[FixedIntervalGate] = None,
    verbose: bool = True,
) -> List[Dict]:
    """
    Enrich all stores sequentially.

    Args:
        refs: Stores to look up
        api_key: Places API key
        delay: Minimum seconds between stores
        client: Optional shared httpx client
        gate: Optional pre-built gate (overrides delay)
        verbose: Whether to print progress

    Returns:
        One result row per store that resolved; unresolved stores are left out
    """
    refs = list(refs)
    gate = gate or FixedIntervalGate(interval=delay)
    results = []

    for i, ref in enumerate(refs):
        gate.wait()

        if verbose:
            print(f"[{i+1}/{len(refs)}] Processing: {ref.name}...")

        try:
            row = enrich_store(ref, api_key, client=client)
        except Exception as e:
            logger.exception("Unexpected error enriching {}: {}", ref.name, e)
            row = None

        if row is None:
            if verbose:
                print(f"  [!] Could not find place for {ref.name}")
            continue

        results.append(row)
        if verbose:
            print(f"  [OK] {row['placeId']} rating={row['rating'] or 'N/A'}, reviews={row['totalReviews'] or 0}")

    logger.info("Enriched {} of {} stores", len(results), len(refs))
    return results
