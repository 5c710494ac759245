"""
Place Search

Resolves a store to a Places candidate via "find place from text".
"""

from typing import Optional

import httpx
from loguru import logger

from ..config import FIND_PLACE_URL, FIND_PLACE_FIELDS
from ..exceptions import PlacesAPIError
from ..parsers.places import PlaceCandidate, parse_first_candidate
from .client import places_request


def build_place_query(name: str, address: str, city: str) -> str:
    return f"{name}, {address}, {city}"


def find_place(
    name: str,
    address: str,
    city: str,
    api_key: str,
    client: Optional[httpx.Client] = None,
) -> Optional[PlaceCandidate]:
    """
    Look up the first Places candidate for a store.

    Args:
        name: Store name
        address: Street address
        city: City
        api_key: Places API key
        client: Optional shared httpx client

    Returns:
        PlaceCandidate with place_id and coordinates, or None when there is
        no candidate or the call fails (failures are logged)
    """
    params = {
        'input': build_place_query(name, address, city),
        'inputtype': 'textquery',
        'fields': FIND_PLACE_FIELDS,
    }

    try:
        data = places_request(FIND_PLACE_URL, params, api_key, client=client)
    except PlacesAPIError as e:
        if e.status == 'ZERO_RESULTS':
            logger.info("No place candidates for {}", name)
        else:
            logger.warning("Find place failed for {}: {}", name, e)
        return None
    except (httpx.HTTPError, ValueError) as e:
        logger.error("Error finding place for {}: {}", name, e)
        return None

    candidate = parse_first_candidate(data)
    if candidate is None:
        logger.info("No place candidates for {}", name)
    return candidate
