"""
Places API Request Helper

Single GET against a Places web-service endpoint. Every endpoint answers
HTTP 200 with a JSON "status" field; anything other than "OK" is raised as
PlacesAPIError so callers can log it and move on.
"""

from contextlib import contextmanager
from typing import Dict, Optional

import httpx

from ..config import REQUEST_TIMEOUT
from ..exceptions import PlacesAPIError


@contextmanager
def places_client(client: Optional[httpx.Client] = None, timeout: float = REQUEST_TIMEOUT):
    """Yield the given client, or a short-lived one closed on exit."""
    if client is not None:
        yield client
        return
    with httpx.Client(timeout=timeout) as owned:
        yield owned


def places_request(
    url: str,
    params: Dict[str, str],
    api_key: str,
    client: Optional[httpx.Client] = None,
    timeout: float = REQUEST_TIMEOUT,
) -> Dict:
    """
    Call a Places endpoint and return the decoded body.

    Args:
        url: Endpoint URL
        params: Query parameters (the key is added here)
        api_key: Places API key
        client: Optional shared httpx client
        timeout: Request timeout in seconds when no client is given

    Returns:
        Decoded JSON object with status "OK"

    Raises:
        httpx.HTTPError: On transport errors or non-2xx responses
        ValueError: If the body is not JSON
        PlacesAPIError: If the body's status is not "OK"
    """
    query = dict(params)
    query['key'] = api_key

    with places_client(client, timeout) as http:
        response = http.get(url, params=query)
        response.raise_for_status()
        data = response.json()

    status = data.get('status') if isinstance(data, dict) else None
    if status != 'OK':
        raise PlacesAPIError(status or 'UNKNOWN', data.get('error_message') if isinstance(data, dict) else None)
    return data
