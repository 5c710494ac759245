"""
Default configuration for the store locator.

Module-level constants shared by the CSV codec, the Places API jobs and the
HTTP API. Credentials are read from environment variables; use
LocatorConfig (config_manager.py) to override them programmatically.
"""

import os

# API credentials
# Server-side key, used by the scripts and the /api/places endpoint
PLACES_API_KEY_ENV = "GOOGLE_PLACES_API_KEY"
# Client-exposed key, used for photo URLs and map embeds
MAPS_API_KEY_ENV = "GOOGLE_MAPS_API_KEY"
MAPS_API_KEY_ENV_FALLBACK = "NEXT_PUBLIC_GOOGLE_MAPS_API_KEY"


def get_places_api_key():
    """Get the server-side Places API key, or None if unset."""
    return os.environ.get(PLACES_API_KEY_ENV) or None


def get_maps_api_key():
    """Get the client-exposed Maps API key, or None if unset."""
    return (
        os.environ.get(MAPS_API_KEY_ENV)
        or os.environ.get(MAPS_API_KEY_ENV_FALLBACK)
        or None
    )


# Places API endpoints
PLACES_BASE_URL = "https://maps.googleapis.com/maps/api/place"
FIND_PLACE_URL = f"{PLACES_BASE_URL}/findplacefromtext/json"
PLACE_DETAILS_URL = f"{PLACES_BASE_URL}/details/json"
PLACE_PHOTO_URL = f"{PLACES_BASE_URL}/photo"

# Photo URL template (maxwidth can be up to 4800)
PHOTO_URL_TEMPLATE = PLACE_PHOTO_URL + "?maxwidth={max_width}&photo_reference={reference}&key={key}"
PHOTO_MAX_WIDTH = 1200
MAX_PHOTOS = 10

# Maps links
MAP_EMBED_URL = "https://www.google.com/maps/embed/v1/place"
MAP_EMBED_ZOOM = 15
DIRECTIONS_URL = "https://www.google.com/maps/dir/"

# Fields requested from the Places API
FIND_PLACE_FIELDS = "place_id,formatted_address,geometry"
ENRICHMENT_DETAIL_FIELDS = (
    "name,formatted_address,formatted_phone_number,website,opening_hours,"
    "rating,user_ratings_total,reviews,geometry,url"
)
PHOTO_DETAIL_FIELDS = "name,photos"
STORE_PAGE_DETAIL_FIELDS = "name,rating,user_ratings_total,reviews,photos,url,opening_hours"

# Rate Limiting (seconds)
DELAY_BETWEEN_STORES = 0.2
REQUEST_TIMEOUT = 30.0

# New store defaults
DEFAULT_STATE = "Karnataka"
DEFAULT_WORKING_HOURS = "10 AM to 10 PM"

# CSV Columns
CSV_COLUMNS = [
    "id",
    "name",
    "slug",
    "address",
    "city",
    "state",
    "pincode",
    "phone",
    "email",
    "lat",
    "lng",
    "tags",
    "workingHours",
    "openedDate",
    "placeId",
]

# Columns that are always wrapped in double quotes on export
CSV_QUOTED_COLUMNS = {"name", "address", "tags", "workingHours", "openedDate", "placeId"}
CSV_TAG_SEPARATOR = ";"
CSV_EXPORT_PREFIX = "zecode-stores"

# Script outputs
DEFAULT_PHOTOS_OUTPUT = "store-photos.json"
DEFAULT_PLACES_OUTPUT = "store-places-results.json"

# API Server
API_HOST = "0.0.0.0"
API_PORT = 8000

# Logging
LOG_LEVEL = os.environ.get("STORE_LOCATOR_LOG_LEVEL", "INFO")
