"""
Configuration manager for library and API usage.

Bundles the credentials and tunables that the scripts and the HTTP API need,
resolving unset values from the environment at construction time.
"""

from typing import Optional
from dataclasses import dataclass

from . import config
from .exceptions import ConfigurationError


@dataclass
class LocatorConfig:
    """Configuration for the Places jobs and the HTTP API.

    Explicit args win; anything left as None falls back to the environment
    (GOOGLE_PLACES_API_KEY, GOOGLE_MAPS_API_KEY / NEXT_PUBLIC_GOOGLE_MAPS_API_KEY).

    Args:
        places_api_key: Server-side Places API key.
        maps_api_key: Client-exposed Maps key used in photo and embed URLs.
            Not filled from places_api_key; the photo job uses the server
            key in URLs only when this one is unset.
        delay_between_stores: Minimum spacing of enrichment calls (seconds).
        request_timeout: HTTP timeout for vendor calls (seconds).
        photo_max_width: maxwidth used in generated photo URLs.
        max_photos: Maximum photo URLs kept per store.
        log_level: loguru level name.
    """

    places_api_key: Optional[str] = None
    maps_api_key: Optional[str] = None
    delay_between_stores: float = config.DELAY_BETWEEN_STORES
    request_timeout: float = config.REQUEST_TIMEOUT
    photo_max_width: int = config.PHOTO_MAX_WIDTH
    max_photos: int = config.MAX_PHOTOS
    log_level: str = config.LOG_LEVEL

    def __post_init__(self):
        """Resolve credentials from env vars if not explicitly set."""
        if self.places_api_key is None:
            self.places_api_key = config.get_places_api_key()
        if self.maps_api_key is None:
            self.maps_api_key = config.get_maps_api_key()

    @property
    def photos_enabled(self) -> bool:
        return bool(self.maps_api_key)

    @property
    def places_enabled(self) -> bool:
        return bool(self.places_api_key)

    def require_places_key(self) -> str:
        """Return the server-side key or raise ConfigurationError."""
        if not self.places_api_key:
            raise ConfigurationError(
                f"{config.PLACES_API_KEY_ENV} environment variable is not set"
            )
        return self.places_api_key

    def require_maps_key(self) -> str:
        """Return the client-exposed key or raise ConfigurationError."""
        if not self.maps_api_key:
            raise ConfigurationError("Google Maps API key not configured")
        return self.maps_api_key
