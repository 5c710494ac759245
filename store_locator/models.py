"""
Store Data Model

A Store is one physical retail location. Serialized form (JSON data file,
API payloads) uses the camelCase keys of the storefront:

    id, name, slug, address, city, state, pincode, phone, email,
    lat, lng, tags, workingHours, openedDate, placeId,
    photos, featuredProducts, description
"""

import re
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field
from urllib.parse import quote, urlencode

from .config import MAP_EMBED_URL, MAP_EMBED_ZOOM, DIRECTIONS_URL


# attribute name -> serialized key, for fields whose names differ
_KEY_MAP = {
    "working_hours": "workingHours",
    "opened_date": "openedDate",
    "place_id": "placeId",
    "featured_products": "featuredProducts",
}
_ATTR_MAP = {v: k for k, v in _KEY_MAP.items()}

_OPTIONAL_FIELDS = (
    "working_hours",
    "opened_date",
    "place_id",
    "photos",
    "featured_products",
    "description",
)


@dataclass
class Store:
    """A single store record."""

    id: int
    name: str = ""
    slug: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    pincode: str = ""
    phone: str = ""
    email: str = ""
    lat: float = 0.0
    lng: float = 0.0
    tags: List[str] = field(default_factory=list)
    working_hours: Optional[str] = None
    opened_date: Optional[str] = None
    place_id: Optional[str] = None
    photos: Optional[List[str]] = None
    featured_products: Optional[List[str]] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Store":
        """Build a Store from a camelCase dict. Unknown keys are ignored."""
        kwargs = {}
        for key, value in data.items():
            attr = _ATTR_MAP.get(key, key)
            if attr in cls.__dataclass_fields__:
                kwargs[attr] = value
        if "tags" in kwargs and kwargs["tags"] is not None:
            kwargs["tags"] = list(kwargs["tags"])
        else:
            kwargs["tags"] = []
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a camelCase dict, omitting unset optional fields."""
        data = {}
        for attr in self.__dataclass_fields__:
            value = getattr(self, attr)
            if attr in _OPTIONAL_FIELDS and value is None:
                continue
            if isinstance(value, list):
                value = list(value)
            data[_KEY_MAP.get(attr, attr)] = value
        return data


def generate_slug(name: str) -> str:
    """Turn a store name into a URL slug.

    "ZECODE Hesaraghatta Road" -> "zecode-hesaraghatta-road"
    """
    slug = name.lower()
    slug = re.sub(r'[^a-z0-9\s-]', '', slug)
    slug = re.sub(r'\s+', '-', slug)
    slug = re.sub(r'-+', '-', slug)
    return slug.strip()


def map_embed_url(store: Store, api_key: str) -> str:
    """Maps embed URL for a store; place_id gives the most accurate pin."""
    if store.place_id:
        q = f"place_id:{store.place_id}"
    else:
        q = quote(store.address, safe='')
    return f"{MAP_EMBED_URL}?key={api_key}&q={q}&zoom={MAP_EMBED_ZOOM}"


def directions_url(store: Store) -> str:
    """Google Maps directions link to the store's coordinates."""
    params = urlencode({"api": 1, "destination": f"{store.lat},{store.lng}"}, safe=',')
    return f"{DIRECTIONS_URL}?{params}"
