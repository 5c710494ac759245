"""
Packaged store records.

stores.json is the source list the storefront is built from. Loaders return
fresh Store objects so callers may mutate them freely.
"""

import json
from importlib import resources
from typing import List

from ..models import Store


def _parse_stores(data) -> List[Store]:
    if not isinstance(data, list):
        raise ValueError("Store data must be a JSON array of store objects")
    return [Store.from_dict(item) for item in data]


def load_default_stores() -> List[Store]:
    """Load the packaged store list."""
    text = resources.files(__name__).joinpath("stores.json").read_text(encoding="utf-8")
    return _parse_stores(json.loads(text))


def load_stores_file(path: str) -> List[Store]:
    """Load stores from a JSON file with the same shape as stores.json."""
    with open(path, 'r', encoding='utf-8') as f:
        return _parse_stores(json.load(f))
