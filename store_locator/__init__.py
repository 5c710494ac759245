"""
Store Locator

Store records, CSV import/export and Google Places tooling for a retail
storefront's store locator.

Quick start (library usage):
    from store_locator import StoreRegistry, load_default_stores, export_stores_csv

    registry = StoreRegistry(load_default_stores())
    csv_text = export_stores_csv(registry)

Places jobs (need GOOGLE_PLACES_API_KEY):
    from store_locator.extraction import enrich_stores
    from store_locator.parsers import extract_store_refs_from_file

    refs = extract_store_refs_from_file("src/data/stores.ts")
    results = enrich_stores(refs.stores, api_key)
"""

from .models import Store, generate_slug
from .registry import StoreRegistry
from .data import load_default_stores, load_stores_file
from .csv_io import export_stores_csv, import_stores_csv
from .config_manager import LocatorConfig

__version__ = "1.0.0"
__all__ = [
    "Store",
    "StoreRegistry",
    "LocatorConfig",
    "generate_slug",
    "load_default_stores",
    "load_stores_file",
    "export_stores_csv",
    "import_stores_csv",
]
