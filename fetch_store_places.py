#!/usr/bin/env python
"""
Google Places Bulk Enrichment

Look up place ID, rating and review count for every store in a
TypeScript stores module and save the results as JSON.

Usage:
    python fetch_store_places.py src/data/stores.ts
    python fetch_store_places.py src/data/stores.ts -o results.json --delay 0.5

Requires GOOGLE_PLACES_API_KEY in the environment.
"""

import sys
from store_locator.cli import main

if __name__ == "__main__":
    sys.exit(main(["places"] + sys.argv[1:]))
