#!/usr/bin/env python
"""
Google Places Photo Fetcher

Fetch up to 10 photo URLs for one store and save them as a JSON report.

Usage:
    python fetch_store_photos.py --store-id 1
    python fetch_store_photos.py --place-id ChIJMZMHeHcjrjsR1vSRgUCbrbc -o photos.json

Requires GOOGLE_PLACES_API_KEY in the environment.
"""

import sys
from store_locator.cli import main

if __name__ == "__main__":
    sys.exit(main(["photos"] + sys.argv[1:]))
