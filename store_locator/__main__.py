"""
Package entry point.

Allows running: python -m store_locator photos --store-id 1
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
