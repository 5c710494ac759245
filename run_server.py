#!/usr/bin/env python
"""
Run the API Server

Starts the FastAPI server for the store locator.

Usage:
    python run_server.py

The server runs on http://localhost:8000

Endpoints:
    GET    /api/health                   - Health check
    GET    /api/stores                   - Store list (?q=, ?city=, ?tag=)
    GET    /api/stores/{slug}            - Store detail
    GET    /api/places?placeId=          - Place rating, reviews and photos
    GET    /api/admin/stores             - Admin store list
    POST   /api/admin/stores             - Add a store
    PUT    /api/admin/stores/{id}        - Edit a store
    DELETE /api/admin/stores/{id}        - Delete a store
    GET    /api/admin/stores/export      - Download CSV
    POST   /api/admin/stores/import      - Replace stores from CSV
    POST   /api/admin/stores/{id}/photos - Fetch photos for a store
"""

from store_locator.log import configure_logging
from store_locator.server import run_server

configure_logging()
run_server()
