"""
FastAPI Server for the Store Locator

Provides API endpoints for:
- Public store list and store detail
- Place details (rating, reviews, photos) from the Places API
- Admin CRUD over the in-memory store collection, CSV export/import
  and photo fetching

Admin edits live only in the process; nothing is written back to the
packaged data file.
"""

from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field
from loguru import logger

from .config import API_HOST, API_PORT, STORE_PAGE_DETAIL_FIELDS
from .config_manager import LocatorConfig
from .csv_io import export_stores_csv, import_stores_csv, export_filename
from .data import load_default_stores
from .exceptions import DuplicateStoreError, StoreNotFoundError
from .extraction import fetch_place_details, fetch_photo_refs, build_photo_urls
from .extraction.client import places_client
from .models import Store, map_embed_url, directions_url
from .parsers.places import parse_photo_refs, parse_reviews
from .registry import StoreRegistry


# Request Models
class StoreIn(BaseModel):
    """Admin form payload. Field names accept the camelCase aliases."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    slug: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    tags: Optional[List[str]] = None
    working_hours: Optional[str] = Field(default=None, alias="workingHours")
    opened_date: Optional[str] = Field(default=None, alias="openedDate")
    place_id: Optional[str] = Field(default=None, alias="placeId")
    photos: Optional[List[str]] = None
    featured_products: Optional[List[str]] = Field(default=None, alias="featuredProducts")
    description: Optional[str] = None


class StoreUpdate(StoreIn):
    name: Optional[str] = None


# Dependencies
def get_registry(request: Request) -> StoreRegistry:
    return request.app.state.registry


def get_config(request: Request) -> LocatorConfig:
    return request.app.state.config


def _lookup(registry: StoreRegistry, store_id: int) -> Store:
    try:
        return registry.get(store_id)
    except StoreNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


def create_app(registry: StoreRegistry = None, config: LocatorConfig = None) -> FastAPI:
    """Build the API app around a store collection.

    Args:
        registry: Store collection to serve; defaults to the packaged stores.
        config: Credentials and tunables; defaults to env-derived values.
    """
    app = FastAPI(title="Store Locator API")
    app.state.registry = registry if registry is not None else StoreRegistry(load_default_stores())
    app.state.config = config if config is not None else LocatorConfig()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if not app.state.config.places_enabled:
        logger.warning("Places API key missing; /api/places is disabled")
    if not app.state.config.photos_enabled:
        logger.warning("Maps API key missing; photo fetching and map embeds are disabled")

    # Public endpoints
    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/stores")
    async def list_stores(
        q: str = "",
        city: Optional[str] = None,
        tag: Optional[str] = None,
        registry: StoreRegistry = Depends(get_registry),
    ):
        """Store list for the locator page, filtered by search text, city or tag."""
        stores = registry.search(q)
        if city or tag:
            allowed = registry.filter(city=city, tag=tag)
            stores = [s for s in stores if s in allowed]
        return {"count": len(stores), "stores": [s.to_dict() for s in stores]}

    @app.get("/api/stores/{slug}")
    async def get_store(
        slug: str,
        registry: StoreRegistry = Depends(get_registry),
        config: LocatorConfig = Depends(get_config),
    ):
        """Store detail by slug, with map links."""
        try:
            store = registry.get_by_slug(slug)
        except StoreNotFoundError:
            raise HTTPException(status_code=404, detail="Store Not Found")

        data = store.to_dict()
        data["directionsUrl"] = directions_url(store)
        if config.maps_api_key:
            data["mapEmbedUrl"] = map_embed_url(store, config.maps_api_key)
        return data

    @app.get("/api/places")
    def get_place(placeId: str, config: LocatorConfig = Depends(get_config)):
        """Place details (rating, reviews, photos) for the store page."""
        if not config.places_api_key:
            raise HTTPException(status_code=503, detail="Places API key not configured")

        with places_client(timeout=config.request_timeout) as http:
            details = fetch_place_details(
                placeId, config.places_api_key, fields=STORE_PAGE_DETAIL_FIELDS, client=http
            )
        if details is None:
            raise HTTPException(status_code=502, detail="Failed to fetch place details")

        return {
            "success": True,
            "data": {
                "name": details.get("name"),
                "rating": details.get("rating"),
                "totalReviews": details.get("user_ratings_total"),
                "googleUrl": details.get("url"),
                "openingHours": details.get("opening_hours"),
                "reviews": parse_reviews(details),
                "photos": [
                    {
                        "photo_reference": ref.reference,
                        "width": ref.width,
                        "height": ref.height,
                        "html_attributions": ref.attributions,
                    }
                    for ref in parse_photo_refs(details)
                ],
            },
        }

    # Admin endpoints
    @app.get("/api/admin/stores")
    async def admin_list_stores(registry: StoreRegistry = Depends(get_registry)):
        return {"count": len(registry), "stores": [s.to_dict() for s in registry]}

    @app.post("/api/admin/stores", status_code=201)
    async def admin_create_store(payload: StoreIn, registry: StoreRegistry = Depends(get_registry)):
        store = registry.add(payload.model_dump(exclude_none=True))
        logger.info("Added store {} ({})", store.id, store.name)
        return store.to_dict()

    @app.put("/api/admin/stores/{store_id}")
    async def admin_update_store(
        store_id: int,
        payload: StoreUpdate,
        registry: StoreRegistry = Depends(get_registry),
    ):
        _lookup(registry, store_id)
        store = registry.update(store_id, payload.model_dump(exclude_unset=True))
        return store.to_dict()

    @app.delete("/api/admin/stores/{store_id}", status_code=204)
    async def admin_delete_store(store_id: int, registry: StoreRegistry = Depends(get_registry)):
        _lookup(registry, store_id)
        registry.delete(store_id)
        logger.info("Deleted store {}", store_id)
        return Response(status_code=204)

    @app.get("/api/admin/stores/export")
    async def admin_export_csv(registry: StoreRegistry = Depends(get_registry)):
        """Download the current collection as CSV."""
        return Response(
            content=export_stores_csv(registry),
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
        )

    @app.post("/api/admin/stores/import")
    async def admin_import_csv(request: Request, registry: StoreRegistry = Depends(get_registry)):
        """Replace the whole collection with the stores in a raw CSV body."""
        body = await request.body()
        try:
            text = body.decode("utf-8-sig")
        except UnicodeDecodeError:
            raise HTTPException(status_code=400, detail="CSV upload must be UTF-8 encoded")
        stores = import_stores_csv(text)
        try:
            registry.replace_all(stores)
        except DuplicateStoreError as e:
            raise HTTPException(status_code=409, detail=str(e))
        logger.info("Imported {} stores from CSV", len(stores))
        return {"imported": len(stores)}

    @app.post("/api/admin/stores/{store_id}/photos")
    def admin_fetch_photos(
        store_id: int,
        registry: StoreRegistry = Depends(get_registry),
        config: LocatorConfig = Depends(get_config),
    ):
        """Fetch up to 10 photo URLs for the store's place id and save them on the record."""
        store = _lookup(registry, store_id)
        if not store.place_id:
            raise HTTPException(status_code=400, detail="Please enter a Place ID first")
        if not config.photos_enabled:
            raise HTTPException(status_code=503, detail="Google Maps API key not configured")

        details_key = config.places_api_key or config.maps_api_key
        with places_client(timeout=config.request_timeout) as http:
            refs = fetch_photo_refs(store.place_id, details_key, max_photos=config.max_photos, client=http)
        if refs is None:
            raise HTTPException(status_code=502, detail="Failed to fetch place details")
        if not refs:
            raise HTTPException(status_code=404, detail="No photos found for this place")

        urls = build_photo_urls(
            refs,
            config.maps_api_key,
            max_photos=config.max_photos,
            max_width=config.photo_max_width,
        )
        registry.update(store_id, {"photos": urls})
        return {"success": True, "photoCount": len(urls), "photos": urls}

    return app


def run_server(host: str = API_HOST, port: int = API_PORT, application: FastAPI = None):
    """Run the API server. Serves the module-level app unless one is given."""
    import uvicorn
    uvicorn.run(application if application is not None else app, host=host, port=port)


app = create_app()
