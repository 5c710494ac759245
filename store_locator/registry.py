"""
Store Registry

In-memory collection of store records used by the public listing and the
admin CRUD endpoints. Mutations never write back to the packaged data file;
CSV export is the only way to get edits out.
"""

from typing import Dict, Iterable, List, Optional, Any

from .config import DEFAULT_STATE, DEFAULT_WORKING_HOURS
from .exceptions import DuplicateStoreError, StoreNotFoundError
from .models import Store, generate_slug

# Fields that may hold None; the rest are cleared to an empty value
_NULLABLE_FIELDS = {"working_hours", "opened_date", "place_id", "photos", "featured_products", "description"}
_EMPTY_VALUES = {"lat": 0.0, "lng": 0.0, "tags": []}


class StoreRegistry:
    """Ordered collection of stores keyed by id.

    Args:
        stores: Initial records. Ids must be unique.
    """

    def __init__(self, stores: Optional[Iterable[Store]] = None):
        self._stores: List[Store] = []
        if stores is not None:
            self.replace_all(stores)

    def __len__(self):
        return len(self._stores)

    def __iter__(self):
        return iter(self._stores)

    def __repr__(self):
        return f"<StoreRegistry: {len(self._stores)} stores>"

    def all(self) -> List[Store]:
        return list(self._stores)

    def get(self, store_id: int) -> Store:
        for store in self._stores:
            if store.id == store_id:
                return store
        raise StoreNotFoundError(f"No store with id {store_id}")

    def get_by_slug(self, slug: str) -> Store:
        """First store with the given slug (slugs are not enforced unique)."""
        for store in self._stores:
            if store.slug == slug:
                return store
        raise StoreNotFoundError(f"No store with slug {slug!r}")

    def search(self, query: str = "") -> List[Store]:
        """Case-insensitive substring search over name, city, address and tags."""
        q = (query or "").strip().lower()
        if not q:
            return self.all()
        return [
            store for store in self._stores
            if q in store.name.lower()
            or q in store.city.lower()
            or q in store.address.lower()
            or any(q in tag.lower() for tag in store.tags)
        ]

    def filter(self, city: str = None, tag: str = None) -> List[Store]:
        """Exact (case-insensitive) match on city and/or tag."""
        results = self._stores
        if city:
            results = [s for s in results if s.city.lower() == city.lower()]
        if tag:
            results = [s for s in results if any(t.lower() == tag.lower() for t in s.tags)]
        return list(results)

    def next_id(self) -> int:
        if not self._stores:
            return 1
        return max(store.id for store in self._stores) + 1

    def add(self, data: Dict[str, Any]) -> Store:
        """Create a store from form data and append it.

        Any "id" in data is ignored; the new record gets next_id().
        """
        fields = {k: v for k, v in data.items() if v is not None}
        fields.pop("id", None)
        name = fields.get("name") or ""

        store = Store(
            id=self.next_id(),
            name=name,
            slug=fields.get("slug") or generate_slug(name),
            address=fields.get("address") or "",
            city=fields.get("city") or "",
            state=fields.get("state") or DEFAULT_STATE,
            pincode=fields.get("pincode") or "",
            phone=fields.get("phone") or "",
            email=fields.get("email") or "",
            lat=fields.get("lat") or 0.0,
            lng=fields.get("lng") or 0.0,
            tags=list(fields.get("tags") or []),
            working_hours=fields.get("working_hours") or DEFAULT_WORKING_HOURS,
            opened_date=fields.get("opened_date") or "",
            place_id=fields.get("place_id") or "",
            photos=fields.get("photos"),
            featured_products=fields.get("featured_products"),
            description=fields.get("description"),
        )
        self._stores.append(store)
        return store

    def update(self, store_id: int, changes: Dict[str, Any]) -> Store:
        """Merge changes over an existing record. The id never changes.

        None clears a field to its empty value; a None name is ignored.
        """
        current = self.get(store_id)
        for attr, value in changes.items():
            if attr == "id" or attr not in Store.__dataclass_fields__:
                continue
            if value is None and attr not in _NULLABLE_FIELDS:
                if attr == "name":
                    continue
                value = _EMPTY_VALUES.get(attr, "")
            setattr(current, attr, list(value) if isinstance(value, list) else value)
        return current

    def delete(self, store_id: int) -> Store:
        store = self.get(store_id)
        self._stores = [s for s in self._stores if s.id != store_id]
        return store

    def replace_all(self, stores: Iterable[Store]):
        """Swap in a whole new collection (used by CSV import)."""
        incoming = list(stores)
        seen = set()
        for store in incoming:
            if store.id in seen:
                raise DuplicateStoreError(f"Duplicate store id {store.id}")
            seen.add(store.id)
        self._stores = incoming
