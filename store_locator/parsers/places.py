"""
Places Response Parsers

Pull the pieces we use out of Places API JSON responses.

find place from text:
    {"status": "OK", "candidates": [{"place_id", "formatted_address",
                                     "geometry": {"location": {"lat", "lng"}}}]}
place details:
    {"status": "OK", "result": {"rating", "user_ratings_total", "url",
                                "geometry", "photos": [{"photo_reference",
                                "width", "height", "html_attributions"}], ...}}
"""

from typing import Dict, List, Any, Optional
from dataclasses import dataclass


def safe_get(obj: Any, *keys, default=None) -> Any:
    """Safely traverse nested dicts/lists"""
    current = obj
    for key in keys:
        if current is None:
            return default
        if isinstance(current, dict):
            current = current.get(key)
        elif isinstance(current, list) and isinstance(key, int):
            current = current[key] if -len(current) <= key < len(current) else None
        else:
            return default
    return default if current is None else current


@dataclass
class PlaceCandidate:
    """First hit of a find-place query."""
    place_id: str
    lat: Optional[float] = None
    lng: Optional[float] = None
    formatted_address: Optional[str] = None


@dataclass
class PhotoRef:
    reference: str
    width: Optional[int] = None
    height: Optional[int] = None
    attributions: Optional[List[str]] = None

    def to_dict(self) -> Dict:
        return {
            "reference": self.reference,
            "width": self.width,
            "height": self.height,
            "attributions": self.attributions,
        }


def parse_first_candidate(data: Dict) -> Optional[PlaceCandidate]:
    """First candidate with a place_id, or None."""
    place_id = safe_get(data, "candidates", 0, "place_id")
    if not place_id:
        return None
    candidate = data["candidates"][0]
    return PlaceCandidate(
        place_id=place_id,
        lat=safe_get(candidate, "geometry", "location", "lat"),
        lng=safe_get(candidate, "geometry", "location", "lng"),
        formatted_address=candidate.get("formatted_address"),
    )


def parse_photo_refs(result: Dict, limit: int = None) -> List[PhotoRef]:
    """Photo references from a details result, in vendor order."""
    photos = safe_get(result, "photos", default=[])
    refs = []
    for photo in photos:
        if not isinstance(photo, dict) or not photo.get("photo_reference"):
            continue
        refs.append(PhotoRef(
            reference=photo["photo_reference"],
            width=photo.get("width"),
            height=photo.get("height"),
            attributions=photo.get("html_attributions"),
        ))
        if limit is not None and len(refs) >= limit:
            break
    return refs


def parse_reviews(result: Dict) -> List[Dict]:
    """Reviews from a details result, trimmed to the fields the store page shows."""
    reviews = []
    for review in safe_get(result, "reviews", default=[]):
        if not isinstance(review, dict):
            continue
        reviews.append({
            "author": review.get("author_name"),
            "author_photo": review.get("profile_photo_url"),
            "rating": review.get("rating"),
            "relative_time": review.get("relative_time_description"),
            "time": review.get("time"),
            "text": review.get("text"),
        })
    return reviews
