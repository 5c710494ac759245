"""
Store CSV Codec

Export/import of store records in the admin CSV format:

    id,name,slug,address,city,state,pincode,phone,email,lat,lng,tags,workingHours,openedDate,placeId

name, address, tags (joined with ';'), workingHours, openedDate and placeId
are always double-quoted. Other fields are written bare unless they are
empty or hold whitespace, a comma or a quote, in which case they are quoted
too so the row keeps its column positions. Embedded double quotes are
doubled on export and undoubled on import; fully populated rows without
embedded quotes read and write the same as before.

Import is tolerant: the header line is skipped unvalidated, short rows get
defaulted trailing fields and unparseable numbers become 0.
"""

import re
from datetime import date
from typing import Iterable, List, Optional

from .config import CSV_COLUMNS, CSV_QUOTED_COLUMNS, CSV_TAG_SEPARATOR, CSV_EXPORT_PREFIX
from .models import Store

# A quoted run (with "" escapes) or a bare run without quotes, commas or
# whitespace, followed by a comma or the end of the line.
_TOKEN_RE = re.compile(r'("(?:[^"]|"")*"|[^",\s]+)(?=\s*,|\s*$)')
_INT_RE = re.compile(r'^\s*[+-]?\d+')
_FLOAT_RE = re.compile(r'^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?')
# Bare values that would not survive the tokenizer unquoted
_NEEDS_QUOTES_RE = re.compile(r'[\s,"]')


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def _bare(value: str) -> str:
    if not value or _NEEDS_QUOTES_RE.search(value):
        return _quote(value)
    return value


def _unquote(token: str) -> str:
    if len(token) >= 2 and token.startswith('"') and token.endswith('"'):
        return token[1:-1].replace('""', '"')
    return token


def _text(value) -> str:
    return "" if value is None else str(value)


def _store_values(store: Store) -> dict:
    return {
        "id": str(store.id),
        "name": _text(store.name),
        "slug": _text(store.slug),
        "address": _text(store.address),
        "city": _text(store.city),
        "state": _text(store.state),
        "pincode": _text(store.pincode),
        "phone": _text(store.phone),
        "email": _text(store.email),
        "lat": _text(store.lat),
        "lng": _text(store.lng),
        "tags": CSV_TAG_SEPARATOR.join(store.tags or []),
        "workingHours": _text(store.working_hours),
        "openedDate": _text(store.opened_date),
        "placeId": _text(store.place_id),
    }


def export_stores_csv(stores: Iterable[Store]) -> str:
    """
    Serialize stores to CSV text.

    Args:
        stores: Records in the order they should appear

    Returns:
        Header line plus one line per store, joined with '\\n'
        (no trailing newline)
    """
    lines = [",".join(CSV_COLUMNS)]
    for store in stores:
        values = _store_values(store)
        row = []
        for col in CSV_COLUMNS:
            value = values[col]
            row.append(_quote(value) if col in CSV_QUOTED_COLUMNS else _bare(value))
        lines.append(",".join(row))
    return "\n".join(lines)


def parse_int(value: Optional[str]) -> int:
    """Leading-integer parse; anything unparseable is 0."""
    if not value:
        return 0
    match = _INT_RE.match(value)
    return int(match.group(0)) if match else 0


def parse_float(value: Optional[str]) -> float:
    """Leading-float parse; anything unparseable is 0.0."""
    if not value:
        return 0.0
    match = _FLOAT_RE.match(value)
    return float(match.group(0)) if match else 0.0


def tokenize_row(line: str) -> List[str]:
    """Split one CSV line into unquoted field values.

    Empty bare fields produce no token, so later values shift left. Export
    quotes empty fields, so this only affects hand-written files.
    """
    return [_unquote(m.group(1)) for m in _TOKEN_RE.finditer(line)]


def _row_to_store(values: List[str]) -> Store:
    def get(index: int) -> str:
        return values[index] if index < len(values) else ""

    tags_field = get(11)
    return Store(
        id=parse_int(get(0)),
        name=get(1),
        slug=get(2),
        address=get(3),
        city=get(4),
        state=get(5),
        pincode=get(6),
        phone=get(7),
        email=get(8),
        lat=parse_float(get(9)),
        lng=parse_float(get(10)),
        tags=[t for t in tags_field.split(CSV_TAG_SEPARATOR) if t],
        working_hours=get(12),
        opened_date=get(13),
        place_id=get(14),
    )


def import_stores_csv(text: str) -> List[Store]:
    """
    Parse CSV text into store records.

    The first line is treated as a header and discarded. Blank lines are
    skipped. Never raises on malformed rows.

    Args:
        text: Full CSV contents

    Returns:
        List of Store objects, one per non-blank data line
    """
    lines = text.split("\n")
    stores = []
    for line in lines[1:]:
        if not line.strip():
            continue
        stores.append(_row_to_store(tokenize_row(line)))
    return stores


def export_stores_file(stores: Iterable[Store], path: str) -> int:
    """Write stores to a CSV file. Returns the number of rows written."""
    stores = list(stores)
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(export_stores_csv(stores))
    return len(stores)


def import_stores_file(path: str) -> List[Store]:
    with open(path, 'r', encoding='utf-8', newline='') as f:
        return import_stores_csv(f.read())


def export_filename(today: date = None) -> str:
    """Download name for an export, e.g. zecode-stores-2026-10-17.csv."""
    today = today or date.today()
    return f"{CSV_EXPORT_PREFIX}-{today.isoformat()}.csv"
