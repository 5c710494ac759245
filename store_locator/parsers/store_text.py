"""
Store Array Text Extractor

Pulls store name/address/city out of a TypeScript data module of the form:

    export const STORES: Store[] = [
        {
            id: 1,
            name: "ZECODE Hesaraghatta",
            address: "No. 42, Hesaraghatta Main Road",
            city: "Bengaluru",
            ...
        },
        ...
    ];

This is a migration aid, not a parser. Object chunks are found with a
non-greedy `{...},` match, so nested braces inside a record split it early.
Chunks missing any of the three fields are skipped.
"""

import re
from typing import List
from dataclasses import dataclass, field

from ..exceptions import StoreTextError

STORES_ARRAY_RE = re.compile(r'export const STORES: Store\[\] = \[([\s\S]*?)\];')
STORE_CHUNK_RE = re.compile(r'\{[\s\S]*?\},')
NAME_RE = re.compile(r'name:\s*"([^"]+)"')
ADDRESS_RE = re.compile(r'address:\s*"([^"]+)"')
CITY_RE = re.compile(r'city:\s*"([^"]+)"')


@dataclass
class StoreRef:
    """The fields needed to look a store up in the Places API."""
    name: str
    address: str
    city: str

    @property
    def query(self) -> str:
        return f"{self.name}, {self.address}, {self.city}"


@dataclass
class ExtractionResult:
    stores: List[StoreRef] = field(default_factory=list)
    chunks: int = 0
    skipped: int = 0

    def __len__(self):
        return len(self.stores)

    def __iter__(self):
        return iter(self.stores)


def extract_stores_array(text: str) -> str:
    """Return the body of the STORES array literal.

    Raises:
        StoreTextError: If no STORES array is found
    """
    match = STORES_ARRAY_RE.search(text)
    if not match:
        raise StoreTextError("Could not parse stores array")
    return match.group(1)


def split_store_chunks(array_body: str) -> List[str]:
    return STORE_CHUNK_RE.findall(array_body)


def parse_store_chunk(chunk: str):
    """StoreRef for one object chunk, or None if a field is missing."""
    name = NAME_RE.search(chunk)
    address = ADDRESS_RE.search(chunk)
    city = CITY_RE.search(chunk)
    if not (name and address and city):
        return None
    return StoreRef(name=name.group(1), address=address.group(1), city=city.group(1))


def extract_store_refs(text: str) -> ExtractionResult:
    """
    Extract store refs from the source text of a stores module.

    Args:
        text: Full file contents

    Returns:
        ExtractionResult with the parsed refs and the count of skipped chunks

    Raises:
        StoreTextError: If the STORES array cannot be located
    """
    chunks = split_store_chunks(extract_stores_array(text))
    result = ExtractionResult(chunks=len(chunks))
    for chunk in chunks:
        ref = parse_store_chunk(chunk)
        if ref is None:
            result.skipped += 1
            continue
        result.stores.append(ref)
    return result


def extract_store_refs_from_file(path: str) -> ExtractionResult:
    with open(path, 'r', encoding='utf-8') as f:
        return extract_store_refs(f.read())
