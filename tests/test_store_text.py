import pytest

from store_locator.exceptions import StoreTextError
from store_locator.parsers.store_text import (
    StoreRef,
    extract_store_refs,
    extract_store_refs_from_file,
    extract_stores_array,
    split_store_chunks,
)


def _record(i, name=True, address=True, city=True):
    lines = [f"        id: {i},"]
    if name:
        lines.append(f'        name: "Store {i}",')
    lines.append(f'        slug: "store-{i}",')
    if address:
        lines.append(f'        address: "{i} Main Road",')
    if city:
        lines.append('        city: "Bengaluru",')
    lines.append('        tags: ["North", "Mall"],')
    lines.append("        lat: 12.97,")
    return "    {\n" + "\n".join(lines) + "\n    },"


def _module(records):
    return (
        "import { Store } from '@/types/store';\n\n"
        "export const STORES: Store[] = [\n"
        + "\n".join(records)
        + "\n];\n\n"
        "export function getStoreBySlug(slug: string) {\n"
        "    return STORES.find(s => s.slug === slug);\n"
        "}\n"
    )


def test_five_good_chunks_and_one_malformed():
    records = [_record(i) for i in range(1, 4)]
    records.append(_record(4, city=False))
    records += [_record(i) for i in range(5, 7)]

    result = extract_store_refs(_module(records))

    assert len(result) == 5
    assert result.chunks == 6
    assert result.skipped == 1
    assert [ref.name for ref in result] == ["Store 1", "Store 2", "Store 3", "Store 5", "Store 6"]


@pytest.mark.parametrize("missing", ["name", "address", "city"])
def test_chunk_missing_any_field_is_skipped(missing):
    record = _record(1, **{missing: False})
    result = extract_store_refs(_module([record, _record(2)]))
    assert [ref.name for ref in result] == ["Store 2"]


def test_fields_are_extracted():
    result = extract_store_refs(_module([_record(9)]))
    assert result.stores == [StoreRef(name="Store 9", address="9 Main Road", city="Bengaluru")]
    assert result.stores[0].query == "Store 9, 9 Main Road, Bengaluru"


def test_missing_array_raises():
    with pytest.raises(StoreTextError):
        extract_store_refs("export const PRODUCTS = [];")


def test_array_body_stops_at_first_terminator():
    body = extract_stores_array(_module([_record(1)]))
    assert "getStoreBySlug" not in body
    assert len(split_store_chunks(body)) == 1


def test_nested_braces_split_a_record_early():
    record = (
        "    {\n"
        '        name: "Nested",\n'
        "        hours: { open: 10 },\n"
        '        address: "1 Road",\n'
        '        city: "Mysuru",\n'
        "    },"
    )
    result = extract_store_refs(_module([record]))
    assert len(result) == 0
    assert result.skipped >= 1


def test_from_file(tmp_path):
    path = tmp_path / "stores.ts"
    path.write_text(_module([_record(1), _record(2)]), encoding="utf-8")
    assert len(extract_store_refs_from_file(str(path))) == 2
