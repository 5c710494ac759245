from datetime import date

from store_locator.csv_io import (
    export_stores_csv,
    import_stores_csv,
    export_stores_file,
    import_stores_file,
    export_filename,
    tokenize_row,
    parse_int,
    parse_float,
)
from store_locator.models import Store
from store_locator.registry import StoreRegistry

HEADER = "id,name,slug,address,city,state,pincode,phone,email,lat,lng,tags,workingHours,openedDate,placeId"


def test_export_header_and_row_format(sample_stores):
    text = export_stores_csv(sample_stores[:1])
    lines = text.split("\n")
    assert lines[0] == HEADER
    assert lines[1] == (
        '1,"ZECODE Hesaraghatta",hesaraghatta-road-bengaluru,"No. 42, Hesaraghatta Main Road",'
        'Bengaluru,Karnataka,560090,+91-8041234501,hesaraghatta@zecode.in,13.0652,77.5131,'
        '"Hesaraghatta;North Bengaluru","10 AM to 10 PM","March 2024","ChIJMZMHeHcjrjsR1vSRgUCbrbc"'
    )
    assert not text.endswith("\n")


def test_export_quotes_missing_optional_fields():
    store = Store(id=3, name="Bare", slug="bare", city="Hubballi", state="Karnataka",
                  pincode="580020", phone="1", email="a@b.c")
    row = export_stores_csv([store]).split("\n")[1]
    assert row.endswith(',"","","",""')


def test_round_trip_keeps_scalar_fields(sample_stores):
    imported = import_stores_csv(export_stores_csv(sample_stores))
    assert len(imported) == len(sample_stores)
    assert imported == sample_stores


def test_tags_serialize_with_semicolons():
    store = Store(id=1, name="N", slug="n", address="A", city="C", state="S",
                  pincode="1", phone="2", email="e", tags=["A", "B"],
                  working_hours="h", opened_date="d", place_id="p")
    row = export_stores_csv([store]).split("\n")[1]
    assert ',"A;B",' in row
    assert import_stores_csv(export_stores_csv([store]))[0].tags == ["A", "B"]


def test_short_row_defaults_trailing_fields():
    stores = import_stores_csv(HEADER + '\n7,"Short Store",short-slug')
    assert len(stores) == 1
    store = stores[0]
    assert store.id == 7
    assert store.name == "Short Store"
    assert store.slug == "short-slug"
    assert store.address == ""
    assert store.lat == 0.0
    assert store.lng == 0.0
    assert store.tags == []
    assert store.working_hours == ""
    assert store.place_id == ""


def test_header_is_not_validated_and_blank_lines_skipped():
    text = 'whatever,header\n\n1,"One",one\n   \n2,"Two",two\n'
    stores = import_stores_csv(text)
    assert [s.id for s in stores] == [1, 2]


def test_bad_numbers_default_to_zero():
    stores = import_stores_csv(HEADER + '\nabc,"X",x,"A",C,S,1,2,e,north,12.5east,"","","",""')
    assert stores[0].id == 0
    assert stores[0].lat == 0.0
    assert stores[0].lng == 12.5


def test_empty_tag_entries_dropped():
    stores = import_stores_csv(HEADER + '\n1,"X",x,"A",C,S,1,2,e,1,2,";A;;B;","","",""')
    assert stores[0].tags == ["A", "B"]


def test_embedded_quotes_survive_round_trip():
    store = Store(id=1, name='The "Flagship" Store', slug="flagship", address="A", city="C",
                  state="S", pincode="1", phone="2", email="e", working_hours="h",
                  opened_date="d", place_id="p")
    text = export_stores_csv([store])
    assert '"The ""Flagship"" Store"' in text
    assert import_stores_csv(text)[0].name == 'The "Flagship" Store'


def test_windows_line_endings():
    text = HEADER + '\r\n1,"One",one,"Addr",City,State,1,2,e,1.5,2.5,"T","h","d","p"\r\n'
    store = import_stores_csv(text)[0]
    assert store.place_id == "p"
    assert store.lng == 2.5


def test_tokenize_row_keeps_commas_inside_quotes():
    assert tokenize_row('1,"a, b",c') == ["1", "a, b", "c"]


def test_number_helpers():
    assert parse_int("42abc") == 42
    assert parse_int("") == 0
    assert parse_float("-3.25") == -3.25
    assert parse_float(None) == 0.0


def test_file_helpers(tmp_path, sample_stores):
    path = tmp_path / "stores.csv"
    assert export_stores_file(sample_stores, str(path)) == 3
    assert import_stores_file(str(path)) == sample_stores


def test_export_filename():
    assert export_filename(date(2026, 10, 17)) == "zecode-stores-2026-10-17.csv"


def test_round_trip_store_created_through_admin_form():
    registry = StoreRegistry()
    store = registry.add({
        "name": "ZECODE Whitefield", "address": "ITPL Main Road", "city": "Bengaluru",
        "lat": 12.97, "lng": 77.75, "tags": ["East"],
    })
    text = export_stores_csv([store])
    assert ',Karnataka,"","","",12.97,77.75,' in text

    [back] = import_stores_csv(text)
    assert back == store
    assert back.pincode == ""
    assert back.working_hours == "10 AM to 10 PM"


def test_round_trip_bare_fields_with_spaces():
    store = Store(id=9, name="Chennai", slug="chennai", address="1 Road", city="Chennai",
                  state="Tamil Nadu", pincode="600 001", phone="+91 80 4123 4501",
                  email="chennai@zecode.in", working_hours="h", opened_date="d", place_id="p")
    text = export_stores_csv([store])
    assert ',"Tamil Nadu","600 001","+91 80 4123 4501",' in text
    assert import_stores_csv(text) == [store]
