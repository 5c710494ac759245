import httpx
import pytest

from store_locator.models import Store


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for var in ["GOOGLE_PLACES_API_KEY", "GOOGLE_MAPS_API_KEY", "NEXT_PUBLIC_GOOGLE_MAPS_API_KEY"]:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def sample_stores():
    return [
        Store(
            id=1,
            name="ZECODE Hesaraghatta",
            slug="hesaraghatta-road-bengaluru",
            address="No. 42, Hesaraghatta Main Road",
            city="Bengaluru",
            state="Karnataka",
            pincode="560090",
            phone="+91-8041234501",
            email="hesaraghatta@zecode.in",
            lat=13.0652,
            lng=77.5131,
            tags=["Hesaraghatta", "North Bengaluru"],
            working_hours="10 AM to 10 PM",
            opened_date="March 2024",
            place_id="ChIJMZMHeHcjrjsR1vSRgUCbrbc",
        ),
        Store(
            id=2,
            name="ZECODE Jayanagar",
            slug="jayanagar-bengaluru",
            address="11th Main Road, 4th Block, Jayanagar",
            city="Bengaluru",
            state="Karnataka",
            pincode="560011",
            phone="+91-8041234503",
            email="jayanagar@zecode.in",
            lat=12.9299,
            lng=77.5838,
            tags=["Jayanagar", "South Bengaluru", "Jayanagar"],
            working_hours="10 AM to 10 PM",
            opened_date="August 2024",
            place_id="ChIJjayanagar",
        ),
        Store(
            id=5,
            name="ZECODE Mysuru",
            slug="sayyaji-rao-road-mysuru",
            address="Sayyaji Rao Road, Devaraja Mohalla",
            city="Mysuru",
            state="Karnataka",
            pincode="570001",
            phone="+91-8212345604",
            email="mysuru@zecode.in",
            lat=12.3112,
            lng=76.6527,
            tags=[],
            working_hours="10:30 AM to 9:30 PM",
            opened_date="November 2024",
            place_id="ChIJmysuru",
        ),
    ]


@pytest.fixture
def mock_client():
    """Build an httpx.Client whose requests go to a handler function."""
    clients = []

    def factory(handler):
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()
