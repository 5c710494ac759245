import httpx

from store_locator.extraction import enrich_stores
from store_locator.parsers.store_text import StoreRef
from store_locator.ratelimit import FixedIntervalGate


class FakeClock:
    def __init__(self):
        self.now = 100.0
        self.sleeps = []

    def clock(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


CANDIDATES = {
    "Alpha, 1 Road, Bengaluru": {"place_id": "PA", "geometry": {"location": {"lat": 1.0, "lng": 2.0}}},
    "Gamma, 3 Road, Mysuru": {"place_id": "PG"},
}
DETAILS = {
    "PA": {"rating": 4.4, "user_ratings_total": 120, "url": "https://maps.google.com/?cid=1"},
    "PG": {"rating": 3.9, "user_ratings_total": 8, "url": "https://maps.google.com/?cid=3",
           "geometry": {"location": {"lat": 5.0, "lng": 6.0}}},
}


def make_handler(calls):
    def handler(request):
        params = request.url.params
        if request.url.path.endswith("/findplacefromtext/json"):
            calls.append(("find", params["input"]))
            candidate = CANDIDATES.get(params["input"])
            if candidate is None:
                return httpx.Response(200, json={"status": "ZERO_RESULTS", "candidates": []})
            return httpx.Response(200, json={"status": "OK", "candidates": [candidate]})
        calls.append(("details", params["place_id"]))
        return httpx.Response(200, json={"status": "OK", "result": DETAILS[params["place_id"]]})
    return handler


REFS = [
    StoreRef("Alpha", "1 Road", "Bengaluru"),
    StoreRef("Beta", "2 Road", "Hubballi"),
    StoreRef("Gamma", "3 Road", "Mysuru"),
]


def test_store_without_candidate_is_skipped_and_run_continues(mock_client):
    calls = []
    fake = FakeClock()
    gate = FixedIntervalGate(interval=0.2, clock=fake.clock, sleep=fake.sleep)

    results = enrich_stores(REFS, "K", client=mock_client(make_handler(calls)), gate=gate, verbose=False)

    assert [row["name"] for row in results] == ["Alpha", "Gamma"]
    assert ("details", "PA") in calls
    assert ("details", "PG") in calls
    assert not any(kind == "details" and pid not in ("PA", "PG") for kind, pid in calls)
    assert calls[2] == ("find", "Beta, 2 Road, Hubballi")


def test_result_rows(mock_client):
    results = enrich_stores(REFS, "K", client=mock_client(make_handler([])),
                            gate=FixedIntervalGate(interval=0, sleep=lambda s: None), verbose=False)
    assert results[0] == {
        "name": "Alpha",
        "placeId": "PA",
        "rating": 4.4,
        "totalReviews": 120,
        "lat": 1.0,
        "lng": 2.0,
        "googleUrl": "https://maps.google.com/?cid=1",
    }
    # coordinates fall back to the details geometry
    assert (results[1]["lat"], results[1]["lng"]) == (5.0, 6.0)


def test_stores_are_spaced_by_the_gate(mock_client):
    fake = FakeClock()
    gate = FixedIntervalGate(interval=0.2, clock=fake.clock, sleep=fake.sleep)

    enrich_stores(REFS, "K", client=mock_client(make_handler([])), gate=gate, verbose=False)

    # first store goes immediately, the other two wait the full interval
    assert fake.sleeps == [0.2, 0.2]


def test_network_failure_for_one_store_does_not_abort(mock_client):
    def handler(request):
        if request.url.params.get("input", "").startswith("Alpha"):
            raise httpx.ReadTimeout("slow", request=request)
        return make_handler([])(request)

    results = enrich_stores(REFS, "K", client=mock_client(handler),
                            gate=FixedIntervalGate(interval=0, sleep=lambda s: None), verbose=False)
    assert [row["name"] for row in results] == ["Gamma"]


def test_details_failure_skips_store(mock_client):
    def handler(request):
        if request.url.path.endswith("/details/json"):
            return httpx.Response(200, json={"status": "OVER_QUERY_LIMIT"})
        return make_handler([])(request)

    results = enrich_stores(REFS, "K", client=mock_client(handler),
                            gate=FixedIntervalGate(interval=0, sleep=lambda s: None), verbose=False)
    assert results == []
