from fastapi.testclient import TestClient

from tripdesk.main import app

client = TestClient(app)

PASSENGER = {
    "origin": "Toronto",
    "destination": "Istanbul",
    "from_date": "2025-01-25",
    "to_date": "2025-02-10",
    "adults": 2,
    "children": 1,
    "infants": 0,
}

CUSTOMER = {
    "country": "Turkey",
    "city": "Istanbul",
    "from_date": "2025-01-29",
    "to_date": "2025-02-01",
    "adults": 2,
    "children": 1,
    "needed_rooms": 2,
    "number_of_nights": 3,
}


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_flight_search_merges_vendors():
    r = client.post("/flights/search", json=PASSENGER)
    assert r.status_code == 200
    offers = r.json()["offers"]
    assert [(o["airline"], o["price"]) for o in offers] == [
        ("Canada", 200), ("Canada", 250), ("Turkish", 200), ("Turkish", 250),
    ]


def test_hotel_search_merges_vendors():
    r = client.post("/hotels/search", json=CUSTOMER)
    assert r.status_code == 200
    assert [o["hotel"] for o in r.json()["offers"]] == ["Hilton"] * 3 + ["Marriott"] * 3


def test_quote_flight_and_hotel():
    r = client.post("/itinerary/quote", json={
        "flights": [{"criteria": PASSENGER, "choice": 1}],
        "hotels": [{"criteria": CUSTOMER, "choice": 2}],
    })
    assert r.status_code == 200
    body = r.json()
    assert body["count"] == 2
    assert body["cost"] == 2400
    assert body["details"].startswith("Itinerary of 2 sub-reservations:")


def test_quote_empty():
    r = client.post("/itinerary/quote", json={})
    assert r.status_code == 200
    assert r.json()["cost"] == 0


def test_quote_invalid_choice():
    r = client.post("/itinerary/quote", json={"flights": [{"criteria": PASSENGER, "choice": 9}]})
    assert r.status_code == 422
    assert "flights[0]" in r.json()["detail"]


def test_negative_counts_rejected():
    r = client.post("/flights/search", json={**PASSENGER, "adults": -1})
    assert r.status_code == 422
