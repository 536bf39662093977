"""
API Endpoint Tests

FastAPI TestClient against the seeded read-only datastore.
"""

import pytest
from sqlalchemy.exc import OperationalError

from listing_catalog.api import deps
from listing_catalog.api.endpoints import properties as properties_endpoint


# =============================================================================
# HEALTH CHECK TESTS
# =============================================================================

def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data


def test_readiness_check(client):
    response = client.get("/health/ready")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["checks"]["database"]["status"] == "healthy"


# =============================================================================
# SEARCH ENDPOINT TESTS
# =============================================================================

def test_list_properties(client):
    response = client.get("/properties")

    assert response.status_code == 200
    assert "X-Request-ID" in response.headers
    data = response.json()
    assert data["total"] == 5
    assert data["matched"] == 5
    assert [p["zpid"] for p in data["properties"]] == ["1005", "1004", "1003", "1002", "1001"]


def test_list_properties_camel_case_body(client):
    data = client.get("/properties", params={"limit": 1}).json()
    top = data["properties"][0]

    assert top["zipCode"] == "94618"
    assert top["propertyType"] == "Single Family"
    assert top["listing"]["openHouseDates"] == ["2024-05-04", "2024-05-05"]
    assert top["features"]["kitchenFeatures"] == ["Gas range", "Island", "Pantry"]
    assert top["photos"][0]["imageUrl"] == "https://source.test/a.jpg"


def test_list_properties_with_filters(client):
    response = client.get(
        "/properties",
        params={"minPrice": "750000", "bedrooms": "3", "limit": "1"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 1
    assert data["matched"] == 4
    assert data["properties"][0]["zpid"] == "1005"


def test_list_properties_search_and_type(client):
    data = client.get(
        "/properties",
        params={"search": "Oakland", "propertyType": "Single Family", "bathrooms": "2.5"},
    ).json()

    assert [p["zpid"] for p in data["properties"]] == ["1005", "1003"]


def test_list_properties_pagination(client):
    first = client.get("/properties", params={"limit": 2, "offset": 0}).json()
    second = client.get("/properties", params={"limit": 2, "offset": 2}).json()

    assert [p["zpid"] for p in first["properties"]] == ["1005", "1004"]
    assert [p["zpid"] for p in second["properties"]] == ["1003", "1002"]
    assert first["total"] == 2
    assert first["matched"] == 5


@pytest.mark.parametrize(
    "params",
    [
        {"minPrice": "cheap"},
        {"maxPrice": ""},
        {"bedrooms": "-2"},
        {"bathrooms": "nan"},
        {"bedrooms": "3.5"},
        {"limit": "lots", "offset": "soon"},
        {"minPrice": "100000000000000000000"},
        {"maxPrice": "99999999999999999999999"},
        {"limit": "12345678901234567890"},
        {"offset": "12345678901234567890"},
    ],
)
def test_malformed_numbers_are_ignored(client, params):
    response = client.get("/properties", params=params)

    assert response.status_code == 200
    assert response.json()["total"] == 5


def test_list_properties_storage_failure(client, monkeypatch):
    def broken(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(properties_endpoint, "search_properties", broken)
    response = client.get("/properties")

    assert response.status_code == 500
    data = response.json()
    assert data["error"] == "Failed to fetch properties"
    assert "disk" not in response.text


def test_unexpected_failure_is_generic_500(client, monkeypatch):
    def broken(*args, **kwargs):
        raise RuntimeError("secret internals")

    monkeypatch.setattr(properties_endpoint, "search_properties", broken)
    response = client.get("/properties")

    assert response.status_code == 500
    assert response.json()["error"] == "Internal server error"
    assert "secret" not in response.text


# =============================================================================
# DETAIL ENDPOINT TESTS
# =============================================================================

def test_get_property(client):
    response = client.get("/properties/1003")

    assert response.status_code == 200
    prop = response.json()["property"]
    assert prop["zpid"] == "1003"
    assert prop["listing"]["keyFeatures"] == ["Hardwood", "Views"]
    assert prop["listing"]["priceChanges"] is None
    assert prop["features"] is None
    assert prop["photos"] == []


def test_get_property_not_found(client):
    response = client.get("/properties/0000")

    assert response.status_code == 404
    data = response.json()
    assert data["error"] == "Property not found"
    assert "request_id" in data


def test_get_property_storage_failure(client, monkeypatch):
    def broken(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(properties_endpoint, "get_property_by_zpid", broken)
    response = client.get("/properties/1003")

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to fetch property"


# =============================================================================
# QUERY PARAMETER PARSING
# =============================================================================

@pytest.mark.parametrize(
    "raw, expected",
    [
        ("20", 20),
        (" 7 ", 7),
        ("0", 0),
        ("-1", None),
        ("9223372036854775807", 9223372036854775807),
        ("9223372036854775808", None),
        ("1.5", None),
        ("abc", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_int(raw, expected):
    assert deps.parse_int(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [("2.5", 2.5), ("3", 3.0), ("-1", None), ("inf", None), ("nan", None), ("x", None), (None, None)],
)
def test_parse_float(raw, expected):
    assert deps.parse_float(raw) == expected
