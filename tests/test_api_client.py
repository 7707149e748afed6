# tests/test_api_client.py
"""Unit tests for the vehicles HTTP client. The requests session is mocked."""

import pytest
import requests
from unittest.mock import MagicMock
from ev_platform.client.api_client import VehicleApiClient, VehicleApiError, VehicleNotFoundApiError
from tests.factories import make_record

BASE = "http://api.test/vehicles"


def make_response(status_code=200, body=None, reason="OK"):
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    resp.reason = reason
    if body is None:
        resp.json.side_effect = ValueError("no body")
        resp.text = ""
    else:
        resp.json.return_value = body
    return resp


def make_client(response=None, side_effect=None):
    session = MagicMock()
    if side_effect is not None:
        session.request.side_effect = side_effect
    else:
        session.request.return_value = response
    return VehicleApiClient(base_url=BASE + "/", timeout=5, session=session), session


class TestRequests:
    def test_list_parses_records(self):
        records = [make_record().model_dump(), make_record(brand="BMW").model_dump()]
        client, session = make_client(make_response(body=records))

        vehicles = client.list_vehicles()

        session.request.assert_called_once_with("GET", BASE, json=None, timeout=5)
        assert [v.brand for v in vehicles] == ["Tesla", "BMW"]

    def test_get_uses_id_path(self):
        record = make_record(id="abc")
        client, session = make_client(make_response(body=record.model_dump()))

        assert client.get_vehicle("abc") == record
        session.request.assert_called_once_with("GET", f"{BASE}/abc", json=None, timeout=5)

    def test_create_posts_payload_without_id(self):
        record = make_record(id="new")
        client, session = make_client(make_response(201, record.model_dump(), "Created"))

        created = client.create_vehicle({"id": "ignored", "brand": "Tesla"})

        assert created.id == "new"
        session.request.assert_called_once_with("POST", BASE, json={"brand": "Tesla"}, timeout=5)

    def test_update_puts_patch(self):
        record = make_record(id="abc", price=1000)
        client, session = make_client(make_response(body=record.model_dump()))

        assert client.update_vehicle("abc", {"price": 1000}).price == 1000
        session.request.assert_called_once_with("PUT", f"{BASE}/abc", json={"price": 1000}, timeout=5)

    def test_delete(self):
        client, session = make_client(make_response(200, {"status": "deleted", "id": "abc"}))
        assert client.delete_vehicle("abc") is None
        session.request.assert_called_once_with("DELETE", f"{BASE}/abc", json=None, timeout=5)

    def test_normalizes_missing_optional_fields(self):
        body = make_record().model_dump()
        del body["accident_description"]
        del body["images"]
        client, _ = make_client(make_response(body=body))

        vehicle = client.get_vehicle(body["id"])

        assert vehicle.accident_description is None
        assert vehicle.images == []
        assert vehicle.primary_image is None


class TestErrors:
    def test_not_found_is_distinct(self):
        client, _ = make_client(make_response(404, {"detail": "Vehicle with ID x not found"}, "Not Found"))
        with pytest.raises(VehicleNotFoundApiError) as exc:
            client.get_vehicle("x")
        assert exc.value.status_code == 404
        assert "Vehicle with ID x not found" in str(exc.value)

    def test_validation_error_lists_fields(self):
        body = {"detail": "Validation failed",
                "errors": [{"field": "year", "message": "bad year", "type": "value_error"}]}
        client, _ = make_client(make_response(400, body, "Bad Request"))
        with pytest.raises(VehicleApiError) as exc:
            client.create_vehicle({"brand": "X"})
        assert exc.value.status_code == 400
        assert not isinstance(exc.value, VehicleNotFoundApiError)
        assert "year: bad year" in str(exc.value)

    def test_server_error_includes_status(self):
        client, _ = make_client(make_response(500, {"detail": "Internal server error"}, "Internal Server Error"))
        with pytest.raises(VehicleApiError) as exc:
            client.list_vehicles()
        assert exc.value.status_code == 500
        assert "HTTP 500" in str(exc.value)

    def test_transport_failure_has_no_status(self):
        client, _ = make_client(side_effect=requests.exceptions.ConnectionError("refused"))
        with pytest.raises(VehicleApiError) as exc:
            client.list_vehicles()
        assert exc.value.status_code is None
        assert "refused" in str(exc.value)

    def test_malformed_body(self):
        client, _ = make_client(make_response(200, {"unexpected": True}))
        with pytest.raises(VehicleApiError):
            client.get_vehicle("abc")
