# tests/test_catalog.py
"""Unit tests for the in-memory catalog view state. The API client is mocked."""

import pytest
from unittest.mock import MagicMock
from ev_platform.client.api_client import VehicleApiError, VehicleNotFoundApiError
from ev_platform.client.catalog import VehicleCatalog
from ev_platform.client.form_validation import FormValidationError
from tests.factories import form_data, make_record


@pytest.fixture
def records():
    return [
        make_record(id="a", brand="Tesla", condition="New", price=40000),
        make_record(id="b", brand="Nissan", model="Leaf", condition="Used", price=15000),
    ]


@pytest.fixture
def api(records):
    client = MagicMock()
    client.list_vehicles.return_value = list(records)
    return client


@pytest.fixture
def catalog(api):
    catalog = VehicleCatalog(api)
    catalog.load()
    return catalog


class TestLoad:
    def test_load_fills_collection(self, catalog, records):
        assert catalog.vehicles == records
        assert catalog.loading is False
        assert catalog.error is None

    def test_failure_surfaces_dismissible_error(self, api):
        api.list_vehicles.side_effect = VehicleApiError("refused")
        catalog = VehicleCatalog(api)

        assert catalog.load() is False
        assert catalog.error == "Failed to load vehicles. Please try again later."
        assert catalog.loading is False

        catalog.dismiss_error()
        assert catalog.error is None

    def test_retry_refetches(self, api, records):
        api.list_vehicles.side_effect = [VehicleApiError("refused"), list(records)]
        catalog = VehicleCatalog(api)
        catalog.load()

        assert catalog.retry() is True
        assert catalog.error is None
        assert catalog.vehicles == records
        assert api.list_vehicles.call_count == 2


class TestView:
    def test_criteria_drive_view(self, catalog):
        catalog.set_condition("Used")
        assert [v.id for v in catalog.view] == ["b"]

        catalog.set_condition("All")
        catalog.set_sort("price", descending=False)
        assert [v.id for v in catalog.view] == ["b", "a"]

    def test_clear_filters(self, catalog):
        catalog.set_search("tesla")
        catalog.set_condition("Used")
        catalog.set_sort("price", descending=True)
        catalog.clear_filters()
        assert catalog.view == catalog.vehicles


class TestMutations:
    def test_add_appends_without_refetch(self, catalog, api):
        created = make_record(id="c", brand="Polestar")
        api.create_vehicle.return_value = created

        assert catalog.add(form_data(images=["", "x.jpg"])) == created

        assert catalog.vehicles[-1] == created
        assert api.create_vehicle.call_args.args[0]["images"] == ["x.jpg"]
        assert api.list_vehicles.call_count == 1

    def test_add_blocked_by_validation(self, catalog, api):
        with pytest.raises(FormValidationError) as exc:
            catalog.add(form_data(brand="", images=[]))
        assert set(exc.value.errors) == {"brand", "images"}
        api.create_vehicle.assert_not_called()

    def test_add_failure_keeps_list(self, catalog, api):
        api.create_vehicle.side_effect = VehicleApiError("Failed to create vehicle: HTTP 400", 400)
        assert catalog.add(form_data()) is None
        assert len(catalog.vehicles) == 2
        assert "HTTP 400" in catalog.error

    def test_edit_replaces_in_place(self, catalog, api):
        updated = make_record(id="a", brand="Tesla", price=38000)
        api.update_vehicle.return_value = updated

        assert catalog.edit("a", {"price": 38000}) == updated

        api.update_vehicle.assert_called_once_with("a", {"price": 38000})
        assert catalog.vehicles[0] == updated
        assert len(catalog.vehicles) == 2

    def test_edit_validates_merged_record(self, catalog, api):
        with pytest.raises(FormValidationError) as exc:
            catalog.edit("a", {"accidents": True})
        assert set(exc.value.errors) == {"accident_description"}
        api.update_vehicle.assert_not_called()

    def test_edit_unknown_vehicle(self, catalog, api):
        api.get_vehicle.side_effect = VehicleNotFoundApiError("Failed: HTTP 404", 404)
        assert catalog.edit("zzz", {"price": 1}) is None
        assert "HTTP 404" in catalog.error

    def test_remove_filters_out(self, catalog, api):
        assert catalog.remove("a") is True
        api.delete_vehicle.assert_called_once_with("a")
        assert [v.id for v in catalog.vehicles] == ["b"]

    def test_remove_not_found_keeps_list(self, catalog, api):
        api.delete_vehicle.side_effect = VehicleNotFoundApiError("Failed: HTTP 404", 404)
        assert catalog.remove("a") is False
        assert len(catalog.vehicles) == 2
        assert catalog.error is not None
