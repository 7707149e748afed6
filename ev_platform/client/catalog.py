# ev_platform/client/catalog.py
"""
In-memory view state for the vehicle listing.

Holds the last fetched collection plus the listing criteria. After a
successful create/update/delete the local list is patched in place instead
of refetching; load()/retry() refetch the whole collection on demand.
API failures never propagate from here: they are logged and kept in
`error` as a dismissible message until the next successful call.
"""

from dataclasses import replace
from typing import Optional

from ev_platform.client.api_client import VehicleApiClient, VehicleApiError
from ev_platform.client.form_validation import FormValidationError, clean_images, validate_vehicle_form
from ev_platform.client.listing import ListingCriteria, clear_filters, derive_view
from ev_platform.schemas.vehicle import VehicleOut
from ev_platform.utils.logger import get_logger

logger = get_logger(__name__)


class VehicleCatalog:
    def __init__(self, client: Optional[VehicleApiClient] = None):
        self.client = client or VehicleApiClient()
        self.vehicles: list[VehicleOut] = []
        self.criteria = ListingCriteria()
        self.loading = False
        self.error: Optional[str] = None

    # ── Loading ──────────────────────────────────────────────────────────────
    def load(self) -> bool:
        self.loading = True
        try:
            self.vehicles = self.client.list_vehicles()
            self.error = None
            return True
        except VehicleApiError as e:
            self._fail("Failed to load vehicles. Please try again later.", e)
            return False
        finally:
            self.loading = False

    def retry(self) -> bool:
        return self.load()

    def dismiss_error(self):
        self.error = None

    def _fail(self, message: str, exc: VehicleApiError):
        logger.error(f"{message} ({exc})")
        self.error = str(exc) if exc.status_code else message

    # ── Derived view ─────────────────────────────────────────────────────────
    @property
    def view(self) -> list[VehicleOut]:
        return derive_view(self.vehicles, self.criteria)

    def set_search(self, search: str):
        self.criteria = replace(self.criteria, search=search)

    def set_condition(self, condition: str):
        self.criteria = replace(self.criteria, condition=condition)

    def set_sort(self, sort_key: Optional[str], descending: bool = False):
        self.criteria = replace(self.criteria, sort_key=sort_key, descending=descending)

    def clear_filters(self):
        self.criteria = clear_filters()

    def find(self, vehicle_id: str) -> Optional[VehicleOut]:
        return next((v for v in self.vehicles if v.id == vehicle_id), None)

    # ── Mutations ────────────────────────────────────────────────────────────
    def add(self, form: dict) -> Optional[VehicleOut]:
        errors = validate_vehicle_form(form)
        if errors:
            raise FormValidationError(errors)
        payload = dict(form, images=clean_images(form.get("images")))
        try:
            created = self.client.create_vehicle(payload)
        except VehicleApiError as e:
            self._fail("Failed to create vehicle.", e)
            return None
        self.vehicles.append(created)
        self.error = None
        return created

    def edit(self, vehicle_id: str, changes: dict) -> Optional[VehicleOut]:
        """Validate the record as it would look after the change, then send only the changes."""
        try:
            current = self.find(vehicle_id) or self.client.get_vehicle(vehicle_id)
        except VehicleApiError as e:
            self._fail("Failed to load vehicle.", e)
            return None
        errors = validate_vehicle_form({**current.model_dump(), **changes})
        if errors:
            raise FormValidationError(errors)
        patch = dict(changes)
        if "images" in patch:
            patch["images"] = clean_images(patch["images"])
        try:
            updated = self.client.update_vehicle(vehicle_id, patch)
        except VehicleApiError as e:
            self._fail("Failed to update vehicle.", e)
            return None
        self.vehicles = [updated if v.id == vehicle_id else v for v in self.vehicles]
        self.error = None
        return updated

    def remove(self, vehicle_id: str) -> bool:
        try:
            self.client.delete_vehicle(vehicle_id)
        except VehicleApiError as e:
            self._fail("Failed to delete vehicle.", e)
            return False
        self.vehicles = [v for v in self.vehicles if v.id != vehicle_id]
        self.error = None
        return True
