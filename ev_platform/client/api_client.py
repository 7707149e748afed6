# ev_platform/client/api_client.py
"""
HTTP client for the vehicles API.
One request per call, no retries and no caching. Every failure is logged
and raised as VehicleApiError (status code included when there is one).
"""

from typing import Optional

import requests
from pydantic import ValidationError

from ev_platform.config import settings
from ev_platform.schemas.vehicle import VehicleOut
from ev_platform.utils.logger import get_logger

logger = get_logger(__name__)


class VehicleApiError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class VehicleNotFoundApiError(VehicleApiError):
    pass


def _error_detail(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text.strip()
    if isinstance(body, dict):
        detail = body.get("detail", "")
        errors = body.get("errors")
        if errors:
            fields = ", ".join(f"{e.get('field')}: {e.get('message')}" for e in errors)
            return f"{detail} ({fields})"
        return str(detail)
    return str(body)


class VehicleApiClient:
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.API_TIMEOUT
        self.session = session or requests.Session()

    def _url(self, vehicle_id: Optional[str] = None) -> str:
        return f"{self.base_url}/{vehicle_id}" if vehicle_id else self.base_url

    def _request(self, method: str, action: str, vehicle_id: Optional[str] = None,
                 payload: Optional[dict] = None) -> requests.Response:
        url = self._url(vehicle_id)
        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"{action} failed: {method} {url} unreachable: {e}")
            raise VehicleApiError(f"Failed to {action}: {e}") from e

        if response.ok:
            return response

        detail = _error_detail(response)
        message = f"Failed to {action}: HTTP {response.status_code} {response.reason or ''}".rstrip()
        if detail:
            message = f"{message} - {detail}"
        logger.error(message)
        if response.status_code == 404:
            raise VehicleNotFoundApiError(message, response.status_code)
        raise VehicleApiError(message, response.status_code)

    def _parse(self, response: requests.Response, action: str):
        try:
            body = response.json()
            if isinstance(body, list):
                return [VehicleOut.model_validate(item) for item in body]
            return VehicleOut.model_validate(body)
        except (ValueError, ValidationError) as e:
            logger.error(f"{action}: unexpected response body: {e}")
            raise VehicleApiError(f"Failed to {action}: malformed response", response.status_code) from e

    def list_vehicles(self) -> list[VehicleOut]:
        action = "fetch vehicles"
        return self._parse(self._request("GET", action), action)

    def get_vehicle(self, vehicle_id: str) -> VehicleOut:
        action = f"fetch vehicle with ID {vehicle_id}"
        return self._parse(self._request("GET", action, vehicle_id), action)

    def create_vehicle(self, payload: dict) -> VehicleOut:
        action = "create vehicle"
        body = {key: value for key, value in payload.items() if key != "id"}
        return self._parse(self._request("POST", action, payload=body), action)

    def update_vehicle(self, vehicle_id: str, patch: dict) -> VehicleOut:
        action = f"update vehicle with ID {vehicle_id}"
        return self._parse(self._request("PUT", action, vehicle_id, patch), action)

    def delete_vehicle(self, vehicle_id: str) -> None:
        self._request("DELETE", f"delete vehicle with ID {vehicle_id}", vehicle_id)
