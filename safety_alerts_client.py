"""SafetyNet Alerts API client.

This module defines a small client wrapper around the REST API served
by ``safety_alerts_api``.  Dispatch tools, scripts and integration
checks use it instead of building URLs by hand.  The client uses the
``requests`` library internally.

Every method returns a tuple ``(data, error)``:

* on success ``data`` holds the decoded JSON body (``None`` for
  ``204 No Content``) and ``error`` is ``None``;
* on failure ``data`` is ``None`` and ``error`` is a dictionary with
  the keys ``status_code`` and ``message``.  ``status_code`` is
  ``None`` when the server could not be reached.

Example::

    api = SafetyAlertsAPI(base_url="http://localhost:8080")
    children, error = api.child_alert("1509 Culver St")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class SafetyAlertsAPI:
    """Client for the SafetyNet Alerts API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8080``.
            api_prefix: Prefix under which the v1 routes are mounted.
            timeout: Timeout in seconds applied to every request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        prefix = api_prefix.strip("/")
        self.base_url = base_url.rstrip("/") + (f"/{prefix}" if prefix else "")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        """Send one request below the API prefix and decode the answer.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Route below the prefix, e.g. ``/fire``.
            params: Query string parameters.
            json_body: Body serialised as JSON (create and update calls).
        """
        url = self.base_url + path
        logger.debug("%s %s params=%s", method, url, params)
        try:
            response = self.session.request(
                method=method, url=url, params=params, json=json_body, timeout=self.timeout
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            error = {"status_code": exc.response.status_code, "message": _error_message(exc)}
            logger.warning("%s %s returned %s: %s", method, path, error["status_code"], error["message"])
            return None, error
        except requests.RequestException as exc:
            logger.error("%s %s could not be sent: %s", method, url, exc)
            return None, {"status_code": None, "message": str(exc)}
        if response.status_code == 204 or not response.content:
            return None, None
        return response.json(), None

    # ------------------------------------------------------------------
    # Alert views
    # ------------------------------------------------------------------
    def child_alert(self, address: str) -> Result:
        return self._request("GET", "/childAlert", params={"address": address})

    def community_email(self, city: str) -> Result:
        return self._request("GET", "/communityEmail", params={"city": city})

    def fire(self, address: str) -> Result:
        return self._request("GET", "/fire", params={"address": address})

    def firestation_coverage(self, station_number: int) -> Result:
        return self._request("GET", "/firestation", params={"stationNumber": station_number})

    def flood(self, station_numbers: Iterable[int]) -> Result:
        """Households covered by the stations, sent as ``stations=1,2``."""
        stations = ",".join(str(number) for number in station_numbers)
        return self._request("GET", "/flood/stations", params={"stations": stations})

    def phone_alert(self, station_number: int) -> Result:
        return self._request("GET", "/phoneAlert", params={"firestation": station_number})

    def person_info(self, last_name: str) -> Result:
        return self._request("GET", f"/personInfolastName/{quote(last_name, safe='')}")

    # ------------------------------------------------------------------
    # Persons
    # ------------------------------------------------------------------
    def create_person(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/person", json_body=payload)

    def update_person(self, payload: Dict[str, Any]) -> Result:
        return self._request("PUT", "/person", json_body=payload)

    def delete_person(self, first_name: str, last_name: str) -> Result:
        return self._request("DELETE", "/person", params={"firstName": first_name, "lastName": last_name})

    # ------------------------------------------------------------------
    # Fire stations
    # ------------------------------------------------------------------
    def create_fire_station(self, address: str, station: int) -> Result:
        return self._request("POST", "/firestation", json_body={"address": address, "station": station})

    def update_fire_station(self, address: str, station: int) -> Result:
        return self._request("PUT", "/firestation", json_body={"address": address, "station": station})

    def delete_fire_station(self, address: str) -> Result:
        return self._request("DELETE", "/firestation", params={"address": address})

    # ------------------------------------------------------------------
    # Medical records
    # ------------------------------------------------------------------
    def create_medical_record(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/medicalRecord", json_body=payload)

    def update_medical_record(self, payload: Dict[str, Any]) -> Result:
        return self._request("PUT", "/medicalRecord", json_body=payload)

    def delete_medical_record(self, first_name: str, last_name: str) -> Result:
        return self._request(
            "DELETE", "/medicalRecord", params={"firstName": first_name, "lastName": last_name}
        )


def _error_message(exc: requests.HTTPError) -> str:
    """``detail`` of a FastAPI error body, else the raw text."""
    try:
        body = exc.response.json()
    except ValueError:
        return exc.response.text or str(exc)
    if isinstance(body, dict) and body.get("detail"):
        return str(body["detail"])
    return str(body) or str(exc)


def emails_for_cities(api: SafetyAlertsAPI, cities: Iterable[str]) -> List[str]:
    """Collect the community e‑mails of several cities, without duplicates.

    Cities the server knows nothing about are skipped.
    """
    collected: List[str] = []
    for city in cities:
        emails, error = api.community_email(city)
        if error:
            logger.warning("No e-mails for %s: %s", city, error["message"])
            continue
        for email in emails:
            if email not in collected:
                collected.append(email)
    return collected
