"""Sons Mágicos Instruments API client.

This module defines a small client wrapper around the instrument
endpoints of the API.  It uses the ``requests`` library internally to
make HTTP calls and exposes one method per operation:

* :meth:`list_instruments` – return instruments, optionally filtered.
* :meth:`get_instrument` – fetch a single instrument by its identifier.
* :meth:`create_instrument` – create an instrument (requires credentials).
* :meth:`update_instrument` – replace an instrument (requires credentials).
* :meth:`delete_instrument` – delete an instrument (requires credentials).
* :meth:`total_value_by_type` – summed value of one instrument type.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.  Credentials for the
mutating operations are sent with HTTP Basic authentication when the
client is initialised with ``username`` and ``password``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class InstrumentsClient:
    """Client for the ``/api/v1/instrumentos`` endpoint group."""

    def __init__(
        self,
        *,
        base_url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``https://example.com``.
            username: Optional Basic authentication user name.
            password: Optional Basic authentication password.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.auth: Optional[Tuple[str, str]] = None
        if username is not None and password is not None:
            self.auth = (username, password)

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the instrument collection (``""`` or e.g. ``/5``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}/api/v1/instrumentos{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                auth=self.auth,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None and exc.response.content:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Instrument operations
    # ------------------------------------------------------------------
    def list_instruments(self, filter: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve instruments, optionally narrowed by ``filter``."""
        params = {"filter": filter} if filter else None
        data, error = self._request("GET", "", params=params)
        if error:
            return [], error
        return data or [], None

    def get_instrument(self, instrument_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single instrument by ID."""
        return self._request("GET", f"/{instrument_id}")

    def create_instrument(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create an instrument; the returned record carries the assigned id."""
        return self._request("POST", "", json_body=payload)

    def update_instrument(
        self, instrument_id: int, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace an instrument.

        ``payload["id"]`` is filled in from ``instrument_id`` when absent.
        """
        body = {"id": instrument_id, **payload}
        return self._request("PUT", f"/{instrument_id}", json_body=body)

    def delete_instrument(self, instrument_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Delete an instrument and return it as it was before deletion."""
        return self._request("DELETE", f"/{instrument_id}")

    def total_value_by_type(self, instrument_type: str) -> Tuple[Optional[float], Optional[Error]]:
        """Return the total value of all instruments of ``instrument_type``."""
        return self._request("GET", "/valor-por-tipo", params={"type": instrument_type})
