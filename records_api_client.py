"""Records API client.

A thin wrapper around the Records REST API using the ``requests``
library.  Every method returns a tuple ``(data, error)``: on success
``error`` is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with ``status_code`` (``None`` for transport errors) and
``message`` (the server's ``detail`` when available).  The client
never raises for HTTP or network errors, which keeps callers such as
scripts and bots free of try/except noise.

Example::

    api = RecordsAPI(base_url="http://localhost:8000")
    record, error = api.create_record({"name": "João", "email": "joao@example.com"})
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class RecordsAPI:
    """Client for the record CRUD endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            api_prefix: Path prefix the server mounts its router under
                (``API_PREFIX`` on the server side).
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + api_prefix.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/records``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            or ``None`` for empty responses such as 204.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            # ``Response.__bool__`` is False for error statuses, so compare to None.
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("message") or str(err_json)
                    else:
                        message = str(err_json)
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
    # Record operations
    # ------------------------------------------------------------------
    def list_records(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all records."""
        data, error = self._request("GET", "/records")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_record(self, record_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single record; a missing id yields a 404 error."""
        return self._request("GET", f"/records/{record_id}")

    def create_record(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a record from ``{"name": ..., "email": ...}``."""
        return self._request("POST", "/records", json_body=payload)

    def update_record(
        self, record_id: int, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace name and email of an existing record."""
        return self._request("PUT", f"/records/{record_id}", json_body=payload)

    def delete_record(self, record_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a record.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/records/{record_id}")
        if error:
            return False, error
        return True, None
