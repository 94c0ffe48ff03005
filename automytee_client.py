"""Automytee content API client.

This module defines a thin client around the content API's REST
endpoints.  It is used by the admin controllers in
:mod:`site_controllers` and by the ``admin_console`` command line.
The client uses the ``requests`` library internally.

Every high-level method returns a tuple ``(data, error)``:

* on success ``data`` is the ``data`` member of the response envelope
  and ``error`` is ``None``;
* on failure ``data`` is ``None`` and ``error`` is a dictionary with
  the keys ``status_code``, ``message`` and ``details``.

The client never raises for HTTP or network failures, so callers can
always turn a failed call into a user-visible notification.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class AutomyteeAPI:
    """Client for the contacts and projects endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the deployment, e.g. ``https://automytee.com``.
            api_prefix: Path under which the versioned API is mounted.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + "/" + api_prefix.strip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request and unwrap the response envelope.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/contacts``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
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
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc), "details": None}

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.ok and isinstance(body, dict) and body.get("success"):
            return body.get("data"), None

        if isinstance(body, dict):
            message = body.get("error") or body.get("detail") or str(body)
            details = body.get("details")
        else:
            message = response.text or response.reason or f"HTTP {response.status_code}"
            details = None
        logger.error("API request failed (%s): %s", response.status_code, message)
        return None, {"status_code": response.status_code, "message": message, "details": details}

    # ------------------------------------------------------------------
    # Contact operations
    # ------------------------------------------------------------------
    def list_contacts(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all contact submissions, newest first.

        Returns:
            A tuple ``(contacts, error)``. ``contacts`` is empty on failure.
        """
        data, error = self._request("GET", "/contacts")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_contact(self, contact_id: str) -> Result:
        return self._request("GET", f"/contacts/{contact_id}")

    def create_contact(self, payload: Dict[str, Any]) -> Result:
        """Submit the public contact form."""
        return self._request("POST", "/contacts", json_body=payload)

    def update_contact(self, contact_id: str, payload: Dict[str, Any]) -> Result:
        return self._request("PUT", f"/contacts/{contact_id}", json_body=payload)

    def set_contact_status(self, contact_id: str, status: str) -> Result:
        """Move a submission to ``new``, ``read`` or ``replied``."""
        return self.update_contact(contact_id, {"status": status})

    def delete_contact(self, contact_id: str) -> Result:
        return self._request("DELETE", f"/contacts/{contact_id}")

    # ------------------------------------------------------------------
    # Project operations
    # ------------------------------------------------------------------
    def list_projects(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve the most recent projects, newest first.

        Returns:
            A tuple ``(projects, error)``. ``projects`` is empty on failure.
        """
        data, error = self._request("GET", "/projects")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_project(self, project_id: str) -> Result:
        return self._request("GET", f"/projects/{project_id}")

    def create_project(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/projects", json_body=payload)

    def update_project(self, project_id: str, payload: Dict[str, Any]) -> Result:
        return self._request("PUT", f"/projects/{project_id}", json_body=payload)

    def delete_project(self, project_id: str) -> Result:
        return self._request("DELETE", f"/projects/{project_id}")

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def health(self) -> Result:
        return self._request("GET", "/health")
