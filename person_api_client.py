"""Person API client.

A thin wrapper around the Person API's REST endpoints built on the
``requests`` library.  Every method returns a tuple ``(data, error)``:
on success ``error`` is ``None``; on failure ``data`` is empty and
``error`` is a dictionary with the keys ``status_code`` and
``message`` (the server's ``detail`` text when there is one).

* :meth:`info` – the version banner.
* :meth:`list_persons` – every person.
* :meth:`filter_persons` – people matching name / chocolate / cap.
* :meth:`chocolate_lovers` – everyone who likes chocolate.
* :meth:`get_person` – a single person by id.
* :meth:`create_person` – POST a new person.
* :meth:`put_person` – replace (or create) a person by id.
* :meth:`delete_person` – remove a person.

Example::

    api = PersonAPI(base_url="http://localhost:8000")
    people, error = api.filter_persons(likes_chocolate=True, max_results=2)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class PersonAPI:
    """Client for one version of the Person API."""

    def __init__(
        self,
        *,
        base_url: str,
        version: Optional[str] = "v1",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            version: API version segment (``"v1"``, ``"v2"``).  ``None``
                talks to the unversioned default routes under ``/api``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.prefix = f"/api/{version}/Person" if version else "/api/Person"
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str = "", *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request against :attr:`prefix`.

        Returns ``(data, error)``; ``data`` is the decoded JSON body, the
        raw text for non-JSON responses, or ``None`` for empty ones.
        """
        url = f"{self.base_url}{self.prefix}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = _error_message(exc.response) if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if not response.content:
            return None, None
        if "json" in response.headers.get("Content-Type", ""):
            return response.json(), None
        return response.text, None

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------
    def info(self) -> Tuple[Optional[str], Optional[Error]]:
        return self._request("GET", "/Info")

    def list_persons(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET")
        return data or [], error

    def filter_persons(
        self,
        *,
        name: Optional[str] = None,
        likes_chocolate: Optional[bool] = None,
        max_results: Optional[int] = None,
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the people matching the given criteria.

        Criteria left as ``None`` are not sent.  The server answers 400
        when no criterion is given and 404 when nobody matches; both come
        back as ``error``.
        """
        params: Dict[str, Any] = {}
        if name is not None:
            params["name"] = name
        if likes_chocolate is not None:
            params["likesChocolate"] = "true" if likes_chocolate else "false"
        if max_results is not None:
            params["maxResults"] = max_results
        data, error = self._request("GET", "/Filter", params=params)
        return data or [], error

    def chocolate_lovers(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/ChocolateLovers")
        return data or [], error

    def get_person(self, person_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/{person_id}")

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------
    def create_person(
        self, name: str, likes_chocolate: bool = True, person_id: Optional[int] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a person; the server assigns the id when ``person_id`` is ``None``."""
        payload: Dict[str, Any] = {"name": name, "likesChocolate": likes_chocolate}
        if person_id is not None:
            payload["id"] = person_id
        return self._request("POST", json_body=payload)

    def put_person(
        self, person_id: int, name: str, likes_chocolate: bool = True
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace the person at ``person_id``.

        ``data`` is the created person when the id was unused and
        ``None`` when an existing person was replaced.
        """
        payload = {"id": person_id, "name": name, "likesChocolate": likes_chocolate}
        return self._request("PUT", f"/{person_id}", json_body=payload)

    def delete_person(self, person_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/{person_id}")
        return error is None, error


def _error_message(response: requests.Response) -> str:
    try:
        err_json = response.json()
    except ValueError:
        return response.text
    if isinstance(err_json, dict):
        detail = err_json.get("detail") or err_json.get("message")
        if isinstance(detail, str):
            return detail
        if detail is not None:
            return str(detail)
    return str(err_json)
