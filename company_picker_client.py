"""Company Picker API client.

A thin wrapper around the Company Picker REST API built on the
``requests`` library.  It exposes one method per operation used by
the selection front‑end:

* :meth:`list_companies` – the master catalog.
* :meth:`get_selected_companies` – the persisted selection.
* :meth:`save_selected_companies` – replace the persisted selection.
* :meth:`probe_logo` – check whether a logo URL can be loaded.

Errors never propagate as exceptions.  Every call returns a tuple
``(result, error)`` where ``error`` is ``None`` on success or a
dictionary with ``status_code`` and ``message`` keys.  Failures are
logged; retrying is left to the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000"

Error = Dict[str, Any]


class CompanyPickerAPI:
    """Client for the catalog and selection endpoints."""

    COMPANIES_PATH = "/companies"
    SELECTION_PATH = "/selected-companies"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:5000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body
            for JSON responses, the text for anything else, and ``None``
            for empty responses.
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
            if not response.content:
                return None, None
            if "application/json" not in response.headers.get("Content-Type", ""):
                return response.text, None
            try:
                return response.json(), None
            except ValueError as exc:
                logger.error("%s %s returned invalid JSON: %s", method, path, exc)
                return None, {"status_code": response.status_code, "message": f"Invalid JSON: {exc}"}
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("%s %s failed (%s): %s", method, path, status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            return None, {"status_code": None, "message": str(exc)}

    def _get_list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        logger.warning("Expected a JSON array from %s, got %s", path, type(data).__name__)
        return [], {"status_code": None, "message": f"Unexpected payload from {path}"}

    # ------------------------------------------------------------------
    # Catalog and selection operations
    # ------------------------------------------------------------------
    def list_companies(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the master list of companies.

        Returns:
            A tuple ``(companies, error)``.  ``companies`` is empty on
            failure.
        """
        return self._get_list(self.COMPANIES_PATH)

    def get_selected_companies(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the user's saved selection.

        Returns:
            A tuple ``(selected, error)``.
        """
        return self._get_list(self.SELECTION_PATH)

    def save_selected_companies(self, items: List[Dict[str, Any]]) -> Tuple[bool, Optional[Error]]:
        """Replace the saved selection with ``items``.

        Returns:
            A tuple ``(saved, error)``.
        """
        _, error = self._request("POST", self.SELECTION_PATH, json_body=list(items))
        if error:
            return False, error
        return True, None

    # ------------------------------------------------------------------
    # Logos
    # ------------------------------------------------------------------
    def probe_logo(self, url: str) -> bool:
        """Return ``True`` if ``url`` answers with a 2xx status.

        A ``HEAD`` request is tried first; servers that reject it with
        405 get a streamed ``GET`` instead.  Any transport error counts
        as a failure.
        """
        if not url:
            return False
        try:
            response = self.session.head(url, allow_redirects=True, timeout=self.timeout)
            if response.status_code == 405:
                response = self.session.get(url, stream=True, timeout=self.timeout)
                response.close()
            return 200 <= response.status_code < 300
        except requests.RequestException as exc:
            logger.debug("Logo %s could not be loaded: %s", url, exc)
            return False
