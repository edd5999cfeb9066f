"""Storefront API client.

A thin wrapper around the Storefront HTTP API for scripts and other
Python callers.  It uses the ``requests`` library internally.

Every public method returns a tuple ``(result, error)``.  On success
``error`` is ``None``.  On failure ``result`` is empty (``None``,
``[]`` or ``False`` depending on the method) and ``error`` is a
dictionary with the keys ``status_code`` and ``message``; the message
is the ``detail`` reported by the API where there is one.

Mutating endpoints need a seller or admin identity.  Either pass
``user_email`` to the constructor or call :meth:`login` first; the
address is then sent in the ``X-User-Email`` header of every request.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]

USER_HEADER = "X-User-Email"


class StorefrontClient:
    """Client for the Storefront API (``/api/v1``)."""

    def __init__(
        self,
        *,
        base_url: str,
        user_email: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Server root, e.g. ``http://localhost:8000``.
            user_email: E‑mail of the acting user, if already known.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + "/api/v1"
        self.user_email = user_email
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and return ``(data, error)``."""
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.user_email:
            headers[USER_HEADER] = self.user_email
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = str(err_json.get("detail") or err_json)
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
    # Auth
    # ------------------------------------------------------------------
    def login(self, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Log in as ``email`` and remember it for later requests."""
        data, error = self._request("POST", "/auth/login", json_body={"email": email})
        if error:
            return None, error
        self.user_email = data["email"]
        return data, None

    def logout(self) -> None:
        self.user_email = None

    # ------------------------------------------------------------------
    # Catalog reads
    # ------------------------------------------------------------------
    def list_products(
        self,
        page: int = 1,
        page_size: Optional[int] = None,
        search: str = "",
        sort_by: str = "createdAt",
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Fetch one page of products.

        Returns the paginated payload (``data``, ``page``,
        ``page_size``, ``total``, ``total_pages``).
        """
        params: Dict[str, Any] = {"page": page, "search": search, "sort_by": sort_by}
        if page_size is not None:
            params["page_size"] = page_size
        return self._request("GET", "/products/", params=params)

    def get_product(self, product_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/products/{product_id}")

    def list_products_by_seller(self, seller_id: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"/sellers/{seller_id}/products")
        if error:
            return [], error
        return data or [], None

    def list_categories(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/categories/")
        if error:
            return [], error
        return data or [], None

    def dashboard_products(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Products shown on the dashboard of the logged in seller or admin."""
        data, error = self._request("GET", "/dashboard/products")
        if error:
            return [], error
        return data or [], None

    # ------------------------------------------------------------------
    # Catalog writes
    # ------------------------------------------------------------------
    def create_product(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/products/", json_body=payload)

    def update_product(
        self, product_id: str, changes: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Send only the fields to change; the server keeps the rest."""
        return self._request("PUT", f"/products/{product_id}", json_body=changes)

    def delete_product(self, product_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/products/{product_id}")
        if error:
            return False, error
        return True, None
