"""Hosted data API client

Overview
--------
Thin async HTTP client for a PostgREST-style table API, as exposed by hosted
Postgres platforms under ``<project-url>/rest/v1/<table>``. It covers exactly
what the repositories need: filtered selects, inserts and filtered updates,
always asking the server to return the affected rows.

Query conventions
-----------------
- Filters are query parameters ``<column>=<op>.<value>`` where ``op`` is one
  of ``eq``, ``neq`` (see :class:`Filter`).
- ``order=<column>.desc`` / ``.asc`` and ``limit=<n>`` shape selects.
- Writes send ``Prefer: return=representation`` so the changed rows come back.

Authentication
--------------
The project key is sent as both the ``apikey`` header and a bearer token.

Errors
------
Transport failures and non-2xx responses are raised as ``StoreApiError``
carrying the upstream status and parsed body.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence

import httpx

from promogame.core.errors import StoreApiError


@dataclass(frozen=True)
class Filter:
    """One ``column=op.value`` filter."""

    column: str
    value: Any
    op: str = "eq"

    def as_param(self) -> tuple[str, str]:
        value = self.value
        if isinstance(value, bool):
            value = str(value).lower()
        return self.column, f"{self.op}.{value}"


def eq(column: str, value: Any) -> Filter:
    return Filter(column, value, "eq")


def neq(column: str, value: Any) -> Filter:
    return Filter(column, value, "neq")


class RestTableClient:
    """Async client for the hosted table API.

    Args:
        base_url: Project URL (e.g. ``https://xyz.supabase.co``); ``/rest/v1`` is appended.
        api_key: Project API key.
        timeout: Default HTTP timeout for the internal client.
        client: Optional preconfigured ``httpx.AsyncClient`` (used by tests with ``MockTransport``).
    """

    REST_PATH = "/rest/v1"

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/") + self.REST_PATH
        self._api_key = api_key
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._logger = logging.getLogger(__name__)

    def _headers(self, *, returning: bool = False) -> dict[str, str]:
        headers: dict[str, str] = {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if returning:
            headers["Prefer"] = "return=representation"
        return headers

    @staticmethod
    def _params(filters: Iterable[Filter], **extra: Optional[str]) -> List[tuple[str, str]]:
        params = [f.as_param() for f in filters]
        params.extend((k, v) for k, v in extra.items() if v is not None)
        return params

    async def _send(
        self,
        method: str,
        table: str,
        *,
        params: Sequence[tuple[str, str]] = (),
        json: Any = None,
        returning: bool = False,
    ) -> List[Dict[str, Any]]:
        url = f"{self.base_url}/{table}"
        self._logger.debug("%s %s params=%s", method, url, params)
        try:
            response = await self._client.request(
                method,
                url,
                params=list(params),
                json=json,
                headers=self._headers(returning=returning),
            )
        except httpx.HTTPError as e:
            raise StoreApiError(f"Data API request failed: {e}") from e

        if response.is_error:
            try:
                details: Any = response.json()
            except ValueError:
                details = response.text
            raise StoreApiError(
                f"Data API {method} {table} failed: {response.status_code}",
                status_code=response.status_code,
                details=details,
            )

        if not response.content:
            return []
        data = response.json()
        if isinstance(data, dict):
            return [data]
        return list(data)

    async def select(
        self,
        table: str,
        *filters: Filter,
        order: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """``GET /<table>?select=*`` with filters, ordering and limit."""
        params = self._params(
            filters,
            select="*",
            order=order,
            limit=str(limit) if limit is not None else None,
        )
        return await self._send("GET", table, params=params)

    async def insert(self, table: str, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """``POST /<table>`` and return the inserted rows."""
        return await self._send("POST", table, json=rows, returning=True)

    async def update(self, table: str, values: Dict[str, Any], *filters: Filter) -> List[Dict[str, Any]]:
        """``PATCH /<table>`` on the filtered rows and return them."""
        if not filters:
            raise ValueError("update requires at least one filter")
        return await self._send("PATCH", table, params=self._params(filters), json=values, returning=True)

    async def aclose(self) -> None:
        await self._client.aclose()
