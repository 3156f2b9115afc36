"""PostgREST (Supabase) implementation of LocationDirectory.

Talks to the ``location`` table over HTTP:

* filtered select: ``GET /location?user_id=eq.<id>``
* upsert        : ``POST /location?on_conflict=user_id`` with
  ``Prefer: resolution=merge-duplicates`` (needs the unique index on user_id)
* update        : ``PATCH /location?user_id=eq.<id>``
* insert        : ``POST /location``
* delete        : ``DELETE /location?user_id=eq.<id>``

With ``native_upsert=False`` the directory falls back to check-then-write
(select, then update or insert). Two concurrent saves for the same user can
then both see "absent" and both insert, or overwrite each other; the last
completed write wins and no error is raised. Use native upsert wherever the
table has its unique constraint.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Any

import httpx

from tetramap.adapters.persistence.serialization import location_from_json, location_to_json
from tetramap.application.ports.location_directory import LocationDirectory
from tetramap.domain.entities.location_record import LocationRecord
from tetramap.domain.errors import StorageRejected, StorageUnavailable
from tetramap.domain.value_objects.location import Location

logger = logging.getLogger(__name__)

TABLE = "location"
RECORD_COLUMNS = "user_id,location,user_name"


def build_postgrest_client(
    endpoint: str,
    token: str,
    timeout: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """HTTP client preconfigured with the REST endpoint and API credentials."""
    return httpx.AsyncClient(
        base_url=endpoint,
        headers={"apikey": token, "Authorization": f"Bearer {token}"},
        timeout=timeout,
        transport=transport,
    )


class PostgrestLocationDirectory(LocationDirectory):
    def __init__(self, client: httpx.AsyncClient, native_upsert: bool = True):
        self._client = client
        self._native_upsert = native_upsert

    async def exists(self, user_id: str) -> bool:
        rows = await self._select(user_id, "user_id")
        return bool(rows)

    async def get(self, user_id: str) -> LocationRecord | None:
        rows = await self._select(user_id, RECORD_COLUMNS)
        if not rows:
            return None
        row = rows[0]
        return LocationRecord(
            user_id=str(row.get("user_id", user_id)),
            location=location_from_json(_parse_column(row.get("location"))),
            user_name=row.get("user_name") or "",
        )

    async def save(self, user_id: str, location: Location, user_name: str) -> None:
        payload = {"location": location_to_json(location), "user_name": user_name}

        if self._native_upsert:
            await self._write(
                "POST",
                params={"on_conflict": "user_id"},
                json_body={"user_id": user_id, **payload},
                prefer="resolution=merge-duplicates,return=minimal",
            )
            logger.debug("Upserted location for user %s", user_id)
            return

        if await self.exists(user_id):
            await self._write("PATCH", params=_user_filter(user_id), json_body=payload)
            logger.debug("Updated location for user %s", user_id)
        else:
            await self._write("POST", json_body={"user_id": user_id, **payload})
            logger.debug("Inserted location for user %s", user_id)

    async def delete(self, user_id: str) -> None:
        await self._write("DELETE", params=_user_filter(user_id))
        logger.debug("Deleted location for user %s (if any)", user_id)

    # ─── HTTP helpers ────────────────────────────────────────────────

    async def _select(self, user_id: str, columns: str) -> list[dict[str, Any]]:
        response = await self._send("GET", params={**_user_filter(user_id), "select": columns})
        if response.is_error:
            # Read errors other than auth/outage mean "no usable record".
            logger.warning(
                "Select for user %s returned HTTP %d: %s",
                user_id, response.status_code, _error_detail(response),
            )
            return []
        try:
            data = response.json(parse_float=Decimal)
        except ValueError:
            logger.warning("Select for user %s returned a non-JSON body", user_id)
            return []
        if not isinstance(data, list):
            return []
        return [row for row in data if isinstance(row, dict)]

    async def _write(
        self,
        method: str,
        params: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
        prefer: str = "return=minimal",
    ) -> None:
        response = await self._send(method, params=params, json_body=json_body, prefer=prefer)
        if response.is_error:
            raise StorageRejected(
                f"{method} {TABLE} rejected with HTTP {response.status_code}: {_error_detail(response)}"
            )

    async def _send(
        self,
        method: str,
        params: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
        prefer: str | None = None,
    ) -> httpx.Response:
        headers = {"Prefer": prefer} if prefer else None
        try:
            response = await self._client.request(
                method, TABLE, params=params, json=json_body, headers=headers
            )
        except httpx.HTTPError as e:
            raise StorageUnavailable(f"{method} {TABLE} failed: {e!r}") from e

        if response.status_code in (401, 403) or response.status_code >= 500:
            raise StorageUnavailable(
                f"{method} {TABLE} returned HTTP {response.status_code}: {_error_detail(response)}"
            )
        return response


def _user_filter(user_id: str) -> dict[str, str]:
    return {"user_id": f"eq.{user_id}"}


def _parse_column(value: Any) -> Any:
    # Text columns hold the location as a JSON string instead of an object.
    if isinstance(value, str):
        try:
            return json.loads(value, parse_float=Decimal)
        except ValueError:
            return value
    return value


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(body, dict):
        return str(body.get("message") or body)
    return str(body)[:200]
