"""SQLAlchemy implementation of LocationDirectory (direct PostgreSQL access)."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tetramap.adapters.persistence.models import LocationModel
from tetramap.adapters.persistence.serialization import location_from_json, location_to_json
from tetramap.application.ports.location_directory import LocationDirectory
from tetramap.domain.entities.location_record import LocationRecord
from tetramap.domain.errors import StorageRejected, StorageUnavailable
from tetramap.domain.value_objects.location import Location

logger = logging.getLogger(__name__)


# ─── Mappers ─────────────────────────────────────────────────────────


def _record_to_domain(m: LocationModel) -> LocationRecord:
    return LocationRecord(
        user_id=m.user_id,
        location=location_from_json(m.location),
        user_name=m.user_name,
    )


def upsert_statement(user_id: str, location: Location, user_name: str):
    """INSERT ... ON CONFLICT (user_id) DO UPDATE for one record."""
    stmt = pg_insert(LocationModel).values(
        user_id=user_id,
        location=location_to_json(location),
        user_name=user_name,
    )
    return stmt.on_conflict_do_update(
        index_elements=[LocationModel.user_id],
        set_={"location": stmt.excluded.location, "user_name": stmt.excluded.user_name},
    )


# ─── Repository ──────────────────────────────────────────────────────


class SqlLocationDirectory(LocationDirectory):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._sessions = session_factory

    async def exists(self, user_id: str) -> bool:
        async with self._transaction() as s:
            result = await s.execute(
                select(LocationModel.id).where(LocationModel.user_id == user_id)
            )
            return result.first() is not None

    async def get(self, user_id: str) -> LocationRecord | None:
        async with self._transaction() as s:
            result = await s.execute(
                select(LocationModel).where(LocationModel.user_id == user_id)
            )
            m = result.scalars().first()
            return _record_to_domain(m) if m else None

    async def save(self, user_id: str, location: Location, user_name: str) -> None:
        async with self._transaction() as s:
            await s.execute(upsert_statement(user_id, location, user_name))
        logger.debug("Upserted location for user %s", user_id)

    async def delete(self, user_id: str) -> None:
        async with self._transaction() as s:
            await s.execute(delete(LocationModel).where(LocationModel.user_id == user_id))
        logger.debug("Deleted location for user %s (if any)", user_id)

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[AsyncSession]:
        try:
            async with self._sessions() as session, session.begin():
                yield session
        except (OperationalError, InterfaceError, OSError) as e:
            raise StorageUnavailable(f"Database unavailable: {e}") from e
        except DBAPIError as e:
            raise StorageRejected(f"Database rejected statement: {e.orig!r}") from e
        except SQLAlchemyError as e:
            raise StorageRejected(f"Database error: {e}") from e
