"""In-memory fakes for every port."""

from __future__ import annotations

from decimal import Decimal

from tetramap.application.ports.geocoder_port import GeocoderPort
from tetramap.application.ports.location_directory import LocationDirectory
from tetramap.application.ports.reply_port import ReplyPort
from tetramap.domain.entities.location_record import LocationRecord
from tetramap.domain.errors import InvalidArgument, LocationNotFound
from tetramap.domain.value_objects.location import Coordinates

LONDON = Coordinates(lat=Decimal("51.5074"), lng=Decimal("-0.1278"))


class FakeGeocoder(GeocoderPort):
    def __init__(self, places: dict[str, Coordinates] | None = None, error: Exception | None = None):
        self._places = places if places is not None else {"London": LONDON}
        self._error = error
        self.queries: list[str] = []

    async def resolve(self, query):
        self.queries.append(query)
        if not query.strip():
            raise InvalidArgument("Empty geocoding query")
        if self._error:
            raise self._error
        if query not in self._places:
            raise LocationNotFound(query)
        return self._places[query]


class InMemoryDirectory(LocationDirectory):
    def __init__(self, error: Exception | None = None):
        self.records: dict[str, LocationRecord] = {}
        self.writes = 0
        self._error = error

    async def exists(self, user_id):
        return user_id in self.records

    async def get(self, user_id):
        return self.records.get(user_id)

    async def save(self, user_id, location, user_name):
        if self._error:
            raise self._error
        self.writes += 1
        self.records[user_id] = LocationRecord(user_id=user_id, location=location, user_name=user_name)

    async def delete(self, user_id):
        if self._error:
            raise self._error
        self.writes += 1
        self.records.pop(user_id, None)


class RecordingReply(ReplyPort):
    def __init__(self, error: Exception | None = None):
        self.sent: list[tuple[str | None, str]] = []
        self._error = error

    async def send(self, channel_id, text):
        if self._error:
            raise self._error
        self.sent.append((channel_id, text))
