"""Dependency wiring — builds adapters from settings and hands out use cases.

All network clients are created once per process and shared by every request;
none of them keeps per-request state, so no locking is needed.
"""

from __future__ import annotations

import logging
import secrets

import httpx
from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncEngine

from tetramap.adapters.chat.reply_adapters import LoggingReplyAdapter, WebhookReplyAdapter
from tetramap.adapters.geocoder.google_maps_adapter import GoogleMapsAdapter
from tetramap.adapters.geocoder.nominatim_adapter import NominatimAdapter
from tetramap.adapters.persistence.database import create_engine, create_session_factory
from tetramap.adapters.persistence.postgrest_directory import (
    PostgrestLocationDirectory,
    build_postgrest_client,
)
from tetramap.adapters.persistence.repositories import SqlLocationDirectory
from tetramap.application.ports.geocoder_port import GeocoderPort
from tetramap.application.ports.location_directory import LocationDirectory
from tetramap.application.ports.reply_port import ReplyPort
from tetramap.application.use_cases.clear_location import ClearLocationUseCase
from tetramap.application.use_cases.dispatch_command import DispatchCommandUseCase
from tetramap.application.use_cases.register_flight import RegisterFlightUseCase
from tetramap.application.use_cases.reveal_location import RevealLocationUseCase
from tetramap.config import Settings

logger = logging.getLogger(__name__)


class Container:
    """Process-wide adapters and the command dispatcher built on top of them."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._http = httpx.AsyncClient()
        self._storage_http: httpx.AsyncClient | None = None
        self._engine: AsyncEngine | None = None

        self.geocoder = self._build_geocoder()
        self.directory = self._build_directory()
        self.reply = self._build_reply()
        self.dispatcher = build_dispatcher(self.geocoder, self.directory, self.reply)

    def _build_geocoder(self) -> GeocoderPort:
        s = self.settings
        if s.geocoder_provider == "nominatim":
            logger.info("Using Nominatim for geocoding")
            return NominatimAdapter(self._http, user_agent=s.geocoder_user_agent, timeout=s.geocoder_timeout)
        logger.info("Using Google Maps for geocoding")
        return GoogleMapsAdapter(self._http, api_key=s.google_maps_token, timeout=s.geocoder_timeout)

    def _build_directory(self) -> LocationDirectory:
        s = self.settings
        if s.storage_backend == "sql":
            logger.info("Using PostgreSQL location storage")
            self._engine = create_engine(s.database_url, echo=s.debug)
            return SqlLocationDirectory(create_session_factory(self._engine))
        logger.info(
            "Using PostgREST location storage (native upsert: %s)", s.supabase_native_upsert
        )
        self._storage_http = build_postgrest_client(
            s.supabase_endpoint, s.supabase_token, timeout=s.storage_timeout
        )
        return PostgrestLocationDirectory(self._storage_http, native_upsert=s.supabase_native_upsert)

    def _build_reply(self) -> ReplyPort:
        if self.settings.chat_webhook_url:
            return WebhookReplyAdapter(self._http, self.settings.chat_webhook_url)
        return LoggingReplyAdapter()

    async def aclose(self) -> None:
        await self._http.aclose()
        if self._storage_http is not None:
            await self._storage_http.aclose()
        if self._engine is not None:
            await self._engine.dispose()


def build_dispatcher(
    geocoder: GeocoderPort, directory: LocationDirectory, reply: ReplyPort
) -> DispatchCommandUseCase:
    return DispatchCommandUseCase(
        handlers=[
            RevealLocationUseCase(geocoder=geocoder, directory=directory),
            ClearLocationUseCase(directory=directory),
            RegisterFlightUseCase(directory=directory),
        ],
        reply=reply,
    )


_bearer = HTTPBearer(auto_error=False)


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_dispatcher(container: Container = Depends(get_container)) -> DispatchCommandUseCase:
    return container.dispatcher


def require_command_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    container: Container = Depends(get_container),
) -> None:
    """Only the chat platform bridge may submit commands."""
    if credentials is None or not secrets.compare_digest(
        credentials.credentials.encode(), container.settings.command_token.encode()
    ):
        raise HTTPException(status_code=401, detail="Invalid command token")
