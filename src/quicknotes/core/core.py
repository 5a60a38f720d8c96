from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from quicknotes.config import Config

if TYPE_CHECKING:
    from quicknotes.core.modules.note.service import NoteService


class Service:
    """Base class for in-process services."""

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""


class Services:
    """Service registry owning every service instance."""

    note: NoteService

    def __init__(self) -> None:
        from quicknotes.core.modules.note.service import NoteService  # noqa: PLC0415

        self.note = NoteService()
        self._services: list[Service] = [self.note]

    async def start_all(self) -> None:
        """Start all services that have startup logic."""
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        """Stop all services that have cleanup logic."""
        for service in self._services:
            await service.on_stop()


class Core:
    """Container providing config and all service instances."""

    config: Config
    services: Services

    def __init__(self, config: Config) -> None:
        self.config = config
        self.services = Services()

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.services.start_all()
        try:
            yield
        finally:
            await self.services.stop_all()
