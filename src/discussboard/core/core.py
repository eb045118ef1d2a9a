from __future__ import annotations

import importlib
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import cast

from discussboard.config import Config
from discussboard.core.storage import BoardStorage, create_storage


class Service:
    """Base class for services with access to board storage."""

    def __init__(self, storage: BoardStorage) -> None:
        self.storage = storage
        self._core: Core | None = None

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""

    @property
    def core(self) -> Core:
        """Get the core application context."""
        if self._core is None:
            raise RuntimeError("Core not set for service")
        return self._core

    def set_core(self, core: Core) -> None:
        """Set the core application context."""
        self._core = core


class Services:
    """Service registry that automatically discovers and initializes services."""

    from discussboard.core.modules.access.service import AccessService  # noqa: PLC0415
    from discussboard.core.modules.board.service import BoardService  # noqa: PLC0415
    from discussboard.core.modules.discussion.service import DiscussionService  # noqa: PLC0415

    board: BoardService
    access: AccessService
    discussion: DiscussionService

    def __init__(self, storage: BoardStorage) -> None:
        """Initialize all services automatically using service configuration."""
        self._services: list[Service] = []

        # Service configuration: (attribute_name, module_path, class_name)
        service_configs = [
            ("access", "discussboard.core.modules.access.service", "AccessService"),
            ("discussion", "discussboard.core.modules.discussion.service", "DiscussionService"),
            ("board", "discussboard.core.modules.board.service", "BoardService"),
        ]

        for attr_name, module_path, class_name in service_configs:
            module = importlib.import_module(module_path)
            service_class = cast(type[Service], getattr(module, class_name))
            service_instance = service_class(storage)
            setattr(self, attr_name, service_instance)
            self._services.append(service_instance)

    def set_core(self, core: Core) -> None:
        """Set core reference for all services."""
        for service in self._services:
            service.set_core(core)

    async def start_all(self) -> None:
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        for service in self._services:
            await service.on_stop()


class Core:
    """Container providing config, board storage, and all service instances."""

    config: Config
    storage: BoardStorage
    services: Services

    def __init__(self, config: Config, storage: BoardStorage | None = None) -> None:
        """Initialize core with config and storage, and auto-register services."""
        self.config = config
        self.storage = storage if storage is not None else create_storage(config.database_url)
        self.services = Services(self.storage)
        self.services.set_core(self)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        await self.services.start_all()

    async def on_stop(self) -> None:
        """Stop services and close the storage backend on shutdown."""
        await self.services.stop_all()
        await self.storage.close()
