import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import structlog

from discussboard import utils
from discussboard.core.core import Service
from discussboard.core.modules.discussion.models import Board
from discussboard.core.storage import BoardStorage
from discussboard.errors import StorageError, ValidationError

logger = structlog.get_logger(__name__)

type BoardOperation[T] = Callable[[Board], T]


@dataclass
class _Job:
    operation: BoardOperation[Any]
    future: asyncio.Future[Any]


class BoardInstance:
    """Serialization point for one named board.

    A single worker task takes operations off a FIFO queue and runs each one to
    completion: load the board, apply the operation to the loaded copy, and write
    the whole board back if the operation changed it. Nothing else touches this
    board's storage key, so the load/modify/save sequence never interleaves with
    another operation on the same board.
    """

    def __init__(self, name: str, storage: BoardStorage) -> None:
        self.name = name
        self._storage = storage
        self._queue: asyncio.Queue[_Job | None] = asyncio.Queue()
        self._worker: asyncio.Task[None] | None = None
        self._closing = False

    async def execute[T](self, operation: BoardOperation[T]) -> T:
        """Queue an operation and wait for its result.

        Cancelling the caller does not cancel the operation: once queued it is
        still applied and persisted. Operations submitted after `close` started
        are refused, since nothing would run them.
        """
        if self._closing:
            raise StorageError(f"Board '{self.name}' is shutting down")
        self._ensure_worker()
        future: asyncio.Future[T] = asyncio.get_running_loop().create_future()
        await self._queue.put(_Job(operation, future))
        return await asyncio.shield(future)

    async def close(self) -> None:
        """Finish queued operations and stop the worker."""
        self._closing = True
        if self._worker is None:
            return
        await self._queue.put(None)
        await self._worker
        self._worker = None

    def _ensure_worker(self) -> None:
        if self._worker is None or self._worker.done():
            self._worker = asyncio.create_task(self._run(), name=f"board-worker:{self.name}")
            logger.debug("board_worker_started", board=self.name)

    async def _run(self) -> None:
        while True:
            job = await self._queue.get()
            if job is None:
                return
            await self._process(job)

    async def _process(self, job: _Job) -> None:
        try:
            board = await self._storage.load_board(self.name)
            result = job.operation(board)
            if board.modified:
                await self._storage.save_board(board)
        except Exception as e:
            # Delivered to the waiting caller
            if not job.future.done():
                job.future.set_exception(e)
        else:
            if not job.future.done():
                job.future.set_result(result)


class BoardService(Service):
    """Routes board names to their serialization instances."""

    def __init__(self, storage: BoardStorage) -> None:
        super().__init__(storage)
        self._instances: dict[str, BoardInstance] = {}
        self._stopping = False

    async def on_stop(self) -> None:
        """Drain every board's queue before storage is closed."""
        self._stopping = True
        for instance in list(self._instances.values()):
            await instance.close()
        self._instances.clear()

    def get_instance(self, name: str) -> BoardInstance:
        """Get the instance for a board name, creating it on first access."""
        instance = self._instances.get(name)
        if instance is None:
            if not utils.is_slug(name):
                raise ValidationError(f"Invalid board name: '{name}'")
            if self._stopping:
                raise StorageError(f"Board '{name}' is shutting down")
            instance = BoardInstance(name, self.storage)
            self._instances[name] = instance
        return instance
