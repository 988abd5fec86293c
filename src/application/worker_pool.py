"""Bounded pool of long-lived async workers."""

import asyncio
from collections.abc import Awaitable, Callable

from loguru import logger

Task = Callable[[], Awaitable[None]]


class WorkerPool:
    """Executes submitted zero-argument tasks on a fixed set of workers.

    Tasks are queued on a channel whose capacity equals the number of
    workers; ``submit`` waits while the channel is full. ``join`` returns once
    every task submitted so far has run. Tasks are expected to handle their
    own errors; anything escaping a task is logged and the worker goes on.
    """

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f"Pool size must be positive, got {size}")
        self.size = size
        self._queue: asyncio.Queue[Task | None] = asyncio.Queue(maxsize=size)
        self._workers: list[asyncio.Task] = []
        self._submitted = 0
        self._completed = 0
        self._closed = False

    @property
    def submitted(self) -> int:
        return self._submitted

    @property
    def completed(self) -> int:
        return self._completed

    def start(self) -> None:
        if self._workers:
            return
        logger.debug(f"Starting {self.size} worker(s)")
        self._workers = [
            asyncio.create_task(self._work(n), name=f"worker-{n}") for n in range(self.size)
        ]

    async def submit(self, task: Task) -> None:
        """Enqueue a task, waiting while the queue is full."""
        if self._closed:
            raise RuntimeError("Pool is closed")
        if not self._workers:
            self.start()
        self._submitted += 1
        await self._queue.put(task)

    async def join(self) -> None:
        """Wait until every submitted task has completed."""
        await self._queue.join()

    async def close(self) -> None:
        """Run remaining tasks and stop the workers."""
        if self._closed:
            return
        self._closed = True
        await self.join()
        for _ in self._workers:
            await self._queue.put(None)
        await asyncio.gather(*self._workers)
        logger.debug(f"Pool closed after {self._completed} task(s)")

    def cancel(self) -> None:
        self._closed = True
        for worker in self._workers:
            worker.cancel()

    async def __aenter__(self) -> "WorkerPool":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc_type is None or issubclass(exc_type, Exception):
            await self.close()
        else:
            self.cancel()

    async def _work(self, number: int) -> None:
        while True:
            task = await self._queue.get()
            try:
                if task is None:
                    return
                try:
                    await task()
                except Exception:
                    logger.exception(f"Unhandled error in task {task!r} on worker {number}")
                self._completed += 1
            finally:
                self._queue.task_done()
