# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Bounded worker pool for cooperative asyncio work."""

from __future__ import annotations

import asyncio
from collections import deque
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Final, Generic, TypeVar

DEFAULT_CONCURRENCY: Final[int] = 8

ResultT = TypeVar("ResultT")


@dataclass(slots=True)
class _Job(Generic[ResultT]):
    factory: Callable[[], Awaitable[ResultT]]
    future: asyncio.Future[ResultT]


class WorkerPool:
    """Run submitted work with at most ``capacity`` units in flight.

    Units are admitted in submission order as slots free up. A slot is
    released whether its unit succeeds or raises, and a failing unit only
    affects its own future.
    """

    def __init__(self, capacity: int = DEFAULT_CONCURRENCY) -> None:
        """Create a pool with a fixed number of slots.

        Args:
            capacity: Maximum number of units running at once.

        Raises:
            ValueError: If ``capacity`` is lower than one.
        """

        if capacity < 1:
            raise ValueError("worker pool capacity must be at least 1")
        self._capacity = capacity
        self._active = 0
        self._peak = 0
        self._completed = 0
        self._queue: deque[_Job[Any]] = deque()
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def capacity(self) -> int:
        """Return the number of slots."""

        return self._capacity

    @property
    def active(self) -> int:
        """Return the number of units currently running."""

        return self._active

    @property
    def pending(self) -> int:
        """Return the number of units waiting for a slot."""

        return len(self._queue)

    @property
    def peak(self) -> int:
        """Return the highest number of units that ran at the same time."""

        return self._peak

    @property
    def completed(self) -> int:
        """Return the number of units that have finished."""

        return self._completed

    def submit(self, factory: Callable[[], Awaitable[ResultT]]) -> asyncio.Future[ResultT]:
        """Schedule ``factory`` and return a future for its result.

        The call returns immediately; the awaitable is only created once a
        slot is available. Must be called with a running event loop.

        Args:
            factory: Zero-argument callable producing the awaitable to run.

        Returns:
            asyncio.Future[ResultT]: Future resolved with the unit's result or
            exception.
        """

        future: asyncio.Future[ResultT] = asyncio.get_running_loop().create_future()
        job = _Job(factory=factory, future=future)
        if self._active < self._capacity:
            self._start(job)
        else:
            self._queue.append(job)
        return future

    async def join(self) -> None:
        """Wait until every submitted unit has finished."""

        while self._tasks or self._queue:
            if not self._tasks:
                self._admit()
            await asyncio.gather(*tuple(self._tasks))

    def _start(self, job: _Job[Any]) -> None:
        self._active += 1
        self._peak = max(self._peak, self._active)
        task = asyncio.create_task(self._execute(job))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _execute(self, job: _Job[Any]) -> None:
        try:
            result = await job.factory()
        except asyncio.CancelledError:
            job.future.cancel()
            raise
        except Exception as exc:  # noqa: BLE001 - delivered through the unit's own future
            if not job.future.done():
                job.future.set_exception(exc)
        else:
            if not job.future.done():
                job.future.set_result(result)
        finally:
            self._active -= 1
            self._completed += 1
            self._admit()

    def _admit(self) -> None:
        while self._queue and self._active < self._capacity:
            self._start(self._queue.popleft())


__all__ = ["DEFAULT_CONCURRENCY", "WorkerPool"]
