"""Opt-in parallel traversal of an arena.

Sequential iteration (`for ident, value in arena`) stays the default; ParIter
fans callbacks out over a thread pool, or over coroutines for the async
variants. Callbacks run in no particular order. Results of map() and
filter() are still returned in index order.

Usage:
    arena.par_iter().for_each(lambda ident, node: check(node))
    sizes = arena.par_iter(ParallelSettings(max_workers=4)).map(measure)

    # Mutable slots
    arena.par_iter_mut().for_each(lambda ident, slot: setattr(slot, "value", 0))

    # Coroutine callbacks, bounded by max_concurrent
    await arena.par_iter().for_each_async(push_remote)
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from idarena.config import ParallelSettings
from idarena.storage.arena import Slot

if TYPE_CHECKING:
    from idarena.storage.arena import Arena

T = TypeVar("T")
R = TypeVar("R")

logger = logging.getLogger(__name__)


class ParIter(Generic[T]):
    """Parallel iterator over (id, value) or (id, Slot) pairs of one arena.

    The pairs covered are those present when the ParIter is created. While a
    traversal runs the arena rejects allocation with ArenaBusyError.

    Args:
        arena: Arena to traverse.
        mutable: Yield Slot views instead of values.
        settings: Worker and chunking configuration (default: from environment).
    """

    def __init__(
        self,
        arena: Arena[T],
        *,
        mutable: bool = False,
        settings: ParallelSettings | None = None,
    ) -> None:
        self._arena = arena
        self._mutable = mutable
        self._settings = settings if settings is not None else ParallelSettings()
        self._length = len(arena)

    def __len__(self) -> int:
        return self._length

    def _pair(self, position: int) -> tuple[Any, Any]:
        ident = self._arena._id_at(position)
        if self._mutable:
            return ident, Slot(self._arena, position, ident)
        return ident, self._arena._items[position]

    def _chunks(self) -> list[range]:
        size = self._settings.chunk_size
        return [
            range(start, min(start + size, self._length))
            for start in range(0, self._length, size)
        ]

    def _run(self, work: Callable[[range], list[R]]) -> list[R]:
        """Run work over every chunk in the pool; concatenate results in chunk order."""
        chunks = self._chunks()
        if not chunks:
            return []

        logger.debug(
            "Parallel traversal of %r: %d chunks, max_workers=%s",
            self._arena,
            len(chunks),
            self._settings.max_workers,
        )
        with self._arena._held("a parallel traversal is running"):
            with ThreadPoolExecutor(max_workers=self._settings.max_workers) as pool:
                futures = [pool.submit(work, chunk) for chunk in chunks]
                # result() re-raises the first worker exception in chunk order
                results: list[R] = []
                for future in futures:
                    results.extend(future.result())
                return results

    def for_each(self, fn: Callable[[Any, Any], object]) -> None:
        """Call fn(id, item) for every pair."""

        def work(chunk: range) -> list[None]:
            for position in chunk:
                fn(*self._pair(position))
            return []

        self._run(work)

    def map(self, fn: Callable[[Any, Any], R]) -> list[R]:
        """Return [fn(id, item) ...] in index order."""

        def work(chunk: range) -> list[R]:
            return [fn(*self._pair(position)) for position in chunk]

        return self._run(work)

    def filter(self, predicate: Callable[[Any, Any], bool]) -> list[tuple[Any, Any]]:
        """Return the pairs for which predicate(id, item) is true, in index order."""

        def work(chunk: range) -> list[tuple[Any, Any]]:
            pairs = [self._pair(position) for position in chunk]
            return [pair for pair in pairs if predicate(*pair)]

        return self._run(work)

    def collect(self) -> list[tuple[Any, Any]]:
        """Materialize all pairs in index order."""
        return [self._pair(position) for position in range(self._length)]

    def count(self) -> int:
        return self._length

    async def map_async(self, fn: Callable[[Any, Any], Awaitable[R]]) -> list[R]:
        """Await fn(id, item) for every pair concurrently; results in index order.

        Concurrency is limited by settings.max_concurrent (None = unlimited).
        If callbacks raise, every other callback still runs to completion
        before the first error (in index order) is re-raised.
        """
        max_concurrent = self._settings.max_concurrent

        with self._arena._held("a parallel traversal is running"):
            if max_concurrent is None:
                tasks: list[Awaitable[R]] = [
                    fn(*self._pair(position)) for position in range(self._length)
                ]
            else:
                semaphore = asyncio.Semaphore(max_concurrent)

                async def limited(position: int) -> R:
                    async with semaphore:
                        return await fn(*self._pair(position))

                tasks = [limited(position) for position in range(self._length)]

            # Every callback finishes before the hold is released
            results = await asyncio.gather(*tasks, return_exceptions=True)

        for result in results:
            if isinstance(result, BaseException):
                raise result
        return list(results)

    async def for_each_async(self, fn: Callable[[Any, Any], Awaitable[object]]) -> None:
        """Await fn(id, item) for every pair concurrently."""
        await self.map_async(fn)
