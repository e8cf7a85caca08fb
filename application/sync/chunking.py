"""
Chunk scheduling for bulk sync operations.

Collections are processed in fixed-size contiguous slices. Between slices the
async scheduler yields to the event loop so progress observers (and anything
else sharing the loop) get a chance to run, and checks for cancellation.
"""

import asyncio
from typing import AsyncIterator, Iterator, Optional, Sequence, TypeVar

from application.sync.cancellation import CancellationToken

T = TypeVar("T")

DEFAULT_CHUNK_SIZE = 100


def _check_chunk_size(chunk_size: int) -> None:
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")


def chunk_count(length: int, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Number of chunks a sequence of `length` items splits into."""
    _check_chunk_size(chunk_size)
    return -(-length // chunk_size)


def iter_chunks(items: Sequence[T], chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[Sequence[T]]:
    """
    Lazily yield contiguous, ordered slices of at most chunk_size items.

    Yields ceil(len(items) / chunk_size) slices with no gaps or overlaps.
    Empty input yields nothing.
    """
    _check_chunk_size(chunk_size)
    for start in range(0, len(items), chunk_size):
        yield items[start:start + chunk_size]


class ChunkScheduler:
    """
    Async chunk iterator with inter-chunk pauses and cancellation checks.

    Usage:
        >>> scheduler = ChunkScheduler(chunk_size=100)
        >>> async for chunk in scheduler.chunks(records, cancellation=token):
        ...     await process(chunk)
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE, pause_seconds: float = 0.0) -> None:
        _check_chunk_size(chunk_size)
        if pause_seconds < 0:
            raise ValueError(f"pause_seconds must be >= 0, got {pause_seconds}")
        self.chunk_size = chunk_size
        self.pause_seconds = pause_seconds

    async def chunks(
        self,
        items: Sequence[T],
        cancellation: Optional[CancellationToken] = None,
    ) -> AsyncIterator[Sequence[T]]:
        """
        Yield chunks of items.

        Raises:
            OperationCancelledError: At a chunk boundary once the token is cancelled
        """
        for index, chunk in enumerate(iter_chunks(items, self.chunk_size)):
            if index > 0:
                await asyncio.sleep(self.pause_seconds)
            if cancellation is not None:
                cancellation.raise_if_cancelled()
            yield chunk
