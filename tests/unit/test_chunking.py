"""
Unit tests for chunk scheduling and cancellation.
"""
import pytest

from application.exceptions import OperationCancelledError
from application.sync import CancellationToken, ChunkScheduler, chunk_count, iter_chunks

pytestmark = pytest.mark.unit


# =============================================================================
# iter_chunks / chunk_count
# =============================================================================


class TestIterChunks:
    @pytest.mark.parametrize(
        "length,size,expected",
        [(0, 100, 0), (1, 100, 1), (100, 100, 1), (101, 100, 2), (350, 100, 4), (7, 3, 3)],
    )
    def test_chunk_count(self, length, size, expected):
        items = list(range(length))
        chunks = list(iter_chunks(items, size))
        assert len(chunks) == expected == chunk_count(length, size)

    def test_chunks_are_contiguous_and_ordered(self):
        items = list(range(350))
        chunks = list(iter_chunks(items, 100))

        assert [len(c) for c in chunks] == [100, 100, 100, 50]
        flattened = [x for chunk in chunks for x in chunk]
        assert flattened == items

    def test_empty_input_yields_nothing(self):
        assert list(iter_chunks([], 10)) == []

    @pytest.mark.parametrize("size", [0, -1])
    def test_invalid_chunk_size_raises(self, size):
        with pytest.raises(ValueError):
            list(iter_chunks([1, 2, 3], size))
        with pytest.raises(ValueError):
            ChunkScheduler(chunk_size=size)

    def test_negative_pause_raises(self):
        with pytest.raises(ValueError):
            ChunkScheduler(chunk_size=10, pause_seconds=-0.5)


# =============================================================================
# ChunkScheduler
# =============================================================================


class TestChunkScheduler:
    @pytest.mark.asyncio
    async def test_yields_same_chunks_as_iter_chunks(self):
        scheduler = ChunkScheduler(chunk_size=4)
        items = list(range(10))

        chunks = [list(chunk) async for chunk in scheduler.chunks(items)]

        assert chunks == [[0, 1, 2, 3], [4, 5, 6, 7], [8, 9]]

    @pytest.mark.asyncio
    async def test_cancellation_checked_at_chunk_boundary(self):
        scheduler = ChunkScheduler(chunk_size=2)
        token = CancellationToken()
        seen = []

        with pytest.raises(OperationCancelledError):
            async for chunk in scheduler.chunks(list(range(10)), cancellation=token):
                seen.append(list(chunk))
                token.cancel("user request")

        # The chunk in progress when cancel() was called completes; no more follow.
        assert seen == [[0, 1]]

    @pytest.mark.asyncio
    async def test_cancelled_before_start_yields_nothing(self):
        token = CancellationToken()
        token.cancel()
        scheduler = ChunkScheduler(chunk_size=2)

        with pytest.raises(OperationCancelledError):
            async for _ in scheduler.chunks([1, 2, 3], cancellation=token):
                pytest.fail("no chunk should be yielded")

    @pytest.mark.asyncio
    async def test_empty_input_never_checks_token(self):
        token = CancellationToken()
        token.cancel()
        scheduler = ChunkScheduler(chunk_size=2)

        chunks = [chunk async for chunk in scheduler.chunks([], cancellation=token)]

        assert chunks == []


class TestCancellationToken:
    def test_initial_state(self):
        token = CancellationToken()
        assert not token.is_cancelled
        assert token.reason is None
        token.raise_if_cancelled()

    def test_first_reason_wins(self):
        token = CancellationToken()
        token.cancel("first")
        token.cancel("second")
        assert token.is_cancelled
        assert token.reason == "first"

    def test_raise_includes_reason(self):
        token = CancellationToken()
        token.cancel("shutting down")
        with pytest.raises(OperationCancelledError, match="shutting down"):
            token.raise_if_cancelled()
