"""Tests for result variants."""
import pytest

from kansas.results import Failed, Found, NotFound, capture, from_lookup


async def returns(value):
    return value


async def raises(error):
    raise error


def test_from_lookup():
    """Test that None maps to NotFound and anything else to Found."""
    assert from_lookup(None) == NotFound()
    assert from_lookup(0) == Found(0)
    assert from_lookup([]) == Found([])


@pytest.mark.asyncio
class TestCapture:
    """Tests for capture."""

    async def test_capture_value(self):
        assert await capture(returns("goal")) == Found("goal")

    async def test_capture_none(self):
        assert await capture(returns(None)) == NotFound()

    async def test_capture_error(self):
        error = RuntimeError("connection dropped")

        result = await capture(raises(error))

        assert result == Failed(error)
