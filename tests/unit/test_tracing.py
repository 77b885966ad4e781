"""Tests for the traced decorator and span argument recording."""

import inspect

import pytest

from portfolio.shared.telemetry.tracing import _bound_arguments, _record_arguments, traced


class RecordingSpan:
    def __init__(self) -> None:
        self.attributes: dict[str, object] = {}

    def set_attribute(self, key: str, value: object) -> None:
        self.attributes[key] = value


async def _search(self, raw_query: str, limit: int = 20) -> None:
    return None


def test_positional_arguments_are_recorded_by_name() -> None:
    span = RecordingSpan()
    arguments = _bound_arguments(inspect.signature(_search), (object(), "secret text", 5), {})
    _record_arguments(span, arguments)
    assert span.attributes == {"arg.raw_query.length": 11, "arg.limit": "5"}


async def test_traced_returns_result_without_tracer_provider() -> None:
    @traced("test.ok")
    async def add(a: int, b: int) -> int:
        return a + b

    assert await add(2, 3) == 5
    assert add.__name__ == "add"


async def test_traced_propagates_exceptions() -> None:
    @traced()
    async def fail() -> None:
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        await fail()
