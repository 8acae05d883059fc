"""
Shared fixtures

RecordingSink stands in for a console: it records every call and, unlike
StreamConsole, has no format_with_options, so a Console built on it spreads
merged arguments into the sink call.
"""

from typing import Any, List, Tuple

import pytest

from stylog.lib.statement import Console


class RecordingSink:
    """Console-style sink that records (method, args) pairs"""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def _record(self, method: str, args: Tuple[Any, ...]) -> str:
        self.calls.append((method, args))
        return method

    def log(self, *args: Any) -> str:
        return self._record("log", args)

    def info(self, *args: Any) -> str:
        return self._record("info", args)

    def group(self, *args: Any) -> str:
        return self._record("group", args)

    def group_collapsed(self, *args: Any) -> str:
        return self._record("group_collapsed", args)

    def warn(self, *args: Any) -> str:
        return self._record("warn", args)

    @property
    def last(self) -> Tuple[str, Tuple[Any, ...]]:
        return self.calls[-1]


class FailingSink(RecordingSink):
    """Sink whose log() raises after recording"""

    def log(self, *args: Any) -> str:
        super().log(*args)
        raise RuntimeError("sink unavailable")


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def console(sink: RecordingSink) -> Console:
    """Builder over a recording sink (no formatter: arguments are spread)"""
    return Console(sink=sink)


@pytest.fixture
def failing_sink() -> FailingSink:
    return FailingSink()
