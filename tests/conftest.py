from __future__ import annotations

import itertools
from collections.abc import Callable

import pytest

from domain.cues import SoundCueStatus


class FakeScheduler:
    """Loop principal simulado: as fontes só disparam quando pedido."""

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self.sources: dict[int, tuple[int, Callable[[], bool]]] = {}
        self.scheduled: list[int] = []

    def __call__(self, interval: int, callback: Callable[[], bool]) -> int:
        source_id = next(self._ids)
        self.sources[source_id] = (interval, callback)
        self.scheduled.append(source_id)
        return source_id

    def fire(self, source_id: int) -> bool:
        _interval, callback = self.sources[source_id]
        keep = callback()
        if not keep:
            del self.sources[source_id]
        return keep

    def fire_all(self) -> None:
        for source_id in list(self.sources):
            self.fire(source_id)

    def intervals(self) -> list[int]:
        return [interval for interval, _callback in self.sources.values()]


class FakeEmitter:
    def __init__(self, statuses: list[int] | None = None) -> None:
        self.events: list[str] = []
        self.statuses = list(statuses or [])
        self.closed = False

    def play_event(self, event_name: str) -> int:
        self.events.append(event_name)
        if self.statuses:
            return self.statuses.pop(0)
        return SoundCueStatus.OK

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def emitter() -> FakeEmitter:
    return FakeEmitter()
