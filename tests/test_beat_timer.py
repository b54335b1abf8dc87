from __future__ import annotations

import logging

import pytest

from application.beat_timer import BeatTimer
from config import CLICK_EVENT
from domain.cues import SoundCueStatus

from conftest import FakeEmitter, FakeScheduler


class RaisingEmitter:
    def __init__(self) -> None:
        self.calls = 0

    def play_event(self, event_name: str) -> int:
        self.calls += 1
        raise RuntimeError('device busy')


def make_timer(
    scheduler: FakeScheduler, emitter: object, playing: bool = True
) -> BeatTimer:
    return BeatTimer(schedule=scheduler, emitter=emitter, is_playing=lambda: playing)


def test_start_schedules_one_recurring_source(
    scheduler: FakeScheduler, emitter: FakeEmitter
) -> None:
    timer = make_timer(scheduler, emitter)

    token = timer.start(120)

    assert timer.current_token == token
    assert timer.interval == 500
    assert scheduler.intervals() == [500]

    for _ in range(3):
        assert scheduler.fire(scheduler.scheduled[0]) is True
    assert emitter.events == [CLICK_EVENT] * 3


def test_tokens_are_distinct(scheduler: FakeScheduler, emitter: FakeEmitter) -> None:
    timer = make_timer(scheduler, emitter)
    assert timer.start(60) != timer.start(60)


def test_stop_makes_pending_firing_end_silently(
    scheduler: FakeScheduler, emitter: FakeEmitter
) -> None:
    timer = make_timer(scheduler, emitter)
    _ = timer.start(120)

    timer.stop()

    assert not timer.is_live
    assert timer.interval is None
    assert scheduler.fire(scheduler.scheduled[0]) is False
    assert emitter.events == []
    assert scheduler.sources == {}


def test_rebuild_supersedes_old_source(
    scheduler: FakeScheduler, emitter: FakeEmitter
) -> None:
    timer = make_timer(scheduler, emitter)
    _ = timer.start(120)
    old_source = scheduler.scheduled[0]

    _ = timer.rebuild(60)
    new_source = scheduler.scheduled[1]

    assert scheduler.fire(old_source) is False
    assert emitter.events == []
    assert scheduler.fire(new_source) is True
    assert emitter.events == [CLICK_EVENT]
    assert scheduler.intervals() == [1000]


def test_tick_stops_when_transport_is_not_playing(
    scheduler: FakeScheduler, emitter: FakeEmitter
) -> None:
    timer = make_timer(scheduler, emitter, playing=False)
    token = timer.start(120)

    assert timer.tick(token) is False
    assert emitter.events == []


def test_failed_cue_is_logged_and_sequence_continues(
    scheduler: FakeScheduler, caplog: pytest.LogCaptureFixture
) -> None:
    emitter = FakeEmitter(statuses=[SoundCueStatus.NOT_AVAILABLE, SoundCueStatus.OK])
    timer = make_timer(scheduler, emitter)
    _ = timer.start(240)
    source = scheduler.scheduled[0]

    with caplog.at_level(logging.ERROR, logger='application.beat_timer'):
        assert scheduler.fire(source) is True
        assert scheduler.fire(source) is True

    assert emitter.events == [CLICK_EVENT, CLICK_EVENT]
    assert 'sound cue -2: Sound backend not available' in caplog.text


def test_raising_emitter_does_not_stop_the_timer(scheduler: FakeScheduler) -> None:
    emitter = RaisingEmitter()
    timer = make_timer(scheduler, emitter)
    _ = timer.start(120)
    source = scheduler.scheduled[0]

    assert scheduler.fire(source) is True
    assert scheduler.fire(source) is True
    assert emitter.calls == 2


def test_start_commits_nothing_when_scheduling_fails(emitter: FakeEmitter) -> None:
    def failing(interval: int, callback: object) -> int:
        raise RuntimeError('no main loop')

    timer = BeatTimer(schedule=failing, emitter=emitter, is_playing=lambda: True)

    with pytest.raises(RuntimeError):
        _ = timer.start(120)

    assert timer.current_token is None
    assert timer.interval is None
