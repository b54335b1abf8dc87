import logging
import threading
from pathlib import Path

import fluidsynth

from config import (
    CLICK_DURATION,
    CLICK_VELOCITY,
    DEFAULT_SOUNDFONT,
    PERCUSSION_BANK,
    PERCUSSION_CHANNEL,
    SOUND_EVENTS,
)
from domain.cues import SoundCueStatus

logger = logging.getLogger(__name__)


class FluidSynthCuePlayer:
    """Toca sinais sonoros curtos por nome usando fluidsynth."""

    def __init__(
        self,
        soundfont_path: Path = DEFAULT_SOUNDFONT,
        events: dict[str, int] | None = None,
        duration: float = CLICK_DURATION,
    ) -> None:
        self.soundfont_path: Path = soundfont_path
        self.events: dict[str, int] = dict(SOUND_EVENTS if events is None else events)
        self.duration: float = duration
        self.fs: fluidsynth.Synth | None = None
        self.timers: list[threading.Timer] = []
        self._closed: bool = False

        try:
            self._initialize_fluidsynth()
        except Exception:
            logger.exception('Erro ao inicializar o FluidSynth')
            self._delete_synth()

    def _initialize_fluidsynth(self) -> None:
        self.fs = fluidsynth.Synth()
        self.fs.start()

        sfid = self.fs.sfload(str(self.soundfont_path))
        if sfid < 0:
            raise RuntimeError(f'SoundFont não carregado: {self.soundfont_path}')

        status = self.fs.program_select(PERCUSSION_CHANNEL, sfid, PERCUSSION_BANK, 0)
        if status < 0:
            raise RuntimeError('Banco de percussão indisponível no SoundFont')

    @property
    def is_available(self) -> bool:
        return self.fs is not None

    def play_event(self, event_name: str) -> int:
        if self._closed:
            return SoundCueStatus.DESTROYED
        if not event_name:
            return SoundCueStatus.INVALID
        if self.fs is None:
            return SoundCueStatus.NOT_AVAILABLE

        key = self.events.get(event_name)
        if key is None:
            return SoundCueStatus.NOT_FOUND

        status = self.fs.noteon(chan=PERCUSSION_CHANNEL, key=key, vel=CLICK_VELOCITY)
        if status is False or status < 0:
            return SoundCueStatus.FAILED

        self._schedule_noteoff(key)
        return SoundCueStatus.OK

    def _schedule_noteoff(self, key: int) -> None:
        self.timers = [t for t in self.timers if t.is_alive()]

        timer = threading.Timer(
            self.duration,
            self.fs.noteoff,
            args=[PERCUSSION_CHANNEL, key],
        )
        self.timers.append(timer)
        timer.start()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True

        for timer in self.timers:
            timer.cancel()
        for timer in self.timers:
            timer.join()
        self.timers = []

        self._delete_synth()

    def _delete_synth(self) -> None:
        if self.fs is not None:
            self.fs.delete()
            self.fs = None
