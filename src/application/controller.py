import logging

from application.beat_timer import BeatTimer, Scheduler
from config import BPM_DEFAULT
from domain.cues import SoundCueEmitter
from domain.models import TransportState, clamp_bpm

logger = logging.getLogger(__name__)


class MetronomeController:
    def __init__(
        self,
        schedule: Scheduler,
        emitter: SoundCueEmitter,
        bpm: int = BPM_DEFAULT,
    ) -> None:
        self.emitter: SoundCueEmitter = emitter
        self.timer: BeatTimer = BeatTimer(
            schedule=schedule,
            emitter=emitter,
            is_playing=lambda: self.is_playing,
        )
        self._state: TransportState = TransportState.STOPPED
        self._bpm: int = clamp_bpm(bpm)

    @property
    def state(self) -> TransportState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state is TransportState.PLAYING

    @property
    def bpm(self) -> int:
        return self._bpm

    def toggle(self) -> TransportState:
        """Alternar entre tocando e parado e retornar o novo estado."""
        if self.is_playing:
            self._state = TransportState.STOPPED
            self.timer.stop()
        else:
            # O estado só muda depois que o timer foi agendado
            _ = self.timer.start(self._bpm)
            self._state = TransportState.PLAYING

        logger.info('Metrônomo %s a %d BPM', self._state.value, self._bpm)
        return self._state

    def set_bpm(self, value: float) -> None:
        bpm = clamp_bpm(value)
        if bpm == self._bpm:
            return

        if self.is_playing:
            _ = self.timer.rebuild(bpm)
        self._bpm = bpm

    def shutdown(self) -> None:
        """Parar a reprodução e liberar o emissor de som."""
        self._state = TransportState.STOPPED
        self.timer.stop()

        close = getattr(self.emitter, 'close', None)
        if callable(close):
            close()
