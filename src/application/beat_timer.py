import itertools
import logging
from collections.abc import Callable
from functools import partial

from config import CLICK_EVENT
from domain.cues import SoundCueEmitter, describe_status
from domain.models import interval_ms

logger = logging.getLogger(__name__)

type Scheduler = Callable[[int, Callable[[], bool]], int]


class BeatTimer:
    """Dispara um clique a cada batida enquanto o seu token for o atual.

    Um timer substituído ou parado não é cancelado: na próxima execução ele
    percebe que o token não confere mais e deixa de se reagendar.
    """

    def __init__(
        self,
        schedule: Scheduler,
        emitter: SoundCueEmitter,
        is_playing: Callable[[], bool],
    ) -> None:
        self._schedule: Scheduler = schedule
        self._emitter: SoundCueEmitter = emitter
        self._is_playing: Callable[[], bool] = is_playing
        self._tokens: itertools.count[int] = itertools.count(1)
        self._current_token: int | None = None
        self._interval: int | None = None

    @property
    def current_token(self) -> int | None:
        return self._current_token

    @property
    def interval(self) -> int | None:
        return self._interval

    @property
    def is_live(self) -> bool:
        return self._current_token is not None

    def start(self, bpm: float) -> int:
        """Agendar um novo timer recorrente e torná-lo o atual."""
        token = next(self._tokens)
        interval = interval_ms(bpm)
        source_id = self._schedule(interval, partial(self.tick, token))
        self._current_token = token
        self._interval = interval
        logger.debug(
            'Timer %d agendado a cada %d ms (fonte %d)', token, interval, source_id
        )
        return token

    def rebuild(self, bpm: float) -> int:
        """Substituir o timer atual por um novo com o intervalo recalculado."""
        return self.start(bpm)

    def stop(self) -> None:
        self._current_token = None
        self._interval = None

    def tick(self, token: int) -> bool:
        if token != self._current_token or not self._is_playing():
            logger.debug('Timer %d obsoleto, encerrando', token)
            return False

        try:
            status = self._emitter.play_event(CLICK_EVENT)
        except Exception:
            logger.exception('Erro ao tocar o clique')
        else:
            if status < 0:
                logger.error('sound cue %d: %s', status, describe_status(status))

        return True
