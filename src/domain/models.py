from enum import Enum, StrEnum

from config import BPM_MAX, BPM_MIN


class TransportState(Enum):
    """Estado de reprodução do metrônomo."""

    STOPPED = 'stopped'
    PLAYING = 'playing'


class WindowCommand(StrEnum):
    """Ações da janela, despachadas por um único handler."""

    PLAY = 'play'
    ABOUT = 'about'

    @property
    def is_stateful(self) -> bool:
        return self is WindowCommand.PLAY


def interval_ms(bpm: float) -> int:
    """Calcular o intervalo entre batidas em milissegundos."""
    if bpm <= 0:
        raise ValueError(f'BPM deve ser positivo, recebido {bpm}')
    return round(1000.0 / (bpm / 60.0))


def clamp_bpm(value: float) -> int:
    """Arredondar e limitar o valor à faixa aceita pelo controle."""
    return max(BPM_MIN, min(round(value), BPM_MAX))
