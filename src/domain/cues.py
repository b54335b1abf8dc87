from enum import IntEnum
from typing import Protocol


class SoundCueStatus(IntEnum):
    """Códigos de retorno de um emissor de sinais sonoros."""

    OK = 0
    FAILED = -1
    NOT_AVAILABLE = -2
    NOT_FOUND = -3
    INVALID = -4
    DESTROYED = -5


_DESCRIPTIONS: dict[SoundCueStatus, str] = {
    SoundCueStatus.OK: 'Success',
    SoundCueStatus.FAILED: 'Operation failed',
    SoundCueStatus.NOT_AVAILABLE: 'Sound backend not available',
    SoundCueStatus.NOT_FOUND: 'Sound event not found',
    SoundCueStatus.INVALID: 'Invalid argument',
    SoundCueStatus.DESTROYED: 'Sound backend destroyed',
}


def describe_status(code: int) -> str:
    """Converter um código de status em texto legível."""
    try:
        return _DESCRIPTIONS[SoundCueStatus(code)]
    except ValueError:
        return f'Unknown error {code}'


class SoundCueEmitter(Protocol):
    def play_event(self, event_name: str) -> int: ...
