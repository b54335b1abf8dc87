from collections.abc import Callable

from gi.repository import GLib  # pyright: ignore[reportMissingModuleSource]


def glib_schedule(interval: int, callback: Callable[[], bool]) -> int:
    """Agendar `callback` no loop principal a cada `interval` ms.

    A fonte continua ativa enquanto o callback retornar `True`.
    """
    return GLib.timeout_add(interval, callback, priority=GLib.PRIORITY_HIGH)
