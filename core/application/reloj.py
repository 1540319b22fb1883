from datetime import datetime, timedelta, timezone
from typing import Callable

Reloj = Callable[[], datetime]

_RESOLUCION = timedelta(milliseconds=1)


def ahora_utc() -> datetime:
    return datetime.now(timezone.utc)


def sellar_fecha(reloj: Reloj, anterior: datetime | None = None) -> datetime:
    """
    Fecha de la última mutación.

    Se trunca a milisegundos (la resolución de MongoDB) y siempre queda
    estrictamente después de `anterior`, aunque el reloj retroceda o dos
    mutaciones caigan en el mismo milisegundo.
    """
    fecha = reloj()
    fecha = fecha.replace(microsecond=fecha.microsecond // 1000 * 1000)
    if anterior is not None and fecha <= anterior:
        fecha = anterior + _RESOLUCION
    return fecha
