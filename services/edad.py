from datetime import date, datetime

from services.errors import InvalidDateError

DATE_FORMAT = "%Y-%m-%d"


class Clock:
    """Fuente de la fecha actual; los tests la reemplazan por una fija."""

    def today(self):
        return date.today()


class FixedClock(Clock):
    def __init__(self, fixed):
        self.fixed = fixed

    def today(self):
        return self.fixed


def parse_date(value):
    """Acepta ``date``, ``datetime`` o texto ``YYYY-MM-DD``; ``None`` si no se puede leer."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError:
        return None


def compute_age(birth_date, reference_date=None, clock=None):
    """
    Edad en años cumplidos entre ``birth_date`` y ``reference_date``.

    Si no se pasa ``reference_date`` se usa ``clock.today()``.
    Lanza ``InvalidDateError`` si la fecha de nacimiento no se puede leer
    o es posterior a la de referencia.
    """
    nacimiento = parse_date(birth_date)
    if nacimiento is None:
        raise InvalidDateError("La fecha de nacimiento no es válida (YYYY-MM-DD).")

    if reference_date is None:
        hoy = (clock or Clock()).today()
    else:
        hoy = parse_date(reference_date)
        if hoy is None:
            raise InvalidDateError("La fecha de referencia no es válida (YYYY-MM-DD).")

    if nacimiento > hoy:
        raise InvalidDateError("La fecha de nacimiento es posterior a la fecha de referencia.")

    edad = hoy.year - nacimiento.year
    if (hoy.month, hoy.day) < (nacimiento.month, nacimiento.day):
        edad -= 1
    return edad
