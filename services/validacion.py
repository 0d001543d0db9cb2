from datetime import date, datetime

from services.bascula import round_half_up, to_number
from services.errors import ValidationError


def is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(data, campos, mensaje):
    faltantes = [campo for campo in campos if is_blank(data.get(campo))]
    if faltantes:
        raise ValidationError(f"{mensaje} Faltan: {', '.join(faltantes)}.")


# Rango y escala de las columnas Numeric(5, 2)
MAX_MEDIDA = 999.99
DECIMALES_MEDIDA = 2


def parse_number(value, campo, positive=False, maximum=None, digits=None):
    """
    Número validado. Con ``digits`` se redondea a la escala de la columna
    antes de comprobar los límites, para que lo calculado coincida con lo
    que se guarda.
    """
    numero = to_number(value)
    if numero is None:
        raise ValidationError(f"El campo '{campo}' debe ser un número válido.")
    if maximum is not None and abs(numero) > maximum:
        raise ValidationError(f"El campo '{campo}' está fuera de rango (máximo {maximum}).")
    if digits is not None:
        numero = round_half_up(numero, digits)
    if positive and numero <= 0:
        raise ValidationError(f"El campo '{campo}' debe ser mayor que cero.")
    return numero


def parse_recorded_at(value, campo="fecha"):
    """
    Fecha de registro de una medición.

    Acepta ``YYYY-MM-DD`` o un datetime ISO (``YYYY-MM-DDTHH:MM[:SS]``).
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    if isinstance(value, str):
        texto = value.strip()
        try:
            return datetime.strptime(texto, "%Y-%m-%d")
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(texto).replace(tzinfo=None)
        except ValueError:
            pass
    raise ValidationError(f"La fecha '{campo}' no es válida (YYYY-MM-DD).")


def optional_text(value):
    if is_blank(value):
        return None
    return str(value).strip()


def parse_id(value, campo="pacienteId"):
    if isinstance(value, bool):
        raise ValidationError(f"El campo '{campo}' debe ser un identificador válido.")
    try:
        identificador = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"El campo '{campo}' debe ser un identificador válido.") from None
    if identificador <= 0:
        raise ValidationError(f"El campo '{campo}' debe ser un identificador válido.")
    return identificador
