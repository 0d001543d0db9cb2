"""
Cálculo y clasificación del IMC.

IMC = peso_kg / (altura_m)²
"""
import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional

DATA_NOT_AVAILABLE = "Data not available"

# Límite inferior inclusivo; se evalúa en orden y gana el primero.
BMI_CATEGORIES = (
    (16.0, "Severe underweight"),
    (17.0, "Moderate underweight"),
    (18.5, "Mild underweight"),
    (25.0, "Normal weight"),
    (30.0, "Overweight"),
    (35.0, "Obese class I"),
    (40.0, "Obese class II"),
)
BMI_TOP_CATEGORY = "Obese class III"

BMI_SIMPLE_CATEGORIES = (
    (18.5, "Underweight"),
    (25.0, "Normal"),
    (30.0, "Overweight"),
)
BMI_SIMPLE_TOP_CATEGORY = "Obese"


def round_half_up(value: float, digits: int = 2) -> Optional[float]:
    """Redondeo a ``digits`` decimales; ``None`` si el valor no es finito o no cabe."""
    if value is None or not math.isfinite(value):
        return None
    quantum = Decimal(1).scaleb(-digits)
    try:
        return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return None


def to_number(value) -> Optional[float]:
    """Convierte ``value`` a float; ``None`` si falta, no es numérico o es NaN/inf."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def compute_bmi(weight, height) -> Optional[float]:
    """
    Calcula el IMC a partir del peso (kg) y la altura (m).

    Returns:
        IMC redondeado a 2 decimales (ROUND_HALF_UP), o ``None`` cuando
        alguno de los valores falta, es cero/negativo, no es numérico
        o el resultado no es representable.

    Examples:
        >>> compute_bmi(70, 1.75)
        22.86
        >>> compute_bmi(70, 0) is None
        True
    """
    peso = to_number(weight)
    altura = to_number(height)
    if peso is None or altura is None:
        return None
    if peso <= 0 or altura <= 0:
        return None

    try:
        imc = peso / (altura ** 2)
    except (ZeroDivisionError, OverflowError):
        return None
    return round_half_up(imc, 2)


def _classify(bmi, categories, top_category):
    valor = to_number(bmi)
    if valor is None:
        return DATA_NOT_AVAILABLE
    for upper_bound, label in categories:
        if valor < upper_bound:
            return label
    return top_category


def classify_bmi(bmi) -> str:
    """Clasificación clínica del IMC en 8 tramos."""
    return _classify(bmi, BMI_CATEGORIES, BMI_TOP_CATEGORY)


def classify_bmi_simple(bmi) -> str:
    """Clasificación simplificada del IMC en 4 tramos."""
    return _classify(bmi, BMI_SIMPLE_CATEGORIES, BMI_SIMPLE_TOP_CATEGORY)
