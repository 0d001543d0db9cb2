"""Conversión de unidades y estado febril de una temperatura."""
from typing import Optional

from services.bascula import DATA_NOT_AVAILABLE, round_half_up, to_number

CELSIUS = "C"
FAHRENHEIT = "F"
VALID_UNITS = (CELSIUS, FAHRENHEIT)

# Precisión única para todas las conversiones
TEMPERATURE_DIGITS = 2

HIGH_FEVER = "High fever"
LOW_GRADE_FEVER = "Low-grade fever"
MILD_HYPOTHERMIA = "Mild hypothermia"
NORMAL = "Normal"
INVALID_UNIT = "Invalid unit"


def celsius_to_fahrenheit(celsius) -> Optional[float]:
    return round_half_up(float(celsius) * 9 / 5 + 32, TEMPERATURE_DIGITS)


def fahrenheit_to_celsius(fahrenheit) -> Optional[float]:
    return round_half_up((float(fahrenheit) - 32) * 5 / 9, TEMPERATURE_DIGITS)


def to_both_units(value, unit) -> Optional[tuple]:
    """Devuelve ``(celsius, fahrenheit)`` o ``None`` si la unidad no es C/F."""
    if unit == CELSIUS:
        return round_half_up(float(value), TEMPERATURE_DIGITS), celsius_to_fahrenheit(value)
    if unit == FAHRENHEIT:
        return fahrenheit_to_celsius(value), round_half_up(float(value), TEMPERATURE_DIGITS)
    return None


def classify_temperature(value, unit) -> str:
    if unit not in VALID_UNITS:
        return INVALID_UNIT
    temp = to_number(value)
    if temp is None:
        return DATA_NOT_AVAILABLE
    if unit == CELSIUS:
        if temp >= 38:
            return HIGH_FEVER
        if temp >= 37.5:
            return LOW_GRADE_FEVER
        if temp < 36:
            return MILD_HYPOTHERMIA
        return NORMAL
    if temp >= 100.4:
        return HIGH_FEVER
    if temp >= 99.5:
        return LOW_GRADE_FEVER
    return NORMAL
