from datetime import date, datetime

import pytest

from services.acceso import authorize
from services.bascula import (
    DATA_NOT_AVAILABLE,
    classify_bmi,
    classify_bmi_simple,
    compute_bmi,
    round_half_up,
)
from services.edad import FixedClock, compute_age
from services.errors import InvalidDateError
from services.termometro import (
    INVALID_UNIT,
    celsius_to_fahrenheit,
    classify_temperature,
    fahrenheit_to_celsius,
)


# ---------------------------- IMC ----------------------------

def test_imc_con_valores_validos():
    assert compute_bmi(70, 1.75) == 22.86


def test_imc_acepta_decimales_y_texto():
    from decimal import Decimal

    assert compute_bmi(Decimal("70.00"), Decimal("1.75")) == 22.86
    assert compute_bmi("70", "1.75") == 22.86


@pytest.mark.parametrize("peso, altura", [
    (0, 1.75),
    (70, 0),
    (None, 1.75),
    (70, None),
    ("abc", 1.75),
    (-70, 1.75),
    (float("nan"), 1.75),
])
def test_imc_no_calculable_devuelve_none(peso, altura):
    assert compute_bmi(peso, altura) is None


def test_imc_no_representable_devuelve_none():
    assert compute_bmi(1e27, 1.0) is None
    assert compute_bmi(70, 1e-200) is None


@pytest.mark.parametrize("valor, esperado", [
    (2.675, 2.68),
    (0.125, 0.13),
    (1.005, 1.01),
])
def test_redondeo_half_up_en_el_punto_medio(valor, esperado):
    assert round_half_up(valor, 2) == esperado


def test_redondeo_de_valores_no_finitos():
    assert round_half_up(float("inf"), 2) is None
    assert round_half_up(1e27, 2) is None


def test_imc_en_el_punto_medio_redondea_hacia_arriba():
    assert compute_bmi(22.625, 1.0) == 22.63


def test_imc_decrece_al_aumentar_la_altura():
    alturas = [1.50, 1.60, 1.70, 1.80, 1.90]
    valores = [compute_bmi(80, a) for a in alturas]
    assert valores == sorted(valores, reverse=True)
    assert compute_bmi(80, 1.70) == compute_bmi(80, 1.70)


@pytest.mark.parametrize("imc, esperado", [
    (15.9, "Severe underweight"),
    (16.0, "Moderate underweight"),
    (17.0, "Mild underweight"),
    (18.5, "Normal weight"),
    (22.86, "Normal weight"),
    (25.0, "Overweight"),
    (30.0, "Obese class I"),
    (35.0, "Obese class II"),
    (39.99, "Obese class II"),
    (40.0, "Obese class III"),
])
def test_clasificacion_imc_en_los_limites(imc, esperado):
    assert classify_bmi(imc) == esperado


@pytest.mark.parametrize("imc, esperado", [
    (18.4, "Underweight"),
    (18.5, "Normal"),
    (25.0, "Overweight"),
    (30.0, "Obese"),
])
def test_clasificacion_imc_simplificada(imc, esperado):
    assert classify_bmi_simple(imc) == esperado


def test_clasificacion_sin_dato():
    assert classify_bmi(None) == DATA_NOT_AVAILABLE
    assert classify_bmi(float("nan")) == DATA_NOT_AVAILABLE
    assert classify_bmi_simple(None) == DATA_NOT_AVAILABLE


# ---------------------------- TEMPERATURA ----------------------------

def test_conversion_de_unidades():
    assert celsius_to_fahrenheit(37) == 98.6
    assert celsius_to_fahrenheit(100) == 212.0
    assert fahrenheit_to_celsius(212) == 100.0
    assert fahrenheit_to_celsius(100.4) == 38.0


def test_conversion_en_el_punto_medio_redondea_hacia_arriba():
    assert celsius_to_fahrenheit(36.25) == 97.25
    assert celsius_to_fahrenheit(36.125) == 97.03


def test_conversion_fuera_de_rango_devuelve_none():
    assert celsius_to_fahrenheit(1e27) is None
    assert fahrenheit_to_celsius(float("inf")) is None


@pytest.mark.parametrize("celsius", [-40, 0, 35.5, 36.6, 37.0, 38.25, 41.3])
def test_conversion_ida_y_vuelta(celsius):
    assert fahrenheit_to_celsius(celsius_to_fahrenheit(celsius)) == pytest.approx(celsius, abs=0.01)


@pytest.mark.parametrize("valor, unidad, esperado", [
    (38.0, "C", "High fever"),
    (37.5, "C", "Low-grade fever"),
    (37.0, "C", "Normal"),
    (35.9, "C", "Mild hypothermia"),
    (100.4, "F", "High fever"),
    (99.5, "F", "Low-grade fever"),
    (95.0, "F", "Normal"),
])
def test_estado_de_temperatura(valor, unidad, esperado):
    assert classify_temperature(valor, unidad) == esperado


def test_unidad_invalida_no_lanza():
    assert classify_temperature(37.0, "X") == INVALID_UNIT
    assert classify_temperature(37.0, None) == INVALID_UNIT


# ---------------------------- EDAD ----------------------------

def test_edad_antes_y_despues_del_cumpleanos():
    assert compute_age(date(2000, 6, 15), date(2024, 6, 14)) == 23
    assert compute_age(date(2000, 6, 15), date(2024, 6, 15)) == 24


def test_edad_acepta_texto_y_datetime():
    assert compute_age("2000-06-15", datetime(2024, 6, 15, 10, 30)) == 24


def test_edad_usa_el_reloj_si_no_hay_referencia():
    assert compute_age("2000-02-29", clock=FixedClock(date(2021, 2, 28))) == 20
    assert compute_age("2000-02-29", clock=FixedClock(date(2021, 3, 1))) == 21


@pytest.mark.parametrize("nacimiento", ["no-es-fecha", "2000-13-01", None, "2030-01-01"])
def test_edad_invalida(nacimiento):
    with pytest.raises(InvalidDateError):
        compute_age(nacimiento, date(2024, 1, 1))


# ---------------------------- ACCESO ----------------------------

def test_autorizacion_por_dueno():
    assert authorize(1, 1) is True
    assert authorize(1, 2) is False
    assert authorize(1, None) is False
    assert authorize(None, None) is False
