"""
Orquestación de las mediciones de báscula y termómetro.

Flujo de escritura: validar -> comprobar dueño del paciente -> un único
insert -> calcular IMC/estado. Los campos derivados nunca se guardan; se
recalculan en cada lectura.
"""
import logging

from services.bascula import classify_bmi, compute_bmi
from services.errors import AuthorizationError, ValidationError
from services.termometro import VALID_UNITS, classify_temperature, to_both_units
from services.validacion import (
    DECIMALES_MEDIDA,
    MAX_MEDIDA,
    optional_text,
    parse_number,
    parse_recorded_at,
    parse_id,
    require_fields,
)

logger = logging.getLogger(__name__)


class MeasurementService:

    def __init__(self, pacientes, basculas, termometros):
        self.pacientes = pacientes
        self.basculas = basculas
        self.termometros = termometros

    # ---------------------------- HELPERS ----------------------------
    def _paciente_autorizado(self, owner_id, patient_id):
        paciente = self.pacientes.get_by_id(patient_id, owner_id)
        if paciente is None:
            logger.warning(
                "Acceso denegado: usuario=%s paciente=%s", owner_id, patient_id
            )
            raise AuthorizationError()
        return paciente

    @staticmethod
    def _weight_entry(medicion):
        imc = compute_bmi(medicion.peso, medicion.altura)
        return {
            "id": medicion.id,
            "date": medicion.fecha_registro,
            "weight": float(medicion.peso),
            "height": float(medicion.altura),
            "bmi": imc,
            "classification": classify_bmi(imc),
            "notes": medicion.notas,
        }

    @staticmethod
    def _temperature_entry(medicion):
        celsius, fahrenheit = to_both_units(medicion.temperatura, medicion.unidad) or (None, None)
        return {
            "id": medicion.id,
            "date": medicion.fecha_registro,
            "value": float(medicion.temperatura),
            "unit": medicion.unidad,
            "celsius": celsius,
            "fahrenheit": fahrenheit,
            "classification": classify_temperature(medicion.temperatura, medicion.unidad),
            "symptoms": medicion.sintomas,
            "notes": medicion.notas,
        }

    # ---------------------------- BASCULA ----------------------------
    def record_weight(self, owner_id, patient_id, weight, height, date, notes=None):
        require_fields(
            {"pacienteId": patient_id, "peso": weight, "altura": height, "fecha": date},
            ("pacienteId", "peso", "altura", "fecha"),
            "Faltan datos de pacienteId, peso, altura y fecha (YYYY-MM-DD).",
        )
        patient_id = parse_id(patient_id)
        peso = parse_number(weight, "peso", positive=True, maximum=MAX_MEDIDA, digits=DECIMALES_MEDIDA)
        altura = parse_number(height, "altura", positive=True, maximum=MAX_MEDIDA, digits=DECIMALES_MEDIDA)
        fecha = parse_recorded_at(date)

        self._paciente_autorizado(owner_id, patient_id)

        medicion_id = self.basculas.create({
            "paciente_id": patient_id,
            "peso": peso,
            "altura": altura,
            "fecha_registro": fecha,
            "notas": optional_text(notes),
        })
        logger.info("Peso registrado: paciente=%s medicion=%s", patient_id, medicion_id)

        imc = compute_bmi(peso, altura)
        return {"id": medicion_id, "bmi": imc, "classification": classify_bmi(imc)}

    def list_weight_history(self, owner_id, patient_id):
        self._paciente_autorizado(owner_id, patient_id)
        return [self._weight_entry(m) for m in self.basculas.list_by_patient(patient_id)]

    def weight_summary(self, owner_id, patient_id, history=None):
        """Resumen del historial: IMC de la última medición y peso mínimo/máximo."""
        if history is None:
            history = self.list_weight_history(owner_id, patient_id)

        latest = {"bmi": None, "classification": None}
        if history:
            latest = {"bmi": history[0]["bmi"], "classification": history[0]["classification"]}

        pesos = [m["weight"] for m in history]
        return {
            "patient_id": patient_id,
            "total": len(history),
            "latest": latest,
            "min_weight": min(pesos) if pesos else None,
            "max_weight": max(pesos) if pesos else None,
        }

    def delete_weight(self, owner_id, measurement_id):
        borrado = self.basculas.delete(measurement_id, owner_id)
        if not borrado:
            raise AuthorizationError("Medición no encontrada o no autorizada.")
        logger.info("Peso eliminado: medicion=%s usuario=%s", measurement_id, owner_id)
        return borrado

    # ---------------------------- TERMOMETRO ----------------------------
    def record_temperature(self, owner_id, patient_id, value, unit, date, symptoms=None, notes=None):
        require_fields(
            {"pacienteId": patient_id, "temperatura": value, "unidad": unit, "fecha": date},
            ("pacienteId", "temperatura", "unidad", "fecha"),
            "Faltan datos (pacienteId, temperatura, unidad, fecha).",
        )
        patient_id = parse_id(patient_id)
        unidad = str(unit).strip()
        if unidad not in VALID_UNITS:
            raise ValidationError("Unidad de temperatura debe ser C o F.")
        temperatura = parse_number(value, "temperatura", maximum=MAX_MEDIDA, digits=DECIMALES_MEDIDA)
        fecha = parse_recorded_at(date)

        self._paciente_autorizado(owner_id, patient_id)

        medicion_id = self.termometros.create({
            "paciente_id": patient_id,
            "temperatura": temperatura,
            "unidad": unidad,
            "fecha_registro": fecha,
            "sintomas": optional_text(symptoms),
            "notas": optional_text(notes),
        })
        logger.info("Temperatura registrada: paciente=%s medicion=%s", patient_id, medicion_id)

        celsius, fahrenheit = to_both_units(temperatura, unidad)
        return {
            "id": medicion_id,
            "celsius": celsius,
            "fahrenheit": fahrenheit,
            "classification": classify_temperature(temperatura, unidad),
        }

    def list_temperature_history(self, owner_id, patient_id):
        self._paciente_autorizado(owner_id, patient_id)
        return [self._temperature_entry(m) for m in self.termometros.list_by_patient(patient_id)]

    def temperature_summary(self, owner_id, patient_id, history=None):
        if history is None:
            history = self.list_temperature_history(owner_id, patient_id)

        celsius = [m["celsius"] for m in history if m["celsius"] is not None]
        return {
            "patient_id": patient_id,
            "total": len(history),
            "min_celsius": min(celsius) if celsius else None,
            "max_celsius": max(celsius) if celsius else None,
        }

    def delete_temperature(self, owner_id, measurement_id):
        borrado = self.termometros.delete(measurement_id, owner_id)
        if not borrado:
            raise AuthorizationError("Medición no encontrada o no autorizada.")
        logger.info("Temperatura eliminada: medicion=%s usuario=%s", measurement_id, owner_id)
        return borrado
