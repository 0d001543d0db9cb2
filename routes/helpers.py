from functools import wraps

from flask import request, session

from services.mediciones import MeasurementService
from services.pacientes import PatientService
from services.stores import SqlBasculaStore, SqlPacienteStore, SqlTermometroStore


def get_logged_user_id():
    return session.get("user_id")


def login_requerido(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not get_logged_user_id():
            return {"error": "no-login"}, 401
        return view(*args, **kwargs)
    return wrapper


def datos_request():
    """Cuerpo JSON o formulario, indistintamente."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def servicio_mediciones():
    return MeasurementService(SqlPacienteStore(), SqlBasculaStore(), SqlTermometroStore())


def servicio_pacientes():
    return PatientService(SqlPacienteStore())


def iso(fecha):
    return fecha.isoformat() if fecha is not None else None


def serializar_peso(m):
    return {
        "id": m["id"],
        "fecha": iso(m["date"]),
        "peso": m["weight"],
        "altura": m["height"],
        "imc": m["bmi"],
        "clasificacion": m["classification"],
        "notas": m["notes"],
    }


def serializar_temperatura(m):
    return {
        "id": m["id"],
        "fecha": iso(m["date"]),
        "temperaturaRegistrada": m["value"],
        "unidad": m["unit"],
        "celsius": m["celsius"],
        "fahrenheit": m["fahrenheit"],
        "estado": m["classification"],
        "sintomas": m["symptoms"],
        "notas": m["notes"],
    }
