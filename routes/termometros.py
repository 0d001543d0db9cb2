from routes import termometros_bp
from routes.helpers import (
    datos_request,
    get_logged_user_id,
    login_requerido,
    serializar_temperatura,
    servicio_mediciones,
)


@termometros_bp.post("/")
@login_requerido
def registrar_temperatura():
    data = datos_request()
    resultado = servicio_mediciones().record_temperature(
        get_logged_user_id(),
        data.get("pacienteId"),
        data.get("temperatura"),
        data.get("unidad"),
        data.get("fecha"),
        symptoms=data.get("sintomas"),
        notes=data.get("notas"),
    )
    return {
        "message": "Medición registrada y procesada.",
        "id": resultado["id"],
        "celsius": resultado["celsius"],
        "fahrenheit": resultado["fahrenheit"],
        "estado": resultado["classification"],
    }, 201


@termometros_bp.get("/<int:paciente_id>")
@login_requerido
def historial_temperaturas(paciente_id):
    servicio = servicio_mediciones()
    historial = servicio.list_temperature_history(get_logged_user_id(), paciente_id)
    resumen = servicio.temperature_summary(get_logged_user_id(), paciente_id, history=historial)

    return {
        "pacienteId": paciente_id,
        "totalMediciones": resumen["total"],
        "temperaturaMinimaC": resumen["min_celsius"],
        "temperaturaMaximaC": resumen["max_celsius"],
        "historial": [serializar_temperatura(m) for m in historial],
    }


@termometros_bp.delete("/medicion/<int:medicion_id>")
@login_requerido
def eliminar_temperatura(medicion_id):
    servicio_mediciones().delete_temperature(get_logged_user_id(), medicion_id)
    return {"message": f"Medición {medicion_id} eliminada correctamente."}
