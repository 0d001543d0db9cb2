from routes import basculas_bp
from routes.helpers import (
    datos_request,
    get_logged_user_id,
    login_requerido,
    serializar_peso,
    servicio_mediciones,
)


@basculas_bp.post("/")
@login_requerido
def registrar_peso():
    data = datos_request()
    resultado = servicio_mediciones().record_weight(
        get_logged_user_id(),
        data.get("pacienteId"),
        data.get("peso"),
        data.get("altura"),
        data.get("fecha"),
        notes=data.get("notas"),
    )
    return {
        "message": "Medición registrada y procesada.",
        "id": resultado["id"],
        "imc": resultado["bmi"],
        "clasificacion": resultado["classification"],
    }, 201


@basculas_bp.get("/<int:paciente_id>")
@login_requerido
def historial_pesos(paciente_id):
    servicio = servicio_mediciones()
    historial = servicio.list_weight_history(get_logged_user_id(), paciente_id)
    resumen = servicio.weight_summary(get_logged_user_id(), paciente_id, history=historial)

    return {
        "pacienteId": paciente_id,
        "totalMediciones": resumen["total"],
        "calculoIMC": {
            "imc": resumen["latest"]["bmi"],
            "clasificacion": resumen["latest"]["classification"],
        },
        "pesoMinimo": resumen["min_weight"],
        "pesoMaximo": resumen["max_weight"],
        "historial": [serializar_peso(m) for m in historial],
    }


@basculas_bp.delete("/medicion/<int:medicion_id>")
@login_requerido
def eliminar_peso(medicion_id):
    servicio_mediciones().delete_weight(get_logged_user_id(), medicion_id)
    return {"message": f"Medición {medicion_id} eliminada correctamente."}
