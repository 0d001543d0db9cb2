from routes import pacientes_bp
from routes.helpers import (
    datos_request,
    get_logged_user_id,
    login_requerido,
    serializar_peso,
    serializar_temperatura,
    servicio_mediciones,
    servicio_pacientes,
)


@pacientes_bp.post("/")
@login_requerido
def crear_paciente():
    nuevo_id = servicio_pacientes().create(get_logged_user_id(), datos_request())
    return {"message": "Paciente creado correctamente", "id": nuevo_id}, 201


@pacientes_bp.get("/")
@login_requerido
def listar_pacientes():
    pacientes = servicio_pacientes().list(get_logged_user_id())
    return {"count": len(pacientes), "pacientes": pacientes}


@pacientes_bp.get("/<int:paciente_id>")
@login_requerido
def ver_paciente(paciente_id):
    return servicio_pacientes().get(get_logged_user_id(), paciente_id)


@pacientes_bp.put("/<int:paciente_id>")
@login_requerido
def actualizar_paciente(paciente_id):
    servicio_pacientes().update(get_logged_user_id(), paciente_id, datos_request())
    return {"message": f"Paciente con ID {paciente_id} actualizado correctamente."}


@pacientes_bp.delete("/<int:paciente_id>")
@login_requerido
def eliminar_paciente(paciente_id):
    servicio_pacientes().delete(get_logged_user_id(), paciente_id)
    return {"message": f"Paciente con ID {paciente_id} eliminado correctamente."}


@pacientes_bp.get("/<int:paciente_id>/detalle")
@login_requerido
def detalle_paciente(paciente_id):
    """Ficha del paciente con sus historiales de báscula y termómetro."""
    user_id = get_logged_user_id()
    paciente = servicio_pacientes().get(user_id, paciente_id)
    mediciones = servicio_mediciones()
    return {
        "paciente": paciente,
        "historialBascula": [
            serializar_peso(m) for m in mediciones.list_weight_history(user_id, paciente_id)
        ],
        "historialTermometro": [
            serializar_temperatura(m) for m in mediciones.list_temperature_history(user_id, paciente_id)
        ],
    }
