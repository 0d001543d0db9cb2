import logging

from models import GeneroEnum
from services.edad import Clock, compute_age, parse_date
from services.errors import AuthorizationError, InvalidDateError, ValidationError
from services.validacion import (
    DECIMALES_MEDIDA,
    MAX_MEDIDA,
    optional_text,
    parse_number,
    require_fields,
)

logger = logging.getLogger(__name__)

CAMPOS_OBLIGATORIOS = ("nombre", "apellidos", "fechaDeNacimiento")
GENEROS = {g.value for g in GeneroEnum}


class PatientService:
    """CRUD de pacientes, siempre acotado al usuario dueño."""

    def __init__(self, pacientes, clock=None):
        self.pacientes = pacientes
        self.clock = clock or Clock()

    def _validar(self, data, exclude_id=None):
        require_fields(
            data,
            CAMPOS_OBLIGATORIOS,
            "Datos inválidos. Asegúrate de incluir nombre, apellidos y Fecha de Nacimiento (AAAA-MM-DD).",
        )
        fecha_nacimiento = parse_date(data["fechaDeNacimiento"])
        if fecha_nacimiento is None:
            raise ValidationError("La fecha de nacimiento no es válida (AAAA-MM-DD).")
        if fecha_nacimiento > self.clock.today():
            raise ValidationError("La fecha de nacimiento no puede ser futura.")

        genero = optional_text(data.get("genero"))
        if genero is not None:
            genero = genero.lower()
            if genero not in GENEROS:
                raise ValidationError("El género debe ser masculino, femenino u otro.")

        altura = data.get("altura")
        altura = None if altura in (None, "") else parse_number(
            altura, "altura", positive=True, maximum=MAX_MEDIDA, digits=DECIMALES_MEDIDA
        )

        dni = optional_text(data.get("dni"))
        if dni is not None and self.pacientes.dni_in_use(dni, exclude_id=exclude_id):
            raise ValidationError("Ya existe un paciente con ese DNI.")

        return {
            "nombre": str(data["nombre"]).strip(),
            "apellidos": str(data["apellidos"]).strip(),
            "fecha_nacimiento": fecha_nacimiento,
            "dni": dni,
            "telefono": optional_text(data.get("telefono")),
            "email": optional_text(data.get("email")),
            "direccion": optional_text(data.get("direccion")),
            "genero": genero or GeneroEnum.OTRO.value,
            "altura": altura,
        }

    def _con_edad(self, paciente):
        data = paciente.to_dict()
        try:
            data["edad"] = compute_age(paciente.fecha_nacimiento, clock=self.clock)
        except InvalidDateError:
            data["edad"] = None
        return data

    def create(self, owner_id, data):
        campos = self._validar(data)
        paciente_id = self.pacientes.create(owner_id, campos)
        logger.info("Paciente creado: id=%s usuario=%s", paciente_id, owner_id)
        return paciente_id

    def list(self, owner_id):
        return [self._con_edad(p) for p in self.pacientes.list_by_owner(owner_id)]

    def get(self, owner_id, patient_id):
        paciente = self.pacientes.get_by_id(patient_id, owner_id)
        if paciente is None:
            raise AuthorizationError()
        return self._con_edad(paciente)

    def update(self, owner_id, patient_id, data):
        if self.pacientes.get_by_id(patient_id, owner_id) is None:
            raise AuthorizationError()
        campos = self._validar(data, exclude_id=patient_id)
        if not self.pacientes.update(patient_id, owner_id, campos):
            raise AuthorizationError()
        logger.info("Paciente actualizado: id=%s usuario=%s", patient_id, owner_id)
        return True

    def delete(self, owner_id, patient_id):
        if not self.pacientes.delete(patient_id, owner_id):
            raise AuthorizationError()
        logger.info("Paciente eliminado: id=%s usuario=%s", patient_id, owner_id)
        return True
