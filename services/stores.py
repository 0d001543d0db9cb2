"""
Stores de persistencia sobre Flask-SQLAlchemy.

Toda lectura, modificación o borrado por id pasa por ``authorize`` con el
dueño del paciente. Los errores de SQLAlchemy se envuelven en
``PersistenceError``.
"""
import logging
from functools import wraps

from sqlalchemy.exc import SQLAlchemyError

from models import db, Paciente, Bascula, Termometro
from services.acceso import authorize
from services.errors import PersistenceError

logger = logging.getLogger(__name__)


def envolver_errores_db(accion):
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except SQLAlchemyError as exc:
                db.session.rollback()
                logger.exception("Error de base de datos al %s", accion)
                raise PersistenceError() from exc
        return wrapper
    return decorator


class SqlPacienteStore:

    @envolver_errores_db("crear paciente")
    def create(self, owner_id, fields):
        paciente = Paciente(usuario_id=owner_id, **fields)
        db.session.add(paciente)
        db.session.commit()
        return paciente.id

    @envolver_errores_db("listar pacientes")
    def list_by_owner(self, owner_id):
        if owner_id is None:
            return []
        return (
            Paciente.query
            .filter_by(usuario_id=owner_id)
            .order_by(Paciente.apellidos.asc(), Paciente.nombre.asc(), Paciente.id.asc())
            .all()
        )

    @envolver_errores_db("leer paciente")
    def get_by_id(self, record_id, owner_id):
        paciente = db.session.get(Paciente, record_id)
        if paciente is None or not authorize(owner_id, paciente.usuario_id):
            return None
        return paciente

    @envolver_errores_db("actualizar paciente")
    def update(self, record_id, owner_id, fields):
        paciente = self.get_by_id(record_id, owner_id)
        if paciente is None:
            return False
        for attr, value in fields.items():
            setattr(paciente, attr, value)
        db.session.commit()
        return True

    @envolver_errores_db("eliminar paciente")
    def delete(self, record_id, owner_id):
        paciente = self.get_by_id(record_id, owner_id)
        if paciente is None:
            return False
        # basculas y termometros caen por cascade
        db.session.delete(paciente)
        db.session.commit()
        return True

    @envolver_errores_db("buscar DNI")
    def dni_in_use(self, dni, exclude_id=None):
        query = Paciente.query.filter(Paciente.dni == dni)
        if exclude_id is not None:
            query = query.filter(Paciente.id != exclude_id)
        return db.session.query(query.exists()).scalar()


class SqlMedicionStore:
    model = None

    @envolver_errores_db("registrar medición")
    def create(self, record):
        medicion = self.model(**record)
        db.session.add(medicion)
        db.session.commit()
        return medicion.id

    @envolver_errores_db("listar mediciones")
    def list_by_patient(self, patient_id):
        return (
            self.model.query
            .filter_by(paciente_id=patient_id)
            .order_by(self.model.fecha_registro.desc(), self.model.id.desc())
            .all()
        )

    @envolver_errores_db("leer medición")
    def get_by_id(self, record_id, owner_id):
        medicion = db.session.get(self.model, record_id)
        if medicion is None:
            return None
        dueno = medicion.paciente.usuario_id if medicion.paciente else None
        if not authorize(owner_id, dueno):
            return None
        return medicion

    @envolver_errores_db("eliminar medición")
    def delete(self, record_id, owner_id):
        medicion = self.get_by_id(record_id, owner_id)
        if medicion is None:
            return False
        db.session.delete(medicion)
        db.session.commit()
        return True


class SqlBasculaStore(SqlMedicionStore):
    model = Bascula


class SqlTermometroStore(SqlMedicionStore):
    model = Termometro
