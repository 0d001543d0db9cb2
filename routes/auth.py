import logging
from datetime import datetime

from flask import session
from sqlalchemy.exc import SQLAlchemyError

from models import db, Usuario
from routes import auth_bp
from routes.helpers import datos_request
from services.errors import PersistenceError, ValidationError
from services.validacion import require_fields

logger = logging.getLogger(__name__)


@auth_bp.post("/register")
def register():
    data = datos_request()
    require_fields(data, ("email", "password", "nombre"), "Faltan campos obligatorios.")

    email = str(data["email"]).strip().lower()
    password = str(data["password"])
    nombre = str(data["nombre"]).strip()

    if password != str(data.get("password_confirm") or ""):
        raise ValidationError("Las contraseñas no coinciden.")

    if Usuario.query.filter_by(email=email).first():
        raise ValidationError("El email ya está registrado.")

    nuevo = Usuario(email=email, nombre=nombre)
    nuevo.set_password(password)
    db.session.add(nuevo)

    try:
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.exception("Error al registrar usuario %s", email)
        raise PersistenceError("Error interno del servidor al registrar.") from exc

    logger.info("Usuario registrado: id=%s", nuevo.id)
    return {
        "message": "Usuario registrado correctamente. Por favor, inicia sesión.",
        "id": nuevo.id,
    }, 201


@auth_bp.post("/login")
def login():
    data = datos_request()
    require_fields(data, ("email", "password"), "Faltan campos: email y password.")

    email = str(data["email"]).strip().lower()
    usuario = Usuario.query.filter_by(email=email).first()

    if not usuario or not usuario.activo or not usuario.check_password(str(data["password"])):
        logger.warning("Login fallido para %s", email)
        return {"error": "Credenciales incorrectas."}, 401

    usuario.ultimo_login = datetime.utcnow()
    try:
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.exception("Error al actualizar ultimo_login de %s", usuario.id)
        raise PersistenceError() from exc

    session.clear()
    session["user_id"] = usuario.id
    session["nombre"] = usuario.nombre
    logger.info("Login correcto: usuario=%s", usuario.id)

    return {"message": "Sesión iniciada.", "usuario": usuario.to_dict()}


@auth_bp.post("/logout")
def logout():
    session.clear()
    return {"message": "Sesión cerrada."}
