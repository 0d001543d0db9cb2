"""
Excepciones del motor de mediciones.

Las vistas las traducen a respuestas JSON (ver ``app.py``); ninguna
excepción de SQLAlchemy sale de los stores sin envolverse en
``PersistenceError``.
"""


class AppSaludError(Exception):
    """Base de todos los errores de dominio."""

    status_code = 500
    default_message = "Error interno del servidor."

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppSaludError):
    """Datos de entrada faltantes o mal formados."""

    status_code = 400
    default_message = "Datos inválidos."


class InvalidDateError(ValidationError):
    """Fecha de nacimiento ilegible o posterior a la fecha de referencia."""

    default_message = "Fecha de nacimiento inválida."


class AuthorizationError(AppSaludError):
    """
    El registro no existe o no pertenece al usuario.

    Se responde igual que un 404 para no revelar si el registro existe.
    """

    status_code = 404
    default_message = "Paciente no encontrado o no autorizado."


class PersistenceError(AppSaludError):
    """Fallo de la base de datos al leer o escribir."""

    status_code = 500
    default_message = "Error interno al acceder a la base de datos."
