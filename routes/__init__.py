from flask import Blueprint

auth_bp = Blueprint("auth", __name__, url_prefix="/auth")
pacientes_bp = Blueprint("pacientes", __name__, url_prefix="/api/pacientes")
basculas_bp = Blueprint("basculas", __name__, url_prefix="/api/basculas")
termometros_bp = Blueprint("termometros", __name__, url_prefix="/api/termometros")

from . import auth, pacientes, basculas, termometros  # noqa: E402,F401
