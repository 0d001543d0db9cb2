import logging
from datetime import datetime, timezone

from flask import Flask, request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from config import Config
from models import db, Usuario
from routes import auth_bp, pacientes_bp, basculas_bp, termometros_bp
from routes.helpers import get_logged_user_id, login_requerido, servicio_mediciones, servicio_pacientes
from services.bascula import classify_bmi_simple
from services.edad import compute_age
from services.errors import AppSaludError

VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    db.init_app(app)
    with app.app_context():
        db.create_all()

    # BLUEPRINTS
    app.register_blueprint(auth_bp)
    app.register_blueprint(pacientes_bp)
    app.register_blueprint(basculas_bp)
    app.register_blueprint(termometros_bp)

    # ---------------------------- ERRORES ----------------------------
    @app.errorhandler(AppSaludError)
    def handle_app_error(error):
        if error.status_code >= 500:
            logger.error("Error en %s %s: %s", request.method, request.path, error.message)
        return {"error": error.message}, error.status_code

    # ---------------------------- HOME ----------------------------
    @app.get("/")
    @login_requerido
    def home():
        user_id = get_logged_user_id()
        usuario = db.session.get(Usuario, user_id)
        if usuario is None:
            return {"error": "no-login"}, 401

        mediciones = servicio_mediciones()
        pacientes = []
        for paciente in servicio_pacientes().list(user_id):
            resumen = mediciones.weight_summary(user_id, paciente["id"])
            imc = resumen["latest"]["bmi"]
            pacientes.append({
                "id": paciente["id"],
                "nombre": f'{paciente["nombre"]} {paciente["apellidos"]}',
                "edad": paciente["edad"],
                "imc": imc,
                "clasificacion_imc": classify_bmi_simple(imc),
            })

        return {
            "title": "AppSalud - Panel de Control",
            "usuario": usuario.to_dict(),
            "totalPacientes": len(pacientes),
            "pacientes": pacientes,
        }

    # ---------------------------- EDAD ----------------------------
    @app.get("/api/edad")
    @login_requerido
    def edad():
        fecha_nacimiento = request.args.get("fecha_nacimiento")
        return {"fecha_nacimiento": fecha_nacimiento, "edad": compute_age(fecha_nacimiento)}

    # ---------------------------- STATUS ----------------------------
    @app.get("/api/status")
    def status():
        try:
            db.session.execute(text("SELECT 1"))
            database = "connected"
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception("No se pudo conectar con la base de datos")
            database = "disconnected"

        return {
            "status": "online",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "database": database,
            "version": VERSION,
        }

    return app


app = create_app()

if __name__ == "__main__":
    app.run(debug=True)
