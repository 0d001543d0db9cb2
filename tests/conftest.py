from datetime import date

import pytest

from app import create_app
from config import TestConfig
from models import db, Usuario, Paciente


@pytest.fixture
def app():
    app = create_app(TestConfig)

    with app.app_context():
        db.drop_all()
        db.create_all()

        usuario = Usuario(nombre="Usuario Test", email="test@example.com")
        usuario.set_password("1234")
        otro = Usuario(nombre="Otro Usuario", email="otro@example.com")
        otro.set_password("abcd")
        db.session.add_all([usuario, otro])
        db.session.commit()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_client(client):
    with client.session_transaction() as sess:
        sess["user_id"] = 1
    return client


@pytest.fixture
def ctx(app):
    with app.app_context():
        yield


@pytest.fixture
def paciente_id(app):
    """Paciente del usuario 1."""
    with app.app_context():
        paciente = Paciente(
            usuario_id=1,
            nombre="Ana",
            apellidos="García",
            fecha_nacimiento=date(1990, 3, 10),
            altura=1.65,
        )
        db.session.add(paciente)
        db.session.commit()
        return paciente.id


@pytest.fixture
def paciente_ajeno_id(app):
    """Paciente del usuario 2."""
    with app.app_context():
        paciente = Paciente(
            usuario_id=2,
            nombre="Luis",
            apellidos="Pérez",
            fecha_nacimiento=date(1985, 7, 1),
        )
        db.session.add(paciente)
        db.session.commit()
        return paciente.id
