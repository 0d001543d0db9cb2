from datetime import datetime
from enum import Enum
from flask_sqlalchemy import SQLAlchemy
from werkzeug.security import generate_password_hash, check_password_hash

db = SQLAlchemy()


class RolEnum(Enum):
    ADMIN = "admin"
    MEDICO = "medico"
    PACIENTE = "paciente"


class GeneroEnum(Enum):
    MASCULINO = "masculino"
    FEMENINO = "femenino"
    OTRO = "otro"


class Usuario(db.Model):
    __tablename__ = "usuarios"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    nombre = db.Column(db.String(100), nullable=False)
    rol = db.Column(db.String(16), nullable=False, default=RolEnum.PACIENTE.value, index=True)
    activo = db.Column(db.Boolean, default=True)
    telefono = db.Column(db.String(20))
    fecha_creacion = db.Column(db.DateTime, default=datetime.utcnow)
    ultimo_login = db.Column(db.DateTime)

    pacientes = db.relationship("Paciente", back_populates="usuario")

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {
            "id": self.id,
            "email": self.email,
            "nombre": self.nombre,
            "rol": self.rol,
            "activo": self.activo,
            "ultimo_login": self.ultimo_login.isoformat() if self.ultimo_login else None,
        }


class Paciente(db.Model):
    __tablename__ = "pacientes"

    id = db.Column(db.Integer, primary_key=True)
    # Sin dueño el paciente queda fuera de cualquier listado por usuario
    usuario_id = db.Column(
        db.Integer, db.ForeignKey("usuarios.id", ondelete="SET NULL"), nullable=True, index=True
    )
    nombre = db.Column(db.String(100), nullable=False, index=True)
    apellidos = db.Column(db.String(200), nullable=False, index=True)
    fecha_nacimiento = db.Column(db.Date, nullable=False)
    dni = db.Column(db.String(20), unique=True, index=True)
    telefono = db.Column(db.String(20))
    email = db.Column(db.String(255))
    direccion = db.Column(db.Text)
    genero = db.Column(db.String(16), default=GeneroEnum.OTRO.value)
    altura = db.Column(db.Numeric(5, 2))
    fecha_creacion = db.Column(db.DateTime, default=datetime.utcnow)
    fecha_actualizacion = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    usuario = db.relationship("Usuario", back_populates="pacientes")
    basculas = db.relationship(
        "Bascula", back_populates="paciente", cascade="all, delete-orphan"
    )
    termometros = db.relationship(
        "Termometro", back_populates="paciente", cascade="all, delete-orphan"
    )

    def to_dict(self):
        return {
            "id": self.id,
            "usuario_id": self.usuario_id,
            "nombre": self.nombre,
            "apellidos": self.apellidos,
            "fecha_nacimiento": self.fecha_nacimiento.isoformat() if self.fecha_nacimiento else None,
            "dni": self.dni,
            "telefono": self.telefono,
            "email": self.email,
            "direccion": self.direccion,
            "genero": self.genero,
            "altura": float(self.altura) if self.altura is not None else None,
            "fecha_creacion": self.fecha_creacion.isoformat() if self.fecha_creacion else None,
            "fecha_actualizacion": (
                self.fecha_actualizacion.isoformat() if self.fecha_actualizacion else None
            ),
        }


class Bascula(db.Model):
    __tablename__ = "basculas"

    id = db.Column(db.Integer, primary_key=True)
    paciente_id = db.Column(
        db.Integer, db.ForeignKey("pacientes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    peso = db.Column(db.Numeric(5, 2), nullable=False)     # kg
    altura = db.Column(db.Numeric(5, 2), nullable=False)   # m
    fecha_registro = db.Column(db.DateTime, nullable=False, index=True)
    notas = db.Column(db.Text)

    paciente = db.relationship("Paciente", back_populates="basculas")


class Termometro(db.Model):
    __tablename__ = "termometros"

    id = db.Column(db.Integer, primary_key=True)
    paciente_id = db.Column(
        db.Integer, db.ForeignKey("pacientes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    temperatura = db.Column(db.Numeric(5, 2), nullable=False)
    unidad = db.Column(db.String(1), nullable=False, default="C")  # C / F
    fecha_registro = db.Column(db.DateTime, nullable=False, index=True)
    sintomas = db.Column(db.Text)
    notas = db.Column(db.Text)

    paciente = db.relationship("Paciente", back_populates="termometros")
