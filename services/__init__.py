"""
Capa de servicios de AppSalud.

- bascula: cálculo y clasificación del IMC
- termometro: conversión de unidades y estado febril
- edad: edad a partir de la fecha de nacimiento
- acceso: comprobación de dueño de un registro
- mediciones / pacientes: orquestación sobre los stores
- stores: persistencia con Flask-SQLAlchemy
"""

from services.acceso import authorize
from services.bascula import (
    DATA_NOT_AVAILABLE,
    classify_bmi,
    classify_bmi_simple,
    compute_bmi,
)
from services.edad import Clock, FixedClock, compute_age
from services.errors import (
    AppSaludError,
    AuthorizationError,
    InvalidDateError,
    PersistenceError,
    ValidationError,
)
from services.mediciones import MeasurementService
from services.pacientes import PatientService
from services.termometro import (
    INVALID_UNIT,
    celsius_to_fahrenheit,
    classify_temperature,
    fahrenheit_to_celsius,
)
