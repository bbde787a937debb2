# API pública del dominio validacion

from .modelos import ComplianceOutcome, TipoAviso, ValidationWarning
from .validacion_cables import (
    MARCA_VERIFICACION,
    check_capacity,
    check_impedance,
    check_inputs,
    check_voltage_drop,
    validate_cable_calculation,
)

__all__ = [
    # modelos
    "ComplianceOutcome",
    "TipoAviso",
    "ValidationWarning",

    # chequeos
    "MARCA_VERIFICACION",
    "check_capacity",
    "check_voltage_drop",
    "check_impedance",
    "check_inputs",
    "validate_cable_calculation",
]
