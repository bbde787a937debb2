"""
cable_sizing — motor de dimensionamiento de cables (SANS 10142-1 / SANS 1507-3).

Flujo: SizingRequest -> calculate_cable_size -> validate_cable_calculation.
"""

from .ajustes import AJUSTES_DEFAULT, AjustesCalculo, AjustesError, cargar_ajustes_yaml, factor_agrupamiento
from .catalogo import (
    CatalogoError,
    ConductorCatalog,
    ConductorSpec,
    Material,
    MetodoInstalacion,
    all_sizes,
    ampacity_for,
    cargar_conductores_yaml,
    default_catalog,
)
from .conductores import (
    CableAlternative,
    SizingRequest,
    SizingResult,
    calculate_cable_size,
    cost_savings,
    evaluate_parallel_options,
)
from .orquestador import VerifiedSizing, dimensionar_cronograma, size_and_validate
from .validacion import ComplianceOutcome, TipoAviso, ValidationWarning, validate_cable_calculation

__version__ = "0.1.0"

__all__ = [
    # ajustes
    "AJUSTES_DEFAULT",
    "AjustesCalculo",
    "AjustesError",
    "cargar_ajustes_yaml",
    "factor_agrupamiento",
    # catálogo
    "CatalogoError",
    "ConductorCatalog",
    "ConductorSpec",
    "Material",
    "MetodoInstalacion",
    "all_sizes",
    "ampacity_for",
    "cargar_conductores_yaml",
    "default_catalog",
    # motor
    "CableAlternative",
    "SizingRequest",
    "SizingResult",
    "calculate_cable_size",
    "evaluate_parallel_options",
    "cost_savings",
    # validación
    "ComplianceOutcome",
    "TipoAviso",
    "ValidationWarning",
    "validate_cable_calculation",
    # orquestación
    "VerifiedSizing",
    "size_and_validate",
    "dimensionar_cronograma",
]
