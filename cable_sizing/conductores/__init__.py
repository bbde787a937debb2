"""
Dominio conductores — Cable Sizing

API pública del módulo:
- Dimensionamiento de conductores (calibre + paralelo)
- Cálculo de caída de tensión
- Alternativas en paralelo

Regla arquitectónica:
Otros módulos NO deben importar archivos internos.
Siempre importar desde:
    cable_sizing.conductores
"""

# Motor principal
from .calculo_conductores import calculate_cable_size, cost_savings, evaluate_parallel_options

# Utilidad física (permitida externamente)
from .caida_tension import calcular_caida_tension, voltage_drop_limit_for

from .modelos import CableAlternative, SizingRequest, SizingResult

__all__ = [
    "calculate_cable_size",
    "evaluate_parallel_options",
    "cost_savings",
    "calcular_caida_tension",
    "voltage_drop_limit_for",
    "SizingRequest",
    "SizingResult",
    "CableAlternative",
]
