"""
validacion_cables.py — Cable Sizing

Verificación normativa de una selección de conductor.

Chequeos (puros e independientes):
- Capacidad: ampacidad ajustada vs carga.
- Caída de tensión: VD% vs límite (5% 400 V / 3% resto).
- Impedancia del catálogo: coherencia con modelo resistivo simple.
- Entradas: carga, tensión, longitud.

Agregación:
- Si hubo cualquier aviso se agrega uno general pidiendo firma de ingeniero.
- requires_verification = hay error o algún mensaje trae la marca de verificación.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, List, Optional

from .. import precision as px
from ..ajustes import AJUSTES_DEFAULT, AjustesCalculo
from ..catalogo import ConductorSpec, Material, MetodoInstalacion
from ..conductores import voltage_drop_limit_for
from .modelos import ComplianceOutcome, TipoAviso, ValidationWarning

logger = logging.getLogger(__name__)

MARCA_VERIFICACION = "qualified electrical engineer"

# Ω·mm²/km (aprox. a temperatura de operación)
RESISTIVIDAD_REF: Dict[Material, Decimal] = {
    Material.COBRE: Decimal("17.5"),
    Material.ALUMINIO: Decimal("28.3"),
}


def _w(tipo: TipoAviso, msg: str, field: Optional[str] = None) -> ValidationWarning:
    return ValidationWarning(type=tipo, message=msg, field=field)


# ==========================================================
# Chequeos
# ==========================================================

def check_capacity(
    selection: ConductorSpec,
    load_amps: float,
    installation_method: MetodoInstalacion | str,
    derating_factor: float,
    ajustes: AjustesCalculo = AJUSTES_DEFAULT,
) -> List[ValidationWarning]:
    metodo = MetodoInstalacion.parse(installation_method)
    amp_aj = px.multiply(selection.ampacidad(metodo), derating_factor)
    carga = px.a_decimal(load_amps)
    amp_txt = px.round_to(amp_aj, ajustes.decimales)

    if carga > amp_aj:
        return [_w(
            TipoAviso.ERROR,
            f"UNSAFE: {selection.size} derated ampacity {amp_txt}A ({metodo.value}, "
            f"factor {derating_factor}) is below load {carga}A. Selection INVALID.",
            "cable_size",
        )]
    if carga > px.multiply(amp_aj, ajustes.fraccion_aviso_capacidad):
        uso = px.round_to(px.percentage_of(carga, amp_aj).valor, 1)
        return [_w(
            TipoAviso.WARNING,
            f"{selection.size} is operating at {uso}% of its derated ampacity "
            f"({amp_txt}A). Approaching capacity limit.",
            "cable_size",
        )]
    return []


def check_voltage_drop(
    voltage: float,
    length: float,
    voltage_drop_percent: float,
    ajustes: AjustesCalculo = AJUSTES_DEFAULT,
    voltage_drop_limit: Optional[float] = None,
) -> List[ValidationWarning]:
    if float(length) <= 0.0:
        return []
    limite = voltage_drop_limit_for(voltage, ajustes, voltage_drop_limit)
    vd = px.a_decimal(voltage_drop_percent)

    if vd > limite:
        return [_w(
            TipoAviso.ERROR,
            f"Voltage drop {vd}% exceeds the {limite}% limit for {voltage}V supplies. "
            f"Increase cable size or add parallel conductors.",
            "voltage_drop",
        )]
    if vd > px.multiply(limite, ajustes.fraccion_aviso_vd):
        return [_w(
            TipoAviso.WARNING,
            f"Voltage drop {vd}% is above {int(ajustes.fraccion_aviso_vd * 100)}% of the "
            f"{limite}% limit. Approaching maximum.",
            "voltage_drop",
        )]
    return []


def check_impedance(
    selection: ConductorSpec,
    ajustes: AjustesCalculo = AJUSTES_DEFAULT,
) -> List[ValidationWarning]:
    """Detecta errores de carga de datos en el catálogo (no en la selección)."""
    rho = RESISTIVIDAD_REF.get(selection.material, RESISTIVIDAD_REF[Material.COBRE])
    esperado = px.divide(rho, selection.seccion_mm2)
    if not esperado.ok:
        return []

    real = px.a_decimal(selection.impedance_per_km)
    tol = px.a_decimal(ajustes.tolerancia_impedancia)
    bajo = px.multiply(esperado.valor, px.subtract(1, tol))
    alto = px.multiply(esperado.valor, px.add(1, tol))

    if real < bajo or real > alto:
        return [_w(
            TipoAviso.WARNING,
            f"Impedance {real} Ω/km for {selection.size} deviates more than "
            f"{int(ajustes.tolerancia_impedancia * 100)}% from expected "
            f"~{px.round_to(esperado.valor, 4)} Ω/km. Verify cable data manually against SANS 10142-1.",
            "impedance",
        )]
    return []


def check_inputs(
    load_amps: float,
    voltage: float,
    length: float,
    ajustes: AjustesCalculo = AJUSTES_DEFAULT,
) -> List[ValidationWarning]:
    out: List[ValidationWarning] = []

    if float(load_amps) <= 0.0:
        out.append(_w(TipoAviso.ERROR, "Load current must be greater than zero.", "load_amps"))

    estandar = {float(v) for v in ajustes.tensiones_estandar}
    if float(voltage) not in estandar:
        tensiones = "/".join(f"{v:g}V" for v in sorted(estandar))
        out.append(_w(
            TipoAviso.WARNING,
            f"Non-standard voltage {voltage}V. Standard supplies are {tensiones}.",
            "voltage",
        ))

    if float(length) > float(ajustes.longitud_maxima_m):
        out.append(_w(
            TipoAviso.WARNING,
            f"Cable length {length}m exceeds {ajustes.longitud_maxima_m:g}m. "
            f"Consider intermediate distribution.",
            "length",
        ))
    elif float(length) <= 0.0:
        out.append(_w(
            TipoAviso.INFO,
            "Cable length is zero: voltage drop was not evaluated.",
            "length",
        ))

    return out


# ==========================================================
# API pública
# ==========================================================

def validate_cable_calculation(
    selection: ConductorSpec,
    load_amps: float,
    voltage: float,
    length: float,
    voltage_drop_percent: float,
    installation_method: MetodoInstalacion | str = MetodoInstalacion.AIRE,
    derating_factor: float = 1.0,
    ajustes: Optional[AjustesCalculo] = None,
    voltage_drop_limit: Optional[float] = None,
) -> ComplianceOutcome:
    aj = ajustes or AJUSTES_DEFAULT

    avisos: List[ValidationWarning] = []
    avisos += check_capacity(selection, load_amps, installation_method, derating_factor, aj)
    avisos += check_voltage_drop(voltage, length, voltage_drop_percent, aj, voltage_drop_limit)
    avisos += check_impedance(selection, aj)
    avisos += check_inputs(load_amps, voltage, length, aj)

    if avisos:
        avisos.append(_w(
            TipoAviso.WARNING,
            f"All cable calculations must be verified and signed off by a {MARCA_VERIFICACION} "
            f"before use.",
        ))

    requiere = any(a.type is TipoAviso.ERROR for a in avisos) or any(
        MARCA_VERIFICACION in a.message for a in avisos
    )

    if requiere:
        logger.debug(
            "Validación %s: %d avisos, requiere verificación", selection.size, len(avisos)
        )
    return ComplianceOutcome(warnings=tuple(avisos), requires_verification=requiere)


__all__ = [
    "MARCA_VERIFICACION",
    "RESISTIVIDAD_REF",
    "check_capacity",
    "check_voltage_drop",
    "check_impedance",
    "check_inputs",
    "validate_cable_calculation",
]
