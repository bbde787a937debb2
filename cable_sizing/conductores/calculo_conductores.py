"""
calculo_conductores.py — Cable Sizing

Motor de dimensionamiento de conductores.

Responsabilidad:
- Cantidad mínima de conductores en paralelo (ampacidad ajustada + tope por cable).
- Selección del menor calibre que cumple ampacidad (derating) y caída de tensión.
- Entrega de resultado estable (SizingResult) para validación/reporte.

Notas normativas:
- Ampacidad base: tablas SANS 1507-3 (referenciales, ver catalogo/tablas.py).
- Caída de tensión máxima: 5% en 400 V, 3% en otras tensiones (SANS 10142-1).

Regla:
- El motor NUNCA clasifica una selección como insegura; entrega siempre el
  mejor borrador disponible. Eso es responsabilidad de cable_sizing.validacion.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from .. import precision as px
from ..ajustes import AJUSTES_DEFAULT, AjustesCalculo
from ..catalogo import ConductorCatalog, ConductorSpec, Material, default_catalog
from .caida_tension import calcular_caida_tension, voltage_drop_limit_for
from .modelos import CableAlternative, SizingRequest, SizingResult

logger = logging.getLogger(__name__)

SANS_REFERENCIAS = {
    Material.COBRE: (
        "SANS 1507-3 Table 6.2 - Copper PVC cables",
        "SANS 10142-1 - Voltage drop limits",
    ),
    Material.ALUMINIO: (
        "SANS 1507-3 Table 6.3 - Aluminium PVC cables",
        "SANS 10142-1 - Voltage drop limits",
    ),
}


# ==========================================================
# Utilidades internas
# ==========================================================

@dataclass(frozen=True)
class _Candidato:
    spec: ConductorSpec
    ampacidad_ajustada: Decimal
    vd_v: Decimal
    vd_pct: Decimal
    cumple_vd: bool


def _ampacidad_ajustada(spec: ConductorSpec, request: SizingRequest) -> Decimal:
    return px.multiply(spec.ampacidad(request.installation_method), request.derating_factor)


def _cabe(spec: ConductorSpec, i_cable: Decimal, request: SizingRequest) -> bool:
    """
    ¿El conductor soporta i_cable?
      - i_cable * margen <= ampacidad * derating
      - y, si hay tope externo, i_cable <= max_amps_per_cable
    """
    requerido = px.multiply(i_cable, request.safety_margin)
    if requerido > _ampacidad_ajustada(spec, request):
        return False
    if request.max_amps_per_cable is not None:
        return i_cable <= px.a_decimal(request.max_amps_per_cable)
    return True


def _paralelo_minimo(carga: Decimal, mayor: ConductorSpec, request: SizingRequest) -> int:
    """
    Menor p >= 1 tal que carga/p cabe en el calibre más grueso del catálogo.

    Se estima por techo(carga / techo_por_cable) y se confirma subiendo p.
    """
    amp_mayor = _ampacidad_ajustada(mayor, request)
    p = px.techo(px.dividir_o_cero(px.multiply(carga, request.safety_margin), amp_mayor))
    if request.max_amps_per_cable is not None:
        p = max(p, px.techo(px.dividir_o_cero(carga, request.max_amps_per_cable)))
    p = max(1, p)

    while not _cabe(mayor, px.divide(carga, p).valor, request):
        p += 1
    return p


def _evaluar(
    spec: ConductorSpec,
    i_cable: Decimal,
    request: SizingRequest,
    limite_vd: Decimal,
    ajustes: AjustesCalculo,
) -> _Candidato:
    evalua_vd = float(request.total_length) > 0.0 and float(request.voltage) > 0.0
    if evalua_vd:
        vd_v, vd_pct = calcular_caida_tension(
            spec, i_cable, request.voltage, request.total_length, ajustes
        )
    else:
        vd_v, vd_pct = Decimal(0), Decimal(0)
    return _Candidato(
        spec=spec,
        ampacidad_ajustada=_ampacidad_ajustada(spec, request),
        vd_v=vd_v,
        vd_pct=vd_pct,
        cumple_vd=(not evalua_vd) or vd_pct <= limite_vd,
    )


def _seleccionar(
    tabla: Sequence[ConductorSpec],
    i_cable: Decimal,
    request: SizingRequest,
    limite_vd: Decimal,
    ajustes: AjustesCalculo,
) -> Optional[_Candidato]:
    """
    Barrido ascendente: primer calibre que cumple ampacidad y VD.
    Si ninguno cumple VD, devuelve el mayor que cumple ampacidad.
    None si ningún calibre cumple ampacidad.
    """
    ultimo: Optional[_Candidato] = None
    for spec in tabla:
        if not _cabe(spec, i_cable, request):
            continue
        cand = _evaluar(spec, i_cable, request, limite_vd, ajustes)
        logger.debug(
            "[CANDIDATO] %s amp_aj=%s I=%s VD=%s%% (lim %s%%)",
            spec.size, cand.ampacidad_ajustada, i_cable, cand.vd_pct, limite_vd,
        )
        if cand.cumple_vd:
            return cand
        ultimo = cand

    if ultimo is not None:
        logger.debug("[AGOTADO VD] se entrega el mayor calibre: %s", ultimo.spec.size)
    return ultimo


def _costos(spec: ConductorSpec, p: int, l_m: float, d: int) -> Tuple[Decimal, Decimal, Decimal]:
    """
    (suministro, instalación, total) del tramo en R.

    Por cable: costo_m * L (redondeado); luego * p. L = 0 -> costo 0.
    """
    l = px.a_decimal(l_m)
    sum_cable = px.round_to(px.multiply(spec.supply_cost_per_m, l), d)
    ins_cable = px.round_to(px.multiply(spec.install_cost_per_m, l), d)
    sum_total = px.round_to(px.multiply(sum_cable, p), d)
    ins_total = px.round_to(px.multiply(ins_cable, p), d)
    return sum_total, ins_total, px.round_to(px.add(sum_total, ins_total), d)


def _resultado(
    cand: _Candidato,
    p: int,
    i_cable: Decimal,
    limite_vd: Decimal,
    l_m: float,
    ajustes: AjustesCalculo,
) -> SizingResult:
    d = ajustes.decimales
    suministro, instalacion, total = _costos(cand.spec, p, l_m, d)
    return SizingResult(
        recommended_size=cand.spec.size,
        cables_in_parallel=int(p),
        derated_ampacity_per_cable=px.a_float(cand.ampacidad_ajustada, d),
        load_per_cable=px.a_float(i_cable, max(d, 3)),
        voltage_drop_percent=px.a_float(cand.vd_pct, d),
        voltage_drop_volts=px.a_float(cand.vd_v, d),
        ohm_per_km=float(cand.spec.impedance_per_km),
        voltage_drop_limit=px.a_float(limite_vd, d),
        material=cand.spec.material,
        supply_cost=px.a_float(suministro, d),
        install_cost=px.a_float(instalacion, d),
        total_cost=px.a_float(total, d),
        referencias=SANS_REFERENCIAS[cand.spec.material],
    )


# ==========================================================
# Motor principal
# ==========================================================

def calculate_cable_size(
    request: SizingRequest,
    catalog: Optional[ConductorCatalog] = None,
    ajustes: Optional[AjustesCalculo] = None,
) -> Optional[SizingResult]:
    """
    Dimensiona un circuito:
      1) Techo por cable: ampacidad ajustada (y max_amps_per_cable si viene).
      2) p mínimo tal que carga/p cabe en el calibre más grueso.
      3) Barrido ascendente por ampacidad ajustada (I_cable = carga / p).
      4) Si L > 0, exige además VD% <= límite (5% 400 V / 3% resto).
      5) Si nadie cumple VD, entrega el mayor calibre que cumple ampacidad.

    Devuelve None solo si load_amps <= 0.
    """
    if float(request.load_amps) <= 0.0:
        logger.debug("Carga no positiva (%s A): sin dimensionamiento.", request.load_amps)
        return None

    cat = catalog or default_catalog()
    aj = ajustes or AJUSTES_DEFAULT

    tabla = cat.all_sizes(request.material)
    carga = px.a_decimal(request.load_amps)
    limite_vd = voltage_drop_limit_for(request.voltage, aj, request.voltage_drop_limit)

    logger.debug(
        "[INICIO] material=%s carga=%sA V=%s L=%sm metodo=%s f=%s",
        request.material.value, carga, request.voltage, request.total_length,
        request.installation_method.value, request.derating_factor,
    )

    p = _paralelo_minimo(carga, tabla[-1], request)
    i_cable = px.divide(carga, p).valor

    cand = _seleccionar(tabla, i_cable, request, limite_vd, aj)
    if cand is None:
        # No debería ocurrir: p garantiza que el mayor calibre cabe.
        cand = _evaluar(tabla[-1], i_cable, request, limite_vd, aj)

    res = _resultado(cand, p, i_cable, limite_vd, request.total_length, aj)
    logger.debug("[SELECCION] %s x%d VD=%s%%", res.recommended_size, p, res.voltage_drop_percent)
    return res


def evaluate_parallel_options(
    request: SizingRequest,
    catalog: Optional[ConductorCatalog] = None,
    ajustes: Optional[AjustesCalculo] = None,
) -> List[CableAlternative]:
    """
    Configuraciones en paralelo viables, desde el p mínimo hasta
    min(techo(carga / amps_preferidos) + 2, max_paralelo).

    Se descartan las que no cumplen VD. La de menor p queda marcada
    como recomendada (coincide con calculate_cable_size cuando cumple VD).
    Cada alternativa reporta su costo (no altera la selección).
    """
    if float(request.load_amps) <= 0.0:
        return []

    cat = catalog or default_catalog()
    aj = ajustes or AJUSTES_DEFAULT

    tabla = cat.all_sizes(request.material)
    carga = px.a_decimal(request.load_amps)
    limite_vd = voltage_drop_limit_for(request.voltage, aj, request.voltage_drop_limit)

    p_min = _paralelo_minimo(carga, tabla[-1], request)
    p_max = min(px.techo(px.dividir_o_cero(carga, aj.amps_preferidos_por_cable)) + 2, aj.max_paralelo)
    p_max = max(p_min, p_max)

    out: List[CableAlternative] = []
    for p in range(p_min, p_max + 1):
        i_cable = px.divide(carga, p).valor
        cand = _seleccionar(tabla, i_cable, request, limite_vd, aj)
        if cand is None or not cand.cumple_vd:
            continue
        suministro, instalacion, total = _costos(cand.spec, p, request.total_length, aj.decimales)
        out.append(
            CableAlternative(
                cable_size=cand.spec.size,
                cables_in_parallel=p,
                load_per_cable=px.a_float(i_cable, max(aj.decimales, 3)),
                voltage_drop_percent=px.a_float(cand.vd_pct, aj.decimales),
                is_recommended=not out,
                supply_cost=px.a_float(suministro, aj.decimales),
                install_cost=px.a_float(instalacion, aj.decimales),
                total_cost=px.a_float(total, aj.decimales),
            )
        )
    return out


def cost_savings(alternativas: Sequence[CableAlternative]) -> float:
    """Diferencia de costo total entre la alternativa más cara y la recomendada."""
    if not alternativas:
        return 0.0
    recomendada = next((a for a in alternativas if a.is_recommended), alternativas[0])
    mas_cara = max(a.total_cost for a in alternativas)
    return px.a_float(px.subtract(mas_cara, recomendada.total_cost), 2)


__all__ = [
    "SANS_REFERENCIAS",
    "calculate_cable_size",
    "cost_savings",
    "evaluate_parallel_options",
]
