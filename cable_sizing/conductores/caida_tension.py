"""
Modelo físico del tramo — Cable Sizing.

Responsabilidad:
- Caída de tensión (V y %) con la cifra tabulada mV/A/m del catálogo.
- Límite normativo de VD según tensión.
- Sin selección por ampacidad (eso vive en calculo_conductores).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional, Tuple

from .. import precision as px
from ..ajustes import AJUSTES_DEFAULT, AjustesCalculo
from ..catalogo import ConductorSpec

_MIL = Decimal(1000)


def voltage_drop_limit_for(
    voltage: float,
    ajustes: AjustesCalculo = AJUSTES_DEFAULT,
    override: Optional[float] = None,
) -> Decimal:
    """Límite VD%: override si viene; si no 5% (400 V) / 3% (resto)."""
    if override is not None:
        return px.a_decimal(override)
    return px.a_decimal(ajustes.limite_vd_pct(voltage))


def calcular_caida_tension(
    spec: ConductorSpec,
    i_a: float | Decimal,
    voltage: float,
    l_m: float,
    ajustes: AjustesCalculo = AJUSTES_DEFAULT,
) -> Tuple[Decimal, Decimal]:
    """
    Caída de tensión de un conductor:

        VD_V = z * I * L / 1000      (z en mV/A/m ≡ Ω/km)
        VD%  = VD_V / V * 100

    z es la cifra 3Φ para la tensión trifásica (400 V) y 1Φ para el resto.
    Ambos valores se redondean half-up a `ajustes.decimales`.
    Devuelve (0, 0) si L <= 0 o V <= 0.
    """
    v = px.a_decimal(voltage)
    l = px.a_decimal(l_m)
    if l <= 0 or v <= 0:
        return Decimal(0), Decimal(0)

    z = px.a_decimal(spec.vd_mv_am(ajustes.es_trifasico(voltage)))
    vd_v = px.dividir_o_cero(px.multiply(px.multiply(z, i_a), l), _MIL)
    vd_v = px.round_to(vd_v, ajustes.decimales)

    # V > 0 garantizado arriba
    vd_pct = px.percentage_of(vd_v, v).valor
    return vd_v, px.round_to(vd_pct, ajustes.decimales)


__all__ = ["voltage_drop_limit_for", "calcular_caida_tension"]
