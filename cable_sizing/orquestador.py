"""
Orquestador — Cable Sizing

Encadena motor y validación:
    SizingRequest -> calculate_cable_size -> validate_cable_calculation

- size_and_validate: un circuito.
- dimensionar_cronograma: cronograma completo de cables (orden preservado).

Los llamadores deben tratar cualquier aviso tipo 'error' como bloqueante.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Optional

from . import precision as px
from .ajustes import AJUSTES_DEFAULT, AjustesCalculo
from .catalogo import ConductorCatalog, default_catalog
from .conductores import SizingRequest, SizingResult, calculate_cable_size
from .validacion import ComplianceOutcome, validate_cable_calculation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerifiedSizing:
    request: SizingRequest
    result: SizingResult
    compliance: ComplianceOutcome

    @property
    def requires_verification(self) -> bool:
        return self.compliance.requires_verification

    @property
    def bloqueante(self) -> bool:
        return self.compliance.has_errors


def size_and_validate(
    request: SizingRequest,
    catalog: Optional[ConductorCatalog] = None,
    ajustes: Optional[AjustesCalculo] = None,
) -> Optional[VerifiedSizing]:
    """
    Dimensiona y valida. None si la carga no es positiva.

    La validación de capacidad usa la corriente por conductor
    (carga / cables_in_parallel, sin redondear).
    """
    cat = catalog or default_catalog()
    aj = ajustes or AJUSTES_DEFAULT

    res = calculate_cable_size(request, cat, aj)
    if res is None:
        return None

    spec = cat.get(res.recommended_size, res.material)
    i_cable = px.divide(request.load_amps, res.cables_in_parallel).valor
    compliance = validate_cable_calculation(
        spec,
        i_cable,
        request.voltage,
        request.total_length,
        res.voltage_drop_percent,
        request.installation_method,
        request.derating_factor,
        ajustes=aj,
        voltage_drop_limit=request.voltage_drop_limit,
    )
    return VerifiedSizing(request=request, result=res, compliance=compliance)


def dimensionar_cronograma(
    requests: Iterable[SizingRequest],
    catalog: Optional[ConductorCatalog] = None,
    ajustes: Optional[AjustesCalculo] = None,
    *,
    max_workers: Optional[int] = None,
) -> List[Optional[VerifiedSizing]]:
    """
    Dimensiona y valida cada circuito de un cronograma.

    max_workers > 1 reparte en hilos; cada llamada es independiente y el
    catálogo es de solo lectura. El orden de salida es el de entrada.
    """
    reqs = list(requests)
    cat = catalog or default_catalog()
    aj = ajustes or AJUSTES_DEFAULT

    if not max_workers or max_workers <= 1 or len(reqs) <= 1:
        out = [size_and_validate(r, cat, aj) for r in reqs]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            out = list(pool.map(lambda r: size_and_validate(r, cat, aj), reqs))

    n_bloq = sum(1 for v in out if v is not None and v.bloqueante)
    logger.debug("Cronograma: %d circuitos, %d con errores bloqueantes", len(out), n_bloq)
    return out


__all__ = ["VerifiedSizing", "size_and_validate", "dimensionar_cronograma"]
