"""
catalogo.py — Cable Sizing

Catálogo de referencia de conductores.

Responsabilidad:
- Secuencia ordenada (delgado -> grueso) de ConductorSpec por material.
- Consultas de ampacidad por método de instalación.
- Índice por etiqueta de calibre (rechaza calibres desconocidos).

Regla:
- El catálogo es inmutable. Se construye una vez y se inyecta al motor;
  default_catalog() entrega la instancia embebida (solo lectura).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

from .modelos import CatalogoError, ConductorSpec, Material, MetodoInstalacion
from .tablas import TABLAS_BASE

logger = logging.getLogger(__name__)


def _verificar_monotonia(material: Material, specs: Sequence[ConductorSpec]) -> None:
    for prev, cur in zip(specs, specs[1:]):
        if cur.seccion_mm2 <= prev.seccion_mm2:
            raise CatalogoError(
                f"{material.value}: sección no creciente entre {prev.size} y {cur.size}"
            )
        for metodo in MetodoInstalacion:
            if cur.ampacidad(metodo) <= prev.ampacidad(metodo):
                raise CatalogoError(
                    f"{material.value}: ampacidad ({metodo.value}) no creciente entre {prev.size} y {cur.size}"
                )
        if cur.impedance_per_km >= prev.impedance_per_km:
            raise CatalogoError(
                f"{material.value}: impedancia no decreciente entre {prev.size} y {cur.size}"
            )


class ConductorCatalog:
    """Catálogo inmutable de conductores, indexado por material y calibre."""

    __slots__ = ("_por_material", "_indice")

    def __init__(self, conductores: Mapping[Material | str, Iterable[ConductorSpec]]) -> None:
        por_material: Dict[Material, Tuple[ConductorSpec, ...]] = {}
        indice: Dict[Tuple[Material, str], ConductorSpec] = {}

        for mat, specs in conductores.items():
            material = Material.parse(mat)
            ordenados = tuple(sorted(specs, key=lambda s: s.seccion_mm2))
            if not ordenados:
                raise CatalogoError(f"Tabla vacía para material={material.value!r}")
            for s in ordenados:
                if s.material is not material:
                    raise CatalogoError(
                        f"{s.size}: material {s.material.value!r} en tabla de {material.value!r}"
                    )
                clave = (material, s.size)
                if clave in indice:
                    raise CatalogoError(f"Calibre duplicado {s.size!r} ({material.value})")
                indice[clave] = s
            _verificar_monotonia(material, ordenados)
            por_material[material] = ordenados

        if Material.COBRE not in por_material:
            raise CatalogoError("El catálogo debe cubrir al menos cobre.")

        object.__setattr__(self, "_por_material", MappingProxyType(por_material))
        object.__setattr__(self, "_indice", MappingProxyType(indice))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("ConductorCatalog es inmutable")

    def __repr__(self) -> str:
        resumen = ", ".join(f"{m.value}={len(s)}" for m, s in self._por_material.items())
        return f"ConductorCatalog({resumen})"

    @property
    def materiales(self) -> Tuple[Material, ...]:
        return tuple(self._por_material)

    def all_sizes(self, material: Material | str = Material.COBRE) -> Tuple[ConductorSpec, ...]:
        """Secuencia ordenada (ascendente por sección) para el material."""
        m = Material.parse(material)
        try:
            return self._por_material[m]
        except KeyError:
            raise CatalogoError(f"Material no encontrado en catálogo: {m.value!r}") from None

    def ampacity_for(self, spec: ConductorSpec, installation_method: MetodoInstalacion | str) -> float:
        return spec.ampacidad(installation_method)

    def get(self, size: str, material: Material | str = Material.COBRE) -> ConductorSpec:
        m = Material.parse(material)
        try:
            return self._indice[(m, str(size))]
        except KeyError:
            raise CatalogoError(f"Calibre desconocido {size!r} ({m.value})") from None

    def contiene(self, size: str, material: Material | str = Material.COBRE) -> bool:
        return (Material.parse(material), str(size)) in self._indice

    def indice(self, spec: ConductorSpec) -> int:
        """Índice del calibre (mayor índice = más grueso)."""
        return self.all_sizes(spec.material).index(self.get(spec.size, spec.material))

    def mayor(self, material: Material | str = Material.COBRE) -> ConductorSpec:
        return self.all_sizes(material)[-1]


# ==========================================================
# Construcción desde filas (tablas embebidas / YAML)
# ==========================================================

def spec_desde_fila(fila: Mapping[str, Any], material: Material) -> ConductorSpec:
    return ConductorSpec(
        size=str(fila["size"]).strip(),
        material=material,
        seccion_mm2=float(fila["mm2"]),
        ampacity_ground=float(fila["terreno"]),
        ampacity_ducts=float(fila["ductos"]),
        ampacity_air=float(fila["aire"]),
        impedance_per_km=float(fila["z_ohm_km"]),
        vd_3f_mv_am=float(fila["vd_3f"]),
        vd_1f_mv_am=float(fila["vd_1f"]),
        supply_cost_per_m=float(fila.get("supply", 0.0)),
        install_cost_per_m=float(fila.get("install", 0.0)),
    )


def catalogo_desde_tablas(tablas: Mapping[str, Sequence[Mapping[str, Any]]]) -> ConductorCatalog:
    conductores: Dict[Material, List[ConductorSpec]] = {}
    for mat, filas in tablas.items():
        material = Material.parse(mat)
        conductores[material] = [spec_desde_fila(f, material) for f in filas]
    return ConductorCatalog(conductores)


@lru_cache(maxsize=1)
def default_catalog() -> ConductorCatalog:
    """Catálogo embebido (singleton de solo lectura)."""
    cat = catalogo_desde_tablas(TABLAS_BASE)
    logger.debug("Catálogo embebido cargado: %r", cat)
    return cat


# ==========================================================
# API funcional (atajos sobre el catálogo por defecto)
# ==========================================================

def all_sizes(material: Material | str = Material.COBRE) -> Tuple[ConductorSpec, ...]:
    return default_catalog().all_sizes(material)


def ampacity_for(spec: ConductorSpec, installation_method: MetodoInstalacion | str) -> float:
    return spec.ampacidad(installation_method)


__all__ = [
    "ConductorCatalog",
    "spec_desde_fila",
    "catalogo_desde_tablas",
    "default_catalog",
    "all_sizes",
    "ampacity_for",
]
