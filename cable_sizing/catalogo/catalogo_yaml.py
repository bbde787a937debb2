# cable_sizing/catalogo/catalogo_yaml.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import yaml

from .catalogo import ConductorCatalog, spec_desde_fila
from .modelos import CatalogoError, ConductorSpec, Material

DATA_DIR = Path("data")

_CAMPOS_NUM = ("mm2", "terreno", "ductos", "aire", "z_ohm_km", "vd_3f", "vd_1f")
_CAMPOS_OPCIONALES = ("supply", "install")


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise CatalogoError(f"No existe el catálogo: {path}")
    doc = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(doc, dict):
        raise CatalogoError(f"Formato inválido en {path}: se esperaba un mapeo.")
    return doc


def _req(d: Dict[str, Any], k: str, ctx: str) -> Any:
    if k not in d or d[k] is None:
        raise CatalogoError(f"Falta '{k}' en {ctx}")
    return d[k]


def _req_num(d: Dict[str, Any], k: str, ctx: str) -> float:
    v = _req(d, k, ctx)
    try:
        return float(v)
    except (TypeError, ValueError) as e:
        raise CatalogoError(f"'{k}' debe ser numérico en {ctx}. Valor={v!r}") from e


def _validate_fila(i: int, fila: Any, ctx: str) -> Dict[str, Any]:
    ctx_fila = f"{ctx}[{i}]"
    if not isinstance(fila, dict):
        raise CatalogoError(f"Fila inválida en {ctx_fila}: se esperaba un mapeo.")
    out: Dict[str, Any] = {"size": str(_req(fila, "size", ctx_fila)).strip()}
    for k in _CAMPOS_NUM:
        out[k] = _req_num(fila, k, ctx_fila)
    for k in _CAMPOS_OPCIONALES:
        if fila.get(k) is not None:
            out[k] = _req_num(fila, k, ctx_fila)
    return out


def cargar_conductores_yaml(path: str | Path = DATA_DIR / "conductores.yaml") -> ConductorCatalog:
    """
    Construye un ConductorCatalog desde YAML. Formato:

        conductores:
          copper:
            - {size: "2.5mm²", mm2: 2.5, terreno: 32, ductos: 26, aire: 26,
               z_ohm_km: 8.87, vd_3f: 15.363, vd_1f: 17.734,
               supply: 12, install: 18}
          aluminium:
            - ...

    Cualquier campo faltante o no numérico -> CatalogoError (con ruta).
    supply/install (R/m) son opcionales; si faltan el costo reportado es 0.
    El catálogo resultante pasa por la misma validación de monotonía.
    """
    p = Path(path)
    doc = _read_yaml(p)
    tablas = doc.get("conductores") or {}
    if not isinstance(tablas, dict) or not tablas:
        raise CatalogoError(f"Falta 'conductores' en {p.name}")

    conductores: Dict[Material, List[ConductorSpec]] = {}
    for mat, filas in tablas.items():
        material = Material.parse(mat)
        ctx = f"{p.name}:conductores.{mat}"
        if not isinstance(filas, list):
            raise CatalogoError(f"Se esperaba una lista en {ctx}")
        conductores[material] = [
            spec_desde_fila(_validate_fila(i, f, ctx), material) for i, f in enumerate(filas)
        ]

    return ConductorCatalog(conductores)


__all__ = ["DATA_DIR", "cargar_conductores_yaml"]
