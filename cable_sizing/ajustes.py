# cable_sizing/ajustes.py
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml


class AjustesError(ValueError):
    """Ajustes de cálculo inválidos (archivo o valores)."""


# ==========================================================
# Ajustes de cálculo (límites normativos + criterios)
# ==========================================================

@dataclass(frozen=True)
class AjustesCalculo:
    # Caída de tensión máxima (%)
    vd_limite_400v_pct: float = 5.0
    vd_limite_otro_pct: float = 3.0

    tensiones_estandar: Tuple[float, ...] = (230.0, 400.0)
    tension_trifasica_v: float = 400.0

    # Umbrales de aviso (fracción del límite)
    fraccion_aviso_capacidad: float = 0.9
    fraccion_aviso_vd: float = 0.8

    # Chequeo de catálogo: ±30% sobre impedancia esperada
    tolerancia_impedancia: float = 0.30

    longitud_maxima_m: float = 1000.0

    # Alternativas en paralelo
    max_paralelo: int = 8
    amps_preferidos_por_cable: float = 300.0

    # Agrupamiento (SANS 10142-1 simplificado)
    factor_agrupamiento_2: float = 0.80
    factor_agrupamiento_3: float = 0.70
    factor_agrupamiento_4_mas: float = 0.65

    decimales: int = 2

    def __post_init__(self) -> None:
        if self.vd_limite_400v_pct <= 0 or self.vd_limite_otro_pct <= 0:
            raise AjustesError("Los límites de caída de tensión deben ser > 0.")
        for nombre in ("fraccion_aviso_capacidad", "fraccion_aviso_vd"):
            v = getattr(self, nombre)
            if not (0.0 < v <= 1.0):
                raise AjustesError(f"'{nombre}' debe estar en (0, 1]. Valor={v!r}")
        if not (0.0 < self.tolerancia_impedancia < 1.0):
            raise AjustesError("'tolerancia_impedancia' debe estar en (0, 1).")
        if self.max_paralelo < 1:
            raise AjustesError("'max_paralelo' debe ser >= 1.")
        if self.amps_preferidos_por_cable <= 0:
            raise AjustesError("'amps_preferidos_por_cable' debe ser > 0.")
        for nombre in ("factor_agrupamiento_2", "factor_agrupamiento_3", "factor_agrupamiento_4_mas"):
            v = getattr(self, nombre)
            if not (0.0 < v <= 1.0):
                raise AjustesError(f"'{nombre}' debe estar en (0, 1]. Valor={v!r}")
        if self.decimales < 0:
            raise AjustesError("'decimales' debe ser >= 0.")

    def limite_vd_pct(self, voltage: float) -> float:
        """5% en 400 V; 3% para cualquier otra tensión (incluida 230 V)."""
        if float(voltage) == float(self.tension_trifasica_v):
            return float(self.vd_limite_400v_pct)
        return float(self.vd_limite_otro_pct)

    def es_trifasico(self, voltage: float) -> bool:
        return float(voltage) == float(self.tension_trifasica_v)


AJUSTES_DEFAULT = AjustesCalculo()


def factor_agrupamiento(n_paralelo: int, ajustes: AjustesCalculo = AJUSTES_DEFAULT) -> float:
    """
    Factor de agrupamiento por cantidad de circuitos en paralelo.

      - 1   -> 1.00
      - 2   -> factor_agrupamiento_2
      - 3   -> factor_agrupamiento_3
      - >=4 -> factor_agrupamiento_4_mas
    """
    n = int(n_paralelo)
    if n < 1:
        raise AjustesError("n_paralelo debe ser >= 1.")
    if n == 1:
        return 1.0
    if n == 2:
        return float(ajustes.factor_agrupamiento_2)
    if n == 3:
        return float(ajustes.factor_agrupamiento_3)
    return float(ajustes.factor_agrupamiento_4_mas)


# ==========================================================
# Carga YAML
# ==========================================================

def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise AjustesError(f"No existe el archivo de ajustes: {path}")
    doc = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(doc, dict):
        raise AjustesError(f"Formato inválido en {path}: se esperaba un mapeo.")
    return doc


def _num(v: Any, k: str, ctx: str) -> float:
    try:
        return float(v)
    except (TypeError, ValueError) as e:
        raise AjustesError(f"'{k}' debe ser numérico en {ctx}. Valor={v!r}") from e


def _entero(v: Any, k: str, ctx: str) -> int:
    x = _num(v, k, ctx)
    if not x.is_integer():
        raise AjustesError(f"'{k}' debe ser entero en {ctx}. Valor={v!r}")
    return int(x)


def ajustes_desde_dict(d: Dict[str, Any], base: AjustesCalculo = AJUSTES_DEFAULT, ctx: str = "ajustes") -> AjustesCalculo:
    """Aplica overrides sobre `base`. Claves desconocidas -> AjustesError."""
    conocidos = {f.name: f for f in fields(AjustesCalculo)}
    cambios: Dict[str, Any] = {}
    for k, v in (d or {}).items():
        if k not in conocidos:
            raise AjustesError(f"Clave desconocida '{k}' en {ctx}")
        if v is None:
            continue
        if k == "tensiones_estandar":
            if not isinstance(v, (list, tuple)) or not v:
                raise AjustesError(f"'{k}' debe ser una lista no vacía en {ctx}")
            cambios[k] = tuple(_num(x, k, ctx) for x in v)
        elif k in ("max_paralelo", "decimales"):
            cambios[k] = _entero(v, k, ctx)
        else:
            cambios[k] = _num(v, k, ctx)
    return replace(base, **cambios)


def cargar_ajustes_yaml(path: str | Path) -> AjustesCalculo:
    """
    Lee ajustes desde YAML. Formato:

        ajustes:
          vd_limite_400v_pct: 5.0
          vd_limite_otro_pct: 3.0
          ...
    """
    p = Path(path)
    doc = _read_yaml(p)
    return ajustes_desde_dict(doc.get("ajustes") or {}, ctx=f"{p.name}:ajustes")


__all__ = [
    "AjustesError",
    "AjustesCalculo",
    "AJUSTES_DEFAULT",
    "factor_agrupamiento",
    "ajustes_desde_dict",
    "cargar_ajustes_yaml",
]
