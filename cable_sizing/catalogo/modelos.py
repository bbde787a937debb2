# cable_sizing/catalogo/modelos.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CatalogoError(ValueError):
    """Error de configuración del catálogo de conductores."""


class Material(str, Enum):
    COBRE = "copper"
    ALUMINIO = "aluminium"

    @classmethod
    def parse(cls, valor: "Material | str") -> "Material":
        if isinstance(valor, Material):
            return valor
        v = str(valor).strip().lower()
        if v in ("copper", "cu", "cobre"):
            return cls.COBRE
        if v in ("aluminium", "aluminum", "al", "aluminio"):
            return cls.ALUMINIO
        raise CatalogoError(f"Material desconocido: {valor!r}")


class MetodoInstalacion(str, Enum):
    TERRENO = "ground"
    DUCTOS = "ducts"
    AIRE = "air"

    @classmethod
    def parse(cls, valor: "MetodoInstalacion | str") -> "MetodoInstalacion":
        if isinstance(valor, MetodoInstalacion):
            return valor
        v = str(valor).strip().lower()
        for m in cls:
            if m.value == v:
                return m
        raise CatalogoError(f"Método de instalación desconocido: {valor!r}")


@dataclass(frozen=True)
class ConductorSpec:
    size: str
    material: Material
    seccion_mm2: float
    ampacity_ground: float
    ampacity_ducts: float
    ampacity_air: float
    impedance_per_km: float  # Ω/km
    vd_3f_mv_am: float       # caída 3Φ (mV/A/m)
    vd_1f_mv_am: float       # caída 1Φ (mV/A/m)
    supply_cost_per_m: float = 0.0   # R/m
    install_cost_per_m: float = 0.0  # R/m

    def __post_init__(self) -> None:
        if not str(self.size).strip():
            raise CatalogoError("ConductorSpec sin 'size'.")
        object.__setattr__(self, "material", Material.parse(self.material))
        for k in (
            "seccion_mm2",
            "ampacity_ground",
            "ampacity_ducts",
            "ampacity_air",
            "impedance_per_km",
            "vd_3f_mv_am",
            "vd_1f_mv_am",
        ):
            if float(getattr(self, k)) <= 0.0:
                raise CatalogoError(f"'{k}' debe ser > 0 en {self.size}")
        for k in ("supply_cost_per_m", "install_cost_per_m"):
            if float(getattr(self, k)) < 0.0:
                raise CatalogoError(f"'{k}' no puede ser negativo en {self.size}")

    def ampacidad(self, metodo: MetodoInstalacion | str) -> float:
        m = MetodoInstalacion.parse(metodo)
        if m is MetodoInstalacion.AIRE:
            return float(self.ampacity_air)
        if m is MetodoInstalacion.TERRENO:
            return float(self.ampacity_ground)
        return float(self.ampacity_ducts)

    def vd_mv_am(self, trifasico: bool) -> float:
        return float(self.vd_3f_mv_am if trifasico else self.vd_1f_mv_am)
