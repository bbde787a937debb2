# cable_sizing/conductores/modelos.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..catalogo import Material, MetodoInstalacion


@dataclass(frozen=True)
class SizingRequest:
    load_amps: float
    voltage: float
    total_length: float = 0.0  # m (ida); 0 desactiva VD
    installation_method: MetodoInstalacion = MetodoInstalacion.AIRE
    material: Material = Material.COBRE
    derating_factor: float = 1.0
    max_amps_per_cable: Optional[float] = None

    safety_margin: float = 1.0
    voltage_drop_limit: Optional[float] = None  # % (override del límite normativo)

    def __post_init__(self) -> None:
        # Normaliza strings -> enums (frozen: vía object.__setattr__)
        object.__setattr__(self, "installation_method", MetodoInstalacion.parse(self.installation_method))
        object.__setattr__(self, "material", Material.parse(self.material))

        if not (0.0 < float(self.derating_factor) <= 1.0):
            raise ValueError(f"derating_factor debe estar en (0, 1]. Valor={self.derating_factor!r}")
        if float(self.total_length) < 0.0:
            raise ValueError(f"total_length no puede ser negativo. Valor={self.total_length!r}")
        if self.max_amps_per_cable is not None and float(self.max_amps_per_cable) <= 0.0:
            raise ValueError(f"max_amps_per_cable debe ser > 0. Valor={self.max_amps_per_cable!r}")
        if float(self.safety_margin) < 1.0:
            raise ValueError(f"safety_margin debe ser >= 1.0. Valor={self.safety_margin!r}")
        if self.voltage_drop_limit is not None and float(self.voltage_drop_limit) <= 0.0:
            raise ValueError(f"voltage_drop_limit debe ser > 0. Valor={self.voltage_drop_limit!r}")


@dataclass(frozen=True)
class SizingResult:
    recommended_size: str
    cables_in_parallel: int
    derated_ampacity_per_cable: float
    load_per_cable: float
    voltage_drop_percent: float
    voltage_drop_volts: float
    ohm_per_km: float
    voltage_drop_limit: float
    material: Material = Material.COBRE

    # Costos del tramo completo (R): costo por metro * longitud * paralelo
    supply_cost: float = 0.0
    install_cost: float = 0.0
    total_cost: float = 0.0

    referencias: Tuple[str, ...] = ()

    @property
    def voltage_drop_ok(self) -> bool:
        return self.voltage_drop_percent <= self.voltage_drop_limit


@dataclass(frozen=True)
class CableAlternative:
    cable_size: str
    cables_in_parallel: int
    load_per_cable: float
    voltage_drop_percent: float
    is_recommended: bool = False
    supply_cost: float = 0.0
    install_cost: float = 0.0
    total_cost: float = 0.0
