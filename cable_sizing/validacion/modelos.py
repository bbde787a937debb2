# cable_sizing/validacion/modelos.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class TipoAviso(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class ValidationWarning:
    type: TipoAviso
    message: str
    field: Optional[str] = None

    def as_dict(self) -> dict:
        d = {"type": self.type.value, "message": self.message}
        if self.field is not None:
            d["field"] = self.field
        return d


@dataclass(frozen=True)
class ComplianceOutcome:
    warnings: Tuple[ValidationWarning, ...] = ()
    requires_verification: bool = False

    @property
    def errors(self) -> Tuple[ValidationWarning, ...]:
        return tuple(w for w in self.warnings if w.type is TipoAviso.ERROR)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def por_tipo(self, tipo: TipoAviso) -> Tuple[ValidationWarning, ...]:
        return tuple(w for w in self.warnings if w.type is tipo)
