"""
precision.py — Cable Sizing

Aritmética decimal determinista para cifras normativas.

Responsabilidad:
- Evitar deriva de punto flotante binario en corrientes y porcentajes.
- Política de redondeo fija: ROUND_HALF_UP.
- Precisión interna alta (20 dígitos significativos).

Notas:
- Se usa un Context propio; NO se toca getcontext() global.
- La división por cero no revienta: devuelve un Cociente con ok=False.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_CEILING, ROUND_HALF_UP, Context, Decimal, InvalidOperation
from typing import Union

Numero = Union[Decimal, float, int, str]

PRECISION_INTERNA = 20
DECIMALES_DEFAULT = 2

_CTX = Context(prec=PRECISION_INTERNA, rounding=ROUND_HALF_UP)

CERO = Decimal(0)
CIEN = Decimal(100)


@dataclass(frozen=True)
class Cociente:
    """Resultado etiquetado de una división (ok=False si el divisor era 0)."""

    valor: Decimal
    ok: bool = True

    def __bool__(self) -> bool:
        return self.ok


# ==========================================================
# Conversión
# ==========================================================

def a_decimal(x: Numero) -> Decimal:
    """
    Convierte cualquier numérico a Decimal pasando por str
    (así 0.1 + 0.2 == 0.3).
    """
    if isinstance(x, Decimal):
        return x
    if isinstance(x, bool):
        raise TypeError("bool no es un valor numérico válido")
    if isinstance(x, int):
        return Decimal(x)
    if isinstance(x, float):
        return Decimal(repr(x))
    if isinstance(x, str):
        try:
            return Decimal(x.strip())
        except InvalidOperation as e:
            raise ValueError(f"Valor no numérico: {x!r}") from e
    raise TypeError(f"No se puede convertir {type(x).__name__} a Decimal")


# ==========================================================
# Operaciones
# ==========================================================

def add(a: Numero, b: Numero) -> Decimal:
    return _CTX.add(a_decimal(a), a_decimal(b))


def subtract(a: Numero, b: Numero) -> Decimal:
    return _CTX.subtract(a_decimal(a), a_decimal(b))


def multiply(a: Numero, b: Numero) -> Decimal:
    return _CTX.multiply(a_decimal(a), a_decimal(b))


def divide(a: Numero, b: Numero) -> Cociente:
    """
    División a / b.

    Si b == 0 devuelve Cociente(0, ok=False). El llamador debe revisar .ok;
    un cero etiquetado no es un resultado válido.
    """
    den = a_decimal(b)
    if den == CERO:
        return Cociente(CERO, ok=False)
    return Cociente(_CTX.divide(a_decimal(a), den), ok=True)


def dividir_o_cero(a: Numero, b: Numero) -> Decimal:
    """Compat: forma legacy que colapsa la división por cero a 0."""
    return divide(a, b).valor


def percentage_of(parte: Numero, total: Numero) -> Cociente:
    """parte / total * 100 (etiquetado igual que divide)."""
    q = divide(parte, total)
    if not q.ok:
        return q
    return Cociente(_CTX.multiply(q.valor, CIEN), ok=True)


def round_to(x: Numero, decimales: int = DECIMALES_DEFAULT) -> Decimal:
    """Redondeo half-up a `decimales` posiciones."""
    if decimales < 0:
        raise ValueError("decimales debe ser >= 0")
    exp = Decimal(1).scaleb(-int(decimales))
    return a_decimal(x).quantize(exp, rounding=ROUND_HALF_UP, context=_CTX)


def techo(x: Numero) -> int:
    """Menor entero >= x."""
    return int(a_decimal(x).to_integral_value(rounding=ROUND_CEILING, context=_CTX))


def a_float(x: Numero, decimales: int = DECIMALES_DEFAULT) -> float:
    """Redondea y entrega float (solo para value objects de salida)."""
    return float(round_to(x, decimales))


__all__ = [
    "Cociente",
    "PRECISION_INTERNA",
    "DECIMALES_DEFAULT",
    "a_decimal",
    "add",
    "subtract",
    "multiply",
    "divide",
    "dividir_o_cero",
    "percentage_of",
    "round_to",
    "techo",
    "a_float",
]
