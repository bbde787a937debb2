# cable_sizing/catalogo/tablas.py
from __future__ import annotations

from typing import Dict, List


# ==========================================================
# Tablas (referenciales) — FUENTE ÚNICA DE VERDAD
# ==========================================================
# Nota:
# - Cables PVC, conductor de cobre / aluminio (SANS 1507-3, tablas 6.2 y 6.3).
# - Valores SIN verificar contra SANS 10142-1 Ed. 3 (2020): requieren firma
#   de un ingeniero calificado antes de usarse en obra.
# - Columnas de ampacidad (A): terreno / ductos / aire.
# - z_ohm_km: impedancia a temperatura de operación (Ω/km).
# - vd_3f / vd_1f: caída tabulada (mV/A/m).
# - supply / install: costo referencial de suministro e instalación (R/m).
# - Derating NO se aplica aquí (eso vive en el motor).
# ==========================================================

TABLA_BASE_CU: List[Dict[str, float]] = [
    {"size": "1.5mm²", "mm2": 1.5,   "terreno": 24,  "ductos": 20,  "aire": 19,  "z_ohm_km": 14.48,  "vd_3f": 25.080, "vd_1f": 28.956, "supply": 8.5, "install": 15},
    {"size": "2.5mm²", "mm2": 2.5,   "terreno": 32,  "ductos": 26,  "aire": 26,  "z_ohm_km": 8.87,   "vd_3f": 15.363, "vd_1f": 17.734, "supply": 12, "install": 18},
    {"size": "4mm²",   "mm2": 4.0,   "terreno": 42,  "ductos": 34,  "aire": 35,  "z_ohm_km": 5.52,   "vd_3f": 9.561,  "vd_1f": 11.034, "supply": 18, "install": 22},
    {"size": "6mm²",   "mm2": 6.0,   "terreno": 53,  "ductos": 43,  "aire": 45,  "z_ohm_km": 3.69,   "vd_3f": 6.391,  "vd_1f": 7.374, "supply": 25, "install": 28},
    {"size": "10mm²",  "mm2": 10.0,  "terreno": 70,  "ductos": 58,  "aire": 62,  "z_ohm_km": 2.19,   "vd_3f": 3.793,  "vd_1f": 4.384, "supply": 38, "install": 35},
    {"size": "16mm²",  "mm2": 16.0,  "terreno": 91,  "ductos": 75,  "aire": 83,  "z_ohm_km": 1.38,   "vd_3f": 2.390,  "vd_1f": 2.759, "supply": 52, "install": 42},
    {"size": "25mm²",  "mm2": 25.0,  "terreno": 119, "ductos": 96,  "aire": 110, "z_ohm_km": 0.8749, "vd_3f": 1.515,  "vd_1f": 1.749, "supply": 75, "install": 55},
    {"size": "35mm²",  "mm2": 35.0,  "terreno": 143, "ductos": 116, "aire": 135, "z_ohm_km": 0.6335, "vd_3f": 1.097,  "vd_1f": 1.267, "supply": 95, "install": 65},
    {"size": "50mm²",  "mm2": 50.0,  "terreno": 169, "ductos": 138, "aire": 163, "z_ohm_km": 0.4718, "vd_3f": 0.817,  "vd_1f": 0.944, "supply": 125, "install": 78},
    {"size": "70mm²",  "mm2": 70.0,  "terreno": 210, "ductos": 171, "aire": 207, "z_ohm_km": 0.3325, "vd_3f": 0.576,  "vd_1f": 0.665, "supply": 165, "install": 95},
    {"size": "95mm²",  "mm2": 95.0,  "terreno": 251, "ductos": 205, "aire": 251, "z_ohm_km": 0.2460, "vd_3f": 0.427,  "vd_1f": 0.492, "supply": 210, "install": 115},
    {"size": "120mm²", "mm2": 120.0, "terreno": 285, "ductos": 234, "aire": 290, "z_ohm_km": 0.2012, "vd_3f": 0.348,  "vd_1f": 0.402, "supply": 255, "install": 135},
    {"size": "150mm²", "mm2": 150.0, "terreno": 320, "ductos": 263, "aire": 332, "z_ohm_km": 0.1698, "vd_3f": 0.294,  "vd_1f": 0.339, "supply": 310, "install": 155},
    {"size": "185mm²", "mm2": 185.0, "terreno": 361, "ductos": 298, "aire": 378, "z_ohm_km": 0.1445, "vd_3f": 0.250,  "vd_1f": 0.289, "supply": 375, "install": 180},
    {"size": "240mm²", "mm2": 240.0, "terreno": 416, "ductos": 344, "aire": 445, "z_ohm_km": 0.1220, "vd_3f": 0.211,  "vd_1f": 0.244, "supply": 475, "install": 215},
    {"size": "300mm²", "mm2": 300.0, "terreno": 465, "ductos": 385, "aire": 510, "z_ohm_km": 0.1090, "vd_3f": 0.189,  "vd_1f": 0.218, "supply": 580, "install": 250},
]

TABLA_BASE_AL: List[Dict[str, float]] = [
    {"size": "25mm²",  "mm2": 25.0,  "terreno": 90,  "ductos": 73,  "aire": 80,  "z_ohm_km": 1.4446, "vd_3f": 2.502, "vd_1f": 2.889, "supply": 45, "install": 55},
    {"size": "35mm²",  "mm2": 35.0,  "terreno": 108, "ductos": 87,  "aire": 99,  "z_ohm_km": 1.0465, "vd_3f": 1.813, "vd_1f": 2.093, "supply": 58, "install": 65},
    {"size": "50mm²",  "mm2": 50.0,  "terreno": 129, "ductos": 104, "aire": 119, "z_ohm_km": 0.7749, "vd_3f": 1.342, "vd_1f": 1.549, "supply": 75, "install": 78},
    {"size": "70mm²",  "mm2": 70.0,  "terreno": 158, "ductos": 130, "aire": 151, "z_ohm_km": 0.5388, "vd_3f": 0.933, "vd_1f": 1.078, "supply": 98, "install": 95},
    {"size": "95mm²",  "mm2": 95.0,  "terreno": 192, "ductos": 157, "aire": 186, "z_ohm_km": 0.3934, "vd_3f": 0.681, "vd_1f": 0.787, "supply": 125, "install": 115},
    {"size": "120mm²", "mm2": 120.0, "terreno": 219, "ductos": 179, "aire": 216, "z_ohm_km": 0.3148, "vd_3f": 0.545, "vd_1f": 0.629, "supply": 152, "install": 135},
    {"size": "150mm²", "mm2": 150.0, "terreno": 245, "ductos": 201, "aire": 250, "z_ohm_km": 0.2607, "vd_3f": 0.452, "vd_1f": 0.521, "supply": 185, "install": 155},
    {"size": "185mm²", "mm2": 185.0, "terreno": 278, "ductos": 229, "aire": 287, "z_ohm_km": 0.2133, "vd_3f": 0.369, "vd_1f": 0.427, "supply": 222, "install": 180},
    {"size": "240mm²", "mm2": 240.0, "terreno": 324, "ductos": 268, "aire": 342, "z_ohm_km": 0.1708, "vd_3f": 0.296, "vd_1f": 0.342, "supply": 280, "install": 215},
]

TABLAS_BASE: Dict[str, List[Dict[str, float]]] = {
    "copper": TABLA_BASE_CU,
    "aluminium": TABLA_BASE_AL,
}
