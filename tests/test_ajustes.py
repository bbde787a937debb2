import tempfile
import unittest
from pathlib import Path

from cable_sizing.ajustes import (
    AJUSTES_DEFAULT,
    AjustesCalculo,
    AjustesError,
    ajustes_desde_dict,
    cargar_ajustes_yaml,
    factor_agrupamiento,
)


class TestAjustes(unittest.TestCase):
    def test_defaults_normativos(self):
        self.assertEqual(5.0, AJUSTES_DEFAULT.limite_vd_pct(400))
        self.assertEqual(3.0, AJUSTES_DEFAULT.limite_vd_pct(230))
        self.assertEqual(3.0, AJUSTES_DEFAULT.limite_vd_pct(110))
        self.assertTrue(AJUSTES_DEFAULT.es_trifasico(400))
        self.assertFalse(AJUSTES_DEFAULT.es_trifasico(230))

    def test_factor_agrupamiento(self):
        self.assertEqual([1.0, 0.80, 0.70, 0.65, 0.65], [factor_agrupamiento(n) for n in range(1, 6)])
        with self.assertRaises(AjustesError):
            factor_agrupamiento(0)

    def test_valores_invalidos(self):
        with self.assertRaises(AjustesError):
            AjustesCalculo(vd_limite_400v_pct=0)
        with self.assertRaises(AjustesError):
            AjustesCalculo(fraccion_aviso_vd=1.5)
        with self.assertRaises(AjustesError):
            AjustesCalculo(max_paralelo=0)
        with self.assertRaises(AjustesError):
            AjustesCalculo(tolerancia_impedancia=1.0)

    def test_overrides_desde_dict(self):
        aj = ajustes_desde_dict({"vd_limite_otro_pct": "2.5", "max_paralelo": 4, "tensiones_estandar": [230, 400, 525]})
        self.assertEqual(2.5, aj.vd_limite_otro_pct)
        self.assertEqual(4, aj.max_paralelo)
        self.assertEqual((230.0, 400.0, 525.0), aj.tensiones_estandar)
        self.assertEqual(5.0, aj.vd_limite_400v_pct)

    def test_clave_desconocida(self):
        with self.assertRaises(AjustesError):
            ajustes_desde_dict({"vd_limite": 3})

    def test_valor_no_numerico(self):
        with self.assertRaises(AjustesError):
            ajustes_desde_dict({"vd_limite_otro_pct": "tres"})

    def test_enteros_no_se_truncan(self):
        with self.assertRaises(AjustesError):
            ajustes_desde_dict({"max_paralelo": 2.7})
        with self.assertRaises(AjustesError):
            ajustes_desde_dict({"decimales": "1.5"})
        self.assertEqual(4, ajustes_desde_dict({"max_paralelo": 4.0}).max_paralelo)


class TestAjustesYaml(unittest.TestCase):
    def test_carga_yaml(self):
        p = Path(tempfile.mkdtemp()) / "ajustes.yaml"
        p.write_text(
            "ajustes:\n"
            "  vd_limite_400v_pct: 4.0\n"
            "  factor_agrupamiento_2: 0.75\n",
            encoding="utf-8",
        )
        aj = cargar_ajustes_yaml(p)
        self.assertEqual(4.0, aj.limite_vd_pct(400))
        self.assertEqual(0.75, factor_agrupamiento(2, aj))

    def test_yaml_vacio_usa_defaults(self):
        p = Path(tempfile.mkdtemp()) / "ajustes.yaml"
        p.write_text("", encoding="utf-8")
        self.assertEqual(AJUSTES_DEFAULT, cargar_ajustes_yaml(p))

    def test_archivo_inexistente(self):
        with self.assertRaises(AjustesError):
            cargar_ajustes_yaml(Path(tempfile.mkdtemp()) / "no_existe.yaml")


if __name__ == "__main__":
    unittest.main()
