import unittest

from cable_sizing.catalogo import ConductorSpec, Material, default_catalog
from cable_sizing.conductores import SizingRequest, calculate_cable_size
from cable_sizing.validacion import (
    MARCA_VERIFICACION,
    TipoAviso,
    check_capacity,
    check_impedance,
    check_inputs,
    check_voltage_drop,
    validate_cable_calculation,
)


def _cu(size):
    return default_catalog().get(size, "copper")


class TestCapacidad(unittest.TestCase):
    def test_sobrecarga_es_error(self):
        avisos = check_capacity(_cu("2.5mm²"), 30, "air", 1.0)
        self.assertEqual(1, len(avisos))
        self.assertIs(TipoAviso.ERROR, avisos[0].type)
        self.assertIn("UNSAFE", avisos[0].message)
        self.assertIn("INVALID", avisos[0].message)

    def test_cerca_del_limite_es_warning(self):
        avisos = check_capacity(_cu("2.5mm²"), 24, "air", 1.0)
        self.assertEqual([TipoAviso.WARNING], [a.type for a in avisos])

    def test_derating_se_aplica(self):
        # 62 A * 0.5 = 31 A < 35 A
        avisos = check_capacity(_cu("10mm²"), 35, "air", 0.5)
        self.assertIs(TipoAviso.ERROR, avisos[0].type)

    def test_holgura_sin_avisos(self):
        self.assertEqual([], check_capacity(_cu("10mm²"), 20, "air", 1.0))


class TestCaidaTension(unittest.TestCase):
    def test_excede_limite_400v(self):
        avisos = check_voltage_drop(400, 100, 6.39)
        self.assertIs(TipoAviso.ERROR, avisos[0].type)

    def test_cerca_del_limite(self):
        self.assertIs(TipoAviso.WARNING, check_voltage_drop(400, 100, 4.5)[0].type)
        self.assertIs(TipoAviso.WARNING, check_voltage_drop(230, 100, 2.5)[0].type)
        self.assertIs(TipoAviso.ERROR, check_voltage_drop(230, 100, 3.5)[0].type)

    def test_dentro_del_limite(self):
        self.assertEqual([], check_voltage_drop(400, 100, 3.79))

    def test_longitud_cero_no_evalua(self):
        self.assertEqual([], check_voltage_drop(400, 0, 99.0))


class TestImpedancia(unittest.TestCase):
    def test_catalogo_coherente(self):
        for size in ("1.5mm²", "2.5mm²", "10mm²", "35mm²"):
            self.assertEqual([], check_impedance(_cu(size)), size)

    def test_desviacion_mayor_al_30_pct(self):
        avisos = check_impedance(_cu("50mm²"))
        self.assertEqual(1, len(avisos))
        self.assertIs(TipoAviso.WARNING, avisos[0].type)
        self.assertIn("Verify cable data manually", avisos[0].message)

    def test_error_de_carga_de_datos(self):
        malo = ConductorSpec("10mm²", Material.COBRE, 10.0, 70, 58, 62, 0.219, 3.793, 4.384)
        self.assertEqual(1, len(check_impedance(malo)))

    def test_referencia_aluminio(self):
        self.assertEqual([], check_impedance(default_catalog().get("25mm²", "aluminium")))


class TestEntradas(unittest.TestCase):
    def test_carga_no_positiva(self):
        avisos = check_inputs(0, 230, 10)
        self.assertEqual([TipoAviso.ERROR], [a.type for a in avisos])

    def test_tension_no_estandar(self):
        avisos = check_inputs(10, 240, 10)
        self.assertEqual([TipoAviso.WARNING], [a.type for a in avisos])
        self.assertEqual("voltage", avisos[0].field)

    def test_longitud_excesiva(self):
        avisos = check_inputs(10, 400, 1500)
        self.assertEqual(["length"], [a.field for a in avisos])
        self.assertIs(TipoAviso.WARNING, avisos[0].type)

    def test_longitud_cero_es_info(self):
        avisos = check_inputs(10, 400, 0)
        self.assertEqual([TipoAviso.INFO], [a.type for a in avisos])


class TestValidacionCompleta(unittest.TestCase):
    def test_seleccion_limpia(self):
        out = validate_cable_calculation(_cu("10mm²"), 20, 230, 10, 1.0, "air", 1.0)
        self.assertEqual((), out.warnings)
        self.assertFalse(out.requires_verification)

    def test_sobrecarga_requiere_verificacion(self):
        res = calculate_cable_size(SizingRequest(load_amps=20, voltage=230, total_length=10))
        spec = default_catalog().get(res.recommended_size)
        out = validate_cable_calculation(spec, 40, 230, 10, res.voltage_drop_percent, "air", 1.0)
        self.assertTrue(out.has_errors)
        self.assertGreaterEqual(len(out.errors), 1)
        self.assertTrue(out.requires_verification)

    def test_aviso_general_al_final(self):
        out = validate_cable_calculation(_cu("2.5mm²"), 24, 230, 10, 1.0, "air", 1.0)
        self.assertEqual(2, len(out.warnings))
        self.assertIn(MARCA_VERIFICACION, out.warnings[-1].message)
        self.assertTrue(out.requires_verification)
        self.assertFalse(out.has_errors)

    def test_longitud_cero_tambien_pide_firma(self):
        out = validate_cable_calculation(_cu("10mm²"), 20, 400, 0, 0.0, "air", 1.0)
        self.assertEqual([TipoAviso.INFO, TipoAviso.WARNING], [w.type for w in out.warnings])
        self.assertTrue(out.requires_verification)

    def test_as_dict(self):
        out = validate_cable_calculation(_cu("2.5mm²"), 30, 230, 10, 1.0, "air", 1.0)
        d = out.warnings[0].as_dict()
        self.assertEqual("error", d["type"])
        self.assertEqual("cable_size", d["field"])
        self.assertNotIn("field", out.warnings[-1].as_dict())


if __name__ == "__main__":
    unittest.main()
