import unittest
from decimal import Decimal

from cable_sizing import precision as px


class TestPrecision(unittest.TestCase):
    def test_suma_sin_deriva_binaria(self):
        self.assertEqual(Decimal("0.3"), px.add(0.1, 0.2))
        self.assertEqual(Decimal("0.1"), px.subtract("0.3", 0.2))

    def test_multiplicacion(self):
        self.assertEqual(Decimal("255.64"), px.multiply("6.391", 40))

    def test_division_por_cero_etiquetada(self):
        q = px.divide(10, 0)
        self.assertFalse(q.ok)
        self.assertFalse(q)
        self.assertEqual(Decimal(0), q.valor)

    def test_cero_legitimo_es_ok(self):
        q = px.divide(0, 5)
        self.assertTrue(q.ok)
        self.assertEqual(Decimal(0), q.valor)

    def test_dividir_o_cero_compat(self):
        self.assertEqual(Decimal(0), px.dividir_o_cero(5, 0))
        self.assertEqual(Decimal("2.5"), px.dividir_o_cero(5, 2))

    def test_porcentaje(self):
        self.assertEqual(Decimal(25), px.percentage_of(1, 4).valor)
        self.assertFalse(px.percentage_of(1, 0).ok)

    def test_redondeo_half_up(self):
        self.assertEqual(Decimal("2.35"), px.round_to("2.345", 2))
        self.assertEqual(Decimal("3.79"), px.round_to("3.7925", 2))
        self.assertEqual(Decimal("3"), px.round_to("2.5", 0))
        with self.assertRaises(ValueError):
            px.round_to(1, -1)

    def test_precision_interna(self):
        q = px.divide(1, 3).valor
        self.assertEqual(px.PRECISION_INTERNA, len(q.as_tuple().digits))

    def test_techo(self):
        self.assertEqual(3, px.techo("2.01"))
        self.assertEqual(2, px.techo(2))

    def test_conversion_invalida(self):
        with self.assertRaises(ValueError):
            px.a_decimal("abc")
        with self.assertRaises(TypeError):
            px.a_decimal(True)
        with self.assertRaises(TypeError):
            px.a_decimal([1])

    def test_a_float(self):
        self.assertEqual(6.39, px.a_float("6.391"))


if __name__ == "__main__":
    unittest.main()
