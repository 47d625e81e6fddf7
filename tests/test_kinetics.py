import math
import unittest

from eqstudio.catalysts import acceleration_factor, get_catalyst_by_id
from eqstudio.kinetics import ArrheniusKinetics, MassActionKinetics


class TestKinetics(unittest.TestCase):
    def test_mass_action(self):
        # r = k * C_A^1 * C_B^2
        law = MassActionKinetics(orders={"A": 1, "B": 2})
        rate = law.rate(10.0, {"A": 2.0, "B": 0.5})
        self.assertAlmostEqual(rate, 5.0)

    def test_mass_action_floors_negative_and_missing(self):
        law = MassActionKinetics(orders={"A": 1, "B": 1})
        self.assertEqual(law.rate(3.0, {"A": -1.0, "B": 1.0}), 0.0)
        self.assertEqual(law.rate(3.0, {"A": 1.0}), 0.0)

    def test_mass_action_saturates_instead_of_raising(self):
        law = MassActionKinetics(orders={"A": 2})
        self.assertEqual(law.rate(1.0, {"A": 1e200}), math.inf)

    def test_arrhenius_ratio(self):
        kin = ArrheniusKinetics(rate_constant=0.48, activation_energy=54.0)
        scaled = kin.rescaled(298.0, 308.0)
        expected = 0.48 * math.exp((54000.0 / 8.314) * (1 / 298.0 - 1 / 308.0))
        self.assertAlmostEqual(scaled.rate_constant, expected, places=12)
        self.assertGreater(scaled.rate_constant, kin.rate_constant)
        # Same barrier and same temperatures give the same factor regardless of k.
        other = ArrheniusKinetics(rate_constant=1e-9, activation_energy=54.0)
        self.assertAlmostEqual(other.scaling_factor(298.0, 308.0), kin.scaling_factor(298.0, 308.0))

    def test_arrhenius_same_temperature_is_identity(self):
        kin = ArrheniusKinetics(rate_constant=2.5, activation_energy=120.0)
        self.assertEqual(kin.scaling_factor(400.0, 400.0), 1.0)


class TestCatalysts(unittest.TestCase):
    def test_no_reduction_gives_unit_factor(self):
        self.assertEqual(acceleration_factor(0.0, 298.0), 1.0)
        self.assertEqual(acceleration_factor(-10.0, 298.0), 1.0)

    def test_acceleration_factor(self):
        factor = acceleration_factor(35.0, 298.0)
        self.assertAlmostEqual(factor, math.exp(35.0 / (8.314e-3 * 298.0)))
        # A larger reduction always accelerates more; higher T dampens the effect.
        self.assertGreater(acceleration_factor(45.0, 298.0), factor)
        self.assertLess(acceleration_factor(35.0, 700.0), factor)

    def test_lookup_falls_back_to_no_catalyst(self):
        self.assertEqual(get_catalyst_by_id("platinum").ea_reduction, 35.0)
        fallback = get_catalyst_by_id("unobtainium")
        self.assertEqual(fallback.identifier, "none")
        self.assertEqual(fallback.ea_reduction, 0.0)


if __name__ == '__main__':
    unittest.main()
