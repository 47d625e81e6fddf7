import math
import unittest

from eqstudio.library import get_reaction_by_id
from eqstudio.thermo import StandardStateThermo, equilibrium_composition


class TestStandardStateThermo(unittest.TestCase):
    def setUp(self):
        self.reaction = get_reaction_by_id("n2o4_no2")
        self.thermo = StandardStateThermo(self.reaction)

    def test_equilibrium_constant(self):
        delta_g = 57.2 * 1000.0 - 298.0 * 176.0
        expected = math.exp(-delta_g / (8.314 * 298.0))
        self.assertAlmostEqual(self.thermo.equilibrium_constant(298.0), expected, places=12)
        # Rate constants were chosen to match the thermodynamic K.
        ratio = self.reaction.k_forward_base / self.reaction.k_reverse_base
        self.assertAlmostEqual(self.thermo.equilibrium_constant(298.0), ratio, delta=0.01 * ratio)

    def test_endothermic_k_rises_with_temperature(self):
        self.assertGreater(self.thermo.equilibrium_constant(350.0), self.thermo.equilibrium_constant(298.0))

    def test_reaction_quotient(self):
        q = self.thermo.reaction_quotient({"N₂O₄": 2.0, "NO₂": 0.1})
        self.assertAlmostEqual(q, 0.1**2 / 2.0)

    def test_reaction_quotient_floors_zero(self):
        q = self.thermo.reaction_quotient({"N₂O₄": 0.0, "NO₂": 0.0})
        self.assertAlmostEqual(q, 1e-20 / 1e-10)
        self.assertTrue(math.isfinite(q))

    def test_gibbs_energy(self):
        conc = {"N₂O₄": 2.0, "NO₂": 0.1}
        standard = 57.2 - 298.0 * 176.0 / 1000.0
        expected = standard + 8.314e-3 * 298.0 * math.log(0.1**2 / 2.0)
        self.assertAlmostEqual(self.thermo.gibbs_energy(298.0, conc), expected, places=10)
        self.assertLess(self.thermo.gibbs_energy(298.0, conc), 0.0)

    def test_gibbs_energy_zero_at_kc(self):
        kc = self.thermo.equilibrium_constant(298.0)
        # [NO2]^2 / [N2O4] = Kc with [N2O4] = 1
        conc = {"N₂O₄": 1.0, "NO₂": math.sqrt(kc)}
        self.assertAlmostEqual(self.thermo.gibbs_energy(298.0, conc), 0.0, places=9)


class TestEquilibriumComposition(unittest.TestCase):
    def test_n2o4(self):
        reaction = get_reaction_by_id("n2o4_no2")
        state = equilibrium_composition(reaction, reaction.initial_concentrations(), 298.0)
        thermo = StandardStateThermo(reaction)
        kc = thermo.equilibrium_constant(298.0)
        self.assertAlmostEqual(thermo.reaction_quotient(state) / kc, 1.0, places=6)
        # Moles of nitrogen are conserved: 2[N2O4] + [NO2]
        self.assertAlmostEqual(2 * state["N₂O₄"] + state["NO₂"], 2 * 2.0 + 0.1, places=9)
        self.assertAlmostEqual(state["NO₂"], 0.513, delta=0.005)

    def test_strongly_product_favoured(self):
        reaction = get_reaction_by_id("co_cocl2")
        state = equilibrium_composition(reaction, reaction.initial_concentrations(), 373.0)
        self.assertAlmostEqual(state["COCl₂"], 1.5, places=6)
        self.assertAlmostEqual(state["Cl₂"], 1.0, places=6)
        self.assertGreaterEqual(state["CO"], 0.0)
        thermo = StandardStateThermo(reaction)
        ratio = thermo.reaction_quotient(state) / thermo.equilibrium_constant(373.0)
        self.assertAlmostEqual(ratio, 1.0, delta=1e-3)

    def test_degenerate_start_is_unchanged(self):
        reaction = get_reaction_by_id("h2_i2_hi")
        start = {"H₂": 0.0, "I₂": 1.0, "HI": 0.0}
        self.assertEqual(equilibrium_composition(reaction, start, 700.0), start)


if __name__ == '__main__':
    unittest.main()
