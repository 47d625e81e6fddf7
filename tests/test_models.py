import unittest

from eqstudio.library import all_reactions, get_reaction_by_id, load_reaction
from eqstudio.models import ReactionModel, Species


def _reaction(**overrides):
    params = dict(
        identifier="a_b",
        name="A to B",
        equation="A ⇌ B",
        reactants=(Species("A", 1, 1.0),),
        products=(Species("B", 1, 0.0),),
        k_forward_base=1.0,
        k_reverse_base=0.5,
        activation_energy_forward=50.0,
        activation_energy_reverse=60.0,
        standard_enthalpy=-10.0,
        standard_entropy=0.0,
    )
    params.update(overrides)
    return ReactionModel(**params)


class TestReactionModel(unittest.TestCase):
    def test_accessors(self):
        reaction = get_reaction_by_id("haber_bosch")
        self.assertEqual(reaction.formulas, ("N₂", "H₂", "NH₃"))
        self.assertEqual(reaction.delta_n, -2)
        self.assertEqual(reaction.species_by_formula("H₂").coefficient, 3)
        self.assertIsNone(reaction.species_by_formula("Ar"))
        self.assertEqual(reaction.initial_concentrations(), {"N₂": 1.0, "H₂": 3.0, "NH₃": 0.0})

    def test_initial_concentrations_are_copies(self):
        reaction = get_reaction_by_id("n2o4_no2")
        first = reaction.initial_concentrations()
        first["N₂O₄"] = 99.0
        self.assertEqual(reaction.initial_concentrations()["N₂O₄"], 2.0)

    def test_duplicate_formula_rejected(self):
        with self.assertRaises(ValueError):
            _reaction(products=(Species("A", 1, 0.0),))

    def test_non_positive_parameters_rejected(self):
        with self.assertRaises(ValueError):
            _reaction(k_reverse_base=0.0)
        with self.assertRaises(ValueError):
            _reaction(recommended_volume=-1.0)
        with self.assertRaises(ValueError):
            Species("A", 0, 1.0)
        with self.assertRaises(ValueError):
            Species("A", 1, -0.1)

    def test_sequences_stored_as_tuples(self):
        reaction = _reaction(reactants=[Species("A", 1, 1.0)])
        self.assertIsInstance(reaction.reactants, tuple)


class TestLibrary(unittest.TestCase):
    def test_catalog(self):
        ids = [r.identifier for r in all_reactions()]
        self.assertEqual(ids, ["n2o4_no2", "h2_i2_hi", "pcl5_pcl3", "fe_scn", "co_cocl2", "haber_bosch"])

    def test_unknown_reaction_is_none(self):
        self.assertIsNone(get_reaction_by_id("does_not_exist"))

    def test_load_reaction(self):
        reaction = load_reaction(
            {
                "id": "custom",
                "reactants": [{"formula": "A", "coefficient": 2, "initial_concentration": 1.0}],
                "products": [{"formula": "B", "coefficient": 1, "color": "#ff0000"}],
                "k_forward": 0.2,
                "k_reverse": 0.1,
                "Ea_forward": 40,
                "Ea_reverse": 50,
                "deltaH": -5.0,
                "deltaS": -10.0,
                "recommended": {"temperature": 350},
            }
        )
        self.assertEqual(reaction.name, "custom")
        self.assertEqual(reaction.reactants[0].coefficient, 2)
        self.assertEqual(reaction.products[0].display_color, "#ff0000")
        self.assertEqual(reaction.products[0].initial_concentration, 0.0)
        self.assertEqual(reaction.recommended_temperature, 350.0)
        self.assertEqual(reaction.recommended_volume, 10.0)

    def test_load_reaction_keeps_catalyst_reason(self):
        reaction = load_reaction(dict(self._minimal(), recommended_catalyst="platinum", catalyst_reason="Lowers Ea."))
        self.assertEqual(reaction.recommended_catalyst, "platinum")
        self.assertEqual(reaction.catalyst_reason, "Lowers Ea.")

    def test_load_reaction_coefficients(self):
        data = self._minimal()
        data["reactants"] = [{"formula": "A", "coefficient": 2.0, "initial_concentration": 1.0}]
        self.assertEqual(load_reaction(data).reactants[0].coefficient, 2)
        data["reactants"] = [{"formula": "A", "coefficient": 1.5, "initial_concentration": 1.0}]
        with self.assertRaises(ValueError):
            load_reaction(data)
        data["reactants"] = [{"formula": "A", "coefficient": "1.5", "initial_concentration": 1.0}]
        with self.assertRaises(ValueError):
            load_reaction(data)

    @staticmethod
    def _minimal():
        return {
            "id": "custom",
            "reactants": [{"formula": "A", "initial_concentration": 1.0}],
            "products": [{"formula": "B"}],
            "k_forward": 1.0,
            "k_reverse": 1.0,
            "Ea_forward": 40,
            "Ea_reverse": 40,
            "deltaH": 0.0,
            "deltaS": 0.0,
        }


if __name__ == '__main__':
    unittest.main()
