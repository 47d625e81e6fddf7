"""Built-in catalog of reversible reactions.

Rate constants are scaled so that each reaction reaches equilibrium on a
timescale that can be watched interactively, and the reverse constant of
each reaction is set from the thermodynamic equilibrium constant at the
recommended temperature (k_reverse = k_forward / Kc).
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from eqstudio.models import ReactionModel, Species

REACTIONS: Dict[str, ReactionModel] = {
    reaction.identifier: reaction
    for reaction in (
        ReactionModel(
            identifier="n2o4_no2",
            name="Dinitrogen tetroxide dissociation",
            equation="N₂O₄ ⇌ 2NO₂",
            description="Gas-phase equilibrium with a visible colour change (colourless to brown)",
            difficulty="easy",
            reactants=(Species("N₂O₄", 1, 2.0, "#64748b"),),
            products=(Species("NO₂", 2, 0.1, "#d97706"),),
            k_forward_base=0.48,
            k_reverse_base=3.27,
            activation_energy_forward=54.0,
            activation_energy_reverse=33.0,
            standard_enthalpy=57.2,
            standard_entropy=176.0,
            recommended_catalyst="none",
            catalyst_reason="Naturally fast in the gas phase; equilibrium is visible within minutes.",
            recommended_temperature=298.0,
            recommended_pressure=1.0,
            recommended_volume=10.0,
        ),
        ReactionModel(
            identifier="h2_i2_hi",
            name="Hydrogen iodide synthesis",
            equation="H₂ + I₂ ⇌ 2HI",
            description="Classic equilibrium studied by Bodenstein (1899)",
            difficulty="easy",
            reactants=(
                Species("H₂", 1, 1.0, "#a5b4fc"),
                Species("I₂", 1, 1.0, "#7c3aed"),
            ),
            products=(Species("HI", 2, 0.0, "#fbbf24"),),
            k_forward_base=0.00234,
            k_reverse_base=0.0000338,
            activation_energy_forward=165.0,
            activation_energy_reverse=185.0,
            standard_enthalpy=-9.4,
            standard_entropy=21.8,
            recommended_catalyst="platinum",
            catalyst_reason="Platinum breaks H-H and I-I bonds efficiently, lowering Ea by ~35 kJ/mol.",
            recommended_temperature=700.0,
            recommended_pressure=1.0,
            recommended_volume=10.0,
        ),
        ReactionModel(
            identifier="pcl5_pcl3",
            name="Phosphorus pentachloride decomposition",
            equation="PCl₅ ⇌ PCl₃ + Cl₂",
            description="Equilibrium with a strong pressure dependence (Le Chatelier)",
            difficulty="medium",
            reactants=(Species("PCl₅", 1, 1.5, "#fde047"),),
            products=(
                Species("PCl₃", 1, 0.0, "#84cc16"),
                Species("Cl₂", 1, 0.0, "#10b981"),
            ),
            k_forward_base=0.00086,
            k_reverse_base=0.538,
            activation_energy_forward=210.0,
            activation_energy_reverse=175.0,
            standard_enthalpy=92.5,
            standard_entropy=142.0,
            recommended_catalyst="palladium",
            catalyst_reason="Palladium is active for P-Cl bond cleavage and cheaper than platinum.",
            recommended_temperature=473.0,
            recommended_pressure=1.0,
            recommended_volume=10.0,
        ),
        ReactionModel(
            identifier="fe_scn",
            name="Iron(III) thiocyanate formation",
            equation="Fe³⁺ + SCN⁻ ⇌ FeSCN²⁺",
            description="Near-instant ionic reaction with an intense blood-red colour",
            difficulty="medium",
            reactants=(
                Species("Fe³⁺", 1, 0.5, "#f59e0b"),
                Species("SCN⁻", 1, 0.5, "#c7d2fe"),
            ),
            products=(Species("FeSCN²⁺", 1, 0.0, "#dc2626"),),
            k_forward_base=18.0,
            k_reverse_base=0.075,
            activation_energy_forward=18.0,
            activation_energy_reverse=42.0,
            standard_enthalpy=-24.0,
            standard_entropy=-35.0,
            recommended_catalyst="none",
            catalyst_reason="Ionic reaction in aqueous solution; already effectively instantaneous.",
            recommended_temperature=298.0,
            recommended_pressure=1.0,
            recommended_volume=10.0,
        ),
        ReactionModel(
            identifier="co_cocl2",
            name="Phosgene synthesis",
            equation="CO + Cl₂ ⇌ COCl₂",
            description="Industrial phosgene production",
            difficulty="hard",
            reactants=(
                Species("CO", 1, 1.5, "#9ca3af"),
                Species("Cl₂", 1, 2.5, "#22c55e"),
            ),
            products=(Species("COCl₂", 1, 0.0, "#ef4444"),),
            # k_reverse is tiny: the reaction is close to irreversible at 373 K.
            k_forward_base=0.00014,
            k_reverse_base=6.57e-13,
            activation_energy_forward=98.0,
            activation_energy_reverse=112.0,
            standard_enthalpy=-107.6,
            standard_entropy=-129.0,
            recommended_catalyst="platinum",
            catalyst_reason="Industrial phosgene uses activated carbon with Pt/Pd; Pt resists Cl₂ corrosion.",
            recommended_temperature=373.0,
            recommended_pressure=1.0,
            recommended_volume=10.0,
        ),
        ReactionModel(
            identifier="haber_bosch",
            name="Haber-Bosch ammonia synthesis",
            equation="N₂ + 3H₂ ⇌ 2NH₃",
            description="N≡N triple bond is extremely strong; uncatalysed equilibrium takes millennia",
            difficulty="hard",
            reactants=(
                Species("N₂", 1, 1.0, "#3b82f6"),
                Species("H₂", 3, 3.0, "#a5b4fc"),
            ),
            products=(Species("NH₃", 2, 0.0, "#8b5cf6"),),
            k_forward_base=8.2e-8,
            k_reverse_base=0.00023,
            activation_energy_forward=335.0,
            activation_energy_reverse=290.0,
            standard_enthalpy=-92.4,
            standard_entropy=-198.0,
            recommended_catalyst="iron",
            catalyst_reason="Promoted iron lowers the barrier enough to reach equilibrium in minutes.",
            recommended_temperature=700.0,
            recommended_pressure=200.0,
            recommended_volume=10.0,
        ),
    )
}


def all_reactions() -> Tuple[ReactionModel, ...]:
    return tuple(REACTIONS.values())


def get_reaction_by_id(identifier: str) -> Optional[ReactionModel]:
    """Return the catalog reaction, or ``None`` when the id is unknown."""
    return REACTIONS.get(identifier)


def _parse_coefficient(value: Any) -> int:
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"Stoichiometric coefficient must be a whole number, got {value!r}")
    return int(number)


def _parse_species(data: Mapping[str, Any]) -> Species:
    return Species(
        formula=str(data["formula"]),
        coefficient=_parse_coefficient(data.get("coefficient", 1)),
        initial_concentration=float(data.get("initial_concentration", 0.0)),
        display_color=str(data.get("color", "#9ca3af")),
    )


def load_reaction(data: Mapping[str, Any]) -> ReactionModel:
    """Build a reaction from a JSON-shaped mapping.

    Required keys: ``id``, ``reactants``, ``products``, ``k_forward``,
    ``k_reverse``, ``Ea_forward``, ``Ea_reverse``, ``deltaH``, ``deltaS``.
    ``recommended`` may hold ``temperature``, ``pressure`` and ``volume``.
    """
    recommended = data.get("recommended", {})
    return ReactionModel(
        identifier=str(data["id"]),
        name=str(data.get("name", data["id"])),
        equation=str(data.get("equation", "")),
        description=str(data.get("description", "")),
        difficulty=str(data.get("difficulty", "")),
        reactants=tuple(_parse_species(sp) for sp in data["reactants"]),
        products=tuple(_parse_species(sp) for sp in data["products"]),
        k_forward_base=float(data["k_forward"]),
        k_reverse_base=float(data["k_reverse"]),
        activation_energy_forward=float(data["Ea_forward"]),
        activation_energy_reverse=float(data["Ea_reverse"]),
        standard_enthalpy=float(data["deltaH"]),
        standard_entropy=float(data["deltaS"]),
        recommended_catalyst=str(data.get("recommended_catalyst", "none")),
        catalyst_reason=str(data.get("catalyst_reason", "")),
        recommended_temperature=float(recommended.get("temperature", 298.0)),
        recommended_pressure=float(recommended.get("pressure", 1.0)),
        recommended_volume=float(recommended.get("volume", 10.0)),
    )
