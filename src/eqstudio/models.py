"""Data structures for species and reversible reactions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Species:
    formula: str
    coefficient: int
    initial_concentration: float
    display_color: str = "#9ca3af"

    def __post_init__(self) -> None:
        if not self.formula:
            raise ValueError("Species formula must be a non-empty string")
        if isinstance(self.coefficient, bool) or not isinstance(self.coefficient, int) or self.coefficient <= 0:
            raise ValueError(f"Coefficient of {self.formula} must be a positive integer, got {self.coefficient!r}")
        if self.initial_concentration < 0:
            raise ValueError(f"Initial concentration of {self.formula} must be non-negative")


@dataclass(frozen=True)
class ReactionModel:
    """Immutable description of a reversible elementary reaction.

    Attributes:
        identifier: Catalog key of the reaction.
        reactants: Species consumed by the forward direction, in display order.
        products: Species produced by the forward direction, in display order.
        k_forward_base: Forward rate constant at the recommended temperature.
        k_reverse_base: Reverse rate constant at the recommended temperature.
        activation_energy_forward: Forward barrier (kJ/mol).
        activation_energy_reverse: Reverse barrier (kJ/mol).
        standard_enthalpy: ΔH° (kJ/mol).
        standard_entropy: ΔS° (J/(mol·K)).
        recommended_temperature: Starting temperature (K).
        recommended_pressure: Starting pressure (atm).
        recommended_volume: Starting volume (L).
    """

    identifier: str
    name: str
    equation: str
    reactants: Tuple[Species, ...]
    products: Tuple[Species, ...]
    k_forward_base: float
    k_reverse_base: float
    activation_energy_forward: float
    activation_energy_reverse: float
    standard_enthalpy: float
    standard_entropy: float
    recommended_temperature: float = 298.0
    recommended_pressure: float = 1.0
    recommended_volume: float = 10.0
    description: str = ""
    difficulty: str = ""
    recommended_catalyst: str = "none"
    catalyst_reason: str = field(default="", repr=False)

    def __post_init__(self) -> None:
        # Accept any sequence but store tuples so the model stays hashable.
        object.__setattr__(self, "reactants", tuple(self.reactants))
        object.__setattr__(self, "products", tuple(self.products))

        if not self.reactants or not self.products:
            raise ValueError(f"Reaction {self.identifier} needs at least one reactant and one product")

        formulas = [sp.formula for sp in self.species]
        duplicates = sorted({f for f in formulas if formulas.count(f) > 1})
        if duplicates:
            raise ValueError(f"Duplicate species in reaction {self.identifier}: {', '.join(duplicates)}")

        positive = {
            "k_forward_base": self.k_forward_base,
            "k_reverse_base": self.k_reverse_base,
            "activation_energy_forward": self.activation_energy_forward,
            "activation_energy_reverse": self.activation_energy_reverse,
            "recommended_temperature": self.recommended_temperature,
            "recommended_pressure": self.recommended_pressure,
            "recommended_volume": self.recommended_volume,
        }
        for key, value in positive.items():
            if not value > 0:
                raise ValueError(f"{key} of reaction {self.identifier} must be positive, got {value!r}")

    @property
    def species(self) -> Tuple[Species, ...]:
        return self.reactants + self.products

    @property
    def formulas(self) -> Tuple[str, ...]:
        return tuple(sp.formula for sp in self.species)

    @property
    def delta_n(self) -> int:
        """Change in moles of species per reaction event."""
        return sum(sp.coefficient for sp in self.products) - sum(sp.coefficient for sp in self.reactants)

    def species_by_formula(self, formula: str) -> Optional[Species]:
        for sp in self.species:
            if sp.formula == formula:
                return sp
        return None

    def initial_concentrations(self) -> Dict[str, float]:
        return {sp.formula: float(sp.initial_concentration) for sp in self.species}
