"""Kinetics helpers: Arrhenius temperature scaling and mass-action rate laws."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Mapping, Protocol

import numpy as np

from eqstudio.constants import R_GAS
from eqstudio.models import Species


class RateLaw(Protocol):
    def rate(self, rate_constant: float, concentrations: Mapping[str, float]) -> float:
        """Calculate a directional reaction rate from a rate constant and concentrations."""
        ...


@dataclass(frozen=True)
class ArrheniusKinetics:
    """A rate constant together with the barrier that governs its temperature dependence.

    Attributes:
        rate_constant: k at the temperature this state was last scaled to.
        activation_energy: Ea (kJ/mol).
    """

    rate_constant: float
    activation_energy: float

    def scaling_factor(self, old_temperature: float, new_temperature: float) -> float:
        """k(T_new) / k(T_old) from the ratio form of the Arrhenius equation."""
        exponent = (self.activation_energy * 1000.0 / R_GAS) * (1.0 / old_temperature - 1.0 / new_temperature)
        with np.errstate(over="ignore"):
            return float(np.exp(exponent))

    def rescaled(self, old_temperature: float, new_temperature: float) -> ArrheniusKinetics:
        factor = self.scaling_factor(old_temperature, new_temperature)
        return replace(self, rate_constant=self.rate_constant * factor)


@dataclass(frozen=True)
class MassActionKinetics:
    """Elementary rate law: rate = k * prod(max(C_i, 0) ** nu_i)."""

    orders: Mapping[str, int]

    @classmethod
    def from_species(cls, species: tuple[Species, ...]) -> MassActionKinetics:
        return cls(orders={sp.formula: sp.coefficient for sp in species})

    def rate(self, rate_constant: float, concentrations: Mapping[str, float]) -> float:
        values = np.array([concentrations.get(formula, 0.0) for formula in self.orders], dtype=float)
        if not np.all(values > 0.0):
            return 0.0
        orders = np.array(list(self.orders.values()), dtype=float)
        # Runaway steps saturate at inf instead of raising OverflowError.
        with np.errstate(over="ignore", invalid="ignore"):
            return float(rate_constant * np.prod(np.power(values, orders)))
