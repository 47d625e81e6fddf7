"""Constant ΔH°/ΔS° thermodynamics for a single reversible reaction."""

from __future__ import annotations

from typing import Dict, Mapping

import numpy as np
from scipy.optimize import brentq

from eqstudio.constants import QUOTIENT_FLOOR, R_GAS, R_GAS_KJ
from eqstudio.models import ReactionModel
from eqstudio.thermo.base import ThermoInterface


class StandardStateThermo(ThermoInterface):
    """Equilibrium thermodynamics with temperature-independent ΔH° and ΔS°.

    Kc comes from ΔG° = ΔH° - T·ΔS° alone. The kinetic rate constants are
    never consulted, so anything that only touches kinetics (a catalyst, a
    rolling Arrhenius adjustment) cannot move the equilibrium constant.
    """

    def __init__(self, reaction: ReactionModel):
        self.reaction = reaction

    def standard_gibbs(self, temperature: float) -> float:
        # ΔH in kJ/mol, ΔS in J/(mol·K)
        return self.reaction.standard_enthalpy - temperature * self.reaction.standard_entropy / 1000.0

    def equilibrium_constant(self, temperature: float) -> float:
        delta_g_standard = self.reaction.standard_enthalpy * 1000.0 - temperature * self.reaction.standard_entropy
        with np.errstate(over="ignore", under="ignore"):
            return float(np.exp(-delta_g_standard / (R_GAS * temperature)))

    def reaction_quotient(self, concentrations: Mapping[str, float]) -> float:
        with np.errstate(over="ignore", under="ignore", invalid="ignore", divide="ignore"):
            numerator = self._activity_product(self.reaction.products, concentrations)
            denominator = self._activity_product(self.reaction.reactants, concentrations)
            return float(np.divide(numerator, denominator))

    @staticmethod
    def _activity_product(species: tuple, concentrations: Mapping[str, float]) -> float:
        values = np.array([concentrations.get(sp.formula, 0.0) for sp in species], dtype=float)
        orders = np.array([sp.coefficient for sp in species], dtype=float)
        return np.prod(np.power(np.maximum(values, QUOTIENT_FLOOR), orders))

    def gibbs_energy(self, temperature: float, concentrations: Mapping[str, float]) -> float:
        quotient = self.reaction_quotient(concentrations)
        with np.errstate(divide="ignore", invalid="ignore"):
            return self.standard_gibbs(temperature) + R_GAS_KJ * temperature * float(np.log(quotient))


def equilibrium_composition(
    reaction: ReactionModel,
    concentrations: Mapping[str, float],
    temperature: float,
) -> Dict[str, float]:
    """Concentrations at which Q equals the thermodynamic Kc.

    The state is parametrised by the reaction extent ξ (mol/L), so that
    C_i = C_i0 + nu_i * ξ, and ln Q(ξ) - ln Kc is solved with Brent's method.
    ln Q is strictly increasing in ξ, which makes the root unique inside the
    interval where every concentration stays non-negative.
    """
    start = {sp.formula: max(float(concentrations.get(sp.formula, 0.0)), 0.0) for sp in reaction.species}
    stoichiometry = {sp.formula: -sp.coefficient for sp in reaction.reactants}
    stoichiometry.update({sp.formula: sp.coefficient for sp in reaction.products})

    extent_min = max(-start[sp.formula] / sp.coefficient for sp in reaction.products)
    extent_max = min(start[sp.formula] / sp.coefficient for sp in reaction.reactants)
    span = extent_max - extent_min
    if span <= 0.0:
        return start

    log_k = np.log(StandardStateThermo(reaction).equilibrium_constant(temperature))

    def at_extent(extent: float) -> Dict[str, float]:
        return {name: max(start[name] + nu * extent, 0.0) for name, nu in stoichiometry.items()}

    def residual(extent: float) -> float:
        state = at_extent(extent)
        log_q = sum(nu * np.log(state[name]) for name, nu in stoichiometry.items())
        return float(log_q - log_k)

    margin = span * 1e-12
    lower = extent_min + margin
    upper = extent_max - margin
    if residual(lower) >= 0.0:
        return at_extent(lower)
    if residual(upper) <= 0.0:
        return at_extent(upper)

    root = brentq(residual, lower, upper, xtol=span * 1e-15, maxiter=500)
    return at_extent(root)
