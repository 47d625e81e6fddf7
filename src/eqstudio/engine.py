"""Equilibrium kinetics engine for a single reversible reaction.

The engine owns the mutable simulation state (concentrations, conditions,
catalyst, elapsed time and recorded history) for one reaction and advances
it with explicit Euler steps of the mass-action rate law:

    rate_f = k_f * prod(C_reactant ** nu)
    rate_r = k_r * prod(C_product ** nu)
    dC_reactant = -nu * (rate_f - rate_r) * dt
    dC_product  = +nu * (rate_f - rate_r) * dt

Two sources of truth are kept apart:

- Kinetics: rate constants start at the reaction's base values and are
  rescaled relative to their previous value on every temperature change
  (ratio form of the Arrhenius equation). A catalyst multiplies both
  directions by the same factor.
- Thermodynamics: Kc is always computed from ΔH° and ΔS° at the current
  temperature and never from the rate constants.

There is no adaptive step control. Callers pick ``dt`` small compared with
the fastest effective rate constant.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from eqstudio.catalysts import acceleration_factor
from eqstudio.constants import EQUILIBRIUM_TOLERANCE, MIN_ACTIVATION_ENERGY
from eqstudio.history import History, HistoryRecord
from eqstudio.kinetics import ArrheniusKinetics, MassActionKinetics
from eqstudio.models import ReactionModel
from eqstudio.thermo import StandardStateThermo

logger = logging.getLogger(__name__)

FORWARD = "forward"
REVERSE = "reverse"
EQUILIBRIUM = "equilibrium"


@dataclass(frozen=True)
class ActivationEnergies:
    forward_original: float
    reverse_original: float
    forward_reduced: float
    reverse_reduced: float
    reduction: float


@dataclass(frozen=True)
class SystemInfo:
    """Snapshot of the engine state and its derived quantities."""

    temperature: float
    pressure: float
    volume: float
    time: float
    concentrations: Mapping[str, float]
    kc: float
    quotient: float
    delta_g: float
    direction: str
    at_equilibrium: bool
    forward_rate: float
    reverse_rate: float

    def as_dict(self) -> Dict[str, Any]:
        return {
            "temperature": self.temperature,
            "pressure": self.pressure,
            "volume": self.volume,
            "time": self.time,
            "concentrations": dict(self.concentrations),
            "Kc": self.kc,
            "Q": self.quotient,
            "deltaG": self.delta_g,
            "direction": self.direction,
            "atEquilibrium": self.at_equilibrium,
            "forwardRate": self.forward_rate,
            "reverseRate": self.reverse_rate,
        }


def _require_positive(name: str, value: float) -> float:
    if not value > 0:
        raise ValueError(f"{name} must be positive, got {value!r}")
    return float(value)


def _clamp_non_negative(value: float) -> float:
    # NaN compares false and is clamped to zero along with negatives.
    return value if value > 0.0 else 0.0


class EquilibriumEngine:
    """Simulation state and operations for one reversible reaction.

    An engine is bound to a single ``ReactionModel`` for its lifetime; to
    switch reactions, build a new engine. Instances are not thread-safe and
    expect a single writer.
    """

    def __init__(self, reaction: ReactionModel):
        self.reaction = reaction
        self.thermo = StandardStateThermo(reaction)
        self._forward_law = MassActionKinetics.from_species(reaction.reactants)
        self._reverse_law = MassActionKinetics.from_species(reaction.products)
        self.history = History()
        self._restore_initial_state()

    def _restore_initial_state(self) -> None:
        self._concentrations: Dict[str, float] = self.reaction.initial_concentrations()
        self.temperature = float(self.reaction.recommended_temperature)
        self.pressure = float(self.reaction.recommended_pressure)
        self.volume = float(self.reaction.recommended_volume)
        self.catalyst_reduction = 0.0
        self.time = 0.0
        self.adjusted_forward_rate: Optional[float] = None
        self.adjusted_reverse_rate: Optional[float] = None
        self.history.clear()

    @property
    def concentrations(self) -> Mapping[str, float]:
        """Read-only live view; use ``set_concentration`` to change values."""
        return MappingProxyType(self._concentrations)

    def concentration(self, formula: str) -> float:
        return self._concentrations.get(formula, 0.0)

    def set_temperature(self, temperature: float) -> None:
        """Move to a new temperature, rescaling both rate constants.

        Each call scales from the currently adjusted constants, so a chain
        of changes composes and returning to the starting temperature
        restores the starting constants.
        """
        new_temperature = _require_positive("temperature", temperature)
        old_temperature = self.temperature

        forward = ArrheniusKinetics(self._base_forward_rate(), self.reaction.activation_energy_forward)
        reverse = ArrheniusKinetics(self._base_reverse_rate(), self.reaction.activation_energy_reverse)

        self.adjusted_forward_rate = forward.rescaled(old_temperature, new_temperature).rate_constant
        self.adjusted_reverse_rate = reverse.rescaled(old_temperature, new_temperature).rate_constant
        self.temperature = new_temperature
        logger.debug(
            "Temperature %.2f K -> %.2f K (kf=%.4g, kr=%.4g)",
            old_temperature,
            new_temperature,
            self.adjusted_forward_rate,
            self.adjusted_reverse_rate,
        )

    def set_pressure(self, pressure: float) -> None:
        # Stored for display only; not coupled into rates or Kc.
        self.pressure = _require_positive("pressure", pressure)

    def set_volume(self, volume: float) -> None:
        """Change the volume at constant moles, rescaling every concentration."""
        new_volume = _require_positive("volume", volume)
        factor = self.volume / new_volume
        for formula in self._concentrations:
            self._concentrations[formula] *= factor
        logger.debug("Volume %.3f L -> %.3f L (concentration factor %.4g)", self.volume, new_volume, factor)
        self.volume = new_volume

    def set_catalyst(self, ea_reduction: float) -> None:
        self.catalyst_reduction = max(float(ea_reduction), 0.0)
        logger.debug("Catalyst activation-energy reduction set to %.1f kJ/mol", self.catalyst_reduction)

    def set_concentration(self, formula: str, value: float) -> None:
        """Set one concentration; formulas outside the reaction are ignored."""
        if formula in self._concentrations:
            self._concentrations[formula] = max(float(value), 0.0)

    def _base_forward_rate(self) -> float:
        if self.adjusted_forward_rate is not None:
            return self.adjusted_forward_rate
        return self.reaction.k_forward_base

    def _base_reverse_rate(self) -> float:
        if self.adjusted_reverse_rate is not None:
            return self.adjusted_reverse_rate
        return self.reaction.k_reverse_base

    def catalyst_acceleration_factor(self) -> float:
        return acceleration_factor(self.catalyst_reduction, self.temperature)

    def forward_rate_constant(self) -> float:
        return self._base_forward_rate() * self.catalyst_acceleration_factor()

    def reverse_rate_constant(self) -> float:
        # Same factor as the forward direction, so k_f / k_r is untouched.
        return self._base_reverse_rate() * self.catalyst_acceleration_factor()

    def effective_activation_energies(self) -> ActivationEnergies:
        ea_forward = self.reaction.activation_energy_forward
        ea_reverse = self.reaction.activation_energy_reverse
        return ActivationEnergies(
            forward_original=ea_forward,
            reverse_original=ea_reverse,
            forward_reduced=max(ea_forward - self.catalyst_reduction, MIN_ACTIVATION_ENERGY),
            reverse_reduced=max(ea_reverse - self.catalyst_reduction, MIN_ACTIVATION_ENERGY),
            reduction=self.catalyst_reduction,
        )

    def forward_rate(self) -> float:
        return self._forward_law.rate(self.forward_rate_constant(), self._concentrations)

    def reverse_rate(self) -> float:
        return self._reverse_law.rate(self.reverse_rate_constant(), self._concentrations)

    def equilibrium_constant(self) -> float:
        return self.thermo.equilibrium_constant(self.temperature)

    def reaction_quotient(self) -> float:
        return self.thermo.reaction_quotient(self._concentrations)

    def gibbs_energy(self) -> float:
        return self.thermo.gibbs_energy(self.temperature, self._concentrations)

    def is_at_equilibrium(self, tolerance: float = EQUILIBRIUM_TOLERANCE) -> bool:
        kc = self.equilibrium_constant()
        if not kc > 0.0:
            # Kc underflowed to zero at very low temperature.
            return False
        return bool(abs(self.reaction_quotient() - kc) / kc < tolerance)

    def reaction_direction(self) -> str:
        if self.is_at_equilibrium():
            return EQUILIBRIUM
        return FORWARD if self.reaction_quotient() < self.equilibrium_constant() else REVERSE

    def system_info(self) -> SystemInfo:
        return SystemInfo(
            temperature=self.temperature,
            pressure=self.pressure,
            volume=self.volume,
            time=self.time,
            concentrations=dict(self._concentrations),
            kc=self.equilibrium_constant(),
            quotient=self.reaction_quotient(),
            delta_g=self.gibbs_energy(),
            direction=self.reaction_direction(),
            at_equilibrium=self.is_at_equilibrium(),
            forward_rate=self.forward_rate(),
            reverse_rate=self.reverse_rate(),
        )

    def step(self, dt: float) -> HistoryRecord:
        """Advance one explicit Euler step of length ``dt`` and record it.

        The new concentrations, the record and the elapsed time are computed
        first and committed together, so a failure leaves the engine as it
        was before the call.
        """
        dt = _require_positive("dt", dt)
        rate_forward = self.forward_rate()
        rate_reverse = self.reverse_rate()
        net_rate = rate_forward - rate_reverse

        updated = dict(self._concentrations)
        for sp in self.reaction.reactants:
            updated[sp.formula] = _clamp_non_negative(updated[sp.formula] - net_rate * sp.coefficient * dt)
        for sp in self.reaction.products:
            updated[sp.formula] = _clamp_non_negative(updated[sp.formula] + net_rate * sp.coefficient * dt)

        new_time = self.time + dt
        record = HistoryRecord(
            time=new_time,
            concentrations=dict(updated),
            forward_rate=rate_forward,
            reverse_rate=rate_reverse,
            quotient=self.thermo.reaction_quotient(updated),
            delta_g=self.thermo.gibbs_energy(self.temperature, updated),
        )
        self.history.append(record)
        self._concentrations.update(updated)
        self.time = new_time
        return record

    def run(self, duration: float, dt: float) -> int:
        """Step repeatedly until ``duration`` has elapsed; returns the step count."""
        dt = _require_positive("dt", dt)
        if duration < 0:
            raise ValueError(f"duration must be non-negative, got {duration!r}")
        steps = int(round(duration / dt))
        for _ in range(steps):
            self.step(dt)
        return steps

    def reset(self) -> None:
        """Return to the state of a freshly constructed engine."""
        self._restore_initial_state()
        logger.info("Engine reset for reaction %s", self.reaction.identifier)
