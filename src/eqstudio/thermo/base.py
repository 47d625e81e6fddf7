"""Base interface for reaction thermodynamics."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping


class ThermoInterface(ABC):
    """Abstract base class for reaction equilibrium property packages."""

    @abstractmethod
    def standard_gibbs(self, temperature: float) -> float:
        """Standard Gibbs energy of reaction ΔG° (kJ/mol)."""
        pass

    @abstractmethod
    def equilibrium_constant(self, temperature: float) -> float:
        """Concentration equilibrium constant Kc."""
        pass

    @abstractmethod
    def reaction_quotient(self, concentrations: Mapping[str, float]) -> float:
        """Reaction quotient Q at arbitrary concentrations."""
        pass

    @abstractmethod
    def gibbs_energy(self, temperature: float, concentrations: Mapping[str, float]) -> float:
        """Gibbs energy of reaction ΔG (kJ/mol) at the given state."""
        pass
