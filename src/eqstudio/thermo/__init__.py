from .base import ThermoInterface
from .standard import StandardStateThermo, equilibrium_composition

__all__ = ["ThermoInterface", "StandardStateThermo", "equilibrium_composition"]
