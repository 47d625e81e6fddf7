"""Equilibrium Studio core package."""

from eqstudio.catalysts import Catalyst, acceleration_factor, get_catalyst_by_id
from eqstudio.engine import EquilibriumEngine, SystemInfo
from eqstudio.history import History, HistoryRecord
from eqstudio.library import all_reactions, get_reaction_by_id, load_reaction
from eqstudio.models import ReactionModel, Species
from eqstudio.simulation import SimulationSession, SimulationSettings

__all__ = [
    "Catalyst",
    "acceleration_factor",
    "get_catalyst_by_id",
    "EquilibriumEngine",
    "SystemInfo",
    "History",
    "HistoryRecord",
    "all_reactions",
    "get_reaction_by_id",
    "load_reaction",
    "ReactionModel",
    "Species",
    "SimulationSession",
    "SimulationSettings",
]
