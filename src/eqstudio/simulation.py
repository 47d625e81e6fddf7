"""Frame-driven simulation session around an equilibrium engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from eqstudio.catalysts import Catalyst, get_catalyst_by_id
from eqstudio.engine import EquilibriumEngine
from eqstudio.models import ReactionModel

logger = logging.getLogger(__name__)

TIME_SCALES = (1, 10, 100, 1000, 10000)


@dataclass(frozen=True)
class SimulationSettings:
    """Timing of the driver loop.

    Attributes:
        frame_dt: Wall-clock seconds per frame.
        speed: Playback multiplier.
        time_scale: Simulated seconds per wall-clock second, one of ``TIME_SCALES``.
    """

    frame_dt: float = 0.016
    speed: float = 1.0
    time_scale: int = 1

    def __post_init__(self) -> None:
        if not self.frame_dt > 0:
            raise ValueError(f"frame_dt must be positive, got {self.frame_dt!r}")
        if not self.speed > 0:
            raise ValueError(f"speed must be positive, got {self.speed!r}")
        if self.time_scale not in TIME_SCALES:
            raise ValueError(f"time_scale must be one of {TIME_SCALES}, got {self.time_scale!r}")

    @property
    def step_dt(self) -> float:
        return self.frame_dt * self.speed * self.time_scale


@dataclass(frozen=True)
class SimulationResult:
    reaction_id: str
    catalyst_id: str
    frames: int
    equilibrium_frame: Optional[int]
    final_state: Dict[str, Any]


class SimulationSession:
    """One interactive session: a reaction, its engine and the loop timing.

    The session owns timing and forwards condition changes; the engine has
    no notion of frames or of any presentation layer.
    """

    def __init__(self, reaction: ReactionModel, settings: SimulationSettings | None = None):
        self.settings = settings or SimulationSettings()
        self.catalyst: Catalyst = get_catalyst_by_id("none")
        self.frames = 0
        self.equilibrium_frame: Optional[int] = None
        self.engine = EquilibriumEngine(reaction)
        logger.info("Session started for %s (dt=%.4g s)", reaction.identifier, self.settings.step_dt)

    @property
    def reaction(self) -> ReactionModel:
        return self.engine.reaction

    def switch_reaction(self, reaction: ReactionModel) -> None:
        """Replace the engine with a fresh one bound to ``reaction``."""
        self.engine = EquilibriumEngine(reaction)
        self.catalyst = get_catalyst_by_id("none")
        self.frames = 0
        self.equilibrium_frame = None
        logger.info("Switched to reaction %s", reaction.identifier)

    def select_catalyst(self, identifier: str) -> Catalyst:
        self.catalyst = get_catalyst_by_id(identifier)
        self.engine.set_catalyst(self.catalyst.ea_reduction)
        return self.catalyst

    def tick(self) -> None:
        self.engine.step(self.settings.step_dt)
        self.frames += 1
        if self.equilibrium_frame is None and self.engine.is_at_equilibrium():
            self.equilibrium_frame = self.frames
            logger.info(
                "Equilibrium reached for %s at t=%.3f s (frame %d)",
                self.reaction.identifier,
                self.engine.time,
                self.frames,
            )

    def run_frames(self, count: int) -> None:
        for _ in range(count):
            self.tick()

    def run_until_equilibrium(self, max_frames: int) -> Optional[int]:
        """Tick until equilibrium is first reached or ``max_frames`` elapse."""
        for _ in range(max_frames):
            if self.equilibrium_frame is not None:
                break
            self.tick()
        return self.equilibrium_frame

    def reset(self) -> None:
        self.engine.reset()
        self.catalyst = get_catalyst_by_id("none")
        self.frames = 0
        self.equilibrium_frame = None

    def result(self) -> SimulationResult:
        return SimulationResult(
            reaction_id=self.reaction.identifier,
            catalyst_id=self.catalyst.identifier,
            frames=self.frames,
            equilibrium_frame=self.equilibrium_frame,
            final_state=self.engine.system_info().as_dict(),
        )
