"""Matplotlib charts of recorded engine history."""

from __future__ import annotations

from matplotlib.axes import Axes
from matplotlib.figure import Figure

from eqstudio.history import History
from eqstudio.models import ReactionModel

CHART_MODES = ("concentration", "rates", "gibbs")


def plot_history(
    history: History,
    reaction: ReactionModel,
    mode: str = "concentration",
    axes: Axes | None = None,
) -> Axes:
    """Draw one history series onto ``axes`` (a new figure when omitted)."""
    if mode not in CHART_MODES:
        raise ValueError(f"Unknown chart mode: {mode}")

    if axes is None:
        figure = Figure(figsize=(6, 4), tight_layout=True)
        axes = figure.add_subplot(1, 1, 1)

    axes.clear()
    time = history.times()

    if mode == "concentration":
        for sp in reaction.species:
            axes.plot(time, history.concentration_series(sp.formula), label=sp.formula, color=sp.display_color)
        axes.set_ylabel("Concentration (mol/L)")
    elif mode == "rates":
        axes.plot(time, history.forward_rates(), label="Forward rate", color="#10b981")
        axes.plot(time, history.reverse_rates(), label="Reverse rate", color="#ef4444")
        axes.set_ylabel("Rate (mol/(L·s))")
    else:
        axes.plot(time, history.gibbs_energies(), label="ΔG", color="#6366f1")
        axes.axhline(0.0, color="#9ca3af", linewidth=0.8, linestyle="--")
        axes.set_ylabel("ΔG (kJ/mol)")

    axes.set_xlabel("Time (s)")
    axes.set_title(reaction.equation)
    axes.legend()
    return axes


def save_history_plot(history: History, reaction: ReactionModel, path: str, mode: str = "concentration") -> None:
    axes = plot_history(history, reaction, mode)
    axes.figure.savefig(path)
