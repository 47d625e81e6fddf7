"""CSV and JSON serializers for engine history and configuration."""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path
from typing import Any, Dict, Sequence

from eqstudio.engine import EquilibriumEngine
from eqstudio.history import History


def history_to_csv(history: History, formulas: Sequence[str]) -> str:
    """One row per recorded step: time, concentrations, rates, Q and ΔG."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(
        ["Time(s)"]
        + [f"{formula}(mol/L)" for formula in formulas]
        + ["Forward Rate", "Reverse Rate", "Q", "DeltaG(kJ/mol)"]
    )
    for record in history:
        writer.writerow(
            [f"{record.time:.3f}"]
            + [f"{record.concentrations.get(formula, 0.0):.6f}" for formula in formulas]
            + [
                f"{record.forward_rate:.6f}",
                f"{record.reverse_rate:.6f}",
                f"{record.quotient:.6f}",
                f"{record.delta_g:.6f}",
            ]
        )
    return buffer.getvalue()


def write_history_csv(history: History, formulas: Sequence[str], path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(history_to_csv(history, formulas), encoding="utf-8")
    return path


def config_payload(engine: EquilibriumEngine) -> Dict[str, Any]:
    return {
        "reaction": engine.reaction.identifier,
        "temperature": engine.temperature,
        "pressure": engine.pressure,
        "volume": engine.volume,
        "concentrations": dict(engine.concentrations),
    }


def write_config_json(engine: EquilibriumEngine, path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config_payload(engine), ensure_ascii=False, indent=2), encoding="utf-8")
    return path
