"""SQLite project files for recorded equilibrium runs.

A project holds any number of runs. Each run keeps the reaction id, the
conditions and frame settings it was simulated under, a JSON manifest of
its final state, and the recorded history flattened into one
``(time, variable, value)`` row per sample.
"""

from __future__ import annotations

import json
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, Sequence, Tuple

from eqstudio.history import History

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS project (
  id INTEGER PRIMARY KEY,
  name TEXT NOT NULL,
  created_utc TEXT
);
CREATE TABLE IF NOT EXISTS run (
  id INTEGER PRIMARY KEY,
  project_id INTEGER REFERENCES project(id),
  reaction TEXT,
  conditions JSON,
  settings JSON,
  manifest JSON,
  started TEXT,
  steps INTEGER
);
CREATE TABLE IF NOT EXISTS profile (
  run_id INTEGER REFERENCES run(id),
  x REAL,
  var TEXT,
  value REAL,
  unit TEXT,
  PRIMARY KEY (run_id, x, var)
);
"""

CONCENTRATION_UNIT = "mol/L"
RATE_UNIT = "mol/(L·s)"
GIBBS_UNIT = "kJ/mol"


def connect(project_file: str | Path) -> sqlite3.Connection:
    """Open an ``.eqproj`` file, creating it and its parent directory if needed."""
    path = Path(project_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    connection = sqlite3.connect(path)
    connection.execute("PRAGMA foreign_keys = ON;")
    return connection


def ensure_schema(connection: sqlite3.Connection) -> None:
    connection.executescript(SCHEMA_SQL)
    connection.commit()


def create_project(connection: sqlite3.Connection, name: str, created_utc: str | None = None) -> int:
    cursor = connection.execute(
        "INSERT INTO project (name, created_utc) VALUES (?, ?)",
        (name, created_utc or _utc_now()),
    )
    connection.commit()
    return int(cursor.lastrowid)


def save_run(
    connection: sqlite3.Connection,
    project_id: int,
    reaction: str,
    conditions: Mapping[str, object],
    settings: Mapping[str, object],
    manifest: Mapping[str, object],
    started_utc: str | None = None,
    steps: int | None = None,
) -> int:
    """Store one simulated run under ``project_id``; returns the new run id.

    ``conditions`` are the engine's temperature, pressure, volume and
    catalyst, ``settings`` the frame timing, ``manifest`` the final state.
    """
    row = (
        project_id,
        reaction,
        _json_dumps(conditions),
        _json_dumps(settings),
        _json_dumps(manifest),
        started_utc or _utc_now(),
        steps,
    )
    cursor = connection.execute(
        "INSERT INTO run (project_id, reaction, conditions, settings, manifest, started, steps)"
        " VALUES (?, ?, ?, ?, ?, ?, ?)",
        row,
    )
    connection.commit()
    return int(cursor.lastrowid)


def save_profile(
    connection: sqlite3.Connection,
    run_id: int,
    x_values: Sequence[float],
    series: Mapping[str, Sequence[float]],
    units: Mapping[str, str | None] | None = None,
) -> None:
    """Write every series sampled at ``x_values`` as rows of the profile table."""
    connection.executemany(
        "INSERT INTO profile (run_id, x, var, value, unit) VALUES (?, ?, ?, ?, ?)",
        _profile_rows(run_id, x_values, series, units or {}),
    )
    connection.commit()


def save_history(
    connection: sqlite3.Connection,
    run_id: int,
    history: History,
    formulas: Iterable[str],
) -> None:
    """Persist a recorded history: concentrations, both rates, Q and ΔG over time."""
    formulas = list(formulas)
    series: Dict[str, Sequence[float]] = {
        formula: history.concentration_series(formula).tolist() for formula in formulas
    }
    series["forward_rate"] = history.forward_rates().tolist()
    series["reverse_rate"] = history.reverse_rates().tolist()
    series["Q"] = history.quotients().tolist()
    series["deltaG"] = history.gibbs_energies().tolist()

    units: Dict[str, str | None] = dict.fromkeys(formulas, CONCENTRATION_UNIT)
    units.update({"forward_rate": RATE_UNIT, "reverse_rate": RATE_UNIT, "Q": None, "deltaG": GIBBS_UNIT})
    save_profile(connection, run_id, history.times().tolist(), series, units)


def load_profile(connection: sqlite3.Connection, run_id: int) -> Dict[str, List[Tuple[float, float]]]:
    """Read a run back as ``{variable: [(time, value), ...]}`` in time order."""
    profile: Dict[str, List[Tuple[float, float]]] = {}
    rows = connection.execute(
        "SELECT var, x, value FROM profile WHERE run_id = ? ORDER BY var, x",
        (run_id,),
    )
    for variable, x_value, value in rows:
        profile.setdefault(variable, []).append((x_value, value))
    return profile


def _profile_rows(
    run_id: int,
    x_values: Sequence[float],
    series: Mapping[str, Sequence[float]],
    units: Mapping[str, str | None],
) -> Iterator[Tuple[int, float, str, float, str | None]]:
    for index, x_value in enumerate(x_values):
        for variable, values in series.items():
            yield run_id, float(x_value), variable, float(values[index]), units.get(variable)


def _json_dumps(payload: Mapping[str, object]) -> str:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()
