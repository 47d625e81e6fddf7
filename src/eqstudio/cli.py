"""Command-line entrypoints for Equilibrium Studio."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Dict

import typer

from eqstudio.catalysts import all_catalysts
from eqstudio.export import write_config_json, write_history_csv
from eqstudio.library import all_reactions, get_reaction_by_id, load_reaction
from eqstudio.models import ReactionModel
from eqstudio.persistence import sqlite_store
from eqstudio.plotting import CHART_MODES, save_history_plot
from eqstudio.simulation import SimulationSession, SimulationSettings

app = typer.Typer(add_completion=False)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Interactive equilibrium kinetics simulator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _parse_reaction_file(path: Path) -> ReactionModel:
    with open(path, "r", encoding="utf-8") as f:
        data: Dict[str, Any] = json.load(f)
    return load_reaction(data)


def _resolve_reaction(reaction_id: str, reaction_file: Path | None) -> ReactionModel:
    if reaction_file is not None:
        return _parse_reaction_file(reaction_file)
    reaction = get_reaction_by_id(reaction_id)
    if reaction is None:
        known = ", ".join(r.identifier for r in all_reactions())
        typer.echo(f"Unknown reaction '{reaction_id}'. Available: {known}", err=True)
        raise typer.Exit(code=1)
    return reaction


@app.command()
def reactions() -> None:
    """List the built-in reactions."""
    for reaction in all_reactions():
        typer.echo(f"{reaction.identifier:<12} {reaction.equation:<22} {reaction.name}")


@app.command()
def catalysts() -> None:
    """List the available catalysts."""
    for catalyst in all_catalysts():
        typer.echo(f"{catalyst.identifier:<10} {catalyst.ea_reduction:>5.1f} kJ/mol  {catalyst.name}")


@app.command()
def run(
    reaction_id: Annotated[str, typer.Argument(help="Catalog id of the reaction.")] = "n2o4_no2",
    reaction_file: Annotated[
        Path | None, typer.Option(help="JSON file describing a custom reaction.")
    ] = None,
    temperature: Annotated[float | None, typer.Option(help="Temperature (K).")] = None,
    pressure: Annotated[float | None, typer.Option(help="Pressure (atm).")] = None,
    volume: Annotated[float | None, typer.Option(help="Volume (L).")] = None,
    catalyst: Annotated[str, typer.Option(help="Catalyst id.")] = "none",
    frames: Annotated[int, typer.Option(help="Number of frames to simulate.")] = 2000,
    frame_dt: Annotated[float, typer.Option(help="Seconds per frame.")] = 0.016,
    speed: Annotated[float, typer.Option(help="Playback speed multiplier.")] = 1.0,
    time_scale: Annotated[int, typer.Option(help="Time scale: 1, 10, 100, 1000 or 10000.")] = 1,
    csv: Annotated[Path | None, typer.Option(help="Write the history as CSV.")] = None,
    config: Annotated[Path | None, typer.Option(help="Write the final configuration as JSON.")] = None,
    plot: Annotated[Path | None, typer.Option(help="Save a chart of the history.")] = None,
    plot_mode: Annotated[str, typer.Option(help=f"Chart mode: {', '.join(CHART_MODES)}.")] = "concentration",
    project_file: Annotated[
        Path | None,
        typer.Option(help="Optional .eqproj file to persist results."),
    ] = None,
) -> None:
    """Run a reaction towards equilibrium and print the final state as JSON."""
    reaction = _resolve_reaction(reaction_id, reaction_file)
    settings = SimulationSettings(frame_dt=frame_dt, speed=speed, time_scale=time_scale)
    session = SimulationSession(reaction, settings)

    if temperature is not None:
        session.engine.set_temperature(temperature)
    if pressure is not None:
        session.engine.set_pressure(pressure)
    if volume is not None:
        session.engine.set_volume(volume)
    session.select_catalyst(catalyst)

    session.run_frames(frames)
    result = session.result()
    engine = session.engine

    if csv is not None:
        write_history_csv(engine.history, reaction.formulas, csv)
    if config is not None:
        write_config_json(engine, config)
    if plot is not None:
        save_history_plot(engine.history, reaction, str(plot), mode=plot_mode)

    if project_file is not None:
        connection = sqlite_store.connect(project_file)
        sqlite_store.ensure_schema(connection)
        project_id = sqlite_store.create_project(
            connection,
            name=f"{reaction.name} session",
        )
        run_id = sqlite_store.save_run(
            connection,
            project_id=project_id,
            reaction=reaction.identifier,
            conditions={
                "temperature": engine.temperature,
                "pressure": engine.pressure,
                "volume": engine.volume,
                "catalyst": result.catalyst_id,
                "ea_reduction": engine.catalyst_reduction,
            },
            settings={"frame_dt": frame_dt, "speed": speed, "time_scale": time_scale},
            manifest={"final_state": result.final_state, "equilibrium_frame": result.equilibrium_frame},
            steps=result.frames,
        )
        sqlite_store.save_history(connection, run_id, engine.history, reaction.formulas)
        connection.close()

    payload = {
        "reaction": result.reaction_id,
        "catalyst": result.catalyst_id,
        "frames": result.frames,
        "equilibrium_frame": result.equilibrium_frame,
        "final": result.final_state,
    }
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
