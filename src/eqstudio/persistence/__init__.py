"""Persistence helpers for Equilibrium Studio."""

from eqstudio.persistence.sqlite_store import (
    connect,
    create_project,
    ensure_schema,
    load_profile,
    save_history,
    save_profile,
    save_run,
)

__all__ = [
    "connect",
    "create_project",
    "ensure_schema",
    "load_profile",
    "save_history",
    "save_profile",
    "save_run",
]
