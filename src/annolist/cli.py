"""Typer-based CLI for inspecting a frame's objects list."""

from __future__ import annotations

import functools
import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich import print

from annolist.domain.aggregate import aggregate
from annolist.domain.models import ObjectState, StatesOrdering
from annolist.domain.ordering import sort_and_map
from annolist.errors import AnnoListError
from annolist.errors.handler import ErrorHandler
from annolist.events.bus import EventBus
from annolist.gui.factories.viewmodel_factory import ViewModelFactory
from annolist.infrastructure.memory_session import InMemoryAnnotationSession
from annolist.utils.console_logger import ensure_console_logger

app = typer.Typer(help="Inspect and bulk-edit the objects list of an annotated frame")


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except AnnoListError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc
        except (OSError, ValueError, KeyError) as exc:
            typer.echo(f"Invalid states file: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


def _load_states(path: Path) -> List[ObjectState]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    return [
        ObjectState(
            client_id=int(item["clientID"]),
            hidden=bool(item.get("hidden", False)),
            lock=bool(item.get("lock", False)),
            updated=int(item.get("updated", 0)),
        )
        for item in payload
    ]


def _dump_states(states) -> str:
    return json.dumps(
        [
            {"clientID": s.client_id, "hidden": s.hidden, "lock": s.lock, "updated": s.updated}
            for s in states
        ],
        indent=2,
    )


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output")) -> None:
    ensure_console_logger(level=logging.DEBUG if verbose else logging.WARNING)


@app.command()
@_handle_errors
def inspect(
    states_file: Path = typer.Argument(..., exists=True, dir_okay=False),
    ordering: str = typer.Option("ID_ASCENT", help="ID_ASCENT, ID_DESCENT or UPDATED"),
) -> None:
    """Print the display order and header flags for a states file."""
    states = _load_states(states_file)
    flags = aggregate(states, {})
    print(f"[bold]order[/bold]: {sort_and_map(states, StatesOrdering.parse(ordering))}")
    print(f"all hidden: {flags.all_hidden}")
    print(f"all locked: {flags.all_locked}")


@app.command()
@_handle_errors
def toggle(
    field: str = typer.Argument(..., help="'lock' or 'hidden'"),
    states_file: Path = typer.Argument(..., exists=True, dir_okay=False),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write result here"),
) -> None:
    """Invert the all-locked or all-hidden state, as the t+l / t+h shortcuts do."""
    bus = EventBus()
    session = InMemoryAnnotationSession(bus, {0: _load_states(states_file)})
    error_handler = ErrorHandler(logging.getLogger(__name__), bus)
    failures: List[str] = []
    error_handler.register_ui_callback(lambda message, severity: failures.append(message))
    vm = ViewModelFactory(session, session, bus, error_handler=error_handler).create_objects_list_vm()
    vm.on_collection_changed(session.states())
    if field == "lock":
        vm.toggle_lock_all()
    elif field == "hidden":
        vm.toggle_hidden_all()
    else:
        raise typer.BadParameter("field must be 'lock' or 'hidden'")
    if failures:
        typer.echo(f"Error: could not save states: {failures[0]}", err=True)
        raise typer.Exit(1)
    result = _dump_states(session.states())
    if output is None:
        typer.echo(result)
    else:
        output.write_text(result, encoding="utf-8")


if __name__ == "__main__":
    app()
