"""
CLI for prototyping responses: build an envelope from options and print its JSON.
Example: jsonenvelope render --error "Invalid form" --field-error email="Required" --data id=5
"""
from __future__ import annotations

import json
import math
from typing import Any, Optional

import typer

from jsonenvelope.core.config import load_settings
from jsonenvelope.core.envelope import ResponseEnvelope
from jsonenvelope.logging_config import configure_logging

app = typer.Typer(help="jsonenvelope CLI: render response envelopes.")


@app.callback()
def _root() -> None:
    """Keeps `render` as an explicit subcommand."""


def _split_pair(option: str, pair: str) -> tuple[str, str]:
    name, sep, value = pair.partition("=")
    if not sep or not name:
        raise typer.BadParameter(f"expected NAME=VALUE, got {pair!r}", param_hint=option)
    return name, value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number {name}")


def _finite_float(text: str) -> float:
    number = float(text)
    if math.isinf(number):
        raise ValueError(f"non-finite number {text}")
    return number


def _decode(value: str) -> Any:
    """
    JSON value if it parses (5, true, {"a": 1}), else the raw string.
    NaN, Infinity and overflowing numbers stay strings so the output remains valid JSON.
    """
    try:
        return json.loads(value, parse_constant=_reject_constant, parse_float=_finite_float)
    except ValueError:
        return value


@app.command()
def render(
    success: Optional[str] = typer.Option(None, "--success", help="Mark success with this message"),
    error: Optional[str] = typer.Option(None, "--error", help="Mark error with this message"),
    field_error: list[str] = typer.Option([], "--field-error", help="Field error NAME=MESSAGE (repeatable)"),
    data: list[str] = typer.Option([], "--data", help="Payload field KEY=VALUE, VALUE decoded as JSON if possible"),
    debug_entry: list[str] = typer.Option([], "--debug-entry", help="Debug entry TITLE=VALUE (repeatable)"),
    redirect: Optional[str] = typer.Option(None, "--redirect", help="Redirect URL"),
    debug: Optional[bool] = typer.Option(None, "--debug/--no-debug", help="Include debug entries"),
    protect_reserved: Optional[bool] = typer.Option(
        None, "--protect-reserved/--payload-wins", help="Keep reserved keys when payload keys collide"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log to stderr at DEBUG level"),
) -> None:
    """Build an envelope and print it as JSON."""
    if verbose:
        configure_logging("DEBUG")
    if success is not None and error is not None:
        raise typer.BadParameter("use either --success or --error, not both", param_hint="--success")
    if success is not None and field_error:
        raise typer.BadParameter(
            "--field-error marks an error; it cannot be combined with --success", param_hint="--success"
        )
    try:
        settings = load_settings()
    except ValueError as exc:
        typer.echo(f"Invalid environment: {exc}", err=True)
        raise typer.Exit(2)

    envelope = ResponseEnvelope()
    for pair in data:
        key, value = _split_pair("--data", pair)
        envelope.set_data_field(key, _decode(value))
    for pair in debug_entry:
        title, value = _split_pair("--debug-entry", pair)
        envelope.add_debug(_decode(value), title)
    if redirect is not None:
        envelope.request_redirect(redirect)
    if error is not None or field_error:
        errors = dict(_split_pair("--field-error", pair) for pair in field_error)
        envelope.mark_error(error, errors)
    elif success is not None:
        envelope.mark_success(success)

    if debug is None:
        debug = settings.debug
    if protect_reserved is None:
        protect_reserved = settings.protect_reserved
    typer.echo(envelope.to_json(debug, protect_reserved=protect_reserved))


def main() -> None:
    """Entry point for the jsonenvelope console command."""
    app()


if __name__ == "__main__":
    main()
