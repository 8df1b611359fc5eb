"""CLI for popup-position."""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path

import click

from popup_position import __version__
from popup_position.model import PointerType, PopupPosition, PositionMode
from popup_position.parser import Scenario, parse_scenario
from popup_position.render import render_svg
from popup_position.themes import THEMES

MODE_CHOICES = [m.value for m in PositionMode]
POINTER_CHOICES = [p.value for p in PointerType]


def _load(input_file: Path) -> Scenario:
    """Read and parse a scenario, exiting with status 1 on bad input."""
    try:
        return parse_scenario(input_file.read_text())
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


def _format_position(position: PopupPosition | None) -> str:
    if position is None:
        return "infeasible"
    text = f"x={position.x:g}, y={position.y:g}"
    if position.constrain_width is not None:
        text += f", constrain_width={position.constrain_width:g}"
    if position.constrain_height is not None:
        text += f", constrain_height={position.constrain_height:g}"
    return text


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """popup-position: Place a popup next to a pointer inside a safe area."""


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--mode", type=click.Choice(MODE_CHOICES), default=None,
              help="Override the scenario's position mode")
@click.option("--pointer", type=click.Choice(POINTER_CHOICES), default=None,
              help="Override the scenario's pointer type")
@click.option("--vertical/--horizontal", "vertical_text", default=None,
              help="Override the scenario's text orientation")
def place(
    input_file: Path,
    mode: str | None,
    pointer: str | None,
    vertical_text: bool | None,
) -> None:
    """Compute the popup position for a scenario and print it as JSON."""
    scenario = _load(input_file)

    if mode is not None:
        scenario = replace(scenario, position_mode=PositionMode(mode))
    if pointer is not None:
        scenario = replace(scenario, pointer_type=PointerType(pointer))
    if vertical_text is not None:
        scenario = replace(scenario, is_vertical_text=vertical_text)

    click.echo(json.dumps(scenario.compute().as_dict()))


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def explain(input_file: Path) -> None:
    """Show every candidate and how the final position was chosen."""
    scenario = _load(input_file)
    explanation = scenario.explain()
    stage = explanation.stage
    bounds = explanation.bounds

    click.echo(f"Title: {scenario.title or '(none)'}")
    click.echo(f"Stage: {stage.width:g} x {stage.height:g}")
    click.echo(f"Safe area: left={bounds.left:g}, right={bounds.right:g}, "
               f"top={bounds.top:g}, bottom={bounds.bottom:g}")
    click.echo(f"Mode: {scenario.position_mode.value}, "
               f"pointer: {scenario.pointer_type.value}, "
               f"text: {'vertical' if scenario.is_vertical_text else 'horizontal'}")

    if explanation.order:
        click.echo("Candidates:")
        for placement in explanation.order:
            candidate = explanation.candidates.get(placement)
            click.echo(f"  {placement.value}: {_format_position(candidate)}")
        click.echo(f"Order: {', '.join(p.value for p in explanation.order)}")

    selection = explanation.selection
    chosen = selection.placement.value if selection.placement else "(none)"
    click.echo(f"Chosen: {chosen} (tier: {selection.tier})")
    click.echo(f"Result: {_format_position(explanation.result)}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="dark",
              help="Visual theme (default: dark)")
def render(input_file: Path, output: Path | None, theme: str) -> None:
    """Render a diagram of a scenario's placement to SVG."""
    scenario = _load(input_file)
    svg = render_svg(scenario, THEMES[theme])

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg + "\n")
    result = scenario.compute()
    click.echo(f"Rendered popup at ({result.x:g}, {result.y:g}) -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a scenario file."""
    scenario = _load(input_file)

    errors = []
    if scenario.document.client_width <= 0 or scenario.document.client_height <= 0:
        errors.append("Stage width and height must be positive")

    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {scenario.popup_size.width:g} x {scenario.popup_size.height:g} "
               f"popup, {scenario.position_mode.value} mode, "
               f"{scenario.pointer_type.value} pointer")
    if scenario.position_mode is PositionMode.AUTO and scenario.mouse_pos is None:
        click.echo("Note: no pointer position; placing relative to (0, 0)")
