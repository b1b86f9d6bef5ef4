"""Typer CLI for room cost estimation and scene layout."""

import json
import logging
from pathlib import Path
from typing import Annotated, Any

import typer

from roomcost.application import RoomSession, create_label_formatter, create_session
from roomcost.application.config import (
    ConfigError,
    RoomConfiguration,
    load_config,
    load_config_from_dict,
)
from roomcost.application.factory import create_display_formatter
from roomcost.cli.commands import validate_command
from roomcost.domain import Vector3
from roomcost.infrastructure import CostReportFormatter, RecordingRenderer

logger = logging.getLogger(__name__)

# Price per m² used when no layers are configured, as in the single-price form.
DEFAULT_UNIT_PRICE = 15.0

app = typer.Typer(
    name="roomcost",
    help="Estimate room surface areas and material costs, and lay out the 3D view.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Room cost estimator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


LengthOption = Annotated[
    float | None, typer.Option("--length", "-l", help="Room length in meters")
]
WidthOption = Annotated[
    float | None, typer.Option("--width", "-w", help="Room width in meters")
]
HeightOption = Annotated[
    float | None, typer.Option("--height", "-h", help="Room height in meters")
]
PriceOption = Annotated[
    float | None,
    typer.Option(
        "--price",
        "-p",
        help="Price per m² for a single layer covering walls, floor and ceiling",
    ),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON room configuration file"),
]


def _build_config(
    config_file: Path | None,
    length: float | None,
    width: float | None,
    height: float | None,
    price: float | None,
) -> RoomConfiguration:
    """Load the configuration file, if any, and apply CLI overrides.

    Dimensions given on the command line replace the configured ones. When
    no layers are configured a single layer covering every surface is added,
    priced with ``--price``.
    """
    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
    else:
        config = RoomConfiguration()

    overrides = {
        name: value
        for name, value in (("length", length), ("width", width), ("height", height))
        if value is not None
    }
    if any(value < 0 for value in overrides.values()):
        typer.echo("Error: dimensions cannot be negative", err=True)
        raise typer.Exit(code=1)
    data: dict[str, Any] = config.model_dump()
    data["room"].update(overrides)

    if not data["layers"]:
        data["layers"] = [
            {
                "name": "Standard finish",
                "unit_price": price if price is not None else DEFAULT_UNIT_PRICE,
                "wall_count": 4,
                "applies_floor": True,
                "applies_ceiling": True,
            }
        ]
    elif price is not None:
        typer.echo("Warning: --price ignored, configuration defines layers", err=True)

    try:
        return load_config_from_dict(data, path=config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _emit_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


@app.command()
def estimate(
    config_file: ConfigOption = None,
    length: LengthOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    price: PriceOption = None,
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text or json")
    ] = "text",
) -> None:
    """Compute surface areas and the cost of every material layer."""
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format} (use text or json)", err=True)
        raise typer.Exit(code=1)

    config = _build_config(config_file, length, width, height, price)
    snapshot = create_session(config).recompute()

    if output_format == "json":
        _emit_json(snapshot.report.to_dict())
    else:
        formatter = CostReportFormatter(create_display_formatter(config))
        typer.echo(formatter.format(snapshot.report))


@app.command()
def scene(
    config_file: ConfigOption = None,
    length: LengthOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    price: PriceOption = None,
    no_font: Annotated[
        bool,
        typer.Option("--no-font", help="Simulate a renderer whose font has not loaded"),
    ] = False,
) -> None:
    """Print the scene layout and what a renderer would be told to draw."""
    config = _build_config(config_file, length, width, height, price)
    renderer = RecordingRenderer(
        font_ready=not no_font,
        camera_position=Vector3.from_sequence(config.camera.initial_position),
    )
    session = create_session(config, renderer=renderer)
    snapshot = session.recompute()

    _emit_json(
        {
            "snapshot": snapshot.to_dict(create_label_formatter(config)),
            "renderer": renderer.to_dict(),
        }
    )


def _parse_vector(value: str) -> Vector3:
    try:
        return Vector3.from_sequence(part.strip() for part in value.split(","))
    except ValueError as e:
        raise typer.BadParameter("expected three comma-separated numbers, e.g. 10,10,10") from e


def _run_camera(session: RoomSession, ticks: int, dt: float | None) -> int:
    """Tick until the camera settles or ``ticks`` runs out; return ticks used."""
    for count in range(1, ticks + 1):
        session.tick(dt)
        if not session.camera.is_retargeting:
            return count
    return ticks


@app.command()
def camera(
    config_file: ConfigOption = None,
    length: LengthOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    position: Annotated[
        str | None,
        typer.Option("--camera", help="Starting camera position as x,y,z"),
    ] = None,
    ticks: Annotated[
        int, typer.Option("--ticks", "-t", min=0, help="Maximum animation ticks")
    ] = 600,
    dt: Annotated[
        float | None,
        typer.Option("--dt", help="Frame time in seconds (fixed step when omitted)"),
    ] = None,
) -> None:
    """Simulate camera retargeting after the room changes size."""
    config = _build_config(config_file, length, width, height, None)
    session = create_session(config)
    if position is not None:
        session.camera_position = _parse_vector(position)

    snapshot = session.recompute()
    used = _run_camera(session, ticks, dt) if session.camera.is_retargeting else 0
    final = session.camera_position

    _emit_json(
        {
            "fit_distance": session.camera.fit_distance(session.room.max_dimension),
            "initial_position": list(snapshot.camera_position.as_tuple()),
            "initial_distance": snapshot.camera_position.length,
            "decision": snapshot.camera_state.value,
            "target": (
                list(snapshot.camera_target.as_tuple()) if snapshot.camera_target else None
            ),
            "ticks": used,
            "final_position": list(final.as_tuple()),
            "final_distance": final.length,
            "final_state": session.camera.state.value,
        }
    )


if __name__ == "__main__":
    app()
