"""Command-line entrypoints for GasFlows."""

from __future__ import annotations

import json
import logging
from functools import reduce
from pathlib import Path
from typing import Annotated, Any, Dict, List

import typer

from gasflows.catalog import DEFAULT_CATALOG, ChemicalCatalog
from gasflows.exceptions import ConfigurationError, GasFlowsError
from gasflows.gas import Gas
from gasflows.report import characteristics_payload, show_characteristics

app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)

DEMO_MASS_FRACTIONS_1 = (0.87, 0.07, 0.01, 0.01, 0.01, 0.015, 0.0, 0.0, 0.005, 0.005, 0.005)
DEMO_MASS_FRACTIONS_2 = (0.97, 0.02, 0.003, 0.003, 0.001, 0.002, 0.0, 0.0, 0.001, 0.0, 0.0)


def _parse_stream(data: Dict[str, Any], catalog: ChemicalCatalog) -> Gas:
    if not isinstance(data, dict):
        raise ConfigurationError("Each stream must be a JSON object")
    missing = [
        key
        for key in ("composition", "temperature", "pressure", "mass_flux")
        if key not in data
    ]
    if missing:
        label = data.get("name", "stream")
        raise ConfigurationError(f"{label}: missing {', '.join(missing)}")

    try:
        temperature = float(data["temperature"])
        pressure = float(data["pressure"])
        mass_flux = float(data["mass_flux"])
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid stream state: {exc}") from exc

    return Gas.from_characteristics(
        catalog,
        data["composition"],
        temperature=temperature,
        pressure=pressure,
        mass_flux=mass_flux,
    )


def _parse_streams(config: Dict[str, Any], catalog: ChemicalCatalog) -> List[Gas]:
    streams = config.get("streams")
    if not isinstance(streams, list) or len(streams) < 2:
        raise ConfigurationError("Config needs a 'streams' list with at least two entries")
    return [_parse_stream(stream, catalog) for stream in streams]


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging.")
    ] = False,
) -> None:
    """Thermophysical characteristics of gas streams and their mixtures."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def demo() -> None:
    """Mix the two reference natural-gas streams and print the result."""
    gas1 = Gas.from_characteristics(DEFAULT_CATALOG, DEMO_MASS_FRACTIONS_1, 318, 4, 10)
    gas2 = Gas.from_characteristics(DEFAULT_CATALOG, DEMO_MASS_FRACTIONS_2, 260, 6, 20)
    mixture = Gas.mix(gas1, gas2, DEFAULT_CATALOG)
    show_characteristics(mixture, title="Characteristics of mixture")


@app.command()
def mix(
    config_file: Annotated[
        Path, typer.Argument(help="Path to JSON file describing the streams.")
    ],
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the result as JSON.")
    ] = False,
    output: Annotated[
        Path | None, typer.Option(help="Path to save output JSON.")
    ] = None,
) -> None:
    """Mix the gas streams listed in a config file, left to right."""
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = json.load(f)
    except (OSError, ValueError) as exc:
        # ValueError covers both malformed JSON and undecodable bytes
        typer.echo(f"Error: cannot read {config_file}: {exc}", err=True)
        raise typer.Exit(code=1)

    try:
        if not isinstance(config, dict):
            raise ConfigurationError("Config must be a JSON object")
        streams = _parse_streams(config, DEFAULT_CATALOG)
        strict = config.get("strict", False)
        if not isinstance(strict, bool):
            raise ConfigurationError(f"'strict' must be true or false, got {strict!r}")
        mixture = reduce(
            lambda left, right: Gas.mix(left, right, DEFAULT_CATALOG, strict=strict),
            streams,
        )
    except GasFlowsError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    logger.info("Mixed %d streams from %s", len(streams), config_file)
    if not as_json:
        show_characteristics(mixture, title="Characteristics of mixture")
    if not (as_json or output):
        return

    payload = characteristics_payload(mixture)
    try:
        json_output = json.dumps(payload, indent=2, allow_nan=False)
    except ValueError:
        typer.echo(
            "Error: mixture properties are not finite and cannot be written as JSON; "
            "check the stream mass fluxes",
            err=True,
        )
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json_output)
    if output:
        with open(output, "w") as f:
            f.write(json_output)


@app.command()
def catalog() -> None:
    """List the chemicals known to the default catalog."""
    for chemical in DEFAULT_CATALOG:
        typer.echo(
            f"{chemical.name}: M={chemical.molar_mass} kg/mol, "
            f"k={chemical.heat_capacity_ratio}, "
            f"R={chemical.specific_gas_constant:.2f} J/(kg*K)"
        )
