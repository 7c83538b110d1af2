"""Text and JSON reports of gas characteristics."""

from __future__ import annotations

from typing import Any, Dict

import typer

from gasflows.gas import Gas


def format_characteristics(gas: Gas) -> str:
    lines = [
        f"Temperature: {gas.temperature} K",
        f"Pressure: {gas.pressure} atm",
        f"Mass flux: {gas.mass_flux} kg/s",
        f"Density: {gas.density} kg/m^3",
        "Composition:",
    ]
    for name, fraction in gas.composition.items():
        lines.append(f"{name} - {fraction}")
    return "\n".join(lines)


def show_characteristics(gas: Gas, title: str | None = None) -> None:
    """Print the characteristics of ``gas`` to stdout."""
    if title:
        typer.echo(title)
    typer.echo(format_characteristics(gas))


def characteristics_payload(gas: Gas) -> Dict[str, Any]:
    """Return the reported values as a dict for ``json.dumps``.

    A degenerate mixture carries nan/inf values, which strict JSON cannot
    represent; the ``mix`` command refuses to write those.
    """
    return {
        "temperature": gas.temperature,
        "pressure": gas.pressure,
        "mass_flux": gas.mass_flux,
        "density": gas.density,
        "isobaric_heat_capacity": gas.isobaric_heat_capacity,
        "specific_gas_constant": gas.specific_gas_constant,
        "composition": gas.composition,
    }
