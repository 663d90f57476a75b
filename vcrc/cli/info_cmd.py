"""CLI command for inspecting analysis files and listing refrigerants."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from vcrc.core.config import load_state_json
from vcrc.core.errors import VCRCError
from vcrc.core.fluids import Refrigerant, list_refrigerants
from vcrc.utils.units import pressure_from_si, temperature_from_si


@click.group("info")
@click.pass_context
def info(ctx: click.Context) -> None:
    """Inspect analysis files and refrigerants."""
    pass


@info.command("state")
@click.argument("path", type=click.Path(exists=True))
@click.pass_context
def info_state(ctx: click.Context, path: str) -> None:
    """Display summary of a saved analysis file."""
    console: Console = ctx.obj.get("console", Console())
    state = load_state_json(path)

    tree = Tree(f"[bold]{state.meta.name}[/bold]")
    meta = tree.add("[cyan]Metadata[/cyan]")
    meta.add(f"Author: {state.meta.author or '—'}")
    meta.add(f"Version: {state.meta.version}")
    meta.add(f"Modified: {state.meta.modified or '—'}")

    if state.cycle:
        cyc = tree.add("[cyan]Cycle[/cyan]")
        for k, v in state.cycle.items():
            cyc.add(f"{k}: {v}")

    if state.cycles:
        tree.add(f"[cyan]Cycles[/cyan]: {len(state.cycles)} operating conditions")

    if state.cold_sources:
        src = tree.add("[cyan]Sources[/cyan]")
        src.add(f"Cold: {', '.join(f'{t:.2f} K' for t in state.cold_sources)}")
        src.add(f"Hot: {', '.join(f'{t:.2f} K' for t in state.hot_sources)}")

    if state.performance:
        perf = tree.add("[cyan]Performance[/cyan]")
        for k, v in state.performance.items():
            if k in ("components", "points"):
                continue
            perf.add(f"{k}: {v}")

    if state.analysis:
        an = tree.add("[cyan]Entropy Analysis[/cyan]")
        an.add(f"thermodynamic_perfection: {state.analysis['thermodynamic_perfection']:.4f}")
        fractions = an.add("loss_fractions")
        for k, v in state.analysis.get("loss_fractions", {}).items():
            if v:
                fractions.add(f"{k}: {v:.4f}")

    console.print(tree)


@info.command("refrigerants")
@click.pass_context
def info_refrigerants(ctx: click.Context) -> None:
    """List refrigerants known to CoolProp."""
    console: Console = ctx.obj.get("console", Console())
    table = Table(title="Available Refrigerants")
    table.add_column("Name", style="cyan")
    for name in list_refrigerants():
        table.add_row(name)
    console.print(table)


@info.command("refrigerant")
@click.argument("name")
@click.pass_context
def info_refrigerant(ctx: click.Context, name: str) -> None:
    """Display the critical and triple points of a refrigerant."""
    console: Console = ctx.obj.get("console", Console())
    try:
        refrigerant = Refrigerant(name)
    except VCRCError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if refrigerant.is_zeotropic_blend:
        kind = "Zeotropic blend"
    elif refrigerant.is_azeotropic_blend:
        kind = "Azeotropic blend"
    else:
        kind = "Single component"

    table = Table(title=f"Refrigerant {refrigerant.name}")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Unit", style="dim")
    table.add_row("Type", kind, "—")
    table.add_row("Critical Temperature", f"{temperature_from_si(refrigerant.critical_temperature, 'degC'):.2f}", "°C")
    table.add_row("Critical Pressure", f"{pressure_from_si(refrigerant.critical_pressure, 'bar'):.3f}", "bar")
    table.add_row("Triple Point Temperature", f"{temperature_from_si(refrigerant.triple_temperature, 'degC'):.2f}", "°C")
    console.print(table)
