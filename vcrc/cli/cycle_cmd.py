"""CLI commands for refrigeration cycle analysis."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from vcrc.core.config import AnalysisState, load_cycle_definition_dict, save_state_json
from vcrc.core.errors import VCRCError
from vcrc.cycle.model import VCRC
from vcrc.cycle.solver import CycleDefinition, CycleType, solve_cycle
from vcrc.entropy.aggregate import aggregate_analysis
from vcrc.entropy.analyzer import analyze
from vcrc.entropy.result import EntropyAnalysisResult, Loss
from vcrc.utils.units import (
    pressure_from_si,
    pressure_to_si,
    specific_energy_from_si,
    temperature_delta_to_si,
    temperature_to_si,
)

_TYPE_MAP = {
    "simple": CycleType.SIMPLE,
    "economizer": CycleType.ECONOMIZER,
    "cic": CycleType.COMPLETE_INTERCOOLING,
    "iic": CycleType.INCOMPLETE_INTERCOOLING,
}

_LOSS_LABELS = {
    Loss.COMPRESSOR: "Compressor",
    Loss.CONDENSER: "Condenser",
    Loss.GAS_COOLER: "Gas Cooler",
    Loss.EXPANSION_VALVES: "Expansion Valves",
    Loss.EVAPORATOR: "Evaporator",
    Loss.ECONOMIZER: "Economizer",
    Loss.MIXING: "Mixing",
}


def _cycle_options(func):
    """Attach the options shared by all cycle commands."""
    options = [
        click.option(
            "--type",
            "cycle_type",
            type=click.Choice(list(_TYPE_MAP), case_sensitive=False),
            default="simple",
            show_default=True,
            help="Cycle architecture (cic = complete intercooling, iic = incomplete intercooling).",
        ),
        click.option("--refrigerant", "-r", default="R32", show_default=True, help="Refrigerant name."),
        click.option(
            "--t-unit",
            type=click.Choice(["degC", "K", "degF"]),
            default="degC",
            show_default=True,
            help="Unit of temperatures and temperature differences.",
        ),
        click.option("--superheat", type=float, default=5.0, show_default=True, help="Evaporator superheat."),
        click.option("--efficiency", type=float, default=0.8, show_default=True, help="Compressor isentropic efficiency."),
        click.option("--subcooling", type=float, default=3.0, show_default=True, help="Condenser subcooling."),
        click.option("--economizer-dt", type=float, default=7.0, show_default=True, help="Economizer 'cold' side temperature difference."),
        click.option("--economizer-superheat", type=float, default=5.0, show_default=True, help="Economizer superheat."),
        click.option("--intermediate-pressure", type=float, default=None, help="Intermediate pressure [bar]."),
        click.option("--optimize-pressure", is_flag=True, help="Search the intermediate pressure for maximum EER."),
        click.option("--output", "-o", type=click.Path(), default=None, help="Output file (JSON)."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _definition(
    cycle_type: str,
    refrigerant: str,
    t_unit: str,
    evaporating: float,
    superheat: float,
    efficiency: float,
    subcooling: float,
    economizer_dt: float,
    economizer_superheat: float,
    intermediate_pressure: float | None,
    optimize_pressure: bool,
    condensing: float | None = None,
    gas_cooler_temperature: float | None = None,
    gas_cooler_pressure: float | None = None,
) -> CycleDefinition:
    return CycleDefinition(
        cycle_type=_TYPE_MAP[cycle_type.lower()],
        refrigerant=refrigerant,
        evaporating_temperature=temperature_to_si(evaporating, t_unit),
        superheat=temperature_delta_to_si(superheat, t_unit),
        compressor_efficiency=efficiency,
        condensing_temperature=(
            temperature_to_si(condensing, t_unit) if condensing is not None else None
        ),
        subcooling=temperature_delta_to_si(subcooling, t_unit),
        gas_cooler_temperature=(
            temperature_to_si(gas_cooler_temperature, t_unit)
            if gas_cooler_temperature is not None
            else None
        ),
        gas_cooler_pressure=(
            pressure_to_si(gas_cooler_pressure, "bar") if gas_cooler_pressure is not None else None
        ),
        economizer_temperature_difference=temperature_delta_to_si(economizer_dt, t_unit),
        economizer_superheat=temperature_delta_to_si(economizer_superheat, t_unit),
        intermediate_pressure=(
            pressure_to_si(intermediate_pressure, "bar") if intermediate_pressure is not None else None
        ),
        optimize_intermediate_pressure=optimize_pressure,
    )


def _print_performance(console: Console, model: VCRC) -> None:
    table = Table(title="Cycle Performance")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Unit", style="dim")

    table.add_row("Cycle Type", model.cycle_type.replace("_", " ").title(), "—")
    table.add_row("Refrigerant", model.refrigerant.name, "—")
    table.add_row("Heat Releaser", "Gas Cooler" if model.is_transcritical else "Condenser", "—")
    table.add_row("Evaporating Pressure", f"{pressure_from_si(model.evaporator.pressure, 'bar'):.3f}", "bar")
    table.add_row("Heat Releaser Pressure", f"{pressure_from_si(model.heat_releaser.pressure, 'bar'):.3f}", "bar")
    intermediate = getattr(model, "intermediate_pressure", None)
    if intermediate is not None:
        table.add_row("Intermediate Pressure", f"{pressure_from_si(intermediate, 'bar'):.3f}", "bar")
        table.add_row("Heat Releaser Mass Flow", f"{model.heat_releaser_specific_mass_flow:.4f}", "—")
    table.add_row("Specific Work", f"{specific_energy_from_si(model.specific_work):.2f}", "kJ/kg")
    table.add_row("Cooling Capacity", f"{specific_energy_from_si(model.specific_cooling_capacity):.2f}", "kJ/kg")
    table.add_row("Heating Capacity", f"{specific_energy_from_si(model.specific_heating_capacity):.2f}", "kJ/kg")
    table.add_row("EER", f"{model.eer:.3f}", "—")
    table.add_row("COP", f"{model.cop:.3f}", "—")
    console.print(table)


def _print_analysis(console: Console, result: EntropyAnalysisResult, title: str) -> None:
    table = Table(title=title)
    table.add_column("Component", style="cyan")
    table.add_column("Exergy Destruction [kJ/kg]", style="green", justify="right")
    table.add_column("Share of Losses [%]", justify="right")
    table.add_column("Share of Work [%]", justify="right")

    table.add_row(
        "Minimum Work",
        f"{specific_energy_from_si(result.min_specific_work):.3f}",
        "—",
        f"{result.min_specific_work_ratio * 100:.2f}",
    )
    for loss, label in _LOSS_LABELS.items():
        if result.exergy_destruction[loss] == 0.0:
            continue
        table.add_row(
            label,
            f"{specific_energy_from_si(result.exergy_destruction[loss]):.3f}",
            f"{result.loss_fractions[loss] * 100:.2f}",
            f"{result.energy_loss_ratios[loss] * 100:.2f}",
        )
    console.print(table)
    console.print(
        f"Thermodynamic perfection: [bold]{result.thermodynamic_perfection * 100:.2f} %[/bold]  "
        f"(analysis error {result.analysis_relative_error * 100:.3f} %)"
    )


@click.group("cycle")
@click.pass_context
def cycle(ctx: click.Context) -> None:
    """Refrigeration cycle analysis commands."""
    pass


@cycle.command("analyze")
@_cycle_options
@click.option("--evaporating", type=float, default=5.0, show_default=True, help="Evaporating temperature.")
@click.option("--condensing", type=float, default=45.0, show_default=True, help="Condensing temperature.")
@click.option("--gas-cooler-temperature", type=float, default=None, help="Gas cooler outlet temperature (transcritical).")
@click.option("--gas-cooler-pressure", type=float, default=None, help="Gas cooler pressure [bar].")
@click.option("--cold", type=float, default=None, help="Cold source temperature (enables entropy analysis).")
@click.option("--hot", type=float, default=None, help="Hot source temperature (enables entropy analysis).")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Read the cycle definition from a JSON file instead of the options.",
)
@click.pass_context
def analyze_cmd(
    ctx: click.Context,
    cycle_type: str,
    refrigerant: str,
    t_unit: str,
    superheat: float,
    efficiency: float,
    subcooling: float,
    economizer_dt: float,
    economizer_superheat: float,
    intermediate_pressure: float | None,
    optimize_pressure: bool,
    output: str | None,
    evaporating: float,
    condensing: float,
    gas_cooler_temperature: float | None,
    gas_cooler_pressure: float | None,
    cold: float | None,
    hot: float | None,
    config_path: str | None,
) -> None:
    """Solve a cycle and, given both sources, analyze its losses."""
    console: Console = ctx.obj.get("console", Console())

    try:
        if config_path:
            defn = CycleDefinition.from_dict(load_cycle_definition_dict(config_path))
        else:
            defn = _definition(
                cycle_type,
                refrigerant,
                t_unit,
                evaporating,
                superheat,
                efficiency,
                subcooling,
                economizer_dt,
                economizer_superheat,
                intermediate_pressure,
                optimize_pressure,
                condensing=None if gas_cooler_temperature is not None else condensing,
                gas_cooler_temperature=gas_cooler_temperature,
                gas_cooler_pressure=gas_cooler_pressure,
            )
        model = solve_cycle(defn)
        result = None
        sources: list[float] = []
        if cold is not None and hot is not None:
            sources = sorted((temperature_to_si(cold, t_unit), temperature_to_si(hot, t_unit)))
            result = analyze(model, *sources)
    except VCRCError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    console.print(f"\n[bold]VCRC: Cycle Analysis ({defn.cycle_type.value})[/bold]\n")
    _print_performance(console, model)
    if result is not None:
        _print_analysis(console, result, "Entropy Analysis")

    if output:
        state = AnalysisState(cycle=defn.to_dict(), performance=model.summary())
        if result is not None:
            state.cold_sources = [sources[0]]
            state.hot_sources = [sources[1]]
            state.analysis = result.to_dict()
        save_state_json(state, output)
        console.print(f"\n[dim]Saved to {output}[/dim]")


@cycle.command("average")
@_cycle_options
@click.option("--cold", type=float, multiple=True, required=True, help="Cold source temperature (repeatable).")
@click.option("--hot", type=float, multiple=True, required=True, help="Hot source temperature (repeatable).")
@click.option(
    "--evaporator-approach",
    type=float,
    default=7.0,
    show_default=True,
    help="Cold source minus evaporating temperature.",
)
@click.option(
    "--condenser-approach",
    type=float,
    default=10.0,
    show_default=True,
    help="Condensing temperature minus hot source temperature.",
)
@click.pass_context
def average_cmd(
    ctx: click.Context,
    cycle_type: str,
    refrigerant: str,
    t_unit: str,
    superheat: float,
    efficiency: float,
    subcooling: float,
    economizer_dt: float,
    economizer_superheat: float,
    intermediate_pressure: float | None,
    optimize_pressure: bool,
    output: str | None,
    cold: tuple[float, ...],
    hot: tuple[float, ...],
    evaporator_approach: float,
    condenser_approach: float,
) -> None:
    """Average the entropy analysis over several operating conditions.

    One cycle is solved per (cold, hot) pair, with the evaporating and
    condensing temperatures set by the approach temperature differences.
    """
    console: Console = ctx.obj.get("console", Console())

    try:
        definitions = [
            _definition(
                cycle_type,
                refrigerant,
                t_unit,
                c - evaporator_approach,
                superheat,
                efficiency,
                subcooling,
                economizer_dt,
                economizer_superheat,
                intermediate_pressure,
                optimize_pressure,
                condensing=h + condenser_approach,
            )
            for c, h in zip(cold, hot)
        ]
        models = [solve_cycle(d) for d in definitions]
        cold_sources = [temperature_to_si(c, t_unit) for c in cold]
        hot_sources = [temperature_to_si(h, t_unit) for h in hot]
        result = aggregate_analysis(models, cold_sources, hot_sources)
    except VCRCError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    console.print(f"\n[bold]VCRC: Averaged Entropy Analysis ({len(models)} conditions)[/bold]\n")
    table = Table(title="Averaged Performance")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Unit", style="dim")
    table.add_row("EER", f"{result.eer:.3f}", "—")
    table.add_row("COP", f"{result.cop:.3f}", "—")
    table.add_row("Specific Work", f"{specific_energy_from_si(result.specific_work):.2f}", "kJ/kg")
    console.print(table)
    _print_analysis(console, result, "Averaged Entropy Analysis")

    if output:
        state = AnalysisState(
            cycles=[d.to_dict() for d in definitions],
            cold_sources=cold_sources,
            hot_sources=hot_sources,
            analysis=result.to_dict(),
        )
        save_state_json(state, output)
        console.print(f"\n[dim]Saved to {output}[/dim]")
