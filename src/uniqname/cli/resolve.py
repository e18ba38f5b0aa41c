"""uniqname resolve command - print final names for a type universe."""

import json
from pathlib import Path

import click
from rich.table import Table

from uniqname.config.models import UniqnameConfig
from uniqname.core.errors import NamingError
from uniqname.core.logging import get_log_file_path
from uniqname.core.progress import get_console, pluralize, progress, status
from uniqname.naming.models import load_universe
from uniqname.naming.ops import BuildReport, NamingOps, ResolvedSymbol


@click.command()
@click.argument("universe", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option(
    "--no-reserved",
    is_flag=True,
    help="Do not check reserved words (inputs already known to be valid)",
)
@click.option("--collisions-only", is_flag=True, help="Only list renamed symbols")
@click.pass_context
def resolve_command(
    ctx: click.Context,
    universe: Path,
    as_json: bool,
    no_reserved: bool,
    collisions_only: bool,
) -> None:
    """Resolve collision-free names for every symbol of UNIVERSE.

    UNIVERSE is a YAML or JSON type description.
    """
    config: UniqnameConfig = ctx.obj["config"]

    try:
        types = load_universe(universe)
    except NamingError as e:
        raise click.ClickException(str(e)) from e

    ops = NamingOps.create(config.naming)
    check_reserved = False if no_reserved else None
    report = ops.build(
        progress(types, desc="Resolving", unit="types"), check_reserved=check_reserved
    )

    symbols = [s for s in ops.symbols() if s.collided or not collisions_only]

    if as_json:
        click.echo(
            json.dumps(
                {
                    "report": report.to_dict(),
                    "symbols": [_symbol_dict(s) for s in symbols],
                },
                indent=2,
            )
        )
        return

    get_console().print(_symbol_table(symbols))
    _print_report(report)


def _symbol_dict(symbol: ResolvedSymbol) -> dict[str, object]:
    return {
        "type": symbol.type_name,
        "function": symbol.function,
        "kind": symbol.kind.name,
        "raw": symbol.raw,
        "name": symbol.final,
        "collided": symbol.collided,
    }


def _symbol_table(symbols: list[ResolvedSymbol]) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Type")
    table.add_column("Kind")
    table.add_column("Raw")
    table.add_column("Name")
    for symbol in symbols:
        raw = symbol.raw if symbol.function is None else f"{symbol.function}({symbol.raw})"
        name = f"[yellow]{symbol.final}[/yellow]" if symbol.collided else symbol.final
        table.add_row(symbol.type_name, symbol.kind.name.lower(), raw, name)
    return table


def _print_report(report: BuildReport) -> None:
    summary = (
        f"{pluralize(report.types, 'type')}, {pluralize(report.symbols, 'symbol')}, "
        f"{pluralize(report.collisions, 'collision')}"
    )
    if report.ok:
        status(summary, style="success")
        return
    status(summary, style="warning")
    for diagnostic in report.diagnostics:
        status(str(diagnostic), style="error", indent=2)
    log_file = get_log_file_path()
    if log_file is not None:
        status(f"Details in {log_file}", indent=2)
