"""uniqname reserved command - list the effective reserved words."""

import json

import click

from uniqname.config.models import UniqnameConfig
from uniqname.naming.pool import NamePool
from uniqname.naming.reserved import ReservedWords


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def reserved_command(ctx: click.Context, as_json: bool) -> None:
    """List reserved words seeded from the current configuration."""
    config: UniqnameConfig = ctx.obj["config"]
    reserved = ReservedWords.from_config(NamePool(), config.naming)

    if as_json:
        click.echo(
            json.dumps([{"name": word, "parameter": parameter} for word, parameter in reserved.words])
        )
        return

    for word, parameter in reserved.words:
        click.echo(f"{word} (parameter)" if parameter else word)
