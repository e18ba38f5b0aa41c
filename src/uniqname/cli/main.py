"""uniqname CLI - uniqname command."""

from pathlib import Path

import click

from uniqname.cli.reserved import reserved_command
from uniqname.cli.resolve import resolve_command
from uniqname.config.loader import load_config
from uniqname.core.errors import ConfigError
from uniqname.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="uniqname")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ./uniqname.yaml if present)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """uniqname - collision-free symbol names for generated code."""
    ctx.ensure_object(dict)
    try:
        config = load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)

    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config


cli.add_command(resolve_command, name="resolve")
cli.add_command(reserved_command, name="reserved")


if __name__ == "__main__":
    cli()
