"""
Developer CLI for scopelog using Click.

Commands:
    render        Show how a value is serialized in a log line
    explain       Show whether a logger/level pair is forwarded, and why
    check-config  Validate a YAML configuration file
"""

import json
import sys
from pathlib import Path

import click

from . import __version__
from .config import LoggingOptions, load_options
from .context import LogContext
from .diagnostics import configure_diagnostics
from .errors import ConfigError
from .levels import LEVEL_NAMES, is_none, resolve_level
from .serializer import serialize

# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILED = 1
EXIT_CONFIG_ERROR = 3


def _load_or_exit(config_path: Path | None) -> LoggingOptions:
    """Load options, turning loader errors into exit code 3."""
    try:
        return load_options(config_path)
    except (ConfigError, FileNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)


@click.group()
@click.version_option(version=__version__, prog_name="scopelog")
@click.option("-v", "--verbose", count=True, help="Show scopelog diagnostics (-v info, -vv debug)")
def main(verbose: int) -> None:
    """scopelog - hierarchical in-memory logging tools."""
    if verbose:
        configure_diagnostics(verbose)


@main.command()
@click.argument("value")
def render(value: str) -> None:
    """Print the serialized form of VALUE.

    VALUE is parsed as JSON when possible (so '{"a": [1, true, null]}' is a
    mapping), otherwise it is used as a plain string.
    """
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError:
        parsed = value
    click.echo(str(serialize(parsed)))


@main.command()
@click.argument("name")
@click.argument("level", type=click.Choice(LEVEL_NAMES, case_sensitive=False))
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML configuration file",
)
def explain(name: str, level: str, config_path: Path | None) -> None:
    """Explain whether a LEVEL message from logger NAME would be forwarded."""
    options = _load_or_exit(config_path)
    ctx = LogContext(options)
    decision = ctx.explain(resolve_level(level), name)
    click.echo(f"[{name}] {level.upper()}: {decision.describe()}")


@main.command("check-config")
@click.argument("config_path", type=click.Path(dir_okay=False, path_type=Path))
def check_config(config_path: Path) -> None:
    """Validate CONFIG_PATH and list its logger overrides."""
    options = _load_or_exit(config_path)

    click.echo(f"rootLogger: {options.root_logger}")
    click.echo(f"showTime: {str(options.show_time).lower()}")
    click.echo(f"remoteLoggingPort: {options.remote_logging_port}")

    invalid = 0
    for key, value in options.overrides.items():
        if resolve_level(value) is None and not is_none(value):
            invalid += 1
            click.echo(f"  {key}: {value!r}  (not a level, ignored)")
        else:
            click.echo(f"  {key}: {value}")

    if resolve_level(options.root_logger) is None and not is_none(options.root_logger):
        invalid += 1
        click.echo(f"rootLogger {options.root_logger!r} is not a level: everything is forwarded")

    if invalid:
        click.echo(f"{invalid} invalid value(s)", err=True)
        sys.exit(EXIT_FAILED)


if __name__ == "__main__":
    main()
