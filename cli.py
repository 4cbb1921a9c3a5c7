import pathlib
from typing import Any, Dict, Mapping

import click
import yaml

from command_groups import register_command_groups
from context_state import ContextState
from logging_utils import configure_logging, get_logger

DEFAULT_CONFIG_PATH = "smallyaml.yaml"


def _validate_config_shape(config: Mapping[str, Any]) -> None:
    if not isinstance(config, Mapping):
        raise click.ClickException("Config file must contain a YAML mapping")

    separator = config.get("separator")
    if separator is not None and (not isinstance(separator, str) or not separator):
        raise click.ClickException("Config 'separator' must be a non-empty string")

    aliases = config.get("aliases")
    if aliases is not None:
        if not isinstance(aliases, Mapping):
            raise click.ClickException("Config 'aliases' section must be a mapping")
        if not all(isinstance(target, str) for target in aliases.values()):
            raise click.ClickException("Config 'aliases' values must be path strings")

    log_format = config.get("log_format")
    if log_format is not None and not isinstance(log_format, str):
        raise click.ClickException("Config 'log_format' must be a string")


def load_config(config_path: str) -> Dict[str, Any]:
    path = pathlib.Path(config_path)
    if not path.exists():
        return {}

    try:
        with path.open("r", encoding="utf-8") as config_file:
            data = yaml.safe_load(config_file) or {}
    except yaml.YAMLError as exc:
        raise click.ClickException(f"Failed to parse config file: {exc}") from exc

    _validate_config_shape(data)

    return data


logger = get_logger(__name__)


@click.group()
@click.option(
    "--config",
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    type=click.Path(exists=False, dir_okay=False, resolve_path=True, path_type=str),
    help="Path to configuration file",
)
@click.option("--verbose", is_flag=True, help="Enable verbose logging output")
@click.option("--quiet", is_flag=True, help="Reduce logging output to errors only")
@click.pass_context
def cli(ctx: click.Context, config: str, verbose: bool, quiet: bool) -> None:
    """Query values in small YAML configuration files."""

    if verbose and quiet:
        raise click.ClickException("--verbose and --quiet are mutually exclusive")

    configuration = load_config(config)
    configure_logging(verbose=verbose, quiet=quiet, fmt=configuration.get("log_format"))
    logger.debug("Loaded configuration from %s", config)
    ctx.obj = ContextState(config=configuration, verbose=verbose, quiet=quiet)


register_command_groups(cli)


def main() -> None:
    cli(prog_name="smallyaml")


if __name__ == "__main__":
    main()
