"""CLI entry point for paramprobe."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

import click
import yaml
from pydantic import ValidationError

from paramprobe import __version__
from paramprobe.config import Config, ConnectionConfig
from paramprobe.connection import open_source
from paramprobe.errors import ConfigError
from paramprobe.logging_config import configure_logging
from paramprobe.parameters import ListParametersCommand, resolve_arguments
from paramprobe.settings import AppSettings


def _load_config(config_path: Optional[str], env: AppSettings) -> Config:
    try:
        base = Config.load(Path(config_path) if config_path else None)
        return env.to_runtime_config(base)
    except FileNotFoundError as exc:
        raise ConfigError(str(exc), hint="Pass an existing file with --config or unset PARAMPROBE_CONFIG.") from exc
    except (ValidationError, yaml.YAMLError, TypeError) as exc:
        raise ConfigError(f"invalid configuration: {exc}") from exc


def _apply_overrides(config: Config, **overrides) -> Config:
    connection = {key: value for key, value in overrides.items() if value is not None and key != "snapshot"}
    if connection:
        merged = config.connection.model_dump()
        merged.update(connection)
        try:
            config.connection = ConnectionConfig(**merged)
        except ValidationError as exc:
            raise ConfigError(f"invalid connection option: {exc}") from exc
    if overrides.get("snapshot"):
        config.snapshot = overrides["snapshot"]
    return config


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="paramprobe")
@click.option("--log-level", default=None, help="Log level (override env)")
@click.option("--log-format", default=None, type=click.Choice(["json", "text"]))
@click.option("--config", "config_path", default=None, help="Path to YAML config")
@click.option("--host", default=None, help="Device host")
@click.option("--port", default=None, type=int, help="Device API port")
@click.option("--auth", "auth_token", default=None, help="Bearer token for the device API")
@click.option("--timeout", default=None, type=float, help="Per-request timeout in seconds")
@click.option(
    "--snapshot",
    default=None,
    help="Read parameters from a YAML/JSON snapshot file instead of the device",
)
@click.pass_context
def main(
    ctx: click.Context,
    log_level: Optional[str],
    log_format: Optional[str],
    config_path: Optional[str],
    host: Optional[str],
    port: Optional[int],
    auth_token: Optional[str],
    timeout: Optional[float],
    snapshot: Optional[str],
) -> None:
    """paramprobe - inspect the live parameters of a remote device."""
    try:
        env = AppSettings()
    except ValidationError as exc:
        raise ConfigError(f"invalid PARAMPROBE_* environment: {exc}") from exc
    configure_logging(log_level or env.log_level, log_format or env.log_format)
    config = _load_config(config_path, env)
    ctx.obj = _apply_overrides(
        config, host=host, port=port, auth_token=auth_token, timeout=timeout, snapshot=snapshot
    )


@main.command(
    "list-parameters",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("parameters", nargs=-1, metavar="[PARAMETER [SUBPARAM]]")
@click.pass_obj
def list_parameters(config: Config, parameters: Tuple[str, ...]) -> None:
    """List the visible parameters, or print the value of PARAMETER.

    With no arguments every parameter that is not hidable and currently has
    a value is printed as "<label>: <value>", sorted by name. With PARAMETER
    only its bare value is printed; SUBPARAM selects one entry of an indexed
    value.
    """
    query = resolve_arguments(parameters)
    with open_source(config) as source:
        for line in ListParametersCommand(source).execute(query):
            click.echo(line)


if __name__ == "__main__":
    main()
