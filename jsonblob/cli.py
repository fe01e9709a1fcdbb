"""Click CLI entrypoint for jsonblob."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console

from .config import load_config, validate_config
from .env_file import env_to_json_object, parse_env_file
from .formatters import format_table
from .printer import StreamPrinter

console = Console(stderr=True)


def _abort(msg: str, exit_code: int = 1) -> None:
    console.print(f"[bold red]Error:[/] {msg}")
    sys.exit(exit_code)


def _warn_no_mask(mask: bool) -> None:
    """Print a warning when masking is off."""
    if not mask:
        console.print(
            "[bold yellow]Warning:[/] masking is off. "
            "Sensitive values will be displayed in plaintext."
        )


def _load_and_validate(config_path: str, **kwargs):
    cfg = load_config(config_path, **kwargs)
    errors = validate_config(cfg)
    if errors:
        for err in errors:
            console.print(f"[bold red]Config error:[/] {err}")
        sys.exit(1)
    return cfg


@click.group()
@click.version_option(package_name="jsonblob")
def cli():
    """jsonblob: build compact JSON with maskable values."""


@cli.command()
@click.argument("env_file", metavar="ENV_FILE")
@click.option(
    "--config",
    default=".jsonblob.toml",
    show_default=True,
    help="Path to .jsonblob.toml config file.",
    metavar="FILE",
)
@click.option(
    "--mask/--no-mask",
    default=None,
    help="Mask sensitive values (default from config, on if unset).",
)
@click.option("--placeholder", default=None, help="Text shown in place of masked values.")
@click.option(
    "--format",
    "output_format",
    default=None,
    type=click.Choice(["json", "table"], case_sensitive=False),
    help="Output format (default from config, json if unset).",
)
def render(env_file, config, mask, placeholder, output_format):
    """Render ENV_FILE as a JSON object, masking sensitive keys."""
    cfg = _load_and_validate(
        config,
        mask=mask,
        placeholder=placeholder,
        output_format=output_format.lower() if output_format else None,
    )
    _warn_no_mask(cfg.mask)

    if not Path(env_file).exists():
        _abort(f"Env file not found: {env_file!r}")

    blob = env_to_json_object(
        parse_env_file(env_file),
        sensitive=cfg.is_sensitive,
        placeholder=cfg.placeholder,
    )

    if cfg.output_format == "table":
        click.echo(format_table(blob, mask=cfg.mask), nl=False)
        return

    blob.write_to(StreamPrinter(sys.stdout, mask=cfg.mask))
    click.echo()


def main() -> None:
    cli()
