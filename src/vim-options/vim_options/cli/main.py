"""CLI entrypoint for vim-options — typer app with a `show` command."""

import logging
import sys
from pathlib import Path

import structlog
import typer

from vim_options.cli.output.listing import format_listing
from vim_options.config.infrastructure.factory import build_registry
from vim_options.config.infrastructure.observer import StructlogConfigObserver
from vim_options.config.infrastructure.yaml_loader import YamlOptionsLoader
from vim_options.core.errors import VimOptionsError
from vim_options.option.infrastructure.observer import StructlogRegistryObserver

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format; logs go to stderr."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


@app.callback()
def main() -> None:
    """Inspect option definitions for the Vim emulation layer."""


@app.command()
def show(
    config_path: Path = typer.Argument(..., help="Path to option definitions YAML"),
    width: int = typer.Option(80, "--width", min=20, help="Screen width in columns"),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """List the options declared in a definitions file, alphabetically."""
    _configure_structlog(log_format=log_format)

    try:
        loader = YamlOptionsLoader(observer=StructlogConfigObserver())
        config = loader.load(path=config_path)
        registry = build_registry(config=config, observer=StructlogRegistryObserver())
    except VimOptionsError as exc:
        typer.echo(str(exc))
        sys.exit(1)

    for line in format_listing(options=registry.options(), width=width):
        typer.echo(line)


if __name__ == "__main__":
    app()
