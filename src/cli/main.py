"""shell-idioms CLI (typer).

Commands:
- `example-function`: runs the flag/positional grammar on the raw tokens.
- `notes`: prints the runnable idiom sections.

`example_function_entry` is the standalone console script; it reads
`sys.argv` directly so click never touches the tokens.
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.json_exporter import dump_parsed_args
from cli.ui_components import build_parsed_table, build_section_panel, build_sections_table, print_banner
from core.config import MAX_WHILE_STOP, AppSettings
from core.domain.models import InvocationResult
from core.logging_utils import get_logger, setup_logging
from core.services.arg_parser import invoke_example_function
from core.services.idioms import SECTIONS, describe_options, get_section, render_section

app = typer.Typer(no_args_is_help=True, help="Bash scripting idioms, runnable from Python.")

_console = Console()
_err_console = Console(stderr=True)

logger = get_logger(__name__)


def _print_plain(console: Console, text: str) -> None:
    console.print(text, end="", markup=False, highlight=False, emoji=False, soft_wrap=True)


def _settings_error(exc: ValidationError) -> str:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return f"Invalid configuration: {details}"


def _settings(ctx: typer.Context) -> AppSettings:
    if isinstance(ctx.obj, AppSettings):
        return ctx.obj
    return AppSettings()


def _emit(result: InvocationResult, settings: AppSettings) -> None:
    """Print an invocation result: help to stdout, diagnostics to stderr."""

    if result.stdout:
        _print_plain(_console, result.stdout)
    if result.stderr:
        _print_plain(_err_console, result.stderr)
    if result.args is None:
        return

    if settings.output_format == "json":
        _print_plain(_console, dump_parsed_args(result.args))
        return

    _console.print(build_parsed_table(result.args))
    _print_plain(_console, describe_options(result.args.first, result.args.second) + "\n")


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Override SHELL_IDIOMS_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR).",
    ),
    banner: Optional[bool] = typer.Option(
        None,
        "--banner/--no-banner",
        help="Override SHELL_IDIOMS_SHOW_BANNER.",
    ),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        raise typer.BadParameter(_settings_error(exc), param_hint="SHELL_IDIOMS_*") from exc

    updates: dict[str, object] = {}
    if log_level is not None:
        updates["log_level"] = log_level.strip().upper()
    if banner is not None:
        updates["show_banner"] = banner
    if updates:
        settings = settings.model_copy(update=updates)

    try:
        setup_logging(settings.log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc

    ctx.obj = settings


@app.command(
    name="example-function",
    add_help_option=False,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def example_function(ctx: typer.Context) -> None:
    """Parse [-f|--first] [-s|--second] [--param VALUE]... [POS1 [POS2]] [-h|--help]."""

    settings = _settings(ctx)
    logger.debug("example-function tokens: %r", ctx.args)
    result = invoke_example_function(ctx.args)
    _emit(result, settings)
    if result.exit_code:
        raise typer.Exit(code=result.exit_code)


@app.command()
def notes(
    ctx: typer.Context,
    section: Optional[str] = typer.Argument(None, help="Section to show (all when omitted)."),
    list_sections: bool = typer.Option(False, "--list", help="List section names and exit."),
    stop: Optional[int] = typer.Option(None, "--stop", min=0, max=MAX_WHILE_STOP, help="Upper bound for while-loop."),
    input_text: Optional[str] = typer.Option(None, "--input", help="Comma-separated input for ifs-comma."),
) -> None:
    """Show the runnable idiom sections."""

    settings = _settings(ctx)

    if list_sections:
        _console.print(build_sections_table(SECTIONS.values()))
        return

    if section is None:
        selected = list(SECTIONS.values())
    else:
        try:
            selected = [get_section(section)]
        except KeyError:
            choices = ", ".join(SECTIONS)
            raise typer.BadParameter(f"Unknown section '{section}'. Choose from: {choices}", param_hint="SECTION") from None

    if settings.show_banner:
        print_banner(_console)

    for item in selected:
        lines = render_section(
            item.name,
            stop=settings.default_while_stop if stop is None else stop,
            text=settings.default_ifs_input if input_text is None else input_text,
        )
        _console.print(build_section_panel(item, lines))


def run(args: Sequence[str] | None = None) -> None:
    app(args=None if args is None else list(args))


def example_function_entry(argv: Sequence[str] | None = None) -> None:
    """Console script: `example-function [TOKENS...]`, exits with 0 or 1."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _print_plain(_err_console, _settings_error(exc) + "\n")
        raise SystemExit(1) from None

    setup_logging(settings.log_level)

    tokens = list(sys.argv[1:] if argv is None else argv)
    result = invoke_example_function(tokens)
    _emit(result, settings)
    raise SystemExit(result.exit_code)
