"""Rich UI components for the CLI.

Keeps command logic apart from the visual details so tables and panels can
be reused across commands.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import ParsedArgs
from core.services.idioms import IdiomSection


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped with --no-banner or SHELL_IDIOMS_SHOW_BANNER=0)."""

    title = Text("shell-idioms", style="bold cyan")
    subtitle = Text("Argument parsing • Arrays • Loops • Field splitting", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_parsed_table(args: ParsedArgs) -> Table:
    table = Table(title="Parsed arguments")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("first", str(args.first).lower())
    table.add_row("second", str(args.second).lower())
    table.add_row("params", ", ".join(repr(p) for p in args.params) or "-")
    table.add_row("positional1", args.positional1 if args.positional1 is not None else "-")
    table.add_row("positional2", args.positional2 if args.positional2 is not None else "-")
    return table


def build_sections_table(sections: Iterable[IdiomSection]) -> Table:
    table = Table(title="Idiom sections")
    table.add_column("Name", style="bright_green", no_wrap=True)
    table.add_column("Title", style="white")
    for section in sections:
        table.add_row(section.name, section.title)
    return table


def build_section_panel(section: IdiomSection, lines: list[str]) -> Panel:
    """Panel with the echoed output of one section."""

    body = Text("\n".join(lines) if lines else "(no output)")
    return Panel(body, title=Text(section.title, style="bold yellow"), border_style="yellow")
