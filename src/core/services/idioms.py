"""Runnable idiom sections.

Each section reproduces one demonstration from the shell notes as a pure
function returning the lines the demo would echo. The CLI only decides how
to print them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence


def arithmetic(a: int = 1, b: int = 2) -> int:
    return a + b


def arithmetic_demo(a: int = 1, b: int = 2) -> list[str]:
    return [f"{a} + {b} = {arithmetic(a, b)}"]


def array_demo(items: Sequence[str] = ("1", "2", "3", "4", "5")) -> list[str]:
    """Declare, read, then update a list the way the arrays section does."""

    values = list(items)
    lines = [f"Whole array1: {' '.join(values)}"]
    if len(values) > 0:
        lines.append(f"Item 0 (first element): {values[0]}")
    if len(values) > 1:
        lines.append(f"Item 1 (second element): {values[1]}")
    lines.append(f"array1 Indexes: {' '.join(str(i) for i in range(len(values)))}")

    if values:
        values[0] = "foo"
    else:
        values.append("foo")
    values.append("4")
    lines.append(f"Updated array1: {' '.join(values)}")
    return lines


def describe_options(first: bool = False, second: bool = False) -> str:
    if first:
        return "First option is enabled."
    elif second:
        return "Second option is enabled."
    return "No options are passed in."


def for_loop_demo(items: Sequence[str] = ("a", "b", "c", "d", "e")) -> list[str]:
    lines = [f"Array is '{' '.join(items)}'", "Iterating over array elements:"]
    for item in items:
        lines.append(f"Param: {item}")

    lines.append("Iterating over array indexes and elements:")
    for index, item in enumerate(items):
        lines.append(f"Index: {index}, Param: {item}")
    return lines


def while_count(stop: int) -> list[str]:
    """Count from 0 up to and including `stop`."""

    lines: list[str] = []
    i = 0
    while i <= stop:
        lines.append(f"Number: {i}")
        i += 1
    return lines


def split_fields(text: str, separator: str = ",") -> list[str]:
    """Split one line on `separator` like `IFS=<sep> read -ra`.

    Only the first line is read. Inner empty fields survive; a single
    trailing separator just terminates the last field.
    """

    if len(separator) != 1:
        raise ValueError("separator must be a single character")

    line = text.split("\n", 1)[0]
    if not line:
        return []

    fields = line.split(separator)
    if fields[-1] == "":
        fields.pop()
    return fields


def split_lines(text: str) -> list[str]:
    """Newline word splitting: blank lines vanish, the rest are kept verbatim."""

    return [line for line in text.split("\n") if line]


@dataclass(frozen=True)
class IdiomSection:
    """A named demo that renders to a list of output lines."""

    name: str
    title: str
    render: Callable[..., list[str]]


SECTIONS: dict[str, IdiomSection] = {
    section.name: section
    for section in (
        IdiomSection("arithmetic", "Arithmetic operations", arithmetic_demo),
        IdiomSection("arrays", "Array variables", array_demo),
        IdiomSection(
            "conditionals",
            "If statement",
            lambda first=False, second=False: [describe_options(first, second)],
        ),
        IdiomSection("for-loop", "For loop", for_loop_demo),
        IdiomSection("while-loop", "While loop", while_count),
        IdiomSection("ifs-comma", "Field splitting (comma)", split_fields),
        IdiomSection("ifs-multiline", "Field splitting (newline)", split_lines),
    )
}


def get_section(name: str) -> IdiomSection:
    """Look up a section by name, ignoring case. Raises `KeyError` if unknown."""

    key = name.strip().lower()
    if key not in SECTIONS:
        raise KeyError(name)
    return SECTIONS[key]


def render_section(
    name: str,
    *,
    stop: int = 5,
    text: str = "apple,banana,cherry",
    multiline_text: str = "line 1\nline 2\nline 3",
) -> list[str]:
    """Render a section with the inputs the notes call it with."""

    section = get_section(name)
    if section.name == "while-loop":
        return section.render(stop)
    if section.name == "ifs-comma":
        return section.render(text)
    if section.name == "ifs-multiline":
        return section.render(multiline_text)
    return section.render()
