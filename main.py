"""Development launcher for a source checkout.

`python main.py notes` runs the typer app. Invoked through a link named
`example-function` (or with that program name), it behaves like the
standalone console script and hands `sys.argv[1:]` to the grammar untouched.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv if argv is None else argv
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from cli.main import example_function_entry, run  # noqa: PLC0415

    if argv and Path(argv[0]).stem == "example-function":
        example_function_entry(argv[1:])
    else:
        run(argv[1:])


if __name__ == "__main__":
    main()
