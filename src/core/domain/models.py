"""Domain models (Pydantic v2).

`ParsedArgs` describes *what* the `example-function` grammar produced, not
*how* the tokens were consumed.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ParsedArgs(BaseModel):
    """Structured result of one `example-function` invocation.

    Built fresh per call and frozen once parsing completes.
    """

    model_config = ConfigDict(frozen=True)

    first: bool = Field(
        default=False,
        description="Set by -f/--first.",
    )
    second: bool = Field(
        default=False,
        description="Set by -s/--second.",
    )
    params: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Values of every --param occurrence, in order (duplicates kept).",
    )
    positional1: str | None = Field(
        default=None,
        description="First positional token, if any.",
    )
    positional2: str | None = Field(
        default=None,
        description="Second positional token, if any.",
    )


@dataclass(frozen=True)
class InvocationResult:
    """Outcome of calling `example-function` like a shell function.

    `stdout` / `stderr` hold the text the caller is expected to print; the
    core never writes to a stream itself.
    """

    exit_code: int
    args: ParsedArgs | None = None
    help_shown: bool = False
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0
