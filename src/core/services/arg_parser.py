"""`example-function` argument grammar.

The parser is a pure function over a token list: it returns `ParsedArgs` or
raises a `UsageError` / `HelpRequested`. `invoke_example_function` wraps it
with the shell-function contract (exit code 0/1 plus help and diagnostic
text) while leaving the actual printing to the caller.
"""

from __future__ import annotations

import string
from typing import Sequence

from core.domain.errors import HelpRequested, MissingValueError, UnexpectedArgumentError, UsageError
from core.domain.models import InvocationResult, ParsedArgs
from core.logging_utils import get_logger

logger = get_logger(__name__)

PROGRAM_NAME = "example-function"

USAGE_LINES: tuple[str, ...] = (
    f"Usage: {PROGRAM_NAME} [OPTIONS] [POSITIONAL1 [POSITIONAL2]]",
    "  -f, --first                  Enable the first option.",
    "  -s, --second                 Enable the second option.",
    "  --param=<string>             Specify a parameter value (repeatable).",
    "  -h, --help                   Display this help message and exit.",
)

FIRST_FLAGS = frozenset({"-f", "--first"})
SECOND_FLAGS = frozenset({"-s", "--second"})
HELP_FLAGS = frozenset({"-h", "--help"})
PARAM_FLAG = "--param"
_PARAM_PREFIX = PARAM_FLAG + "="

# A-Z only; ligatures and other Unicode case mappings are left untouched.
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def usage_text() -> str:
    return "\n".join(USAGE_LINES) + "\n"


def parse_example_args(tokens: Sequence[str]) -> ParsedArgs:
    """Parse `tokens` left to right.

    Flag literals match ASCII case-insensitively; values keep their case.

    Raises:
        HelpRequested: -h/--help was reached before any error.
        MissingValueError: --param had no usable value.
        UnexpectedArgumentError: a third positional token was found.
    """

    first = False
    second = False
    params: list[str] = []
    positional1: str | None = None
    positional2: str | None = None

    i = 0
    while i < len(tokens):
        token = tokens[i]
        folded = token.translate(_ASCII_LOWER)

        if folded in FIRST_FLAGS:
            first = True
            i += 1
        elif folded in SECOND_FLAGS:
            second = True
            i += 1
        elif folded.startswith(_PARAM_PREFIX):
            params.append(token[len(_PARAM_PREFIX):])
            i += 1
        elif folded == PARAM_FLAG:
            # The next token is the value unless it is missing, empty, or another flag.
            value = tokens[i + 1] if i + 1 < len(tokens) else ""
            if not value or value.startswith("-"):
                logger.info("--param without value at position %d", i)
                raise MissingValueError(PARAM_FLAG)
            params.append(value)
            i += 2
        elif folded in HELP_FLAGS:
            logger.debug("help requested at position %d", i)
            raise HelpRequested()
        else:
            # Empty positionals count as unset, like `[[ -z ... ]]`.
            if not positional1:
                positional1 = token
            elif not positional2:
                positional2 = token
            else:
                logger.info("unexpected third positional %r", token)
                raise UnexpectedArgumentError(token)
            i += 1

        logger.debug("consumed %r (next index %d)", token, i)

    return ParsedArgs(
        first=first,
        second=second,
        params=tuple(params),
        positional1=positional1,
        positional2=positional2,
    )


def invoke_example_function(tokens: Sequence[str]) -> InvocationResult:
    """Run the grammar with shell-function semantics.

    - help: usage on stdout, exit 0
    - usage error: diagnostic line plus usage on stderr, exit 1
    - success: exit 0 and the parsed arguments
    """

    try:
        args = parse_example_args(tokens)
    except HelpRequested:
        return InvocationResult(exit_code=0, help_shown=True, stdout=usage_text())
    except UsageError as exc:
        return InvocationResult(exit_code=1, stderr=f"{exc.message}\n{usage_text()}")

    return InvocationResult(exit_code=0, args=args)
