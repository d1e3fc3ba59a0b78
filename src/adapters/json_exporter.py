"""JSON rendering of `ParsedArgs`.

Lets scripts consume the parse result (`SHELL_IDIOMS_OUTPUT_FORMAT=json`)
instead of scraping the rich table.
"""

from __future__ import annotations

import json

from core.domain.models import ParsedArgs


def dump_parsed_args(args: ParsedArgs) -> str:
    """Serialize `ParsedArgs` to UTF-8 JSON with a stable key order."""

    payload = args.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"
