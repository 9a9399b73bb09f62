"""Configuration for JSON output and CLI logging."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorkitConfig:
    """Options shared by the JSON codec and the CLI.

    Attributes:
        json_indent: Indent width for ``to_json``; None for compact output.
        sort_keys: Sort object keys when encoding.
        log_level: Logging level name applied by the CLI.
    """

    json_indent: int | None = None
    sort_keys: bool = False
    log_level: str = "WARNING"
