"""Run configuration

Built from parsed command line arguments and validated up front so that a
bad invocation fails before any file is touched.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from hexconv.exceptions import UsageError
from hexconv.models import Mode

DEFAULT_CACHE_SIZE = 5000


def parse_mode(value: str) -> Mode:
    """Look up a mode by its CLI name"""
    try:
        return Mode(value)
    except ValueError:
        names = ", ".join(f"'{m.value}'" for m in Mode)
        raise UsageError(f"unknown mode {value!r}. Use one of {names}") from None


def parse_cache_size(value: str | int | None) -> int:
    """Parse the optional cache size argument

    Returns:
        DEFAULT_CACHE_SIZE when no value was given

    Raises:
        UsageError: the value is not a positive integer
    """
    if value is None:
        return DEFAULT_CACHE_SIZE
    try:
        size = int(value)
    except ValueError:
        raise UsageError(f"cache size must be a positive integer, got {value!r}") from None
    if size < 1:
        raise UsageError(f"cache size must be a positive integer, got {size}")
    return size


@dataclass(frozen=True)
class ConverterConfig:
    """Settings for one conversion run"""

    mode: Mode
    input_path: Path
    output_path: Path
    cache_size: int = DEFAULT_CACHE_SIZE
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> ConverterConfig:
        """Validate a parsed argument namespace"""
        return cls(
            mode=parse_mode(args.mode),
            input_path=Path(args.input_file),
            output_path=Path(args.output_file),
            cache_size=parse_cache_size(args.cache_size),
            verbose=bool(getattr(args, "verbose", False)),
        )
