"""Command line handling

Parses arguments, runs a conversion and reports its timing.
"""

from __future__ import annotations

import argparse
import sys

import structlog

from hexconv.cache import FifoCache
from hexconv.codec import encode
from hexconv.config import DEFAULT_CACHE_SIZE, ConverterConfig
from hexconv.exceptions import ConverterError
from hexconv.models import ConversionResult, Direction, Mode
from hexconv.pipeline import convert_file

logger = structlog.get_logger()


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog

    Logs are written to stderr; stdout carries only the timing report, so it
    can be redirected or parsed on its own. Loggers are not cached on first
    use so that module-level loggers follow a later reconfiguration.

    Args:
        verbose: console-rendered logs instead of JSON lines
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer() if verbose else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def run_conversion(config: ConverterConfig) -> ConversionResult:
    """Run one conversion as described by the config

    Both compress and decompress modes apply the binary-to-hex transform.

    Raises:
        ConversionIOError: a file cannot be opened, read or written
        FormatError: a record is malformed
    """
    log = logger.bind(mode=config.mode.value)
    if config.mode.direction is Direction.DECOMPRESS:
        log.info("decompress mode applies the binary-to-hex transform")

    cache: FifoCache[str, str] | None = FifoCache(config.cache_size) if config.mode.cached else None
    return convert_file(
        config.input_path,
        config.output_path,
        cache=cache,
        transform=encode,
        mode=config.mode,
    )


def format_report(result: ConversionResult) -> list[str]:
    """Human-readable timing report lines for stdout"""
    label = result.mode.label if result.mode is not None else "Conversion"
    lines = [f"{label} took {result.elapsed_seconds:.2f} seconds"]
    if result.cache_enabled:
        lines.append(
            f"Cache: {result.cache_hits} hits, {result.cache_misses} misses, {result.cache_evictions} evictions"
        )
    return lines


def cmd_convert(args: argparse.Namespace) -> int:
    """Execute a conversion and map failures to exit codes"""
    configure_logging(getattr(args, "verbose", False))

    try:
        config = ConverterConfig.from_args(args)
        result = run_conversion(config)
    except ConverterError as e:
        logger.error("conversion failed", error=str(e), error_type=type(e).__name__)
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    for line in format_report(result):
        print(line)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Build the CLI parser"""
    modes = ", ".join(m.value for m in Mode)
    parser = argparse.ArgumentParser(
        prog="hexconv",
        description="Rewrite '<size>:<binary digits>' records as '<size>:<HEX>', optionally caching repeated lines",
    )
    parser.add_argument("mode", help=f"conversion mode ({modes})")
    parser.add_argument("input_file", help="input file, one record per line")
    parser.add_argument("output_file", help="output file, created or truncated")
    parser.add_argument(
        "cache_size",
        nargs="?",
        default=None,
        help=f"maximum number of cached lines for cached modes (default: {DEFAULT_CACHE_SIZE})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="human-readable log output",
    )
    return parser
