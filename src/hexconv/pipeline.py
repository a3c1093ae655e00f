"""Line pipeline

Reads `<size>:<payload>` records line by line, converts the payload and writes
`<size>:<converted>` records. Whole input lines are optionally memoized in a
FifoCache.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import TextIO

import structlog

from hexconv.cache import FifoCache
from hexconv.codec import encode
from hexconv.exceptions import ConversionIOError, FormatError
from hexconv.models import ConversionResult, Mode

logger = structlog.get_logger()

SEPARATOR = ":"

Transform = Callable[[str], str]


def convert_line(line: str, transform: Transform = encode) -> str:
    """Convert one record

    Args:
        line: record without its line terminator
        transform: payload conversion (binary-to-hex by default)

    Returns:
        The size token, a separator and the converted payload

    Raises:
        FormatError: no separator, or the payload is rejected by `transform`
    """
    size, sep, payload = line.partition(SEPARATOR)
    if not sep:
        raise FormatError(f"missing '{SEPARATOR}' separator in {line!r}")
    return f"{size}{SEPARATOR}{transform(payload)}"


def convert_lines(
    lines: Iterable[str],
    *,
    cache: FifoCache[str, str] | None = None,
    transform: Transform = encode,
) -> Iterator[str]:
    """Convert records lazily, yielding output lines without terminators

    The cache key is the whole raw line, so only byte-identical repeats hit.
    On a hit the cached line is yielded and the cache is left untouched.

    Raises:
        FormatError: annotated with the 1-based line number
    """
    for line_number, raw in enumerate(lines, start=1):
        line = _strip_terminator(raw)
        if cache is not None:
            cached, found = cache.get(line)
            if found:
                yield cached
                continue
        try:
            converted = convert_line(line, transform)
        except FormatError as e:
            raise e.at_line(line_number) from e
        if cache is not None:
            cache.set(line, converted)
        yield converted


def convert_file(
    input_path: Path | str,
    output_path: Path | str,
    *,
    cache: FifoCache[str, str] | None = None,
    transform: Transform = encode,
    mode: Mode | None = None,
) -> ConversionResult:
    """Convert an input file into an output file in one pass

    Args:
        input_path: file of `<size>:<payload>` records
        output_path: destination, created or truncated
        cache: line cache, or None to convert every line
        transform: payload conversion (binary-to-hex by default)
        mode: CLI mode, recorded on the result

    Returns:
        Line count, cache statistics and elapsed wall-clock time

    Raises:
        ConversionIOError: a file cannot be opened, read or written
        FormatError: a record is malformed
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    log = logger.bind(input=str(input_path), output=str(output_path), cached=cache is not None)
    log.info("conversion started")

    start = time.perf_counter()
    lines_processed = 0

    with _open(input_path, "r") as src:
        # Buffered writes may only fail when the output is flushed on close
        try:
            with _open(output_path, "w") as dst:
                for out_line in convert_lines(_read_lines(src, input_path), cache=cache, transform=transform):
                    dst.write(out_line + "\n")
                    lines_processed += 1
        except OSError as e:
            raise ConversionIOError(str(output_path), f"write failed: {e.strerror or e}") from e

    elapsed = time.perf_counter() - start

    cache_fields: dict[str, int | bool] = {}
    if cache is not None:
        stats = cache.stats()
        cache_fields = {
            "cache_enabled": True,
            "cache_capacity": stats["capacity"],
            "cache_size": stats["size"],
            "cache_hits": stats["hits"],
            "cache_misses": stats["misses"],
            "cache_evictions": stats["evictions"],
        }

    result = ConversionResult(
        input_path=input_path,
        output_path=output_path,
        mode=mode,
        lines_processed=lines_processed,
        elapsed_seconds=elapsed,
        **cache_fields,
    )

    log.info(
        "conversion finished",
        lines=lines_processed,
        cache_hits=result.cache_hits,
        cache_misses=result.cache_misses,
        elapsed_seconds=round(elapsed, 4),
    )
    return result


def _open(path: Path, mode: str) -> TextIO:
    try:
        return open(path, mode, encoding="utf-8", newline="\n")
    except OSError as e:
        action = "open for reading" if mode == "r" else "open for writing"
        raise ConversionIOError(str(path), f"cannot {action}: {e.strerror or e}") from e


def _read_lines(src: TextIO, path: Path) -> Iterator[str]:
    try:
        yield from src
    except UnicodeDecodeError as e:
        raise FormatError(f"{path}: input is not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise ConversionIOError(str(path), f"read failed: {e}") from e


def _strip_terminator(raw: str) -> str:
    # "\n" then a single "\r", matching line-scanner semantics
    if raw.endswith("\n"):
        raw = raw[:-1]
    if raw.endswith("\r"):
        raw = raw[:-1]
    return raw
