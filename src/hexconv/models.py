"""Data models

Conversion modes and the result of a conversion run.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel


class Direction(str, Enum):
    """Conversion direction named by the mode"""

    COMPRESS = "compress"
    DECOMPRESS = "decompress"


class Mode(str, Enum):
    """CLI conversion modes

    Both directions apply the binary-to-hex transform; the direction only
    changes the label in the timing report.
    """

    COMPRESS_CACHED = "compress-cached"
    COMPRESS_NONCACHED = "compress-noncached"
    DECOMPRESS_CACHED = "decompress-cached"
    DECOMPRESS_NONCACHED = "decompress-noncached"

    @property
    def cached(self) -> bool:
        return self in (Mode.COMPRESS_CACHED, Mode.DECOMPRESS_CACHED)

    @property
    def direction(self) -> Direction:
        if self in (Mode.DECOMPRESS_CACHED, Mode.DECOMPRESS_NONCACHED):
            return Direction.DECOMPRESS
        return Direction.COMPRESS

    @property
    def label(self) -> str:
        prefix = "Cached" if self.cached else "Non-cached"
        noun = "decompression" if self.direction is Direction.DECOMPRESS else "conversion"
        return f"{prefix} {noun}"


class ConversionResult(BaseModel):
    """Summary of one pass over an input file"""

    input_path: Path
    output_path: Path
    mode: Mode | None = None
    lines_processed: int = 0

    # Cache statistics (all zero when caching is disabled)
    cache_enabled: bool = False
    cache_capacity: int = 0
    cache_size: int = 0
    cache_hits: int = 0
    cache_misses: int = 0
    cache_evictions: int = 0

    elapsed_seconds: float = 0.0

    @property
    def cache_hit_rate(self) -> float:
        lookups = self.cache_hits + self.cache_misses
        return self.cache_hits / lookups if lookups > 0 else 0.0
