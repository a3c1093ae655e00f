"""hexconv

Rewrites `<size>:<binary digits>` records as `<size>:<HEX>`, optionally
memoizing repeated lines in a bounded FIFO cache.

Usage:
    python -m hexconv compress-cached input.txt output.txt 5000
"""

from hexconv.cache import FifoCache
from hexconv.codec import decode, encode
from hexconv.exceptions import ConversionIOError, ConverterError, FormatError, UsageError
from hexconv.models import ConversionResult, Mode
from hexconv.pipeline import convert_file, convert_lines

__all__ = [
    "ConversionIOError",
    "ConversionResult",
    "ConverterError",
    "FifoCache",
    "FormatError",
    "Mode",
    "UsageError",
    "convert_file",
    "convert_lines",
    "decode",
    "encode",
]
__version__ = "0.1.0"
