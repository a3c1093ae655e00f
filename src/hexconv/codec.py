"""Binary digit / hexadecimal codec

Pure functions converting strings of '0'/'1' characters to uppercase hex text
and back.

A final group shorter than 8 bits is padded with trailing zero bits, so the
round trip is lossy for bit strings whose length is not a multiple of 8:
`decode(encode("1"))` is `"10000000"`. The original bit length is not carried.
"""

from __future__ import annotations

import binascii

from hexconv.exceptions import FormatError

BITS_PER_BYTE = 8
_BINARY_DIGITS = frozenset("01")


def encode(binary_digits: str) -> str:
    """Convert a binary digit string to uppercase hexadecimal

    Digits are grouped into bytes from the left. A short final group is
    padded with zero bits on the right.

    Args:
        binary_digits: string of '0' and '1' characters (may be empty)

    Returns:
        Uppercase hex string, two characters per byte

    Raises:
        FormatError: a character other than '0' or '1' is present
    """
    if not _BINARY_DIGITS.issuperset(binary_digits):
        position = next(i for i, ch in enumerate(binary_digits) if ch not in _BINARY_DIGITS)
        raise FormatError(
            f"invalid binary digit {binary_digits[position]!r} at position {position}",
            position=position,
        )

    out = bytearray()
    for start in range(0, len(binary_digits), BITS_PER_BYTE):
        group = binary_digits[start : start + BITS_PER_BYTE]
        out.append(int(group.ljust(BITS_PER_BYTE, "0"), 2))
    return out.hex().upper()


def decode(hex_string: str) -> str:
    """Convert a hexadecimal string to binary digits

    Args:
        hex_string: even-length string of hex digits, either case

    Returns:
        Eight binary digits per decoded byte, in byte order

    Raises:
        FormatError: odd length or a non-hex character
    """
    if len(hex_string) % 2:
        raise FormatError(f"odd-length hex string ({len(hex_string)} characters)")
    try:
        # bytes.fromhex() skips whitespace, so decode via binascii instead
        data = binascii.unhexlify(hex_string.encode("ascii"))
    except (UnicodeEncodeError, binascii.Error) as e:
        raise FormatError(f"invalid hex string: {e}") from e
    return "".join(f"{byte:08b}" for byte in data)
