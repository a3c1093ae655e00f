#!/usr/bin/env python3
"""hexconv entry point

Usage:
    python -m hexconv compress-cached mat.in mat.in.x 5000
    python -m hexconv decompress-noncached mat.in mat.in.x --verbose
"""

from __future__ import annotations

import sys

from hexconv.cli import cmd_convert, create_parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)
    return cmd_convert(args)


if __name__ == "__main__":
    sys.exit(main())
