"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_library_flag(parser: argparse.ArgumentParser) -> None:
    """Add --library flag overriding DEPBOOT_LIBRARY."""
    parser.add_argument(
        "--library",
        type=str,
        help="Library root holding Vendorfile.yaml (default: $DEPBOOT_LIBRARY)",
    )


def add_force_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--force",
        action="store_true",
        help="Force operation",
    )


def add_verbose_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output to stderr",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add the flags every depboot command accepts."""
    add_json_flag(parser)
    add_library_flag(parser)
    add_verbose_flag(parser)


__all__ = [
    "add_json_flag",
    "add_library_flag",
    "add_force_flag",
    "add_verbose_flag",
    "add_standard_flags",
]
