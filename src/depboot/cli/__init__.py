"""
depboot CLI package.

Provides the command-line interface with auto-discovery of commands
from domain subfolders (vendor/, ...).

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._output import OutputFormatter
from ._args import (
    add_json_flag,
    add_library_flag,
    add_force_flag,
    add_verbose_flag,
    add_standard_flags,
)
from ._utils import load_settings, build_accessor

__all__ = [
    # Output formatting
    "OutputFormatter",
    # Argument helpers
    "add_json_flag",
    "add_library_flag",
    "add_force_flag",
    "add_verbose_flag",
    "add_standard_flags",
    # Utilities
    "load_settings",
    "build_accessor",
]
