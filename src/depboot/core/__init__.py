"""depboot core library package.

Keep imports here light: this package is loaded before the vendored tree is on
``sys.path``.
"""

from . import exceptions  # noqa: F401

__all__ = ["exceptions"]
