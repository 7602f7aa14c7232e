"""Identity of the running interpreter."""
from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class RuntimeIdentity:
    """Read-only description of the interpreter doing the bootstrapping.

    Attributes:
        version: ``"<major>.<minor>"``; namespaces the per-version vendor tree
        bindir: Directory holding the interpreter executable
    """

    version: str
    bindir: Path

    @classmethod
    def current(cls) -> RuntimeIdentity:
        """Describe the running interpreter."""
        return cls(
            version=f"{sys.version_info.major}.{sys.version_info.minor}",
            bindir=Path(sys.executable).resolve().parent,
        )


__all__ = ["RuntimeIdentity"]
