from __future__ import annotations

from typing import Any, Dict, Mapping


class DepbootError(Exception):
    """Base exception for depboot."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ToolingTooOldError(DepbootError):
    """Raised when the installed package manager is older than the supported minimum."""

    def __init__(
        self,
        message: str = "",
        *,
        installed: str | None = None,
        minimum: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if installed is not None:
            ctx["installed"] = installed
        if minimum is not None:
            ctx["minimum"] = minimum
        super().__init__(message, context=ctx)
        self.installed = installed
        self.minimum = minimum


class ManifestError(DepbootError):
    """Raised when the manifest or its lockfile is missing, unparsable or invalid."""


class InstallError(DepbootError, RuntimeError):
    """Raised when the package manager fails to install the vendored tree."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        DepbootError.__init__(self, message, context=context)
        RuntimeError.__init__(self, message)


class ConfigError(DepbootError, ValueError):
    """Raised when bootstrap configuration is missing or malformed."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        DepbootError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "DepbootError",
    "ToolingTooOldError",
    "ManifestError",
    "InstallError",
    "ConfigError",
]
