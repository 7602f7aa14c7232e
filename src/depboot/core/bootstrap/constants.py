"""Process-wide bootstrap constants."""
from __future__ import annotations

# Bump this whenever the on-disk vendoring layout changes in a way that
# invalidates previously vendored trees.
VENDOR_FORMAT_VERSION = 7

# Oldest pip that understands every flag the installer passes.
MINIMUM_TOOLING_VERSION = "23.0"
TOOLING_DISTRIBUTION = "pip"

LIBRARY_ENV = "DEPBOOT_LIBRARY"
BUNDLE_ENV_PREFIX = "DEPBOOT_BUNDLE_"
MANIFEST_ENV = f"{BUNDLE_ENV_PREFIX}MANIFEST"
LOCKFILE_ENV = f"{BUNDLE_ENV_PREFIX}LOCKFILE"
LOG_LEVEL_ENV = "DEPBOOT_LOG_LEVEL"
LOG_FILE_ENV = "DEPBOOT_LOG_FILE"
INSTALL_TIMEOUT_ENV = "DEPBOOT_INSTALL_TIMEOUT"

MANIFEST_FILENAME = "Vendorfile.yaml"
DEFAULT_GROUP = "default"

__all__ = [
    "VENDOR_FORMAT_VERSION",
    "MINIMUM_TOOLING_VERSION",
    "TOOLING_DISTRIBUTION",
    "LIBRARY_ENV",
    "BUNDLE_ENV_PREFIX",
    "MANIFEST_ENV",
    "LOCKFILE_ENV",
    "LOG_LEVEL_ENV",
    "LOG_FILE_ENV",
    "INSTALL_TIMEOUT_ENV",
    "MANIFEST_FILENAME",
    "DEFAULT_GROUP",
]
