import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'depboot'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from depboot.core.runtime import RuntimeIdentity
from depboot.core.stdlib_logging import reset_stdlib_logging_for_tests


@pytest.fixture(autouse=True)
def _isolate_depboot_env(monkeypatch):
    """Start every test without ambient DEPBOOT_* variables or depboot log handlers."""
    for key in list(os.environ):
        if key.startswith("DEPBOOT_"):
            monkeypatch.delenv(key, raising=False)
    yield
    reset_stdlib_logging_for_tests()


@pytest.fixture
def library(tmp_path: Path) -> Path:
    """Empty library root."""
    root = tmp_path / "Library"
    root.mkdir()
    return root


@pytest.fixture
def vendor_root(library: Path) -> Path:
    return library / "vendor" / "bundle" / "python"


@pytest.fixture
def runtime(tmp_path: Path) -> RuntimeIdentity:
    """A fixed interpreter identity, independent of the Python running the tests."""
    return RuntimeIdentity(version="3.12", bindir=tmp_path / "bin")


@pytest.fixture
def modern_pip(monkeypatch):
    """Pretend a supported pip is installed, whatever the test environment has."""
    monkeypatch.setattr("depboot.core.vendor.manifest.installed_tooling_version", lambda: "24.0")
