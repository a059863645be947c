"""Shared pytest configuration and fixtures for all tests."""

from pathlib import Path

import pytest

from lsid.utils import configure_logging


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: end-to-end CLI tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def lsid_logging():
    """Install the stderr handler once, as the CLI entry point does."""
    configure_logging()


# =============================================================================
# Filesystem Helpers
# =============================================================================


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Directory with one 5-byte file and one subdirectory.

    Layout::

        root/
            file.txt      (b"hello")
            sub/
                inner.bin (b"\\x00" * 1234)
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "file.txt").write_bytes(b"hello")
    (root / "sub").mkdir()
    (root / "sub" / "inner.bin").write_bytes(b"\x00" * 1234)
    return root


@pytest.fixture
def unreadable_dir(tmp_path: Path):
    """A directory without read permission; permissions restored on teardown."""
    locked = tmp_path / "locked"
    locked.mkdir()
    (locked / "hidden.txt").write_text("secret")
    locked.chmod(0o000)
    yield locked
    locked.chmod(0o755)
