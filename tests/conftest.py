from __future__ import annotations

from pathlib import Path

import pytest

TESTS_DIR = Path(__file__).resolve().parent

# Tests that read installed distribution metadata.
PACKAGING_DIRS = (
    TESTS_DIR / "version",
)


def _is_in_dir(path: Path, directory: Path) -> bool:
    try:
        path.relative_to(directory)
    except ValueError:
        return False
    return True


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    for item in items:
        path = Path(str(item.fspath)).resolve()
        if any(_is_in_dir(path, directory) for directory in PACKAGING_DIRS):
            item.add_marker(pytest.mark.packaging)
