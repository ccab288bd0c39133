import logging

import pytest


@pytest.fixture(autouse=True)
def _drop_console_handler():
    """Remove the console handler main() installs so it never outlives a captured stream."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == "audiotool-console":
            root.removeHandler(handler)


@pytest.fixture
def make_files(tmp_path):
    """Create empty files under tmp_path and return their paths."""

    def _make(*relpaths):
        paths = []
        for rel in relpaths:
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("test", encoding="utf-8")
            paths.append(path)
        return paths

    return _make
