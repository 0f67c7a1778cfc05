import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """The CLI reconfigures the root logger; drop its handlers after every test."""
    root = logging.getLogger()
    before, level = set(root.handlers), root.level
    yield
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
