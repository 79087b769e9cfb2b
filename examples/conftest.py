"""Shared pytest configuration for perch examples.

Provides the ``example_module`` fixture that loads a fresh copy of the
``app.py`` file in the same directory as the test. Each call re-executes
app.py in an isolated module namespace, so every test starts with a new
router, host, and document.
"""

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest


@pytest.fixture
def example_module(request: pytest.FixtureRequest) -> ModuleType:
    """Load a fresh module from the sibling app.py next to the test file."""
    app_path = Path(request.path).parent / "app.py"
    module_name = f"example_{app_path.parent.name}"
    spec = importlib.util.spec_from_file_location(module_name, app_path)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
