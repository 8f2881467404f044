"""Global pytest fixtures and default marks for CourseManager."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.builders",
    "tests.fixtures.datagen",
]

TESTS_ROOT = Path(__file__).parent.resolve()

#: Top-level test folders whose name doubles as their default marker.
LAYER_MARKERS = ("unit", "integration", "contract", "functional")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark every item with the layer folder it lives in, unless already marked."""
    for item in items:
        try:
            layer = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if layer in LAYER_MARKERS and item.get_closest_marker(layer) is None:
            item.add_marker(getattr(pytest.mark, layer))


@pytest.fixture
def engine(request: pytest.FixtureRequest) -> Engine:
    """Route to an engine-providing fixture named by an indirect parameter.

    Example:
        ```py
        @pytest.mark.parametrize("engine", ["sqlite_engine_memory", "sqlite_engine_file"], indirect=True)
        def test_something(engine): ...
        ```
    """
    return request.getfixturevalue(request.param)
