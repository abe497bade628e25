import pytest
from loguru import logger


@pytest.fixture
def caplog(caplog):
    """Route loguru records into pytest's caplog."""
    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    yield caplog
    logger.remove(handler_id)


class Row:
    """Re-fetchable record: distinct objects may share an id."""
    def __init__(self, id, name=""):
        self.id = id
        self.name = name

    def __repr__(self):
        return f"Row({self.id!r}, {self.name!r})"


@pytest.fixture
def row_factory():
    return Row


@pytest.fixture
def changes():
    """Collects emitted SelectionChange objects."""
    return []
