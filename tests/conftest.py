import io

import pytest
from rich.console import Console

from classwork import exams


@pytest.fixture
def console():
    """Rich console that records into a string buffer."""
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def output(console):
    """Callable returning everything printed to the console so far."""
    return lambda: console.file.getvalue()


@pytest.fixture(autouse=True)
def seeded_grader():
    exams.seed_grader(1234)
    yield
