"""
Pytest configuration for the fluent views tests.

Puts the project root on the Python path so the tests run against the
working tree without an install, and provides sources that record how
much of them has been traversed.
"""

import sys
from pathlib import Path

project_dir = Path(__file__).parent.parent
if str(project_dir) not in sys.path:
    sys.path.insert(0, str(project_dir))

import pytest


class CountingSource:
    """A re-iterable source that counts the elements pulled and iterators opened."""

    def __init__(self, elements):
        self.elements = list(elements)
        self.pulled = 0
        self.opened = 0

    def __iter__(self):
        self.opened += 1
        return self._pull()

    def _pull(self):
        for element in self.elements:
            self.pulled += 1
            yield element


@pytest.fixture
def counting_source():
    """A counting source over the numbers 1 to 10."""
    return CountingSource(range(1, 11))


@pytest.fixture
def make_counting_source():
    """Factory for counting sources over arbitrary elements."""
    return CountingSource
