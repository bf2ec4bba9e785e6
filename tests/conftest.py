import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def small_corpus():
    return [
        ["the", "cat", "sat"],
        ["the", "dog", "ran"],
        ["cat", "and", "dog"],
    ]
