import pytest

from bm25_search.core.counter import FrequencyCounter


def test_increment_inserts_then_adds():
    counter = FrequencyCounter()
    counter.increment("a")
    counter.increment("b")
    counter.increment("a")

    assert counter.counts() == {"a": 2, "b": 1}
    assert len(counter) == 2


def test_counter_from_iterable():
    counter = FrequencyCounter(["x", "y", "x", "x"])

    assert counter["x"] == 3
    assert counter["y"] == 1
    assert counter["missing"] == 0
    assert "missing" not in counter


def test_counts_is_read_only():
    counter = FrequencyCounter(["a"])

    with pytest.raises(TypeError):
        counter.counts()["a"] = 5


def test_counter_accepts_any_hashable():
    counter = FrequencyCounter([(1, 2), (1, 2), 3])

    assert counter[(1, 2)] == 2
    assert counter[3] == 1


def test_counts_lookup_of_unseen_item_raises():
    counts = FrequencyCounter(["a"]).counts()

    assert counts.get("b") is None
    with pytest.raises(KeyError):
        counts["b"]
