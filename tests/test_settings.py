from __future__ import annotations

import pytest
from pydantic import ValidationError

from bm25_search.infrastructure.config.settings import Settings


def test_defaults(monkeypatch):
    for var in ("BM25_K1", "BM25_B", "BM25_TOP_K", "BM25_TOKENIZER", "BM25_CORPUS_DIR"):
        monkeypatch.delenv(var, raising=False)

    s = Settings()

    assert s.bm25.k1 == 1.5
    assert s.bm25.b == 0.75
    assert s.retrieval.top_k == 5
    assert s.retrieval.tokenizer == "whitespace"
    assert s.corpus.directory == "data/documents"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("BM25_K1", "2.0")
    monkeypatch.setenv("BM25_B", "0.5")
    monkeypatch.setenv("BM25_TOP_K", "10")
    monkeypatch.setenv("BM25_TOKENIZER", "en")

    s = Settings()

    assert s.bm25.k1 == 2.0
    assert s.bm25.b == 0.5
    assert s.retrieval.top_k == 10
    assert s.retrieval.tokenizer == "en"


@pytest.mark.parametrize(
    "var, value",
    [("BM25_K1", "-1"), ("BM25_B", "1.5"), ("BM25_TOP_K", "0"), ("BM25_TOKENIZER", "klingon")],
)
def test_invalid_env_values(monkeypatch, var, value):
    monkeypatch.setenv(var, value)

    with pytest.raises(ValidationError):
        Settings()


def test_get_dotted_path(monkeypatch):
    monkeypatch.delenv("BM25_TOP_K", raising=False)
    s = Settings()

    assert s.get("retrieval.top_k") == 5
    assert s.get("bm25.missing", "fallback") == "fallback"
