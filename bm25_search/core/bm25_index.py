"""
In-memory BM25 index over a fixed, pre-tokenized corpus.

Formula:
    idf(term) = ln((N - df + 0.5) / (df + 0.5))
    score(term, doc) = idf * (tf * (k1 + 1)) / (tf + k1 * (1 - b + b * dl / avgdl))

Where:
    N = number of documents
    df = number of documents containing the term at least once
    tf = occurrences of the term in the document
    dl = document length in tokens
    avgdl = mean document length over the corpus

The idf is not clamped: terms present in more than half of the corpus get a
negative weight.
"""

import logging
import math
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple

from bm25_search.core.counter import FrequencyCounter
from bm25_search.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_K1 = 1.5
DEFAULT_B = 0.75


class BM25Index:
    def __init__(
        self,
        corpus: Sequence[Sequence[str]],
        k1: float = DEFAULT_K1,
        b: float = DEFAULT_B,
    ):
        if not math.isfinite(k1) or k1 < 0:
            raise ConfigurationError(f"k1 must be a finite non-negative number, got {k1}")
        if not 0 <= b <= 1:
            raise ConfigurationError(f"b must be within [0, 1], got {b}")

        self.corpus: Tuple[Tuple[str, ...], ...] = tuple(tuple(doc) for doc in corpus)
        if not self.corpus:
            raise ConfigurationError("cannot build a BM25 index over an empty corpus")

        self.k1 = k1
        self.b = b
        self.doc_count = len(self.corpus)

        self.doc_lens: Tuple[int, ...] = ()
        self.avg_doc_len: float = 0.0
        self.tf_cache: Tuple[Mapping[str, int], ...] = ()
        self.df: Mapping[str, int] = MappingProxyType({})
        self.idf: Mapping[str, float] = MappingProxyType({})

        self._compute_lengths()
        self._build_tf_cache()
        self._compute_idf()

        logger.debug(
            "Built BM25 index: %d documents, %d unique terms, avgdl=%.3f",
            self.doc_count,
            len(self.idf),
            self.avg_doc_len,
        )

    @classmethod
    def build(
        cls,
        corpus: Sequence[Sequence[str]],
        k1: float = DEFAULT_K1,
        b: float = DEFAULT_B,
    ) -> "BM25Index":
        return cls(corpus, k1=k1, b=b)

    @classmethod
    def from_settings(cls, corpus: Sequence[Sequence[str]], settings) -> "BM25Index":
        return cls(corpus, k1=settings.bm25.k1, b=settings.bm25.b)

    def _compute_lengths(self) -> None:
        total_len = 0
        doc_lens = []
        for doc in self.corpus:
            doc_lens.append(len(doc))
            total_len += len(doc)

        self.doc_lens = tuple(doc_lens)
        self.avg_doc_len = total_len / self.doc_count

    def _build_tf_cache(self) -> None:
        self.tf_cache = tuple(
            MappingProxyType(dict(FrequencyCounter(doc).counts())) for doc in self.corpus
        )

    def _compute_idf(self) -> None:
        # each tf table holds a document's distinct terms once
        df = FrequencyCounter()
        for tf in self.tf_cache:
            df.update(tf.keys())

        idf: Dict[str, float] = {}
        for term, count in df.counts().items():
            idf[term] = math.log((self.doc_count - count + 0.5) / (count + 0.5))

        self.df = MappingProxyType(dict(df.counts()))
        self.idf = MappingProxyType(idf)

    def term_idf(self, term: str) -> float:
        return self.idf.get(term, 0.0)

    def document_frequency(self, term: str) -> int:
        return self.df.get(term, 0)

    def term_frequency(self, term: str, doc_index: int) -> int:
        self._check_doc_index(doc_index)
        return self.tf_cache[doc_index].get(term, 0)

    def score(self, term: str, doc_index: int) -> float:
        tf = self.term_frequency(term, doc_index)
        if tf == 0:
            return 0.0

        idf = self.term_idf(term)
        doc_len = self.doc_lens[doc_index]

        numerator = tf * (self.k1 + 1)
        denominator = tf + self.k1 * (1 - self.b + self.b * doc_len / self.avg_doc_len)

        return idf * numerator / denominator

    def score_query(self, query_terms: Sequence[str], doc_index: int) -> float:
        """
        Sum of per-term scores for one document.

        Repeated query terms are not deduplicated: each occurrence contributes.
        """
        self._check_query(query_terms)
        self._check_doc_index(doc_index)

        score = 0.0
        for term in query_terms:
            score += self.score(term, doc_index)
        return score

    def rank(self, query_terms: Sequence[str]) -> List[Tuple[int, float]]:
        """
        Score every document and order them best first.

        Returns exactly one (doc_index, score) pair per document. Equal scores
        are ordered by ascending doc_index.
        """
        self._check_query(query_terms)

        ranks = [
            (doc_index, self.score_query(query_terms, doc_index))
            for doc_index in range(self.doc_count)
        ]
        ranks.sort(key=lambda x: (-x[1], x[0]))
        return ranks

    def top_k(self, query_terms: Sequence[str], k: int) -> List[Tuple[int, float]]:
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")
        return self.rank(query_terms)[:k]

    def _check_doc_index(self, doc_index: int) -> None:
        if not 0 <= doc_index < self.doc_count:
            raise IndexError(
                f"document index {doc_index} out of range for {self.doc_count} documents"
            )

    @staticmethod
    def _check_query(query_terms: Sequence[str]) -> None:
        if isinstance(query_terms, str):
            raise TypeError("query_terms must be a sequence of tokens, not a string")

    def __len__(self) -> int:
        return self.doc_count

    def __repr__(self) -> str:
        return (
            f"BM25Index(doc_count={self.doc_count}, vocabulary={len(self.idf)}, "
            f"k1={self.k1}, b={self.b})"
        )
