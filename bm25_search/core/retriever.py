import logging
from typing import Dict, List, Optional, Tuple

from langchain_core.documents import Document

from bm25_search.core.bm25_index import DEFAULT_B, DEFAULT_K1, BM25Index
from bm25_search.core.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class BM25Retriever:
    """Ranks Documents against text queries and reports their identifiers."""

    def __init__(
        self,
        k1: float = DEFAULT_K1,
        b: float = DEFAULT_B,
        language: str = "whitespace",
        cache_size: int = 100,
    ):
        self.tokenizer = Tokenizer(language)
        self.k1 = k1
        self.b = b
        self._documents: List[Document] = []
        self._index: Optional[BM25Index] = None
        self._cache: Dict[str, Tuple[Tuple[int, float], ...]] = {}
        self._cache_size = cache_size

    @classmethod
    def from_settings(cls, settings) -> "BM25Retriever":
        return cls(
            k1=settings.bm25.k1,
            b=settings.bm25.b,
            language=settings.retrieval.tokenizer,
            cache_size=settings.retrieval.cache_size,
        )

    @property
    def index(self) -> Optional[BM25Index]:
        return self._index

    @property
    def documents(self) -> List[Document]:
        return list(self._documents)

    def add_documents(self, documents: List[Document]) -> None:
        corpus = [self.tokenizer.tokenize(doc.page_content) for doc in documents]
        self._index = BM25Index(corpus, k1=self.k1, b=self.b)
        self._documents = list(documents)
        self.clear_cache()
        logger.info(f"Indexed {len(self._documents)} documents")

    def search(self, query: str, top_k: int = 5) -> List[Tuple[Document, float]]:
        cache_key = f"{query}:{top_k}"
        if cache_key in self._cache:
            return self._to_results(self._cache[cache_key])

        if self._index is None:
            return []

        query_terms = self.tokenizer.tokenize(query)
        if not query_terms:
            return []

        ranks = tuple(self._index.top_k(query_terms, top_k))

        if self._cache_size > 0:
            if len(self._cache) >= self._cache_size:
                self._cache.clear()
            self._cache[cache_key] = ranks

        return self._to_results(ranks)

    def _to_results(self, ranks: Tuple[Tuple[int, float], ...]) -> List[Tuple[Document, float]]:
        # fresh Documents each call; callers may edit what they get back
        results = []
        for doc_id, score in ranks:
            doc = self._documents[doc_id]
            metadata = dict(doc.metadata)
            metadata["bm25_score"] = score
            results.append((Document(page_content=doc.page_content, metadata=metadata), score))
        return results

    def batch_search(
        self, queries: List[str], top_k: int = 5
    ) -> List[List[Tuple[Document, float]]]:
        return [self.search(q, top_k) for q in queries]

    def clear_cache(self) -> None:
        self._cache.clear()
