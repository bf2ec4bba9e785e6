from bm25_search.core.errors import ConfigurationError
from bm25_search.core.counter import FrequencyCounter
from bm25_search.core.bm25_index import BM25Index
from bm25_search.core.tokenizer import Tokenizer
from bm25_search.core.retriever import BM25Retriever

__all__ = ["ConfigurationError", "FrequencyCounter", "BM25Index", "Tokenizer", "BM25Retriever"]
