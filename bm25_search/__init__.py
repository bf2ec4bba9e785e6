from bm25_search.core import BM25Index, BM25Retriever, ConfigurationError, FrequencyCounter

__all__ = ["BM25Index", "BM25Retriever", "ConfigurationError", "FrequencyCounter"]

__version__ = "0.1.0"
