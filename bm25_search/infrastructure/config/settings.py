"""
Pydantic Settings configuration.

Every value can be set through an environment variable (or a .env file);
nested sections group the index, retrieval and corpus options.
"""
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bm25_search.infrastructure.config.env import init_env

init_env()


class BM25Config(BaseSettings):
    """BM25 scoring parameters"""
    k1: float = Field(default=1.5, alias="BM25_K1", ge=0)
    b: float = Field(default=0.75, alias="BM25_B", ge=0, le=1)


class RetrievalConfig(BaseSettings):
    """Query-side options"""
    top_k: int = Field(default=5, alias="BM25_TOP_K", ge=1)
    cache_size: int = Field(default=100, alias="BM25_CACHE_SIZE", ge=0)
    tokenizer: Literal["whitespace", "en", "zh"] = Field(default="whitespace", alias="BM25_TOKENIZER")


class CorpusConfig(BaseSettings):
    """Corpus location"""
    directory: str = Field(default="data/documents", alias="BM25_CORPUS_DIR")
    encoding: str = Field(default="utf-8", alias="BM25_CORPUS_ENCODING")


class Settings(BaseSettings):
    """
    Global settings.

    Usage:
        settings.bm25.k1
        settings.get("retrieval.top_k")
        settings.get("corpus.directory", "data")
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    bm25: BM25Config = Field(default_factory=BM25Config)
    retrieval: RetrievalConfig = Field(default_factory=RetrievalConfig)
    corpus: CorpusConfig = Field(default_factory=CorpusConfig)

    def get(self, path: str, default: Any = None) -> Any:
        obj = self
        for key in path.split("."):
            if hasattr(obj, key):
                obj = getattr(obj, key)
            else:
                return default
        return obj


settings = Settings()
