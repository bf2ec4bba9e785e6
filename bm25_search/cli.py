from __future__ import annotations

import argparse
import os
import sys
import time
from typing import Optional, Sequence, TextIO

from bm25_search.core.corpus_loader import load_documents
from bm25_search.core.errors import ConfigurationError
from bm25_search.core.retriever import BM25Retriever
from bm25_search.infrastructure.config.settings import settings
from bm25_search.infrastructure.utils.logging import get_logger, init_logging

logger = get_logger(__name__)

SEPARATOR = "---------------------"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bm25-search",
        description="Rank the text files of a directory against interactive queries with BM25.",
    )
    parser.add_argument("text_file_directory", nargs="?", default=settings.corpus.directory)
    parser.add_argument("--top-k", type=int, default=settings.retrieval.top_k)
    parser.add_argument("--k1", type=float, default=settings.bm25.k1)
    parser.add_argument("--b", type=float, default=settings.bm25.b)
    parser.add_argument(
        "--tokenizer",
        choices=["whitespace", "en", "zh"],
        default=settings.retrieval.tokenizer,
    )
    parser.add_argument("--encoding", default=settings.corpus.encoding)
    return parser


def query_loop(retriever: BM25Retriever, top_k: int, stdin: TextIO, stdout: TextIO) -> None:
    while True:
        stdout.write("Enter a search query: ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            return

        results = retriever.search(line, top_k=top_k)
        stdout.write("Results:\n")
        for doc, score in results:
            name = doc.metadata.get("name") or os.path.basename(doc.metadata.get("source", ""))
            stdout.write(f"{name}: BM25 Score - {score}\n")
        stdout.write(SEPARATOR + "\n")


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    init_logging()
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.top_k < 1:
        parser.error("--top-k must be at least 1")

    try:
        documents = load_documents(args.text_file_directory, encoding=args.encoding)
        retriever = BM25Retriever(
            k1=args.k1,
            b=args.b,
            language=args.tokenizer,
            cache_size=settings.retrieval.cache_size,
        )
        start = time.perf_counter()
        retriever.add_documents(documents)
        elapsed = time.perf_counter() - start
    except (OSError, UnicodeDecodeError, ConfigurationError) as e:
        logger.error(f"Failed to build index from {args.text_file_directory}: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    stdout.write(f"Time taken to create index: {elapsed:.3f} seconds\n")

    try:
        query_loop(retriever, args.top_k, stdin, stdout)
    except KeyboardInterrupt:
        stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
