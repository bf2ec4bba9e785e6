import logging
import os
from typing import List

from langchain_core.documents import Document

logger = logging.getLogger(__name__)


def list_files(directory: str) -> List[str]:
    """
    List the regular files directly inside a directory.

    Args:
        directory: Directory to scan (not recursive)

    Returns:
        List[str]: Full paths, sorted by file name
    """
    if not os.path.exists(directory):
        raise FileNotFoundError(f"corpus directory not found: {directory}")
    if not os.path.isdir(directory):
        raise NotADirectoryError(f"not a directory: {directory}")

    paths = []
    for name in sorted(os.listdir(directory)):
        path = os.path.join(directory, name)
        if os.path.isfile(path):
            paths.append(path)
    return paths


def read_document(path: str, encoding: str = "utf-8") -> Document:
    with open(path, encoding=encoding) as f:
        text = f.read()
    return Document(
        page_content=text,
        metadata={"source": path, "name": os.path.basename(path)},
    )


def load_documents(directory: str, encoding: str = "utf-8") -> List[Document]:
    documents = [read_document(path, encoding) for path in list_files(directory)]
    logger.info(f"Loaded {len(documents)} documents from {directory}")
    return documents
