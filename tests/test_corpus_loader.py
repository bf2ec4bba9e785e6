import os

import pytest
from langchain_core.documents import Document

from bm25_search.core.corpus_loader import list_files, load_documents, read_document


def test_list_files_sorted_and_skips_directories(tmp_path):
    (tmp_path / "b.txt").write_text("bee", encoding="utf-8")
    (tmp_path / "a.txt").write_text("ay", encoding="utf-8")
    (tmp_path / "sub").mkdir()

    paths = list_files(str(tmp_path))

    assert paths == [str(tmp_path / "a.txt"), str(tmp_path / "b.txt")]


def test_list_files_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_files(str(tmp_path / "nope"))


def test_list_files_not_a_directory(tmp_path):
    p = tmp_path / "file.txt"
    p.write_text("x", encoding="utf-8")

    with pytest.raises(NotADirectoryError):
        list_files(str(p))


def test_read_document(tmp_path):
    p = tmp_path / "doc.txt"
    p.write_text("Hello World", encoding="utf-8")

    doc = read_document(str(p))

    assert isinstance(doc, Document)
    assert doc.page_content == "Hello World"
    assert doc.metadata == {"source": str(p), "name": "doc.txt"}


def test_load_documents_reads_each_file_once(tmp_path):
    for name in ("one.txt", "two.txt", "three.txt"):
        (tmp_path / name).write_text(name, encoding="utf-8")

    docs = load_documents(str(tmp_path))

    assert [d.metadata["name"] for d in docs] == ["one.txt", "three.txt", "two.txt"]
    assert len({d.metadata["source"] for d in docs}) == 3


def test_load_documents_empty_directory(tmp_path):
    assert load_documents(str(tmp_path)) == []


def test_read_document_invalid_encoding(tmp_path):
    p = tmp_path / "bin.dat"
    p.write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(UnicodeDecodeError):
        read_document(str(p))
    assert os.path.exists(p)
