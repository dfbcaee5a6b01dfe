from __future__ import annotations

import json
from pathlib import Path

import pytest

from script_synth.document import (
    Document,
    DocumentStoreError,
    JsonFileDocumentStore,
    MemoryDocumentStore,
    build_share_url,
    default_code,
    default_file_name,
    file_extension,
    parse_share_url,
    rename_for_language,
)
from script_synth.document.defaults import PLACEHOLDER_PROGRAM


def test_document_normalizes_language() -> None:
    document = Document("x = 1", " Python ")

    assert document.language == "python"
    assert document.executable is True
    assert Document("", "javascript").executable is False


def test_document_rejects_none_text() -> None:
    with pytest.raises(ValueError):
        Document(None)  # type: ignore[arg-type]


def test_file_extensions_and_renames() -> None:
    assert file_extension("python") == "py"
    assert file_extension("markdown") == "md"
    assert file_extension("brainfuck") == "txt"
    assert default_file_name("typescript") == "untitled.ts"
    assert rename_for_language("script.py", "javascript") == "script.js"


def test_default_code_table() -> None:
    assert default_code("python").startswith("# Python Code Example")
    assert default_code("RUST").startswith("// Rust Code Example")
    assert default_code("cobol") == PLACEHOLDER_PROGRAM


def test_memory_store_round_trip() -> None:
    store = MemoryDocumentStore()
    assert store.load() is None

    store.save(Document("print(1)", "python"))

    assert store.load() == Document("print(1)", "python")


def test_json_store_missing_file_loads_as_absent(tmp_path: Path) -> None:
    store = JsonFileDocumentStore(tmp_path / "nothing.json")

    assert store.load() is None


def test_json_store_writes_code_and_language(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "last.json"
    store = JsonFileDocumentStore(path)

    store.save(Document("console.log('hi')", "python"))

    assert json.loads(path.read_text(encoding="utf-8")) == {
        "code": "console.log('hi')",
        "language": "python",
    }
    assert store.load() == Document("console.log('hi')", "python")
    assert [p.name for p in path.parent.iterdir()] == ["last.json"]


def test_json_store_corrupt_or_incomplete_file_is_absent(tmp_path: Path) -> None:
    path = tmp_path / "last.json"
    store = JsonFileDocumentStore(path)

    path.write_text("{not json", encoding="utf-8")
    assert store.load() is None

    path.write_text(json.dumps({"code": "", "language": "python"}), encoding="utf-8")
    assert store.load() is None

    path.write_text(json.dumps(["code"]), encoding="utf-8")
    assert store.load() is None


def test_json_store_wraps_io_errors(tmp_path: Path) -> None:
    store = JsonFileDocumentStore(tmp_path)

    with pytest.raises(DocumentStoreError) as excinfo:
        store.load()
    assert excinfo.value.path == tmp_path

    with pytest.raises(DocumentStoreError):
        store.save(Document("x", "python"))


def test_share_url_percent_encodes_code_and_lang() -> None:
    url = build_share_url("https://example.com/editor", Document("a = 1 & 2", "python"))

    assert url == "https://example.com/editor?code=a%20%3D%201%20%26%202&lang=python"


def test_share_url_replaces_existing_pair_and_keeps_other_params() -> None:
    url = build_share_url(
        "https://example.com/?theme=dark&code=old&lang=go",
        Document("x", "python"),
    )

    assert url == "https://example.com/?theme=dark&code=x&lang=python"


def test_parse_share_url_restores_document() -> None:
    document = Document("for i in range(3):\n    print(i)", "python")

    restored = parse_share_url(build_share_url("https://example.com/", document))

    assert restored == document


def test_parse_share_url_without_pair_is_absent() -> None:
    assert parse_share_url("https://example.com/?theme=dark") is None
    assert parse_share_url("https://example.com/?code=x&lang=") is None
