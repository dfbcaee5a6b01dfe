"""Document model, starter programs, persistence, and share links."""

from .defaults import LANGUAGE_OPTIONS, default_code
from .models import (
    EXECUTABLE_LANGUAGE,
    Document,
    default_file_name,
    file_extension,
    is_executable,
    rename_for_language,
)
from .share import build_share_url, parse_share_url
from .store import (
    DocumentStore,
    DocumentStoreError,
    JsonFileDocumentStore,
    MemoryDocumentStore,
)

__all__ = [
    "Document",
    "DocumentStore",
    "DocumentStoreError",
    "EXECUTABLE_LANGUAGE",
    "JsonFileDocumentStore",
    "LANGUAGE_OPTIONS",
    "MemoryDocumentStore",
    "build_share_url",
    "default_code",
    "default_file_name",
    "file_extension",
    "is_executable",
    "parse_share_url",
    "rename_for_language",
]
