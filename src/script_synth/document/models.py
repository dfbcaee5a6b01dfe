"""Document value type and language metadata."""

from __future__ import annotations

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Mapping

EXECUTABLE_LANGUAGE = "python"

FILE_EXTENSIONS: Mapping[str, str] = MappingProxyType(
    {
        "javascript": "js",
        "typescript": "ts",
        "html": "html",
        "css": "css",
        "json": "json",
        "markdown": "md",
        "python": "py",
        "java": "java",
        "c": "c",
        "cpp": "cpp",
        "c++": "cpp",
    }
)


def normalize_language(language: str) -> str:
    return language.strip().lower()


def file_extension(language: str) -> str:
    return FILE_EXTENSIONS.get(normalize_language(language), "txt")


def is_executable(language: str) -> bool:
    return normalize_language(language) == EXECUTABLE_LANGUAGE


@dataclass(frozen=True, slots=True)
class Document:
    """Script text plus the language tag it is written in."""

    text: str = ""
    language: str = EXECUTABLE_LANGUAGE

    def __post_init__(self) -> None:
        if self.text is None:
            raise ValueError("Document text cannot be None")
        object.__setattr__(self, "language", normalize_language(self.language))

    @property
    def executable(self) -> bool:
        return is_executable(self.language)

    def with_text(self, text: str) -> "Document":
        return replace(self, text=text)

    def with_language(self, language: str) -> "Document":
        return replace(self, language=language)


def default_file_name(language: str, stem: str = "untitled") -> str:
    return f"{stem}.{file_extension(language)}"


def rename_for_language(file_name: str, language: str) -> str:
    """Keep the stem of ``file_name`` and swap in ``language``'s extension."""

    stem = file_name.split(".")[0] or "untitled"
    return default_file_name(language, stem)


__all__ = [
    "Document",
    "EXECUTABLE_LANGUAGE",
    "FILE_EXTENSIONS",
    "default_file_name",
    "file_extension",
    "is_executable",
    "normalize_language",
    "rename_for_language",
]
