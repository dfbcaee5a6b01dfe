"""Share links carrying a document in the ``code``/``lang`` query pair."""

from __future__ import annotations

from typing import Optional
from urllib.parse import parse_qs, quote, urlencode, urlsplit, urlunsplit

from .models import Document

CODE_PARAM = "code"
LANG_PARAM = "lang"


def build_share_url(base_url: str, document: Document) -> str:
    """Return ``base_url`` with the document percent-encoded into its query.

    Existing query parameters other than ``code`` and ``lang`` are kept.
    """

    parts = urlsplit(base_url)
    query = [
        (key, value)
        for key, values in parse_qs(parts.query, keep_blank_values=True).items()
        if key not in (CODE_PARAM, LANG_PARAM)
        for value in values
    ]
    query += [(CODE_PARAM, document.text), (LANG_PARAM, document.language)]
    encoded = urlencode(query, quote_via=quote)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, encoded, parts.fragment))


def parse_share_url(url: str) -> Optional[Document]:
    """Restore a shared document, or ``None`` if the link carries none."""

    params = parse_qs(urlsplit(url).query, keep_blank_values=True)
    code = params.get(CODE_PARAM)
    language = params.get(LANG_PARAM)
    if not code or not language or not language[0].strip():
        return None
    return Document(text=code[0], language=language[0])


__all__ = ["CODE_PARAM", "LANG_PARAM", "build_share_url", "parse_share_url"]
