from __future__ import annotations

from pathlib import Path

import pytest

from script_synth.config import DEFAULT_STORE_PATH, SessionConfig
from script_synth.console import OutputKind, OutputSink, highlight, render_entries


def styled(text: str) -> list[tuple[str, str]]:
    rendered = highlight(text)
    return [
        (rendered.plain[span.start : span.end], str(span.style))
        for span in rendered.spans
    ]


def test_highlight_marks_vocabulary() -> None:
    spans = styled("Error: boom. Warning: careful. Success: done")

    assert ("Error:", "bold red") in spans
    assert ("Warning:", "yellow") in spans
    assert ("Success:", "green") in spans


def test_highlight_marks_paths_and_urls() -> None:
    spans = styled("saved src/main.py see https://example.com/docs")

    assert ("src/main.py", "blue") in spans
    assert ("https://example.com/docs", "underline blue") in spans
    assert ("example.com", "blue") not in spans


def test_highlight_keeps_plain_text_untouched() -> None:
    rendered = highlight("[log] plain words")

    assert rendered.plain == "[log] plain words"
    assert rendered.spans == []


def test_highlight_ignores_entry_kind() -> None:
    sink = OutputSink()
    sink.append(OutputKind.INFO, "fail: x")
    sink.append(OutputKind.ERROR, "fail: x")

    first, second = render_entries(sink.all())

    assert first.spans == second.spans


def test_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LANGUAGE", "DEBOUNCE_MS", "STORE_PATH", "SHARE_BASE_URL"):
        monkeypatch.delenv(f"SCRIPT_SYNTH_{name}", raising=False)

    config = SessionConfig.from_env()

    assert config.language == "python"
    assert config.debounce_ms == 1000
    assert config.store_path == DEFAULT_STORE_PATH


def test_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCRIPT_SYNTH_LANGUAGE", "JavaScript")
    monkeypatch.setenv("SCRIPT_SYNTH_DEBOUNCE_MS", "250")
    monkeypatch.setenv("SCRIPT_SYNTH_STORE_PATH", "/tmp/doc.json")
    monkeypatch.setenv("SCRIPT_SYNTH_SHARE_BASE_URL", "https://share.test/")

    config = SessionConfig.from_env()

    assert config.language == "javascript"
    assert config.debounce_ms == 250
    assert config.store_path == Path("/tmp/doc.json")
    assert config.share_base_url == "https://share.test/"


def test_config_invalid_debounce_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCRIPT_SYNTH_DEBOUNCE_MS", "soon")
    assert SessionConfig.from_env().debounce_ms == 1000

    monkeypatch.setenv("SCRIPT_SYNTH_DEBOUNCE_MS", "-5")
    assert SessionConfig.from_env().debounce_ms == 1000
