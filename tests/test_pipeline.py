"""Integration tests for the full pipeline: read, resolve, build, render/write."""

import json
import logging
from pathlib import Path

import pytest
from rich.console import Console

from spantastic.annotated.query import click_identity_at
from spantastic.config import Config, MatchMode
from spantastic.pipeline import process_file

FIXTURES = Path(__file__).parent / "fixtures"
TEXT = FIXTURES / "sample.txt"
SPANS = FIXTURES / "sample_spans.json"


def _console() -> Console:
    return Console(record=True, width=120)


def test_pipeline_resolves_fixture():
    result = process_file(TEXT, SPANS, Config(), console=_console())

    assert [s.text for s in result.resolved] == ["Click here", "user@example"]
    assert [d.span_string for d in result.unmatched] == ["not in the text"]
    assert click_identity_at(result.annotated, 3) == "learn_more"
    assert click_identity_at(result.annotated, 40) == "user@example"
    assert click_identity_at(result.annotated, 12) is None


def test_pipeline_inherits_default_style():
    result = process_file(TEXT, SPANS, Config(), console=_console())

    style = result.resolved[1].style
    assert style.color == "blue"
    assert style.font_weight == "bold"
    assert style.font_size == 14
    assert style.font_family == "serif"


def test_pipeline_prints_table_and_text():
    console = _console()
    process_file(TEXT, SPANS, Config(), console=console)

    output = console.export_text()
    assert "sample.txt" in output
    assert "learn_more" in output
    assert "Click here to learn more." in output


def test_pipeline_no_table():
    console = _console()
    process_file(TEXT, SPANS, Config(show_table=False), console=console)

    output = console.export_text()
    assert "Range" not in output
    assert "Click here to learn more." in output


def test_pipeline_unmatched_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG):
        process_file(TEXT, SPANS, Config(), console=_console())

    records = [r for r in caplog.records if "not in the text" in r.getMessage()]
    assert records
    assert all(r.levelno == logging.DEBUG for r in records)


def test_pipeline_warn_unmatched(caplog):
    with caplog.at_level(logging.WARNING):
        process_file(TEXT, SPANS, Config(warn_unmatched=True), console=_console())

    assert "'not in the text' not found" in caplog.text


def test_pipeline_writes_html(tmp_path: Path):
    output = tmp_path / "out.html"
    console = _console()
    result = process_file(TEXT, SPANS, Config(output_path=output), console=console)

    assert result.output_path == output
    content = output.read_text(encoding="utf-8")
    assert 'data-click="learn_more"' in content
    assert 'data-click="user@example"' in content
    # The rendered text goes to the file, not the console
    assert "Click here to learn more." not in console.export_text()


def test_pipeline_writes_json(tmp_path: Path):
    output = tmp_path / "out.json"
    process_file(TEXT, SPANS, Config(output_path=output), console=_console())

    data = json.loads(output.read_text(encoding="utf-8"))
    assert [r["identity"] for r in data["click_ranges"]] == ["learn_more", "user@example"]


def test_pipeline_unsupported_output(tmp_path: Path, caplog):
    output = tmp_path / "out.pdf"
    with caplog.at_level(logging.WARNING):
        result = process_file(TEXT, SPANS, Config(output_path=output), console=_console())

    assert result.output_path is None
    assert not output.exists()
    assert "No writer for format: .pdf" in caplog.text


def test_pipeline_all_occurrences(tmp_path: Path):
    text = tmp_path / "text.txt"
    text.write_text("cat dog cat", encoding="utf-8")
    spans = tmp_path / "spans.json"
    spans.write_text(json.dumps([{"span_string": "cat"}]), encoding="utf-8")

    first = process_file(text, spans, Config(), console=_console())
    every = process_file(text, spans, Config(match_mode=MatchMode.ALL), console=_console())

    assert [s.span for s in first.resolved] == [(0, 3)]
    assert [s.span for s in every.resolved] == [(0, 3), (8, 11)]


def test_pipeline_malformed_span_file(tmp_path: Path):
    spans = tmp_path / "spans.json"
    spans.write_text(json.dumps({"spans": [{"color": "red"}]}), encoding="utf-8")

    with pytest.raises(ValueError):
        process_file(TEXT, spans, Config(), console=_console())
