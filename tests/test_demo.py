# tests/test_demo.py
from __future__ import annotations

import json
import logging

import pytest

from fuzzystrings import demo


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("FUZZYSTRINGS_DATA_DIR", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    yield


def _lines(out: str):
    return [line for line in out.splitlines() if line.strip()]


def test_demo_defaults_rank_bundled_candidates(capsys):
    assert demo.main([]) == 0
    lines = _lines(capsys.readouterr().out)
    assert len(lines) == 7
    scores = [int(line.split(":", 1)[0]) for line in lines]
    assert scores == sorted(scores, reverse=True)


def test_demo_with_explicit_query_and_metric(capsys):
    assert demo.main(["this is a test", "-c", "this is a pest", "-m", "ratio"]) == 0
    assert _lines(capsys.readouterr().out) == ["96: this is a pest"]


def test_demo_best_only(capsys):
    code = demo.main(["abc", "-c", "abd", "-c", "abc", "-m", "ratio", "--best"])
    assert code == 0
    assert _lines(capsys.readouterr().out) == ["100: abc"]


def test_demo_ignore_case(capsys):
    assert demo.main(["HELLO", "-c", "hello", "-m", "ratio", "-i"]) == 0
    assert _lines(capsys.readouterr().out) == ["100: hello"]


def test_demo_invalid_candidate_reports_error(capsys):
    assert demo.main(["query", "-c", "   "]) == 1
    assert "Error:" in capsys.readouterr().err


def test_demo_debug_logs_settings_and_scores(caplog):
    with caplog.at_level(logging.DEBUG, logger="fuzzystrings"):
        assert demo.main(["abc", "-c", "abd", "--debug"]) == 0
    assert "[DEMO] query='abc' metric=blended" in caplog.text
    assert "[RANK]" in caplog.text


def test_demo_without_debug_logs_nothing(caplog):
    with caplog.at_level(logging.DEBUG, logger="fuzzystrings"):
        assert demo.main(["abc", "-c", "abd"]) == 0
    assert "[DEMO]" not in caplog.text


def test_demo_bad_config_reports_error(tmp_path, monkeypatch, capsys):
    (tmp_path / "demo.json").write_text(json.dumps({"query": "", "candidates": []}), encoding="utf-8")
    monkeypatch.setenv("FUZZYSTRINGS_DATA_DIR", str(tmp_path))
    assert demo.main([]) == 1
    assert "validator failed" in capsys.readouterr().err


def test_demo_config_metric_is_validated(tmp_path, monkeypatch):
    payload = {"query": "q", "candidates": ["a"], "metric": "cosine"}
    (tmp_path / "demo.json").write_text(json.dumps(payload), encoding="utf-8")
    monkeypatch.setenv("FUZZYSTRINGS_DATA_DIR", str(tmp_path))
    with pytest.raises(demo.ConfigParseError, match="cosine"):
        demo.load_demo_settings()


def test_demo_settings_from_bundled_file():
    settings = demo.load_demo_settings()
    assert settings["metric"] == "blended"
    assert settings["ignore_case"] is False
