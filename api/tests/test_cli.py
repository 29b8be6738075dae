import importlib.util
import io
import json
import sys
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "analyze_text.py"
TEXT = "I love planning trips with friends! Sometimes I worry about the details."


def _load_cli():
    module_spec = importlib.util.spec_from_file_location("analyze_text", SCRIPT)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


def _run(monkeypatch, capsys, *argv):
    cli = _load_cli()
    monkeypatch.setattr(sys, "argv", ["analyze_text.py", *argv])
    monkeypatch.setattr(sys, "stdin", io.StringIO(TEXT))
    cli.main()
    return json.loads(capsys.readouterr().out)


def test_cli_prints_analysis_from_stdin(monkeypatch, capsys):
    out = _run(monkeypatch, capsys, "--no-delay", "--seed", "3")
    assert out["traits"][0]["name"] == "Openness"
    assert len(out["traits"]) == 5
    assert out["evidenceQuotes"] == [
        "I love planning trips with friends!",
        "Sometimes I worry about the details.",
    ]


def test_cli_reads_file_and_strategy(monkeypatch, capsys, tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text(TEXT, encoding="utf-8")
    out = _run(monkeypatch, capsys, str(path), "--strategy", "lexicon", "--no-delay")
    assert len(out["traits"]) == 5


def test_cli_features_flag(monkeypatch, capsys):
    out = _run(monkeypatch, capsys, "--features")
    assert {"questionFrequency", "wordFrequencies", "averageSentenceLength", "complexityScore"} <= set(out)
    assert out["exclamationFrequency"] == pytest.approx(0.5)
    assert out["pronouns"]["firstPerson"] == 2
