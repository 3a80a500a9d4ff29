"""Tests for the corufa command line."""

from __future__ import annotations

import json

import pytest

from corufa.cli import main


@pytest.fixture(autouse=True)
def file_storage(tmp_path, monkeypatch):
    monkeypatch.setenv("CORUFA_STORAGE_BACKEND", "file")
    monkeypatch.setenv("CORUFA_STORAGE_DIRECTORY", str(tmp_path / "store"))
    return tmp_path


def test_import_then_report(file_storage, complete_state, capsys):
    from corufa.ingest.bundle import export_bundle

    bundle = file_storage / "in.json"
    bundle.write_text(export_bundle(complete_state), encoding="utf-8")
    assert main(["import", str(bundle)]) == 0
    assert main(["report"]) == 0
    assert "Resultado: APROBADO" in capsys.readouterr().out


def test_evaluate_prints_json(capsys):
    assert main(["evaluate"]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["approved"] is False
    assert report["analisis_status"] == "NO_DATA"


def test_bulk_and_export(file_storage):
    csv = file_storage / "lab.csv"
    csv.write_text("pH;sodio\n7.3;90\n", encoding="utf-8")
    assert main(["bulk", str(csv)]) == 0
    out = file_storage / "out.json"
    assert main(["export", str(out)]) == 0
    assert json.loads(out.read_text(encoding="utf-8"))["dossier"]["analisis"]["pH"] == "7.3"


def test_parse_error_exits_with_one(file_storage, capsys):
    bad = file_storage / "bad.json"
    bad.write_text("{nope", encoding="utf-8")
    assert main(["import", str(bad)]) == 1
    assert "error:" in capsys.readouterr().err


def test_registry_option(file_storage, capsys):
    padron = file_storage / "padron.txt"
    padron.write_text("P-1,P-2", encoding="utf-8")
    assert main(["--registry", str(padron), "evaluate"]) == 0
    assert json.loads(capsys.readouterr().out)["registry"] == "NOT_FOUND"
