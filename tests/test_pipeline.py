from __future__ import annotations

import json

from statement_parser import pipeline
from statement_parser.errors import TextExtractionError
from statement_parser.models import ParsedStatement


def test_cli_writes_json(tmp_path, monkeypatch):
    pdf = tmp_path / "statement.pdf"
    pdf.write_bytes(b"%PDF-1.4")
    out = tmp_path / "out" / "result.json"

    monkeypatch.setattr(
        pipeline, "parse_statement", lambda buffer, fmt, settings: ParsedStatement(ending_balance=-12.5)
    )
    rc = pipeline.main([str(pdf), "--format", "CHASE_CREDIT", "--out", str(out)])

    assert rc == 0
    assert json.loads(out.read_text(encoding="utf-8")) == {"transactions": [], "endingBalance": -12.5}


def test_cli_reports_extraction_errors(tmp_path, monkeypatch):
    pdf = tmp_path / "statement.pdf"
    pdf.write_bytes(b"garbage")

    def fail(buffer, fmt, settings):
        raise TextExtractionError("bad pdf")

    monkeypatch.setattr(pipeline, "parse_statement", fail)
    assert pipeline.main([str(pdf), "--format", "APPLE_CARD"]) == 1
