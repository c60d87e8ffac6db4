from __future__ import annotations

import json
from pathlib import Path

from sheetchart.cli import main as cli_main

"""End-to-end run with failing sources.

- header-only response and API error response fail, the CSV still succeeds
- exit code 2 (partial failure)
- one JSON Lines error record per failed source
"""


def test_run_partial_failure(temp_workdir: Path, write_sources, capsys):
    api_error = temp_workdir / "data" / "denied.json"
    api_error.write_text(
        json.dumps({"error": {"code": 403, "message": "The caller does not have permission"}}),
        encoding="utf-8",
    )
    sources = [write_sources["header_only"], write_sources["csv"], api_error]

    code = cli_main([str(p) for p in sources])
    out = capsys.readouterr().out

    assert code == 2
    assert "ERROR empty.json: Sheet must have at least a header row and one data row" in out
    assert "ERROR denied.json: Google Sheets API Error: The caller does not have permission" in out
    assert "WARN error log written:" in out
    assert "SUMMARY sources=3/3 success=1 failed=2 records=2 columns=2" in out

    logs = list((temp_workdir / "logs").glob("errors-*.log"))
    assert len(logs) == 1
    entries = [json.loads(line) for line in logs[0].read_text(encoding="utf-8").splitlines()]
    assert [(e["source"], e["error_type"]) for e in entries] == [
        ("empty.json", "INSUFFICIENT_DATA"),
        ("denied.json", "UPSTREAM_RESPONSE"),
    ]
    assert all(e["row"] == -1 for e in entries)


def test_run_all_sources_failed(temp_workdir: Path, write_sources, capsys):
    missing = temp_workdir / "data" / "missing.csv"
    code = cli_main([str(write_sources["header_only"]), str(missing)])
    out = capsys.readouterr().out

    assert code == 2
    assert "SUMMARY sources=2/2 success=0 failed=2 records=0 columns=0" in out
