from __future__ import annotations

import json

import jsonschema
import pytest

from sheetchart.logging.error_log import ERROR_LOG_SCHEMA_PATH, ErrorLogBuffer
from sheetchart.models.error_record import ErrorRecord

"""Error log JSON Lines schema contract (error_log_schema.json)."""


@pytest.fixture()
def schema() -> dict:
    return json.loads(ERROR_LOG_SCHEMA_PATH.read_text(encoding="utf-8"))


def test_error_record_validates_against_schema(schema):
    rec = ErrorRecord.create("sales.json", -1, "UPSTREAM_RESPONSE", "Sheet contains no data")
    jsonschema.validate(json.loads(rec.to_json_line()), schema)


def test_schema_rejects_extra_keys(schema):
    data = json.loads(ErrorRecord.create("a.csv", 1, "INSUFFICIENT_DATA", "x").to_json_line())
    data["sheet"] = "Sheet1"
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(data, schema)


def test_schema_requires_all_keys(schema):
    data = json.loads(ErrorRecord.create("a.csv", 1, "INSUFFICIENT_DATA", "x").to_json_line())
    del data["message"]
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(data, schema)


def test_flushed_lines_match_schema(temp_workdir, schema):
    buf = ErrorLogBuffer()
    buf.append(ErrorRecord.create("a.json", -1, "UPSTREAM_RESPONSE", "No data found in the sheet"))
    buf.append(ErrorRecord.create("b.json", -1, "INSUFFICIENT_DATA", "header only"))
    path = buf.flush()
    for line in path.read_text(encoding="utf-8").splitlines():
        jsonschema.validate(json.loads(line), schema)


def _line(row: int) -> dict:
    return {
        "timestamp": "2025-09-26T10:12:33Z",
        "source": "sales.json",
        "row": row,
        "error_type": "UPSTREAM_RESPONSE",
        "message": "Sheet contains no data",
    }


def test_schema_accepts_source_level_row_sentinel(schema):
    jsonschema.validate(_line(-1), schema)
    jsonschema.validate(_line(42), schema)


def test_schema_rejects_row_below_sentinel(schema):
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(_line(-2), schema)
