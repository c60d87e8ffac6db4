# Shared pytest fixtures
from __future__ import annotations
import json
import tempfile
from pathlib import Path

import pytest

from sheetchart.logging.init import reset_logging


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # load_dotenv で設定された値も teardown で元に戻る
    for key in ("SHEETCHART_BASE_COLOR", "SHEETCHART_NUMBER_FORMAT", "SHEETCHART_SAMPLE_SIZE", "SHEETS_API_KEY"):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def sample_config_yaml() -> str:
    return """sample_size: 20
date_threshold: 0.7
numeric_threshold: 0.7
mixed_threshold: 0.3
max_workers: 1
base_color: "#8884d8"
number_format: currency
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "sheetchart.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def sales_grid() -> list[list[str]]:
    return [
        ["Date", "Product", "Sales", "Revenue"],
        ["2021-01-01", "Laptop", "1200", "15000"],
        ["2021-01-02", "Phone", "800", "9000.50"],
        ["", "", "", ""],
        ["2021-01-03", "Tablet", "950", "11000"],
    ]


@pytest.fixture()
def sales_response(sales_grid) -> dict:
    return {"range": "Sheet1!A1:D5", "majorDimension": "ROWS", "values": sales_grid}


@pytest.fixture()
def write_sources(temp_workdir: Path, sales_response: dict) -> dict[str, Path]:
    """Valid JSON + CSV sources and a header-only source under data/."""
    data = temp_workdir / "data"
    good_json = data / "sales.json"
    good_json.write_text(json.dumps(sales_response), encoding="utf-8")
    good_csv = data / "regions.csv"
    good_csv.write_text("Region,Sales\nNorth,10\nSouth,20\n", encoding="utf-8")
    header_only = data / "empty.json"
    header_only.write_text(json.dumps({"values": [["Date", "Sales"]]}), encoding="utf-8")
    return {"json": good_json, "csv": good_csv, "header_only": header_only}
