from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import DEFAULT_CONFIG_PATH, ConfigError, default_config, load_config
from ..grid.response import build_sheets_api_url, extract_gid, extract_sheet_id
from ..logging.error_log import ErrorLogBuffer
from ..logging.init import log_summary, set_debug, setup_logging
from ..models.config_models import ChartSettings
from ..models.preparation import ChartPreparation
from ..services.formatting import format_number
from ..services.pipeline import process_all
from ..services.samples import SampleKind, generate_sample_data, to_csv
from ..services.summary import render_summary_line
from ..services.values import is_number

"""CLI entrypoint.

Prepares chart data for one or more sheet sources (Sheets API response JSON
files or CSV exports) and prints a SUMMARY line:

    sheetchart data/sales.csv data/response.json

Exit codes:
    0  every source prepared
    2  at least one source failed (the others are still processed)
    1  fatal: bad config, no sources, missing API key
"""

EXIT_SUCCESS_ALL = 0
EXIT_PARTIAL_FAILURE = 2
EXIT_FATAL = 1


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env using python-dotenv (existing environment wins by default)."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="sheetchart", description="Sheet grid -> chart-ready typed records")
    p.add_argument("sources", nargs="*", type=Path, help="Sheet sources (.json API response or .csv export)")
    p.add_argument("--config", type=Path, default=None, help=f"Config file (default: {DEFAULT_CONFIG_PATH})")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print classification & first rows of each prepared source")
    p.add_argument(
        "--generate-sample",
        choices=[k.value for k in SampleKind],
        help="Print a generated sample dataset as CSV then exit",
    )
    p.add_argument("--rows", type=int, default=None, help="Rows for --generate-sample")
    p.add_argument("--seed", type=int, default=42, help="Random seed for --generate-sample")
    p.add_argument("--api-url", metavar="SHEET_URL", help="Print the values API URL for a sheet URL then exit")
    return p.parse_args(argv)


def _resolve_settings(config_path: Path | None) -> ChartSettings:
    # 明示指定なし + 既定パス無し -> 既定値 (+ 環境変数)
    if config_path is None:
        if DEFAULT_CONFIG_PATH.exists():
            return load_config(DEFAULT_CONFIG_PATH)
        return default_config()
    return load_config(config_path)


def _print_api_url(sheet_url: str) -> int:
    sheet_id = extract_sheet_id(sheet_url)
    if sheet_id is None:
        print(f"api-url: no spreadsheet id in {sheet_url}")
        return EXIT_FATAL
    api_key = os.getenv("SHEETS_API_KEY")
    if not api_key:
        print("api-url: SHEETS_API_KEY is not set")
        return EXIT_FATAL
    print(build_sheets_api_url(sheet_id, api_key))
    gid = extract_gid(sheet_url)
    if gid is not None:
        print(f"gid={gid}")
    return EXIT_SUCCESS_ALL


def _display_value(value: object, number_format: str) -> object:
    if is_number(value):
        return format_number(value, number_format)
    return value


def _inspect(prepared: dict[str, ChartPreparation]) -> None:
    for name, prep in prepared.items():
        print(f"SOURCE: {name}")
        print(f"  columns={prep.headers}")
        for column_type, headers in prep.classification.to_dict().items():
            print(f"  {column_type}={headers}")
        print(f"  chart={prep.chart_kind.value} colors={prep.colors}")
        sample = [
            {k: _display_value(v, prep.number_format) for k, v in r.values.items()}
            for r in prep.records[:3]
        ]
        print("  sample_rows=", sample)


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None のときのみシステム引数を読む (テストの cli_main([]) 対策)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    if args.api_url:
        return _print_api_url(args.api_url)

    if args.generate_sample:
        try:
            rows = generate_sample_data(args.generate_sample, rows=args.rows, seed=args.seed)
        except ValueError as e:
            logger.error(f"generate-sample: {e}")
            return EXIT_FATAL
        sys.stdout.write(to_csv(rows))
        return EXIT_SUCCESS_ALL

    try:
        settings = _resolve_settings(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if not args.sources:
        logger.error("no sources given")
        return EXIT_FATAL

    logger.info(f"Preparing {len(args.sources)} source(s)")
    result, prepared = process_all(args.sources, settings, ErrorLogBuffer())

    if args.inspect_data:
        _inspect(prepared)

    summary_line = render_summary_line(result.total_sources, result)
    # log_summary が "SUMMARY " を付与する
    log_summary(summary_line.removeprefix("SUMMARY "))

    if result.failed_sources > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL
