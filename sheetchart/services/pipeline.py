from __future__ import annotations

import json
import logging
import time
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from ..errors import SheetChartError, UpstreamResponseError
from ..grid.reader import ingest_grid, read_csv_grid
from ..grid.response import validate_sheets_response
from ..logging.error_log import ErrorLogBuffer, ErrorRecord
from ..models.config_models import ChartSettings
from ..models.preparation import ChartPreparation
from ..models.processing_result import ProcessingResult, SourceStat
from ..models.record import RawGrid
from .advisor import suggest_chart_type
from .classifier import analyze_column_types
from .coercion import coerce_records
from .palette import generate_color_palette
from .progress import ProgressTracker

"""Chart preparation pipeline.

raw grid -> ingest_grid -> analyze_column_types (once) -> coerce_records
                                                      \\-> suggest_chart_type

``prepare_chart`` handles one dataset; ``process_all`` runs it over several
sheet sources (API response JSON files or CSV exports), keeps going when one
source fails, and aggregates the outcome for the SUMMARY line.
"""

__all__ = [
    "SOURCE_SUFFIXES",
    "load_source",
    "prepare_chart",
    "prepare_from_response",
    "process_all",
]

logger = logging.getLogger(__name__)

SOURCE_SUFFIXES = (".json", ".csv")


def prepare_chart(grid: RawGrid, settings: ChartSettings | None = None) -> ChartPreparation:
    """Turn a raw grid into typed records, a classification and chart advice.

    Raises:
        InsufficientDataError: grid has no header row or no data rows
    """
    settings = settings or ChartSettings()
    records = ingest_grid(grid)
    classification = analyze_column_types(records, settings.classifier)
    typed = coerce_records(records, classification, max_workers=settings.classifier.max_workers)
    chart_kind = suggest_chart_type(classification)
    colors = generate_color_palette(max(1, len(classification.numeric)), settings.base_color)
    logger.debug(
        f"prepared records={len(typed)} columns={len(classification.headers)} chart={chart_kind.value}"
    )
    return ChartPreparation(
        records=typed,
        classification=classification,
        chart_kind=chart_kind,
        colors=colors,
        number_format=settings.number_format,
    )


def prepare_from_response(
    response: Mapping[str, Any] | None, settings: ChartSettings | None = None
) -> ChartPreparation:
    """Validate a Sheets API response body, then prepare its grid."""
    return prepare_chart(validate_sheets_response(response), settings)


def load_source(path: Path) -> RawGrid:
    """Read a sheet source file into a RawGrid.

    ``.json`` files hold a Sheets API response body; ``.csv`` files hold a
    sheet export.

    Raises:
        UpstreamResponseError: unreadable file, bad JSON, unsupported suffix,
            or a response that fails shape validation
    """
    suffix = path.suffix.lower()
    if suffix not in SOURCE_SUFFIXES:
        raise UpstreamResponseError(f"unsupported source type: {path.name}")
    try:
        text = path.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise UpstreamResponseError(f"cannot read source {path}: {e}") from e

    if suffix == ".csv":
        return read_csv_grid(text)
    try:
        body = json.loads(text)
    except json.JSONDecodeError as e:
        raise UpstreamResponseError(f"invalid json in {path.name}: {e}") from e
    return validate_sheets_response(body)


def process_all(
    sources: Iterable[Path],
    settings: ChartSettings | None = None,
    error_log: ErrorLogBuffer | None = None,
) -> tuple[ProcessingResult, dict[str, ChartPreparation]]:
    """Prepare chart data for every source.

    A failing source is logged (console + JSON Lines error log) and counted;
    it does not stop the remaining sources.

    Returns:
        (ProcessingResult, {source path: ChartPreparation}) for successful sources
    """
    settings = settings or ChartSettings()
    error_log = error_log if error_log is not None else ErrorLogBuffer()
    paths = list(sources)
    start_time = datetime.now(UTC)

    stats: list[SourceStat] = []
    prepared: dict[str, ChartPreparation] = {}

    with ProgressTracker(len(paths)) as progress:
        for path in paths:
            progress.start_source(path)
            t0 = time.perf_counter()
            try:
                preparation = prepare_chart(load_source(path), settings)
            except SheetChartError as e:
                elapsed = time.perf_counter() - t0
                logger.error(f"{path.name}: {e}")
                error_log.append(ErrorRecord.create(path.name, -1, e.error_type, str(e)))
                stats.append(SourceStat(
                    source_name=path.name,
                    status="failed",
                    records=0,
                    columns=0,
                    chart_kind=None,
                    elapsed_seconds=elapsed,
                    error=str(e),
                ))
                progress.finish_source(success=False)
                progress.set_postfix(failed=sum(1 for s in stats if s.status == "failed"))
                continue

            elapsed = time.perf_counter() - t0
            prepared[str(path)] = preparation
            stats.append(SourceStat(
                source_name=path.name,
                status="success",
                records=len(preparation.records),
                columns=len(preparation.headers),
                chart_kind=preparation.chart_kind.value,
                elapsed_seconds=elapsed,
            ))
            logger.info(
                f"{path.name}: records={len(preparation.records)} "
                f"chart={preparation.chart_kind.value}"
            )
            progress.finish_source(success=True)

    log_path = error_log.flush()
    if log_path is not None:
        logger.warning(f"error log written: {log_path}")

    end_time = datetime.now(UTC)
    succeeded = [s for s in stats if s.status == "success"]
    result = ProcessingResult(
        success_sources=len(succeeded),
        failed_sources=len(stats) - len(succeeded),
        total_records=sum(s.records for s in succeeded),
        total_columns=sum(s.columns for s in succeeded),
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        source_stats=stats,
    )
    return result, prepared
