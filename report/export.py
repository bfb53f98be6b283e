from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Dict, Optional

from pydantic import ValidationError

from config.assumptions import Assumptions
from config.core import DEFAULT_EXPORT_DIR
from model.inputs import FinancialMetrics, TimeMetric
from model.validation import InputValidationError
from pipeline.roi_runner import RoiInputs, RoiResult
from report.schema import RoiReport


logger = logging.getLogger(__name__)


class ReportError(Exception):
    pass


def build_report(result: RoiResult, generated_at: Optional[datetime] = None) -> RoiReport:
    inputs = result.inputs
    return RoiReport(
        calculations=asdict(result.summary),
        time_metrics=[asdict(metric) for metric in inputs.time_metrics],
        financial_metrics=inputs.financials.to_labeled_list(),
        settings=asdict(inputs.assumptions),
        scenarios={
            name: [asdict(point) for point in points]
            for name, points in result.projections.items()
        },
        generated_at=generated_at or datetime.now(timezone.utc),
    )


def report_to_payload(report: RoiReport) -> Dict:
    return report.model_dump(mode="json", by_alias=True)


def report_to_json(report: RoiReport) -> str:
    return json.dumps(report_to_payload(report), indent=2)


def report_filename(report: RoiReport) -> str:
    return f"ai-roi-calculator-{report.generated_at.date().isoformat()}.json"


def write_report(report: RoiReport, export_dir: str = DEFAULT_EXPORT_DIR) -> str:
    path = os.path.join(export_dir, report_filename(report))
    try:
        os.makedirs(export_dir, exist_ok=True)
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(report_to_json(report))
    except OSError as exc:
        raise ReportError(f"Report export failed: {exc}") from exc
    logger.info("Wrote ROI report to %s", path)
    return path


def load_report(path: str) -> RoiReport:
    if not os.path.exists(path):
        raise ReportError(f"Report not found: {path}")
    try:
        with open(path, "rb") as handle:
            return RoiReport.model_validate_json(handle.read())
    except OSError as exc:
        raise ReportError(f"Report could not be read: {exc}") from exc
    except ValidationError as exc:
        raise ReportError(f"Report is invalid: {exc.error_count()} validation error(s).") from exc


def inputs_from_report(report: RoiReport) -> RoiInputs:
    try:
        return RoiInputs(
            time_metrics=tuple(
                TimeMetric(**metric.model_dump()) for metric in report.time_metrics
            ),
            financials=FinancialMetrics.from_labeled_list(
                [item.model_dump() for item in report.financial_metrics]
            ),
            assumptions=Assumptions(**report.settings.model_dump()),
        )
    except InputValidationError as exc:
        raise ReportError(f"Report inputs are invalid: {exc}") from exc
