import json
from datetime import datetime, timezone

import pytest

from config import Assumptions
from model.inputs import FinancialMetrics, TimeMetric
from pipeline import RoiInputs, run_roi
from report import ReportError, build_report, inputs_from_report, load_report, report_to_payload, write_report


GENERATED_AT = datetime(2026, 10, 18, 9, 30, tzinfo=timezone.utc)


def _result(financials=None, horizon=6):
    inputs = RoiInputs(
        time_metrics=(TimeMetric("email", "Email", 10, 0.7),),
        financials=financials
        or FinancialMetrics(hourly_value=75, monthly_tool_cost=100, one_time_implementation_cost=500),
        assumptions=Assumptions(),
    )
    return run_roi(inputs, horizon_months=horizon)


def test_payload_shape():
    payload = report_to_payload(build_report(_result(), generated_at=GENERATED_AT))
    assert set(payload) == {"calculations", "timeMetrics", "financialMetrics", "settings", "scenarios", "generatedAt"}
    assert {"netROIMonthly", "netROIYearly", "breakEvenDays", "fiveYearValue", "paybackPeriodMonths"} <= set(
        payload["calculations"]
    )
    assert payload["timeMetrics"][0] == {
        "id": "email",
        "label": "Email",
        "weeklyHours": 10.0,
        "aiReductionFraction": 0.7,
    }
    assert [item["id"] for item in payload["financialMetrics"]] == [
        "hourly_value",
        "ai_tool_cost",
        "implementation_cost",
        "training_hours",
    ]
    assert payload["settings"]["workWeeksPerYear"] == 48
    assert list(payload["scenarios"]) == ["conservative", "expected", "optimistic"]
    assert [point["monthIndex"] for point in payload["scenarios"]["expected"]] == [1, 2, 3, 4, 5, 6]
    assert payload["generatedAt"].startswith("2026-10-18T09:30:00")


def test_never_break_even_serializes_as_null():
    financials = FinancialMetrics(hourly_value=1, monthly_tool_cost=1000, one_time_implementation_cost=500)
    payload = report_to_payload(build_report(_result(financials), generated_at=GENERATED_AT))
    assert payload["calculations"]["breakEvenDays"] is None


def test_write_then_load(tmp_path):
    report = build_report(_result(), generated_at=GENERATED_AT)
    path = write_report(report, export_dir=str(tmp_path / "exports"))
    assert path.endswith("ai-roi-calculator-2026-10-18.json")

    with open(path, "r", encoding="utf-8") as handle:
        assert json.load(handle)["calculations"]["hoursSavedWeekly"] == pytest.approx(7.0)

    loaded = load_report(path)
    assert loaded == report
    assert inputs_from_report(loaded) == _result().inputs


def test_load_report_errors(tmp_path):
    with pytest.raises(ReportError):
        load_report(str(tmp_path / "missing.json"))

    corrupt = tmp_path / "corrupt.json"
    corrupt.write_text("not-json", encoding="utf-8")
    with pytest.raises(ReportError) as exc:
        load_report(str(corrupt))
    assert "invalid" in str(exc.value)


def test_load_report_wraps_unreadable_files(tmp_path):
    binary = tmp_path / "binary.json"
    binary.write_bytes(b"\xff\xfe{}")
    with pytest.raises(ReportError):
        load_report(str(binary))

    with pytest.raises(ReportError) as exc:
        load_report(str(tmp_path))
    assert "could not be read" in str(exc.value)
