import logging

import pytest

from config import Assumptions
from model.validation import MissingFieldError, OutOfRangeError
from pipeline.normalize_inputs import (
    normalize_assumptions,
    normalize_financials,
    normalize_time_metric,
    normalize_time_metrics,
)


def test_time_metric_clamps_and_normalizes_percent(caplog):
    caplog.set_level(logging.WARNING)
    metric, warnings = normalize_time_metric(
        {"id": "email", "label": "Email", "weekly_hours": -3, "ai_reduction_fraction": 70}
    )
    assert metric.weekly_hours == 0.0
    assert metric.ai_reduction_fraction == pytest.approx(0.7)
    assert len(warnings) == 2
    assert "Clamped weekly_hours" in caplog.text


def test_time_metric_accepts_numeric_strings_and_defaults_label():
    metric, warnings = normalize_time_metric({"id": "email", "weekly_hours": "10", "ai_reduction_fraction": "0.5"})
    assert metric.label == "email"
    assert metric.weekly_hours == 10.0
    assert warnings == []


def test_time_metric_fraction_above_one_is_clamped():
    metric, warnings = normalize_time_metric({"id": "x", "weekly_hours": 1, "ai_reduction_fraction": 1.2})
    assert metric.ai_reduction_fraction == 1.0
    assert warnings


def test_time_metric_missing_and_invalid():
    with pytest.raises(MissingFieldError) as exc:
        normalize_time_metric({"id": "email", "ai_reduction_fraction": 0.5})
    assert exc.value.fields == ["weekly_hours"]
    with pytest.raises(MissingFieldError):
        normalize_time_metric({"id": "email", "weekly_hours": "", "ai_reduction_fraction": 0.5})
    with pytest.raises(OutOfRangeError):
        normalize_time_metric({"id": "email", "weekly_hours": "ten", "ai_reduction_fraction": 0.5})


def test_time_metrics_collects_warnings():
    metrics, warnings = normalize_time_metrics(
        [
            {"id": "a", "weekly_hours": -1, "ai_reduction_fraction": 0.5},
            {"id": "b", "weekly_hours": 2, "ai_reduction_fraction": -0.5},
        ]
    )
    assert [metric.id for metric in metrics] == ["a", "b"]
    assert len(warnings) == 2


def test_financials_from_labeled_list():
    financials, warnings = normalize_financials(
        [
            {"id": "hourly_value", "label": "Rate", "value": "75"},
            {"id": "ai_tool_cost", "label": "Tool", "value": -5},
        ]
    )
    assert financials.hourly_value == 75.0
    assert financials.monthly_tool_cost == 0.0
    assert financials.one_time_implementation_cost == 0.0
    assert len(warnings) == 1


def test_financials_missing_required():
    with pytest.raises(MissingFieldError) as exc:
        normalize_financials([{"id": "implementation_cost", "value": 10}])
    assert exc.value.fields == ["hourly_value", "ai_tool_cost"]


def test_assumptions_overlay_and_clamp():
    assumptions, warnings = normalize_assumptions(
        {"work_weeks_per_year": 60, "work_days_per_week": 0, "unknown": 1},
        base=Assumptions(discount_rate_percent=7),
    )
    assert assumptions.work_weeks_per_year == 52
    assert assumptions.work_days_per_week == 1
    assert assumptions.discount_rate_percent == 7
    assert len(warnings) == 2


def test_accepts_camel_case_keys():
    metric, _ = normalize_time_metric({"id": "email", "weeklyHours": 4, "aiReductionFraction": 0.25})
    assert metric.hours_saved_weekly == pytest.approx(1.0)
    assumptions, _ = normalize_assumptions({"learningCurveWeeks": 0})
    assert assumptions.learning_curve_weeks == 0
