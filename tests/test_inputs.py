import pytest

from config import Assumptions
from model.inputs import (
    DEFAULT_TIME_METRICS,
    FinancialMetrics,
    TimeMetric,
    add_time_metric,
    remove_time_metric,
    replace_time_metric,
)
from model.validation import InputValidationError, MissingFieldError, OutOfRangeError
from scenarios import Scenario, ScenarioName


def test_time_metric_rejects_fraction_out_of_range():
    with pytest.raises(OutOfRangeError) as exc:
        TimeMetric("email", "Email", 10, 1.2)
    assert exc.value.fields == ["ai_reduction_fraction"]


def test_time_metric_missing_field_wins_over_range():
    with pytest.raises(MissingFieldError) as exc:
        TimeMetric("", "Email", -1, 0.5)
    codes = {issue.field: issue.code for issue in exc.value.issues}
    assert codes == {"id": "missing", "weekly_hours": "out_of_range"}


def test_validation_errors_are_value_errors():
    with pytest.raises(ValueError):
        FinancialMetrics(hourly_value=-1)
    assert issubclass(MissingFieldError, InputValidationError)


def test_assumptions_require_positive_divisors():
    with pytest.raises(OutOfRangeError):
        Assumptions(work_days_per_week=0)
    with pytest.raises(OutOfRangeError):
        Assumptions(work_weeks_per_year=53)
    with pytest.raises(OutOfRangeError):
        Assumptions(productivity_loss_percent=120)


def test_financials_labeled_list():
    financials = FinancialMetrics(hourly_value=75, monthly_tool_cost=100, training_hours=10)
    items = financials.to_labeled_list()
    assert [item["id"] for item in items] == ["hourly_value", "ai_tool_cost", "implementation_cost", "training_hours"]
    assert FinancialMetrics.from_labeled_list(items) == financials
    assert financials.total_upfront_cost == 750
    assert financials.total_first_year_cost == 1950


def test_financials_labeled_list_missing_required():
    with pytest.raises(MissingFieldError) as exc:
        FinancialMetrics.from_labeled_list([{"id": "hourly_value", "label": "Rate", "value": 50}])
    assert exc.value.fields == ["ai_tool_cost"]


def test_replace_add_remove_time_metrics():
    metrics = replace_time_metric(DEFAULT_TIME_METRICS, "email_hours", weekly_hours=12)
    assert metrics[0].weekly_hours == 12
    assert DEFAULT_TIME_METRICS[0].weekly_hours == 10
    assert replace_time_metric(metrics, "missing", weekly_hours=1) == metrics

    added = add_time_metric(metrics, TimeMetric("custom", "Custom task", 5, 0.5))
    assert len(added) == len(metrics) + 1
    with pytest.raises(ValueError):
        add_time_metric(added, TimeMetric("custom", "Again", 1, 0.1))
    assert remove_time_metric(added, "custom") == metrics


def test_replace_time_metric_validates():
    with pytest.raises(OutOfRangeError):
        replace_time_metric(DEFAULT_TIME_METRICS, "email_hours", ai_reduction_fraction=2)


def test_scenario_closed_name_set():
    scenario = Scenario("expected", 1.0)
    assert scenario.name is ScenarioName.EXPECTED
    with pytest.raises(OutOfRangeError):
        Scenario("wild_guess", 2.0)
    with pytest.raises(OutOfRangeError):
        Scenario(ScenarioName.OPTIMISTIC, 0)
