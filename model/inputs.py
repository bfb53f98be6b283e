from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Sequence, Tuple

from model.validation import (
    ValidationIssue,
    check_number,
    check_text,
    raise_for_issues,
)


@dataclass(frozen=True)
class TimeMetric:
    id: str
    label: str
    weekly_hours: float
    ai_reduction_fraction: float

    def __post_init__(self) -> None:
        issues: List[ValidationIssue] = []
        check_text(issues, "id", self.id)
        check_text(issues, "label", self.label)
        check_number(issues, "weekly_hours", self.weekly_hours, 0)
        check_number(issues, "ai_reduction_fraction", self.ai_reduction_fraction, 0, 1)
        raise_for_issues(issues)

    @property
    def hours_saved_weekly(self) -> float:
        return self.weekly_hours * self.ai_reduction_fraction


FINANCIAL_LABELS = {
    "hourly_value": "Your hourly rate/value",
    "ai_tool_cost": "Monthly AI tool budget",
    "implementation_cost": "One-time implementation cost",
    "training_hours": "Training hours",
}
REQUIRED_FINANCIAL_IDS = ("hourly_value", "ai_tool_cost")


@dataclass(frozen=True)
class FinancialMetrics:
    hourly_value: float = 0.0
    monthly_tool_cost: float = 0.0
    one_time_implementation_cost: float = 0.0
    training_hours: float = 0.0

    def __post_init__(self) -> None:
        issues: List[ValidationIssue] = []
        check_number(issues, "hourly_value", self.hourly_value, 0)
        check_number(issues, "monthly_tool_cost", self.monthly_tool_cost, 0)
        check_number(issues, "one_time_implementation_cost", self.one_time_implementation_cost, 0)
        check_number(issues, "training_hours", self.training_hours, 0)
        raise_for_issues(issues)

    @property
    def total_upfront_cost(self) -> float:
        return self.one_time_implementation_cost + self.training_hours * self.hourly_value

    @property
    def total_first_year_cost(self) -> float:
        return self.total_upfront_cost + self.monthly_tool_cost * 12

    def to_labeled_list(self) -> List[Dict[str, object]]:
        values = {
            "hourly_value": self.hourly_value,
            "ai_tool_cost": self.monthly_tool_cost,
            "implementation_cost": self.one_time_implementation_cost,
            "training_hours": self.training_hours,
        }
        return [
            {"id": metric_id, "label": FINANCIAL_LABELS[metric_id], "value": value}
            for metric_id, value in values.items()
        ]

    @staticmethod
    def from_labeled_list(items: Iterable[Dict[str, object]]) -> "FinancialMetrics":
        by_id = {str(item.get("id")): item.get("value") for item in items}
        issues = [
            ValidationIssue(metric_id, "missing", f"financial metric {metric_id} is required.")
            for metric_id in REQUIRED_FINANCIAL_IDS
            if metric_id not in by_id
        ]
        raise_for_issues(issues)
        return FinancialMetrics(
            hourly_value=by_id["hourly_value"],
            monthly_tool_cost=by_id["ai_tool_cost"],
            one_time_implementation_cost=by_id.get("implementation_cost", 0.0),
            training_hours=by_id.get("training_hours", 0.0),
        )


DEFAULT_TIME_METRICS: Tuple[TimeMetric, ...] = (
    TimeMetric("email_hours", "Hours on email/week", 10, 0.7),
    TimeMetric("writing_hours", "Hours writing content/week", 8, 0.6),
    TimeMetric("research_hours", "Hours researching/week", 6, 0.8),
    TimeMetric("meeting_prep_hours", "Hours on meeting prep/notes", 5, 0.5),
    TimeMetric("data_analysis_hours", "Hours analyzing data/week", 4, 0.7),
)
DEFAULT_FINANCIALS = FinancialMetrics(hourly_value=75, monthly_tool_cost=100)


def add_time_metric(metrics: Sequence[TimeMetric], metric: TimeMetric) -> Tuple[TimeMetric, ...]:
    if any(existing.id == metric.id for existing in metrics):
        raise ValueError(f"time metric {metric.id} already exists.")
    return tuple(metrics) + (metric,)


def replace_time_metric(
    metrics: Sequence[TimeMetric],
    metric_id: str,
    **changes: object,
) -> Tuple[TimeMetric, ...]:
    """Return a new tuple with the metric matching ``metric_id`` updated; unknown ids leave it unchanged."""
    return tuple(
        replace(metric, **changes) if metric.id == metric_id else metric
        for metric in metrics
    )


def remove_time_metric(metrics: Sequence[TimeMetric], metric_id: str) -> Tuple[TimeMetric, ...]:
    return tuple(metric for metric in metrics if metric.id != metric_id)
