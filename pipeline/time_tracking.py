from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, List, Literal, Optional, Sequence, Tuple

import pandas as pd

from config.core import WEEKS_PER_MONTH
from model.inputs import TimeMetric
from model.task_categories import CATEGORIES_BY_ID, TASK_CATEGORIES
from model.validation import ValidationIssue, check_number, check_text, raise_for_issues


DateRange = Literal["today", "week", "month", "year"]

BREAKDOWN_COLUMNS = [
    "category_id",
    "name",
    "ai_savings",
    "total_seconds",
    "total_hours",
    "avg_productivity",
    "ai_usage_rate",
    "sessions",
    "potential_savings",
]


@dataclass(frozen=True)
class TimeEntry:
    id: str
    category_id: str
    duration_seconds: float
    date: date
    productivity: int = 3
    ai_used: bool = False
    description: Optional[str] = None

    def __post_init__(self) -> None:
        # Timestamps are reduced to their calendar day so range filtering compares dates only.
        if isinstance(self.date, datetime):
            object.__setattr__(self, "date", self.date.date())
        issues: List[ValidationIssue] = []
        check_text(issues, "id", self.id)
        check_text(issues, "category_id", self.category_id)
        if not issues and self.category_id not in CATEGORIES_BY_ID:
            issues.append(
                ValidationIssue("category_id", "out_of_range", f"unknown category_id {self.category_id}.")
            )
        check_number(issues, "duration_seconds", self.duration_seconds, 0)
        check_number(issues, "productivity", self.productivity, 1, 5)
        if self.date is None:
            issues.append(ValidationIssue("date", "missing", "date is required."))
        elif not isinstance(self.date, date):
            issues.append(ValidationIssue("date", "out_of_range", "date must be a date."))
        raise_for_issues(issues)


def _range_start(date_range: DateRange, today: date) -> date:
    if date_range == "today":
        return today
    if date_range == "month":
        return (pd.Timestamp(today) - pd.DateOffset(months=1)).date()
    if date_range == "year":
        return (pd.Timestamp(today) - pd.DateOffset(years=1)).date()
    return today - timedelta(days=7)


def filter_entries(
    entries: Iterable[TimeEntry],
    date_range: DateRange,
    today: date,
) -> Tuple[TimeEntry, ...]:
    start = _range_start(date_range, today)
    return tuple(entry for entry in entries if entry.date >= start)


def category_breakdown(entries: Sequence[TimeEntry]) -> pd.DataFrame:
    """
    Per-category totals for tracked time, largest first.
    Categories without tracked time are omitted.
    """
    if not entries:
        return pd.DataFrame(columns=BREAKDOWN_COLUMNS)

    working = pd.DataFrame(
        {
            "category_id": [entry.category_id for entry in entries],
            "duration_seconds": [float(entry.duration_seconds) for entry in entries],
            "productivity": [float(entry.productivity) for entry in entries],
            "ai_used": [1.0 if entry.ai_used else 0.0 for entry in entries],
        }
    )
    grouped = working.groupby("category_id").agg(
        total_seconds=("duration_seconds", "sum"),
        avg_productivity=("productivity", "mean"),
        ai_usage_rate=("ai_used", "mean"),
        sessions=("duration_seconds", "size"),
    )

    catalog = pd.DataFrame(
        {
            "category_id": [category.id for category in TASK_CATEGORIES],
            "name": [category.name for category in TASK_CATEGORIES],
            "ai_savings": [category.ai_savings for category in TASK_CATEGORIES],
        }
    )
    merged = catalog.merge(grouped, left_on="category_id", right_index=True, how="inner")
    merged = merged[merged["total_seconds"] > 0].copy()
    merged["total_hours"] = merged["total_seconds"] / 3600.0
    merged["potential_savings"] = merged["total_hours"] * merged["ai_savings"]
    merged["sessions"] = merged["sessions"].astype(int)
    merged = merged.sort_values("total_seconds", ascending=False, kind="mergesort")
    return merged[BREAKDOWN_COLUMNS].reset_index(drop=True)


def weeks_in_range(
    date_range: DateRange,
    work_days_per_week: float = 5,
    weeks_per_month: float = WEEKS_PER_MONTH,
) -> float:
    if date_range == "today":
        return 1.0 / work_days_per_week
    if date_range == "month":
        return weeks_per_month
    if date_range == "year":
        return 52.0
    return 1.0


def time_metrics_from_breakdown(
    breakdown: pd.DataFrame,
    date_range: DateRange,
    work_days_per_week: float = 5,
    weeks_per_month: float = WEEKS_PER_MONTH,
) -> Tuple[TimeMetric, ...]:
    weeks = weeks_in_range(date_range, work_days_per_week, weeks_per_month)
    return tuple(
        TimeMetric(
            id=row.category_id,
            label=row.name,
            weekly_hours=float(row.total_hours) / weeks,
            ai_reduction_fraction=float(row.ai_savings),
        )
        for row in breakdown.itertuples(index=False)
    )


def top_opportunity(metrics: Sequence[TimeMetric]) -> Optional[TimeMetric]:
    if not metrics:
        return None
    return max(metrics, key=lambda metric: metric.hours_saved_weekly)
