from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from config.assumptions import Assumptions
from config.core import WEEKS_PER_MONTH
from model.inputs import FinancialMetrics, TimeMetric


@dataclass(frozen=True)
class AggregateSavings:
    hours_saved_weekly: float = 0.0
    hours_saved_monthly: float = 0.0
    hours_saved_yearly: float = 0.0
    dollar_value_weekly: float = 0.0
    dollar_value_monthly: float = 0.0
    dollar_value_yearly: float = 0.0
    total_hours_weekly: float = 0.0
    percentage_saved: float = 0.0


def compute_aggregate_savings(
    metrics: Sequence[TimeMetric],
    financials: FinancialMetrics,
    assumptions: Assumptions,
    weeks_per_month: float = WEEKS_PER_MONTH,
) -> AggregateSavings:
    """
    Reduce time metrics to hours saved and their dollar value per week, month and year.
    An empty metric list yields all zeros.
    """
    total_hours = sum(metric.weekly_hours for metric in metrics)
    hours_weekly = sum(metric.hours_saved_weekly for metric in metrics)
    hours_monthly = hours_weekly * weeks_per_month
    hours_yearly = hours_weekly * assumptions.work_weeks_per_year
    rate = financials.hourly_value
    return AggregateSavings(
        hours_saved_weekly=hours_weekly,
        hours_saved_monthly=hours_monthly,
        hours_saved_yearly=hours_yearly,
        dollar_value_weekly=hours_weekly * rate,
        dollar_value_monthly=hours_monthly * rate,
        dollar_value_yearly=hours_yearly * rate,
        total_hours_weekly=total_hours,
        percentage_saved=(hours_weekly / total_hours) * 100 if total_hours > 0 else 0.0,
    )
