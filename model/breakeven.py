from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from config.assumptions import Assumptions
from model.inputs import FinancialMetrics
from model.learning_curve import first_year_learning_loss
from model.projection import project
from model.savings import AggregateSavings
from scenarios.presets import EXPECTED_SCENARIO


FIVE_YEAR_MONTHS = 60
DAYS_PER_MONTH = 30


@dataclass(frozen=True)
class ROISummary:
    hours_saved_weekly: float
    hours_saved_monthly: float
    hours_saved_yearly: float
    dollar_value_weekly: float
    dollar_value_monthly: float
    dollar_value_yearly: float
    net_roi_monthly: float
    net_roi_yearly: float
    break_even_days: Optional[float]
    roi_percentage: float
    five_year_value: float
    payback_period_months: float

    @property
    def breaks_even(self) -> bool:
        return self.break_even_days is not None


def compute_break_even_days(
    aggregate: AggregateSavings,
    financials: FinancialMetrics,
    assumptions: Assumptions,
) -> Optional[float]:
    """
    Days until savings cover costs; ``None`` means the savings never outpace the costs.
    Upfront costs take priority over the recurring tool cost.
    """
    upfront = financials.total_upfront_cost
    tool_cost = financials.monthly_tool_cost
    daily_value = aggregate.dollar_value_weekly / assumptions.work_days_per_week

    if upfront > 0:
        denominator = daily_value - tool_cost / DAYS_PER_MONTH
        if denominator <= 0:
            return None
        return upfront / denominator
    if tool_cost > 0:
        if daily_value <= 0:
            return None
        return tool_cost / (daily_value * DAYS_PER_MONTH)
    return 0.0


def describe_break_even(days: Optional[float]) -> str:
    if days is None:
        return "never"
    if days == 0:
        return "immediate"
    whole_days = int(math.ceil(days))
    return "1 day" if whole_days == 1 else f"{whole_days} days"


def compute_payback_period_months(aggregate: AggregateSavings, financials: FinancialMetrics) -> float:
    if aggregate.dollar_value_monthly <= 0:
        return 0.0
    return financials.total_first_year_cost / aggregate.dollar_value_monthly


def compute_net_roi_yearly(
    aggregate: AggregateSavings,
    financials: FinancialMetrics,
    assumptions: Assumptions,
) -> float:
    loss = first_year_learning_loss(aggregate.dollar_value_monthly, assumptions)
    return (aggregate.dollar_value_yearly - loss) - financials.total_first_year_cost


def compute_roi_percentage(net_roi_yearly: float, aggregate: AggregateSavings, financials: FinancialMetrics) -> float:
    cost = financials.total_first_year_cost
    if cost <= 0 or aggregate.hours_saved_weekly <= 0:
        return 0.0
    return (net_roi_yearly / cost) * 100


def compute_summary(
    aggregate: AggregateSavings,
    financials: FinancialMetrics,
    assumptions: Assumptions,
) -> ROISummary:
    net_yearly = compute_net_roi_yearly(aggregate, financials, assumptions)
    five_year = project(aggregate, financials, assumptions, EXPECTED_SCENARIO, FIVE_YEAR_MONTHS)
    return ROISummary(
        hours_saved_weekly=aggregate.hours_saved_weekly,
        hours_saved_monthly=aggregate.hours_saved_monthly,
        hours_saved_yearly=aggregate.hours_saved_yearly,
        dollar_value_weekly=aggregate.dollar_value_weekly,
        dollar_value_monthly=aggregate.dollar_value_monthly,
        dollar_value_yearly=aggregate.dollar_value_yearly,
        net_roi_monthly=aggregate.dollar_value_monthly - financials.monthly_tool_cost,
        net_roi_yearly=net_yearly,
        break_even_days=compute_break_even_days(aggregate, financials, assumptions),
        roi_percentage=compute_roi_percentage(net_yearly, aggregate, financials),
        five_year_value=five_year[-1].net_value,
        payback_period_months=compute_payback_period_months(aggregate, financials),
    )
