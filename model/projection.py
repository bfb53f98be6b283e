from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import List, Sequence, Tuple

import pandas as pd

from config.assumptions import Assumptions
from model.inputs import FinancialMetrics
from model.learning_curve import learning_curve_factor, learning_curve_months
from model.savings import AggregateSavings
from scenarios.schema import Scenario


PROJECTION_COLUMNS = [
    "month_index",
    "monthly_value",
    "monthly_cost",
    "cumulative_value",
    "cumulative_cost",
    "net_value",
    "adjusted_value",
    "discount_factor",
]


@dataclass(frozen=True)
class ProjectionPoint:
    month_index: int
    monthly_value: float
    monthly_cost: float
    cumulative_value: float
    cumulative_cost: float
    net_value: float
    adjusted_value: float
    discount_factor: float


def _growth_factor(month: int, annual_increase_percent: float) -> float:
    if month <= 12:
        return 1.0
    return (1.0 + annual_increase_percent / 100.0) ** (month // 12)


def project(
    aggregate: AggregateSavings,
    financials: FinancialMetrics,
    assumptions: Assumptions,
    scenario: Scenario,
    horizon_months: int,
) -> Tuple[ProjectionPoint, ...]:
    """
    Month-by-month discounted value and cost series for one scenario.
    Always computed from month 1; horizon_months <= 0 returns an empty series.
    """
    window = learning_curve_months(assumptions.learning_curve_weeks)
    monthly_rate = assumptions.discount_rate_percent / 100.0 / 12.0
    monthly_cost = financials.monthly_tool_cost
    base_value = aggregate.dollar_value_monthly * scenario.multiplier

    cumulative_value = 0.0
    cumulative_cost = financials.total_upfront_cost
    points: List[ProjectionPoint] = []
    for month in range(1, max(0, horizon_months) + 1):
        adjusted = base_value
        if month <= window:
            adjusted *= learning_curve_factor(month, assumptions)
        adjusted *= _growth_factor(month, assumptions.annual_value_increase_percent)
        discount_factor = (1.0 + monthly_rate) ** month
        discounted = adjusted / discount_factor

        cumulative_value += discounted
        cumulative_cost += monthly_cost
        points.append(
            ProjectionPoint(
                month_index=month,
                monthly_value=discounted,
                monthly_cost=monthly_cost,
                cumulative_value=cumulative_value,
                cumulative_cost=cumulative_cost,
                net_value=cumulative_value - cumulative_cost,
                adjusted_value=adjusted,
                discount_factor=discount_factor,
            )
        )
    return tuple(points)


def projection_frame(points: Sequence[ProjectionPoint]) -> pd.DataFrame:
    return pd.DataFrame([asdict(point) for point in points], columns=PROJECTION_COLUMNS)
