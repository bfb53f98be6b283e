from __future__ import annotations

import math

from config.assumptions import Assumptions


WEEKS_PER_LEARNING_MONTH = 4


def learning_curve_months(learning_curve_weeks: float) -> int:
    if learning_curve_weeks <= 0:
        return 0
    return int(math.ceil(learning_curve_weeks / WEEKS_PER_LEARNING_MONTH))


def learning_curve_factor(month: int, assumptions: Assumptions) -> float:
    """
    Productivity factor for a one-based month index.
    The penalty is largest in month 1 and decays linearly across the window; outside it the factor is 1.
    """
    window = learning_curve_months(assumptions.learning_curve_weeks)
    if window == 0 or month < 1 or month > window:
        return 1.0
    loss = assumptions.productivity_loss_percent / 100.0
    return 1.0 - loss * (window - month + 1) / window


def first_year_learning_loss(dollar_value_monthly: float, assumptions: Assumptions) -> float:
    window = min(learning_curve_months(assumptions.learning_curve_weeks), 12)
    return sum(
        dollar_value_monthly * (1.0 - learning_curve_factor(month, assumptions))
        for month in range(1, window + 1)
    )
