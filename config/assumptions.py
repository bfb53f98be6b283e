from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

from config.core import ConfigError
from model.validation import ValidationIssue, check_number, raise_for_issues


@dataclass(frozen=True)
class Assumptions:
    work_weeks_per_year: float = 48
    work_days_per_week: float = 5
    productivity_loss_percent: float = 10.0
    learning_curve_weeks: float = 4
    annual_value_increase_percent: float = 5.0
    discount_rate_percent: float = 3.0

    def __post_init__(self) -> None:
        issues: List[ValidationIssue] = []
        check_number(issues, "work_weeks_per_year", self.work_weeks_per_year, 1, 52)
        check_number(issues, "work_days_per_week", self.work_days_per_week, 1, 7)
        check_number(issues, "productivity_loss_percent", self.productivity_loss_percent, 0, 100)
        check_number(issues, "learning_curve_weeks", self.learning_curve_weeks, 0)
        check_number(issues, "annual_value_increase_percent", self.annual_value_increase_percent, 0)
        check_number(issues, "discount_rate_percent", self.discount_rate_percent, 0)
        raise_for_issues(issues)

    @staticmethod
    def from_env(env: Optional[dict[str, str]] = None) -> "Assumptions":
        env = env or os.environ
        try:
            return Assumptions(
                work_weeks_per_year=float(env.get("ROI_WORK_WEEKS_PER_YEAR", 48)),
                work_days_per_week=float(env.get("ROI_WORK_DAYS_PER_WEEK", 5)),
                productivity_loss_percent=float(env.get("ROI_PRODUCTIVITY_LOSS_PERCENT", 10.0)),
                learning_curve_weeks=float(env.get("ROI_LEARNING_CURVE_WEEKS", 4)),
                annual_value_increase_percent=float(env.get("ROI_ANNUAL_VALUE_INCREASE_PERCENT", 5.0)),
                discount_rate_percent=float(env.get("ROI_DISCOUNT_RATE_PERCENT", 3.0)),
            )
        except ValueError as exc:
            raise ConfigError(f"Invalid assumption settings: {exc}") from exc


DEFAULT_ASSUMPTIONS = Assumptions()
