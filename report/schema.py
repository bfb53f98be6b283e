from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Payload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class Calculations(_Payload):
    hours_saved_weekly: float
    hours_saved_monthly: float
    hours_saved_yearly: float
    dollar_value_weekly: float
    dollar_value_monthly: float
    dollar_value_yearly: float
    net_roi_monthly: float = Field(..., alias="netROIMonthly")
    net_roi_yearly: float = Field(..., alias="netROIYearly")
    break_even_days: Optional[float] = Field(
        ..., description="Days until break-even; null when savings never cover costs."
    )
    roi_percentage: float
    five_year_value: float
    payback_period_months: float


class TimeMetricPayload(_Payload):
    id: str
    label: str
    weekly_hours: float = Field(..., ge=0)
    ai_reduction_fraction: float = Field(..., ge=0, le=1)


class FinancialMetricPayload(_Payload):
    id: str
    label: str
    value: float = Field(..., ge=0)


class SettingsPayload(_Payload):
    work_weeks_per_year: float = Field(..., ge=1, le=52)
    work_days_per_week: float = Field(..., ge=1, le=7)
    productivity_loss_percent: float = Field(..., ge=0, le=100)
    learning_curve_weeks: float = Field(..., ge=0)
    annual_value_increase_percent: float = Field(..., ge=0)
    discount_rate_percent: float = Field(..., ge=0)


class ProjectionPointPayload(_Payload):
    month_index: int = Field(..., ge=1)
    monthly_value: float
    monthly_cost: float
    cumulative_value: float
    cumulative_cost: float
    net_value: float
    adjusted_value: float
    discount_factor: float


class RoiReport(_Payload):
    calculations: Calculations
    time_metrics: List[TimeMetricPayload]
    financial_metrics: List[FinancialMetricPayload]
    settings: SettingsPayload
    scenarios: Dict[str, List[ProjectionPointPayload]]
    generated_at: AwareDatetime
