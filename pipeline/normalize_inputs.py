from __future__ import annotations

import logging
import math
from dataclasses import fields
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic.alias_generators import to_snake

from config.assumptions import Assumptions
from model.inputs import FINANCIAL_LABELS, REQUIRED_FINANCIAL_IDS, FinancialMetrics, TimeMetric
from model.validation import MissingFieldError, OutOfRangeError, ValidationIssue


logger = logging.getLogger(__name__)


_ASSUMPTION_RANGES: Dict[str, Tuple[float, Optional[float]]] = {
    "work_weeks_per_year": (1, 52),
    "work_days_per_week": (1, 7),
    "productivity_loss_percent": (0, 100),
    "learning_curve_weeks": (0, None),
    "annual_value_increase_percent": (0, None),
    "discount_rate_percent": (0, None),
}


def _to_number(field: str, value: object) -> float:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise MissingFieldError([ValidationIssue(field, "missing", f"{field} is required.")])
    if isinstance(value, bool):
        raise OutOfRangeError([ValidationIssue(field, "out_of_range", f"{field} must be numeric.")])
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise OutOfRangeError(
            [ValidationIssue(field, "out_of_range", f"{field} must be numeric (got {value!r}).")]
        ) from exc
    if not math.isfinite(number):
        raise OutOfRangeError([ValidationIssue(field, "out_of_range", f"{field} must be finite.")])
    return number


def _clamp(
    field: str,
    value: float,
    minimum: float,
    maximum: Optional[float],
    warnings: List[str],
) -> float:
    clamped = max(minimum, value)
    if maximum is not None:
        clamped = min(maximum, clamped)
    if clamped != value:
        message = f"Clamped {field} {value:g} -> {clamped:g}."
        warnings.append(message)
        logger.warning(message)
    return clamped


def _snake_keys(raw: Mapping[str, object]) -> Dict[str, object]:
    return {to_snake(str(key)): value for key, value in raw.items()}


def _require(raw: Mapping[str, object], keys: Iterable[str]) -> None:
    missing = [key for key in keys if key not in raw]
    if missing:
        raise MissingFieldError(
            [ValidationIssue(key, "missing", f"{key} is required.") for key in missing]
        )


def normalize_time_metric(raw: Mapping[str, object]) -> Tuple[TimeMetric, List[str]]:
    """
    Build a TimeMetric from UI input, clamping negatives and out-of-range fractions.
    Reductions above 1.5 are read as whole-number percents (70 -> 0.7).
    """
    raw = _snake_keys(raw)
    _require(raw, ("id", "weekly_hours", "ai_reduction_fraction"))
    warnings: List[str] = []
    hours = _clamp("weekly_hours", _to_number("weekly_hours", raw["weekly_hours"]), 0.0, None, warnings)
    reduction = _to_number("ai_reduction_fraction", raw["ai_reduction_fraction"])
    if abs(reduction) > 1.5:
        normalized = reduction / 100.0
        message = f"Normalized ai_reduction_fraction {reduction:g} -> {normalized:g} assuming percent units."
        warnings.append(message)
        logger.warning(message)
        reduction = normalized
    reduction = _clamp("ai_reduction_fraction", reduction, 0.0, 1.0, warnings)
    metric_id = str(raw["id"])
    label = str(raw.get("label") or metric_id)
    return TimeMetric(metric_id, label, hours, reduction), warnings


def normalize_time_metrics(raws: Iterable[Mapping[str, object]]) -> Tuple[Tuple[TimeMetric, ...], List[str]]:
    metrics: List[TimeMetric] = []
    warnings: List[str] = []
    for raw in raws:
        metric, metric_warnings = normalize_time_metric(raw)
        metrics.append(metric)
        warnings.extend(metric_warnings)
    return tuple(metrics), warnings


def normalize_financials(items: Iterable[Mapping[str, object]]) -> Tuple[FinancialMetrics, List[str]]:
    by_id = {str(item.get("id")): item.get("value") for item in items}
    _require(by_id, REQUIRED_FINANCIAL_IDS)
    warnings: List[str] = []
    values: Dict[str, float] = {}
    for metric_id in FINANCIAL_LABELS:
        raw = by_id.get(metric_id, 0.0)
        values[metric_id] = _clamp(metric_id, _to_number(metric_id, raw), 0.0, None, warnings)
    return (
        FinancialMetrics(
            hourly_value=values["hourly_value"],
            monthly_tool_cost=values["ai_tool_cost"],
            one_time_implementation_cost=values["implementation_cost"],
            training_hours=values["training_hours"],
        ),
        warnings,
    )


def normalize_assumptions(
    raw: Mapping[str, object],
    base: Optional[Assumptions] = None,
) -> Tuple[Assumptions, List[str]]:
    """Overlay raw settings onto ``base``; unknown keys are ignored, missing keys keep the base value."""
    base = base or Assumptions()
    raw = _snake_keys(raw)
    warnings: List[str] = []
    values: Dict[str, float] = {}
    for item in fields(Assumptions):
        name = item.name
        if name not in raw:
            values[name] = getattr(base, name)
            continue
        minimum, maximum = _ASSUMPTION_RANGES[name]
        values[name] = _clamp(name, _to_number(name, raw[name]), minimum, maximum, warnings)
    return Assumptions(**values), warnings
