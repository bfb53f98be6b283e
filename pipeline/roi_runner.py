from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Tuple

from config.assumptions import Assumptions
from config.core import DEFAULT_HORIZON_MONTHS, WEEKS_PER_MONTH
from model.breakeven import ROISummary, compute_summary
from model.inputs import FinancialMetrics, TimeMetric
from model.projection import ProjectionPoint
from model.savings import AggregateSavings, compute_aggregate_savings
from scenarios.compare import ScenarioResult, compare_scenarios
from scenarios.presets import DEFAULT_SCENARIOS
from scenarios.schema import Scenario


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoiInputs:
    time_metrics: Tuple[TimeMetric, ...] = ()
    financials: FinancialMetrics = field(default_factory=FinancialMetrics)
    assumptions: Assumptions = field(default_factory=Assumptions)

    def __post_init__(self) -> None:
        object.__setattr__(self, "time_metrics", tuple(self.time_metrics))


@dataclass(frozen=True)
class RoiResult:
    inputs: RoiInputs
    aggregate: AggregateSavings
    summary: ROISummary
    comparison: Tuple[ScenarioResult, ...]

    @property
    def projections(self) -> Dict[str, Tuple[ProjectionPoint, ...]]:
        return {result.scenario.name.value: result.points for result in self.comparison}


def run_roi(
    inputs: RoiInputs,
    horizon_months: int = DEFAULT_HORIZON_MONTHS,
    scenarios: Tuple[Scenario, ...] = DEFAULT_SCENARIOS,
    weeks_per_month: float = WEEKS_PER_MONTH,
) -> RoiResult:
    aggregate = compute_aggregate_savings(
        inputs.time_metrics,
        inputs.financials,
        inputs.assumptions,
        weeks_per_month=weeks_per_month,
    )
    summary = compute_summary(aggregate, inputs.financials, inputs.assumptions)
    comparison = compare_scenarios(
        aggregate,
        inputs.financials,
        inputs.assumptions,
        tuple(scenarios),
        horizon_months,
    )
    logger.debug(
        "ROI run: metrics=%d horizon=%d scenarios=%d weeks_per_month=%g roi=%.1f%%",
        len(inputs.time_metrics),
        horizon_months,
        len(comparison),
        weeks_per_month,
        summary.roi_percentage,
    )
    return RoiResult(inputs=inputs, aggregate=aggregate, summary=summary, comparison=comparison)


@lru_cache(maxsize=128)
def run_roi_cached(
    inputs: RoiInputs,
    horizon_months: int = DEFAULT_HORIZON_MONTHS,
    scenarios: Tuple[Scenario, ...] = DEFAULT_SCENARIOS,
    weeks_per_month: float = WEEKS_PER_MONTH,
) -> RoiResult:
    return run_roi(
        inputs,
        horizon_months=horizon_months,
        scenarios=tuple(scenarios),
        weeks_per_month=weeks_per_month,
    )
