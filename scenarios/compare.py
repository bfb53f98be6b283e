from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from config.assumptions import Assumptions
from model.inputs import FinancialMetrics
from model.projection import ProjectionPoint, project, projection_frame
from model.savings import AggregateSavings
from scenarios.schema import Scenario


@dataclass(frozen=True)
class ScenarioResult:
    scenario: Scenario
    points: Tuple[ProjectionPoint, ...]

    @property
    def final_point(self) -> Optional[ProjectionPoint]:
        return self.points[-1] if self.points else None

    @property
    def roi(self) -> float:
        final = self.final_point
        if final is None or final.cumulative_cost <= 0:
            return 0.0
        return final.net_value / final.cumulative_cost * 100


def compare_scenarios(
    aggregate: AggregateSavings,
    financials: FinancialMetrics,
    assumptions: Assumptions,
    scenarios: Sequence[Scenario],
    horizon_months: int,
) -> Tuple[ScenarioResult, ...]:
    """Project each scenario independently; results keep the caller's order."""
    return tuple(
        ScenarioResult(
            scenario=scenario,
            points=project(aggregate, financials, assumptions, scenario, horizon_months),
        )
        for scenario in scenarios
    )


def comparison_frame(results: Sequence[ScenarioResult]) -> pd.DataFrame:
    rows = []
    for result in results:
        final = result.final_point
        rows.append(
            {
                "scenario": result.scenario.name.value,
                "multiplier": result.scenario.multiplier,
                "months": len(result.points),
                "cumulative_value": final.cumulative_value if final else 0.0,
                "cumulative_cost": final.cumulative_cost if final else 0.0,
                "net_value": final.net_value if final else 0.0,
            }
        )
    frame = pd.DataFrame(
        rows,
        columns=["scenario", "multiplier", "months", "cumulative_value", "cumulative_cost", "net_value"],
    )
    net = frame["net_value"].to_numpy(dtype=float)
    cost = frame["cumulative_cost"].to_numpy(dtype=float)
    frame["roi"] = np.divide(net, cost, out=np.zeros_like(net), where=cost > 0) * 100
    return frame


def scenario_points_frame(results: Sequence[ScenarioResult]) -> pd.DataFrame:
    frames: List[pd.DataFrame] = []
    for result in results:
        frame = projection_frame(result.points)
        frame.insert(0, "scenario", result.scenario.name.value)
        frames.append(frame)
    if not frames:
        return pd.DataFrame(columns=["scenario"])
    return pd.concat(frames, ignore_index=True)
