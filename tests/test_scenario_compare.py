import pytest

from config import Assumptions
from model.inputs import FinancialMetrics, TimeMetric
from model.savings import compute_aggregate_savings
from scenarios import DEFAULT_SCENARIOS, PRESETS, Scenario, ScenarioName, describe_scenario
from scenarios.compare import compare_scenarios, comparison_frame, scenario_points_frame


def _inputs(financials=None):
    assumptions = Assumptions()
    financials = financials or FinancialMetrics(
        hourly_value=75, monthly_tool_cost=100, one_time_implementation_cost=500
    )
    aggregate = compute_aggregate_savings([TimeMetric("email", "Email", 10, 0.7)], financials, assumptions)
    return aggregate, financials, assumptions


def test_presets_are_ordered_by_multiplier():
    multipliers = [scenario.multiplier for scenario in DEFAULT_SCENARIOS]
    assert multipliers == sorted(multipliers)
    assert PRESETS[ScenarioName.EXPECTED]["params"].multiplier == 1.0


def test_larger_multiplier_never_lowers_terminal_net():
    aggregate, financials, assumptions = _inputs()
    results = compare_scenarios(aggregate, financials, assumptions, DEFAULT_SCENARIOS, 24)
    nets = [result.final_point.net_value for result in results]
    assert nets == sorted(nets)


def test_results_follow_caller_order():
    aggregate, financials, assumptions = _inputs()
    order = (
        Scenario(ScenarioName.OPTIMISTIC, 1.3),
        Scenario(ScenarioName.CONSERVATIVE, 0.7),
    )
    results = compare_scenarios(aggregate, financials, assumptions, order, 12)
    assert [result.scenario.name for result in results] == [ScenarioName.OPTIMISTIC, ScenarioName.CONSERVATIVE]


def test_scenarios_are_independent():
    aggregate, financials, assumptions = _inputs()
    expected = Scenario(ScenarioName.EXPECTED, 1.0)
    alone = compare_scenarios(aggregate, financials, assumptions, (expected,), 12)[0]
    together = compare_scenarios(aggregate, financials, assumptions, DEFAULT_SCENARIOS, 12)[1]
    assert alone.points == together.points


def test_roi_from_terminal_point():
    aggregate, financials, assumptions = _inputs()
    result = compare_scenarios(aggregate, financials, assumptions, DEFAULT_SCENARIOS[:1], 12)[0]
    final = result.final_point
    assert result.roi == pytest.approx(final.net_value / final.cumulative_cost * 100)


def test_zero_cost_and_empty_horizon_roi_is_zero():
    aggregate, financials, assumptions = _inputs(FinancialMetrics(hourly_value=75))
    results = compare_scenarios(aggregate, financials, assumptions, DEFAULT_SCENARIOS, 6)
    assert all(result.roi == 0.0 for result in results)
    empty = compare_scenarios(aggregate, financials, assumptions, DEFAULT_SCENARIOS, 0)
    assert all(result.final_point is None and result.roi == 0.0 for result in empty)


def test_comparison_frame():
    aggregate, financials, assumptions = _inputs()
    results = compare_scenarios(aggregate, financials, assumptions, DEFAULT_SCENARIOS, 12)
    frame = comparison_frame(results)
    assert frame["scenario"].tolist() == ["conservative", "expected", "optimistic"]
    assert frame["roi"].tolist() == pytest.approx([result.roi for result in results])

    zero_cost = _inputs(FinancialMetrics(hourly_value=75))
    zero_results = compare_scenarios(*zero_cost, DEFAULT_SCENARIOS, 12)
    assert comparison_frame(zero_results)["roi"].tolist() == [0.0, 0.0, 0.0]


def test_scenario_points_frame_keeps_order():
    aggregate, financials, assumptions = _inputs()
    results = compare_scenarios(aggregate, financials, assumptions, DEFAULT_SCENARIOS, 3)
    frame = scenario_points_frame(results)
    assert len(frame) == 9
    assert frame["scenario"].tolist()[:3] == ["conservative"] * 3
    assert scenario_points_frame(()).empty


def test_describe_scenario_joins_description_and_story():
    text = describe_scenario(ScenarioName.CONSERVATIVE)
    assert text.startswith(PRESETS[ScenarioName.CONSERVATIVE]["description"])
    assert text.endswith(PRESETS[ScenarioName.CONSERVATIVE]["story"])
    assert describe_scenario("optimistic") == describe_scenario(ScenarioName.OPTIMISTIC)
