from scenarios.schema import Scenario, ScenarioName
from scenarios.presets import DEFAULT_SCENARIOS, EXPECTED_SCENARIO, PRESETS, describe_scenario

__all__ = [
    "Scenario",
    "ScenarioName",
    "DEFAULT_SCENARIOS",
    "EXPECTED_SCENARIO",
    "PRESETS",
    "describe_scenario",
]
