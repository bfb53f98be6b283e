from typing import Tuple

from scenarios.schema import Scenario, ScenarioName


PRESETS = {
    ScenarioName.CONSERVATIVE: {
        "description": "Savings land below the estimate.",
        "params": Scenario(ScenarioName.CONSERVATIVE, 0.7),
        "story": "Adoption is partial and only part of the estimated time is recovered.",
    },
    ScenarioName.EXPECTED: {
        "description": "Savings match the estimate.",
        "params": Scenario(ScenarioName.EXPECTED, 1.0),
        "story": "The team uses the tool as planned.",
    },
    ScenarioName.OPTIMISTIC: {
        "description": "Savings exceed the estimate.",
        "params": Scenario(ScenarioName.OPTIMISTIC, 1.3),
        "story": "Workflows are redesigned around the tool and compound the savings.",
    },
}

DEFAULT_SCENARIOS: Tuple[Scenario, ...] = tuple(
    PRESETS[name]["params"]
    for name in (ScenarioName.CONSERVATIVE, ScenarioName.EXPECTED, ScenarioName.OPTIMISTIC)
)
EXPECTED_SCENARIO = PRESETS[ScenarioName.EXPECTED]["params"]


def describe_scenario(name: ScenarioName) -> str:
    preset = PRESETS[ScenarioName(name)]
    return f"{preset['description']} {preset['story']}"
