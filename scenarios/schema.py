from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from model.validation import ValidationIssue, check_number, raise_for_issues


class ScenarioName(str, Enum):
    CONSERVATIVE = "conservative"
    EXPECTED = "expected"
    OPTIMISTIC = "optimistic"


@dataclass(frozen=True)
class Scenario:
    name: Union[ScenarioName, str]
    multiplier: float

    def __post_init__(self) -> None:
        issues: List[ValidationIssue] = []
        if not isinstance(self.name, ScenarioName):
            try:
                object.__setattr__(self, "name", ScenarioName(self.name))
            except ValueError:
                allowed = ", ".join(member.value for member in ScenarioName)
                issues.append(
                    ValidationIssue("name", "out_of_range", f"name must be one of: {allowed}.")
                )
        check_number(issues, "multiplier", self.multiplier)
        if not issues and self.multiplier <= 0:
            issues.append(ValidationIssue("multiplier", "out_of_range", "multiplier must be positive."))
        raise_for_issues(issues)
