from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence


IssueCode = Literal["missing", "out_of_range"]


@dataclass(frozen=True)
class ValidationIssue:
    field: str
    code: IssueCode
    message: str


class InputValidationError(ValueError):
    def __init__(self, issues: Sequence[ValidationIssue]):
        self.issues: List[ValidationIssue] = list(issues)
        super().__init__("; ".join(issue.message for issue in self.issues))

    @property
    def fields(self) -> List[str]:
        return [issue.field for issue in self.issues]


class MissingFieldError(InputValidationError):
    pass


class OutOfRangeError(InputValidationError):
    pass


def raise_for_issues(issues: Sequence[ValidationIssue]) -> None:
    """
    Raise the typed error for collected issues.
    A missing field wins over range problems so callers fix the shape first.
    """
    if not issues:
        return
    if any(issue.code == "missing" for issue in issues):
        raise MissingFieldError(issues)
    raise OutOfRangeError(issues)


def check_number(
    issues: List[ValidationIssue],
    field: str,
    value: object,
    minimum: Optional[float] = None,
    maximum: Optional[float] = None,
) -> None:
    if value is None:
        issues.append(ValidationIssue(field, "missing", f"{field} is required."))
        return
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        issues.append(ValidationIssue(field, "out_of_range", f"{field} must be numeric."))
        return
    if not math.isfinite(value):
        issues.append(ValidationIssue(field, "out_of_range", f"{field} must be finite."))
        return
    if minimum is not None and value < minimum:
        issues.append(ValidationIssue(field, "out_of_range", f"{field} must be >= {minimum:g}."))
    if maximum is not None and value > maximum:
        issues.append(ValidationIssue(field, "out_of_range", f"{field} must be <= {maximum:g}."))


def check_text(issues: List[ValidationIssue], field: str, value: object) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        issues.append(ValidationIssue(field, "missing", f"{field} is required."))
    elif not isinstance(value, str):
        issues.append(ValidationIssue(field, "out_of_range", f"{field} must be a string."))
