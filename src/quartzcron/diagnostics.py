"""Diagnostics reported while validating a cron expression.

A diagnostic is a structured value: what went wrong (``kind``), in which
field, on which token and against which boundary. The human readable text
is produced on demand by :func:`format_diagnostic`.
"""

from dataclasses import dataclass
from enum import Enum

from quartzcron.constants import CronField


class DiagnosticKind(Enum):
    """Closed set of validation failures."""
    MALFORMED_NO_WHITESPACE = "malformed_no_whitespace"
    MALFORMED_FIELD_COUNT = "malformed_field_count"
    WRONG_EXPRESSION = "wrong_expression"
    OUT_OF_RANGE = "out_of_range"
    SYNTAX = "syntax"
    CROSS_FIELD_CONFLICT = "cross_field_conflict"


MESSAGES = {
    "no_spaces": "Unexpected Expression: no spaces",
    "field_count": "Unexpected Expression: out of boundaries",
    "wrong_expression": "wrong expression",
    "step": "Step value malformed",
    "time": (
        "Minute and Second values must be between 0 and 59 "
        "and Hour Values must be between 0 and 23"
    ),
    "year": "(Year) - Unsupported value for field. Possible values are {min}-{max} , - * /",
    "day_of_month": "Day of month values must be between {min} and {max}",
    "offset": "Offset from last day must be <= {max}",
    "month_range": "Month values must be between {min} and {max}",
    "month_syntax": (
        "Month values must be JAN, FEB, MAR, APR, MAY, JUN, JUL, AUG, SEP, OCT, NOV, DEC "
        "OR between 1 and 12"
    ),
    "day_of_week_range": "Day-of-Week values must be between {min} and {max}",
    "day_of_week_syntax": (
        "Day-of-Week values must be SUN, MON, TUE, WED, THU, FRI, SAT "
        "OR between 1 and 7, - * ? / L #"
    ),
    "weekday_operand": (
        "(Day of week) - Unsupported value for field. "
        "Possible values are 1-7 or SUN-SAT , - * ? / L #"
    ),
    "increment": "Expression {token} is not a valid increment value. Accepted values are {min}-{max}",
    "nth": "A numeric value between {min} and {max} must follow the # option",
    "cross_field": "? can only be specified for Day-of-Month -OR- Day-of-Week",
}

_TIME_FIELDS = (CronField.SECONDS, CronField.MINUTES, CronField.HOURS)


@dataclass(frozen=True)
class Diagnostic:
    """A single validation failure.

    Attributes:
        kind: What went wrong
        field: Field being validated, None for expression-level failures
        token: Offending token (the whole expression for malformed input)
        bounds: Inclusive (min, max) the token was checked against
        operand: Sub-operand that failed ("step", "increment", "nth",
            "weekday", "offset") or None for a plain value
    """

    kind: DiagnosticKind
    field: CronField | None = None
    token: str | None = None
    bounds: tuple[int, int] | None = None
    operand: str | None = None

    @property
    def message(self) -> str:
        return format_diagnostic(self)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "field": self.field.value if self.field else None,
            "token": self.token,
            "bounds": list(self.bounds) if self.bounds else None,
            "operand": self.operand,
            "message": self.message,
        }

    def __str__(self) -> str:
        return self.message


def _template_key(diagnostic: Diagnostic) -> str:
    kind = diagnostic.kind
    field = diagnostic.field
    operand = diagnostic.operand

    if kind is DiagnosticKind.MALFORMED_NO_WHITESPACE:
        return "no_spaces"
    if kind is DiagnosticKind.MALFORMED_FIELD_COUNT:
        return "field_count"
    if kind is DiagnosticKind.CROSS_FIELD_CONFLICT:
        return "cross_field"
    if kind is DiagnosticKind.WRONG_EXPRESSION:
        return "step" if operand == "step" else "wrong_expression"

    if operand in ("increment", "nth", "offset"):
        return operand
    if operand == "weekday" and kind is DiagnosticKind.SYNTAX:
        return "weekday_operand"

    if field in _TIME_FIELDS:
        return "time"
    if field is CronField.YEAR:
        return "year"
    if field is CronField.DAY_OF_MONTH:
        return "day_of_month"
    if field is CronField.MONTH:
        return "month_syntax" if kind is DiagnosticKind.SYNTAX else "month_range"
    if field is CronField.DAY_OF_WEEK:
        return "day_of_week_syntax" if kind is DiagnosticKind.SYNTAX else "day_of_week_range"

    return "wrong_expression"


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Render a diagnostic with its catalog message.

    Args:
        diagnostic: Diagnostic to render

    Returns:
        Human readable message
    """
    template = MESSAGES[_template_key(diagnostic)]
    low, high = diagnostic.bounds if diagnostic.bounds else (None, None)
    return template.format(min=low, max=high, token=diagnostic.token)
