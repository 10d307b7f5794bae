"""Splitting of raw Quartz cron expressions into fields.

A Quartz expression has six or seven space separated fields:

    seconds minutes hours day-of-month month day-of-week [year]

Examples:
    "0 0 12 * * ?" - Every day at noon
    "0 15 10 ? * MON-FRI" - 10:15 on weekdays
    "0 0 0 L * ? 2030" - Midnight on the last day of every month in 2030
"""

import re
from dataclasses import dataclass

from quartzcron.constants import FIELD_COUNTS, FIELD_ORDER, CronField
from quartzcron.diagnostics import Diagnostic, DiagnosticKind
from quartzcron.exceptions import MalformedExpressionError

_WHITESPACE = re.compile(r"\s")


@dataclass(frozen=True)
class CronExpression:
    """Positional fields of a Quartz cron expression."""

    raw_fields: tuple[str, ...]

    @classmethod
    def from_string(cls, expression: str, collapse_whitespace: bool = False) -> "CronExpression":
        """Split an expression into its fields.

        Only single spaces separate fields unless ``collapse_whitespace`` is
        set; consecutive spaces therefore yield empty fields.

        Args:
            expression: Raw cron expression
            collapse_whitespace: Split on any run of whitespace instead

        Returns:
            CronExpression bound to the split tokens

        Raises:
            TypeError: If expression is not a string
            MalformedExpressionError: If there is no whitespace at all or the
                field count is not 6 or 7
        """
        if not isinstance(expression, str):
            raise TypeError(
                f"Cron expression must be a string, got {type(expression).__name__}"
            )

        if not _WHITESPACE.search(expression):
            raise MalformedExpressionError(
                expression,
                Diagnostic(DiagnosticKind.MALFORMED_NO_WHITESPACE, token=expression),
            )

        if collapse_whitespace:
            values = expression.split()
        else:
            values = expression.strip().split(" ")

        if len(values) not in FIELD_COUNTS:
            raise MalformedExpressionError(
                expression,
                Diagnostic(
                    DiagnosticKind.MALFORMED_FIELD_COUNT,
                    token=expression,
                    bounds=(min(FIELD_COUNTS), max(FIELD_COUNTS)),
                ),
            )

        return cls(tuple(values))

    def token(self, field: CronField) -> str | None:
        position = FIELD_ORDER.index(field)
        if position < len(self.raw_fields):
            return self.raw_fields[position]
        return None

    @property
    def seconds(self) -> str:
        return self.raw_fields[0]

    @property
    def minutes(self) -> str:
        return self.raw_fields[1]

    @property
    def hours(self) -> str:
        return self.raw_fields[2]

    @property
    def day_of_month(self) -> str:
        return self.raw_fields[3]

    @property
    def month(self) -> str:
        return self.raw_fields[4]

    @property
    def day_of_week(self) -> str:
        return self.raw_fields[5]

    @property
    def year(self) -> str | None:
        return self.token(CronField.YEAR)

    def fields(self) -> list[tuple[CronField, str]]:
        """Pairs of (field, token) in expression order."""
        return list(zip(FIELD_ORDER, self.raw_fields))

    def __str__(self) -> str:
        return " ".join(self.raw_fields)

    def __repr__(self) -> str:
        return f"CronExpression('{self}')"
