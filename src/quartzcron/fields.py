"""Per-field grammar validators for Quartz cron expressions.

Every validator understands the shared numeric grammar:

    - * (any value)
    - , (value list separator)
    - - (range of values)
    - / (step values)

and adds the tokens specific to its field (L, LW, last-day offsets, #, names).
Failures are appended to the diagnostics list handed to the validator; no
validator raises for a bad token.
"""

import logging
import re

from quartzcron.constants import (
    DAYS_OF_MONTH_BOUNDARIES,
    DAYS_OF_WEEK,
    DAYS_OF_WEEK_BOUNDARIES,
    HOURS_BOUNDARIES,
    LAST_DAY_OFFSET_BOUNDARIES,
    MINUTES_BOUNDARIES,
    MONTHS,
    MONTHS_BOUNDARIES,
    PLACEHOLDERS,
    SECONDS_BOUNDARIES,
    WEEKDAY_OCCURRENCE_BOUNDARIES,
    WILDCARD,
    YEARS_BOUNDARIES,
    CronField,
)
from quartzcron.diagnostics import Diagnostic, DiagnosticKind

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"([-+]?)0*([0-9]+)")
_LAST_WEEKDAY = re.compile(r"[1-7]l")
_MAX_DIGITS = 18


def parse_int(value: str) -> int | None:
    """Parse a strict integer token.

    Args:
        value: Token such as "5", "+5" or "-5"

    Returns:
        The integer, or None when the token is not an integer
        (decimals, names, empty strings). Integers longer than
        _MAX_DIGITS digits are clamped to a value outside every field
        boundary.
    """
    match = _INTEGER.fullmatch(value)
    if match is None:
        return None

    sign, digits = match.groups()
    if len(digits) > _MAX_DIGITS:
        digits = "9" * (_MAX_DIGITS + 1)
    return int(sign + digits)


class FieldValidator:
    """Shared grammar for one cron field.

    Subclasses set ``field`` and ``names`` and hook into
    :meth:`_check_special` for field-specific tokens.

    Args:
        diagnostics: List that receives a Diagnostic for every failed check
        bounds: Inclusive (min, max) for integer values
    """

    field: CronField
    names: tuple[str, ...] = ()
    default_bounds: tuple[int, int]

    def __init__(
        self,
        diagnostics: list[Diagnostic],
        bounds: tuple[int, int] | None = None,
    ):
        self.diagnostics = diagnostics
        self.bounds = bounds or self.default_bounds

    def validate(self, token: str) -> bool:
        """Validate a whole field token."""
        return self._validate_expression(token)

    def _validate_expression(self, token: str) -> bool:
        if token == WILDCARD:
            return True

        special = self._check_special(token)
        if special is not None:
            return special

        if "/" in token:
            return self._validate_step(token)

        if "-" in token:
            return self._validate_range(token)

        if "," in token:
            return self._validate_list(token)

        return self._check_limit(token)

    def _check_special(self, token: str) -> bool | None:
        """Field-specific tokens; None means "not special, keep parsing"."""
        return None

    def _validate_step(self, token: str) -> bool:
        operands = self._split_operands(token, "/")
        if operands is None:
            return False

        base, step = operands
        base_value, step_value = parse_int(base), parse_int(step)
        if base_value is not None and step_value is not None and base_value >= step_value:
            return self._fail(DiagnosticKind.WRONG_EXPRESSION, token, operand="step")

        return self._validate_expression(base) and self._check_step_value(step)

    def _check_step_value(self, step: str) -> bool:
        return self._check_limit(step)

    def _validate_range(self, token: str) -> bool:
        operands = self._split_operands(token, "-")
        if operands is None:
            return False

        low, high = operands
        return self._validate_expression(low) and self._check_limit(high)

    def _validate_list(self, token: str) -> bool:
        return all(self._check_limit(value) for value in token.split(","))

    def _split_operands(self, token: str, separator: str) -> list[str] | None:
        operands = token.split(separator)
        if len(operands) != 2:
            self._fail(DiagnosticKind.WRONG_EXPRESSION, token)
            return None
        return operands

    def _check_limit(
        self,
        token: str,
        bounds: tuple[int, int] | None = None,
        operand: str | None = None,
        allow_names: bool = True,
    ) -> bool:
        """Check a leaf value against the bounds or the field's names."""
        bounds = bounds or self.bounds
        value = parse_int(token)

        if value is None:
            if allow_names and token.lower() in self.names:
                return True
            return self._fail(DiagnosticKind.SYNTAX, token, bounds=bounds, operand=operand)

        low, high = bounds
        if low <= value <= high:
            return True

        return self._fail(DiagnosticKind.OUT_OF_RANGE, token, bounds=bounds, operand=operand)

    def _fail(
        self,
        kind: DiagnosticKind,
        token: str,
        bounds: tuple[int, int] | None = None,
        operand: str | None = None,
    ) -> bool:
        diagnostic = Diagnostic(
            kind=kind,
            field=self.field,
            token=token,
            bounds=bounds or self.bounds,
            operand=operand,
        )
        self.diagnostics.append(diagnostic)
        logger.debug("Rejected %s token %r: %s", self.field.value, token, diagnostic.message)
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(bounds={self.bounds})"


_TIME_BOUNDARIES = {
    CronField.SECONDS: SECONDS_BOUNDARIES,
    CronField.MINUTES: MINUTES_BOUNDARIES,
    CronField.HOURS: HOURS_BOUNDARIES,
    CronField.YEAR: YEARS_BOUNDARIES,
}


class TimeFieldValidator(FieldValidator):
    """Seconds, minutes, hours and year: numbers only."""

    def __init__(
        self,
        field: CronField,
        diagnostics: list[Diagnostic],
        bounds: tuple[int, int] | None = None,
    ):
        self.field = field
        self.default_bounds = _TIME_BOUNDARIES[field]
        super().__init__(diagnostics, bounds)


class _PairedDayValidator(FieldValidator):
    """Day-of-month or day-of-week, aware of the other day field.

    ``sibling`` is the raw token of the other day field, or None when the
    field is validated on its own.
    """

    def __init__(
        self,
        diagnostics: list[Diagnostic],
        sibling: str | None = None,
        bounds: tuple[int, int] | None = None,
    ):
        super().__init__(diagnostics, bounds)
        self.sibling = sibling

    def validate(self, token: str) -> bool:
        if token in PLACEHOLDERS:
            if self.sibling == token:
                return self._conflict(token)
            return True

        return self._validate_expression(token)

    def _conflict(self, token: str) -> bool:
        already_reported = any(
            d.kind is DiagnosticKind.CROSS_FIELD_CONFLICT for d in self.diagnostics
        )
        if already_reported:
            return False
        return self._fail(DiagnosticKind.CROSS_FIELD_CONFLICT, token)


class DayOfMonthValidator(_PairedDayValidator):
    """Day-of-month: 1-31, L, LW, nL and L-offset."""

    field = CronField.DAY_OF_MONTH
    default_bounds = DAYS_OF_MONTH_BOUNDARIES

    def _check_special(self, token: str) -> bool | None:
        lowered = token.lower()
        if lowered in ("l", "lw"):
            return True
        if _LAST_WEEKDAY.fullmatch(lowered):
            return True
        return None

    def _validate_range(self, token: str) -> bool:
        operands = self._split_operands(token, "-")
        if operands is None:
            return False

        low, high = operands
        if high.lower() == "l":
            return self._fail(DiagnosticKind.OUT_OF_RANGE, token)

        # L-3: three days before the last day of the month
        lowered = low.lower()
        if lowered == "l":
            return self._check_limit(high, bounds=LAST_DAY_OFFSET_BOUNDARIES, operand="offset")

        # Only a bare L takes an offset
        if lowered == "lw" or _LAST_WEEKDAY.fullmatch(lowered):
            return self._fail(DiagnosticKind.OUT_OF_RANGE, token)

        return self._validate_expression(low) and self._check_limit(high)


class MonthValidator(FieldValidator):
    """Month: 1-12 or JAN-DEC, each operand checked on its own."""

    field = CronField.MONTH
    names = MONTHS
    default_bounds = MONTHS_BOUNDARIES


class DayOfWeekValidator(_PairedDayValidator):
    """Day-of-week: 1-7 or SUN-SAT, L, nL and weekday#n."""

    field = CronField.DAY_OF_WEEK
    names = DAYS_OF_WEEK
    default_bounds = DAYS_OF_WEEK_BOUNDARIES

    def validate(self, token: str) -> bool:
        # One of the day fields has to be a placeholder
        if (
            token not in PLACEHOLDERS
            and self.sibling is not None
            and self.sibling not in PLACEHOLDERS
        ):
            return self._conflict(token)

        return super().validate(token)

    def _check_special(self, token: str) -> bool | None:
        lowered = token.lower()
        if lowered == "l":
            return True
        if _LAST_WEEKDAY.fullmatch(lowered):
            return True
        if "#" in token:
            return self._validate_nth_weekday(token)
        return None

    def _validate_nth_weekday(self, token: str) -> bool:
        operands = self._split_operands(token, "#")
        if operands is None:
            return False

        weekday, occurrence = operands
        weekday_ok = self._check_limit(weekday, operand="weekday")
        occurrence_ok = self._check_limit(
            occurrence,
            bounds=WEEKDAY_OCCURRENCE_BOUNDARIES,
            operand="nth",
            allow_names=False,
        )
        return weekday_ok and occurrence_ok

    def _check_step_value(self, step: str) -> bool:
        return self._check_limit(step, operand="increment", allow_names=False)
