"""Validation of whole Quartz cron expressions.

Example:
    from quartzcron import validate

    validate("0 0 12 * * ?")                  # True
    validate("61 0 12 * * ?")                 # False

    result = validate("61 0 12 * * ?", verbose=True)
    result.valid                              # False
    result.errors                             # ["Minute and Second values must be ..."]
"""

import logging
from dataclasses import dataclass, field

from quartzcron.config import ValidatorConfig
from quartzcron.constants import CronField
from quartzcron.diagnostics import Diagnostic
from quartzcron.exceptions import InvalidCronExpressionError, MalformedExpressionError
from quartzcron.expression import CronExpression
from quartzcron.fields import (
    DayOfMonthValidator,
    DayOfWeekValidator,
    FieldValidator,
    MonthValidator,
    TimeFieldValidator,
)

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Outcome of validating one expression.

    Attributes:
        valid: Whether every checked field passed
        diagnostics: Failed checks in the order they happened
        expression: Split expression, None when splitting failed
    """

    valid: bool
    diagnostics: list[Diagnostic] = field(default_factory=list)
    expression: CronExpression | None = None

    @property
    def errors(self) -> list[str]:
        return [d.message for d in self.diagnostics]

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "errors": self.errors,
        }


class QuartzCronValidator:
    """Validate Quartz cron expressions.

    The validator keeps no per-call state, every call starts with an empty
    list of diagnostics.

    Args:
        config: Validator configuration (defaults to ValidatorConfig())
    """

    def __init__(self, config: ValidatorConfig | None = None):
        self.config = config or ValidatorConfig()

    def validate(self, expression: str, verbose: bool | None = None) -> bool | ValidationResult:
        """Validate an expression.

        Args:
            expression: Cron expression to validate
            verbose: Override config.verbose for this call

        Returns:
            ValidationResult when verbose, otherwise just the verdict
        """
        result = self.check(expression)
        if verbose is None:
            verbose = self.config.verbose
        return result if verbose else result.valid

    def check(self, expression: str) -> ValidationResult:
        """Validate an expression and always return the full result.

        Raises:
            TypeError: If expression is not a string
        """
        logger.debug("Validating cron expression %r", expression)

        try:
            cron = CronExpression.from_string(
                expression, collapse_whitespace=self.config.collapse_whitespace
            )
        except MalformedExpressionError as e:
            logger.debug("Malformed cron expression %r: %s", expression, e.diagnostic.message)
            return ValidationResult(valid=False, diagnostics=[e.diagnostic])

        diagnostics: list[Diagnostic] = []
        valid = True

        for cron_field, token in cron.fields():
            field_validator = self._field_validator(cron_field, cron, diagnostics)
            if not field_validator.validate(token):
                valid = False
                if self.config.fail_fast:
                    break

        logger.debug(
            "Cron expression %r is %s (%d diagnostics)",
            expression,
            "valid" if valid else "invalid",
            len(diagnostics),
        )
        return ValidationResult(valid=valid, diagnostics=diagnostics, expression=cron)

    def _field_validator(
        self,
        cron_field: CronField,
        cron: CronExpression,
        diagnostics: list[Diagnostic],
    ) -> FieldValidator:
        if cron_field is CronField.DAY_OF_MONTH:
            return DayOfMonthValidator(diagnostics, sibling=cron.day_of_week)
        if cron_field is CronField.MONTH:
            return MonthValidator(diagnostics)
        if cron_field is CronField.DAY_OF_WEEK:
            return DayOfWeekValidator(diagnostics, sibling=cron.day_of_month)
        if cron_field is CronField.YEAR:
            return TimeFieldValidator(cron_field, diagnostics, bounds=self.config.year_bounds)
        return TimeFieldValidator(cron_field, diagnostics)

    def __repr__(self) -> str:
        return f"QuartzCronValidator({self.config!r})"


def validate(
    expression: str,
    verbose: bool | None = None,
    config: ValidatorConfig | None = None,
) -> bool | ValidationResult:
    """Validate a Quartz cron expression.

    Args:
        expression: Cron expression (6 or 7 fields)
        verbose: Return a ValidationResult with diagnostics instead of a bool
            (defaults to config.verbose)
        config: Optional validator configuration

    Returns:
        bool, or ValidationResult when verbose
    """
    return QuartzCronValidator(config).validate(expression, verbose=verbose)


def ensure_valid(expression: str, config: ValidatorConfig | None = None) -> CronExpression:
    """Validate an expression and return its fields.

    Args:
        expression: Cron expression (6 or 7 fields)
        config: Optional validator configuration

    Returns:
        The split CronExpression

    Raises:
        InvalidCronExpressionError: If the expression is not valid
    """
    result = QuartzCronValidator(config).check(expression)
    if not result.valid:
        raise InvalidCronExpressionError(expression, result.diagnostics)
    return result.expression
