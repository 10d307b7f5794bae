"""quartzcron - Quartz scheduler cron expression validation.

Validates six- or seven-field Quartz cron expressions
(seconds minutes hours day-of-month month day-of-week [year]).

Basic usage:
    from quartzcron import validate

    validate("0 15 10 ? * MON-FRI")          # True
    validate("* * * * * *")                  # False, both day fields are *

    result = validate("0 0 0 * * ? * *", verbose=True)
    print(result.to_dict())
    # {'valid': False, 'errors': ['Unexpected Expression: out of boundaries']}

Reusing a configured validator:
    from quartzcron import QuartzCronValidator, ValidatorConfig

    validator = QuartzCronValidator(ValidatorConfig(current_year=2026, fail_fast=False))
    result = validator.check("0 0 0 ? * MON#6 2020")
    for diagnostic in result.diagnostics:
        print(diagnostic.kind, diagnostic.field, diagnostic.token)
"""

__version__ = "0.1.0"

from quartzcron.validator import QuartzCronValidator, ValidationResult, validate, ensure_valid
from quartzcron.expression import CronExpression
from quartzcron.constants import CronField
from quartzcron.diagnostics import Diagnostic, DiagnosticKind, format_diagnostic
from quartzcron.config import ValidatorConfig
from quartzcron.exceptions import (
    QuartzCronError,
    MalformedExpressionError,
    InvalidCronExpressionError,
)

__all__ = [
    # Validation
    "validate",
    "ensure_valid",
    "QuartzCronValidator",
    "ValidationResult",
    # Configuration
    "ValidatorConfig",
    # Models
    "CronExpression",
    "CronField",
    "Diagnostic",
    "DiagnosticKind",
    "format_diagnostic",
    # Exceptions
    "QuartzCronError",
    "MalformedExpressionError",
    "InvalidCronExpressionError",
]
