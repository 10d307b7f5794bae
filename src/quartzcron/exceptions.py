"""Custom exceptions for quartzcron."""

from quartzcron.diagnostics import Diagnostic


class QuartzCronError(Exception):
    pass


class MalformedExpressionError(QuartzCronError, ValueError):
    """Raised when an expression cannot be split into cron fields."""

    def __init__(self, expression: str, diagnostic: Diagnostic):
        self.expression = expression
        self.diagnostic = diagnostic
        super().__init__(f"Malformed cron expression '{expression}': {diagnostic.message}")


class InvalidCronExpressionError(QuartzCronError, ValueError):
    """Raised by ensure_valid() when an expression fails validation."""

    def __init__(self, expression: str, diagnostics: list[Diagnostic]):
        self.expression = expression
        self.diagnostics = list(diagnostics)
        details = "; ".join(d.message for d in self.diagnostics) or "invalid"
        super().__init__(f"Invalid cron expression '{expression}': {details}")

    @property
    def errors(self) -> list[str]:
        return [d.message for d in self.diagnostics]
