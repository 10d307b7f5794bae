import os
from dataclasses import dataclass
from typing import Any

from quartzcron.constants import YEARS_BOUNDARIES


@dataclass
class ValidatorConfig:
    """Options for QuartzCronValidator.

    Args:
        verbose: Return a ValidationResult instead of a bare bool
        fail_fast: Stop at the first failing field (otherwise every field is
            checked and all diagnostics are collected)
        min_year: Lower bound of the year field
        max_year: Upper bound of the year field
        current_year: When set, replaces min_year so that past years are rejected
        collapse_whitespace: Split fields on any run of whitespace instead of
            single spaces
    """
    verbose: bool = False
    fail_fast: bool = True
    min_year: int = YEARS_BOUNDARIES[0]
    max_year: int = YEARS_BOUNDARIES[1]
    current_year: int | None = None
    collapse_whitespace: bool = False

    def __post_init__(self):
        """Validate validator configuration."""
        if self.min_year > self.max_year:
            raise ValueError("min_year must not be greater than max_year")

        if self.current_year is not None and self.current_year > self.max_year:
            raise ValueError("current_year must not be greater than max_year")

    @property
    def year_bounds(self) -> tuple[int, int]:
        if self.current_year is not None:
            return (self.current_year, self.max_year)
        return (self.min_year, self.max_year)

    @classmethod
    def from_env(cls, prefix: str = "QUARTZCRON_") -> "ValidatorConfig":
        """Load configuration from environment variables using mappings."""

        def get_env(key: str, default: Any = None, type_cast: type = str) -> Any:
            value = os.getenv(f"{prefix}{key.upper()}")

            if value is None:
                return default
            if type_cast == bool:
                return value.lower() in ('true', '1', 'yes', 'on')
            elif type_cast == int:
                return int(value)
            else:
                return value

        config_map = {
            "verbose": ("verbose", bool, False),
            "fail_fast": ("fail_fast", bool, True),
            "min_year": ("min_year", int, YEARS_BOUNDARIES[0]),
            "max_year": ("max_year", int, YEARS_BOUNDARIES[1]),
            "current_year": ("current_year", int, None),
            "collapse_whitespace": ("collapse_whitespace", bool, False),
        }

        kwargs = {}
        for field, (env_name, type_cast, default) in config_map.items():
            kwargs[field] = get_env(env_name, default=default, type_cast=type_cast)

        return cls(**kwargs)
