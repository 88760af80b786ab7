"""Input checks applied before any interest calculation.

Checks run in a fixed order and the first failure is reported, so the
message a user sees is always the most basic thing wrong with the form:
missing values, then unparseable ones, then non-positive ones, then values
past their upper bound, and finally the compounding frequency (skipped for
simple interest, which has no use for it).
"""

import math
import re
from typing import Any, Dict, Mapping, Optional, Union

from interest_backend.domain.interest import (
    DEFAULT_FREQUENCY,
    MAX_PRINCIPAL,
    MAX_RATE_PERCENT,
    MAX_TIME_YEARS,
    CalculationMode,
    InterestValidationError,
    ValidatedInput,
    ValidationErrorKind,
)
from interest_backend.models import RawInput

# plain decimal notation only: no digit separators, no nan/inf words
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

REQUIRED_FIELDS = ("principal", "annualRatePercent", "timeYears")

UPPER_BOUNDS = (
    ("principal", MAX_PRINCIPAL, "Principal is too large. The maximum is 999 billion."),
    ("annualRatePercent", MAX_RATE_PERCENT, "Interest rate is too high. The maximum is 100%."),
    ("timeYears", MAX_TIME_YEARS, "Time period is too long. The maximum is 100 years."),
)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_number(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError("booleans are not numbers")
    if isinstance(value, str):
        value = value.strip()
        if not NUMBER_PATTERN.fullmatch(value):
            raise ValueError(f"{value!r} is not a plain decimal number")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{value!r} is not finite")
    return number


def _parse_frequency(value: Any) -> int:
    if _is_blank(value):
        return DEFAULT_FREQUENCY

    try:
        number = _parse_number(value)
    except (TypeError, ValueError):
        number = None

    if number is None or not number.is_integer() or number <= 0:
        raise InterestValidationError(
            ValidationErrorKind.INVALID_FREQUENCY,
            "Compounding frequency must be a whole number greater than 0.",
            field="compoundingFrequencyPerYear",
        )
    return int(number)


def validate(
    raw: Union[RawInput, Mapping[str, Any]],
    mode: Optional[CalculationMode] = None,
) -> ValidatedInput:
    """Normalize raw form values or raise ``InterestValidationError``.

    The compounding frequency is only checked when ``mode`` is not
    ``CalculationMode.SIMPLE``; simple interest never reads it.
    """
    if not isinstance(raw, RawInput):
        raw = RawInput.model_validate(dict(raw))

    for name in REQUIRED_FIELDS:
        if _is_blank(getattr(raw, name)):
            raise InterestValidationError(
                ValidationErrorKind.MISSING_FIELD,
                "All fields must be filled in.",
                field=name,
            )

    values: Dict[str, float] = {}
    for name in REQUIRED_FIELDS:
        try:
            values[name] = _parse_number(getattr(raw, name))
        except (TypeError, ValueError):
            raise InterestValidationError(
                ValidationErrorKind.NOT_A_NUMBER,
                "Input must be a valid number.",
                field=name,
            ) from None

    for name in REQUIRED_FIELDS:
        if values[name] <= 0:
            raise InterestValidationError(
                ValidationErrorKind.NON_POSITIVE,
                "All values must be greater than 0.",
                field=name,
            )

    for name, maximum, message in UPPER_BOUNDS:
        if values[name] > maximum:
            raise InterestValidationError(
                ValidationErrorKind.OUT_OF_RANGE, message, field=name
            )

    if mode is not None and CalculationMode(mode) is CalculationMode.SIMPLE:
        frequency = DEFAULT_FREQUENCY
    else:
        frequency = _parse_frequency(raw.compoundingFrequencyPerYear)

    return ValidatedInput(
        principal=values["principal"],
        annual_rate_percent=values["annualRatePercent"],
        time_years=values["timeYears"],
        compounding_frequency_per_year=frequency,
    )
