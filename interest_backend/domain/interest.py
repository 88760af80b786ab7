from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

MAX_PRINCIPAL = 999_999_999_999
MAX_RATE_PERCENT = 100.0
MAX_TIME_YEARS = 100.0
DEFAULT_FREQUENCY = 12


class CalculationMode(str, Enum):
    SIMPLE = "simple"
    COMPOUND = "compound"


class ValidationErrorKind(str, Enum):
    MISSING_FIELD = "missing_field"
    NOT_A_NUMBER = "not_a_number"
    NON_POSITIVE = "non_positive"
    OUT_OF_RANGE = "out_of_range"
    INVALID_FREQUENCY = "invalid_frequency"


class InterestValidationError(ValueError):
    def __init__(
        self,
        kind: ValidationErrorKind,
        message: str,
        field: Optional[str] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.field = field

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "message": self.message, "field": self.field}


@dataclass(frozen=True)
class ValidatedInput:
    principal: float
    annual_rate_percent: float
    time_years: float
    compounding_frequency_per_year: int = DEFAULT_FREQUENCY


@dataclass(frozen=True)
class ModeDescription:
    mode: CalculationMode
    title: str
    description: str
    formula: str


MODE_DESCRIPTIONS = {
    CalculationMode.SIMPLE: ModeDescription(
        mode=CalculationMode.SIMPLE,
        title="Simple Interest",
        description=(
            "Interest is earned on the initial principal only. "
            "Suited to short-term investments or plain loans."
        ),
        formula="Interest = Principal x Rate x Time",
    ),
    CalculationMode.COMPOUND: ModeDescription(
        mode=CalculationMode.COMPOUND,
        title="Compound Interest",
        description=(
            "Interest is earned on the principal plus previously accrued interest. "
            "Suited to long-term investments with exponential growth."
        ),
        formula="Total = Principal x (1 + Rate / Frequency)^(Frequency x Time)",
    ),
}
