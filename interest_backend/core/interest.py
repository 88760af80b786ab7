"""Simple and compound interest calculations."""

import logging
from typing import Union

from interest_backend.domain.interest import CalculationMode, ValidatedInput
from interest_backend.models import Comparison, CompoundResult, SimpleResult

logger = logging.getLogger(__name__)


def simple_interest(principal: float, rate_percent: float, time_years: float) -> SimpleResult:
    """Interest accrues on the original principal only: I = P * r * t."""
    rate = rate_percent / 100
    interest = principal * rate * time_years
    total = principal + interest

    return SimpleResult(
        principal=principal,
        interest=interest,
        total=total,
        rate_percent=rate_percent,
        time_years=time_years,
    )


def compound_interest(
    principal: float,
    rate_percent: float,
    time_years: float,
    frequency: int,
) -> CompoundResult:
    """Interest is added to the balance ``frequency`` times a year: A = P(1 + r/n)^(nt).

    The exponent is a real number whenever ``time_years`` is fractional, so the
    float power is used rather than repeated multiplication.
    """
    rate = rate_percent / 100
    amount = principal * (1 + rate / frequency) ** (frequency * time_years)
    interest = amount - principal
    # keep total == principal + interest exact for the consumer
    total = principal + interest

    return CompoundResult(
        principal=principal,
        interest=interest,
        total=total,
        rate_percent=rate_percent,
        time_years=time_years,
        compounding_frequency_per_year=frequency,
    )


def calculate(
    mode: CalculationMode, validated: ValidatedInput
) -> Union[SimpleResult, CompoundResult]:
    """Run the calculation selected by ``mode`` on already validated input."""
    mode = CalculationMode(mode)
    if mode is CalculationMode.SIMPLE:
        result = simple_interest(
            validated.principal,
            validated.annual_rate_percent,
            validated.time_years,
        )
    else:
        result = compound_interest(
            validated.principal,
            validated.annual_rate_percent,
            validated.time_years,
            validated.compounding_frequency_per_year,
        )

    logger.debug("calculated %s interest: %s", mode.value, result.model_dump())
    return result


def compare_with_simple(result: CompoundResult) -> Comparison:
    """Total the same deposit would reach without compounding, and the gain over it."""
    baseline = simple_interest(result.principal, result.rate_percent, result.time_years)
    return Comparison(
        simple_total=baseline.total,
        difference=result.total - baseline.total,
    )
