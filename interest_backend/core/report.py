"""Validate, calculate and format in one step for the presentation layers."""

from typing import Any, Mapping, Union

from interest_backend.core.formatting import format_rupiah
from interest_backend.core.interest import calculate, compare_with_simple
from interest_backend.core.validation import validate
from interest_backend.domain.interest import (
    DEFAULT_FREQUENCY,
    MODE_DESCRIPTIONS,
    CalculationMode,
)
from interest_backend.models import CompoundResult, RawInput
from interest_backend.schemas.interest import (
    CalculationResponse,
    FormattedAmounts,
    ModeInfo,
    ModesResponse,
)


def calculation_report(
    mode: Union[CalculationMode, str],
    raw: Union[RawInput, Mapping[str, Any]],
) -> CalculationResponse:
    """Raises ``InterestValidationError`` before any calculation when ``raw`` is invalid."""
    mode = CalculationMode(mode)
    validated = validate(raw, mode)
    result = calculate(mode, validated)

    formatted = FormattedAmounts(
        principal=format_rupiah(result.principal),
        interest=format_rupiah(result.interest),
        total=format_rupiah(result.total),
    )

    comparison = None
    if isinstance(result, CompoundResult):
        comparison = compare_with_simple(result)
        formatted.simple_total = format_rupiah(comparison.simple_total)
        formatted.difference = format_rupiah(comparison.difference)

    return CalculationResponse(result=result, comparison=comparison, formatted=formatted)


def available_modes() -> ModesResponse:
    return ModesResponse(
        modes=[
            ModeInfo(
                mode=description.mode.value,
                title=description.title,
                description=description.description,
                formula=description.formula,
            )
            for description in MODE_DESCRIPTIONS.values()
        ],
        default_frequency=DEFAULT_FREQUENCY,
    )
