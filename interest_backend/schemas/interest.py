"""Data contracts for the interest calculation endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field

from interest_backend.models import CalculationResult, Comparison


class FormattedAmounts(BaseModel):
    """Rupiah strings ready for display."""

    principal: str
    interest: str
    total: str
    simple_total: Optional[str] = None
    difference: Optional[str] = None


class CalculationResponse(BaseModel):
    """Result of one calculation, with the simple-interest comparison for compound mode."""

    result: CalculationResult
    comparison: Optional[Comparison] = None
    formatted: FormattedAmounts


class ErrorDetail(BaseModel):
    kind: str
    message: str
    field: Optional[str] = None


class ErrorResponse(BaseModel):
    error: ErrorDetail


class ModeInfo(BaseModel):
    mode: str
    title: str
    description: str
    formula: str


class ModesResponse(BaseModel):
    """Available calculation modes and the form defaults."""

    modes: List[ModeInfo]
    default_frequency: int = Field(..., gt=0)
