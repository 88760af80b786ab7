from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr


class SimpleResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["simple"] = "simple"
    principal: float
    interest: float
    total: float
    rate_percent: float
    time_years: float


class CompoundResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["compound"] = "compound"
    principal: float
    interest: float
    total: float
    rate_percent: float
    time_years: float
    compounding_frequency_per_year: int = Field(gt=0)


CalculationResult = Annotated[
    Union[SimpleResult, CompoundResult],
    Field(discriminator="kind"),
]


class Comparison(BaseModel):
    """What the same deposit would reach with simple interest, and the gap."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    simple_total: float
    difference: float


# no coercion here; validate() decides what counts as a number
RawNumber = Optional[Union[StrictBool, StrictInt, StrictFloat, StrictStr]]


class RawInput(BaseModel):
    """Form values as the caller received them, before any parsing."""

    model_config = ConfigDict(extra="forbid")

    principal: RawNumber = None
    annualRatePercent: RawNumber = None
    timeYears: RawNumber = None
    compoundingFrequencyPerYear: RawNumber = None
