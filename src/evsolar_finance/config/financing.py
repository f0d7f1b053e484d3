"""Financing — cash purchase or amortizing loan."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class FinancingConfig(BaseModel):
    """How the net project cost is paid for.

    Loan fields are ignored when ``mode == "cash"``.  The APR is in
    percent points (5.0 = 5%), matching how lenders quote it.
    """

    model_config = ConfigDict(frozen=True)

    mode: Literal["cash", "loan"] = Field(default="loan", description="'cash' or 'loan'")
    apr_pct: float = Field(default=5.0, ge=0, le=100, description="Annual percentage rate (percent points)")
    term_years: int = Field(default=10, ge=1, le=50, description="Loan term (years)")
    down_payment: float = Field(default=20_000.0, ge=0, description="Upfront payment; the rest is borrowed ($)")
