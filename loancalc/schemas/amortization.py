"""Data contracts for the amortization endpoint.

Field names follow the payload the loan form posts and the DTO the results
page reads, so they stay camelCase.
"""

from __future__ import annotations

from typing import Any, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from loancalc.core.frequency import CONTINUOUS, payment_frequency, resolve_frequency
from loancalc.domain.loan import AmortizationResult, LoanRequest, round_money

MONTHS_PER_YEAR = 12


class AmortizationRequest(BaseModel):
    """Loan form inputs after presentation-level parsing."""

    model_config = ConfigDict(extra="forbid")

    loanAmount: float = Field(..., gt=0, description="Amount borrowed.")
    interestRate: float = Field(
        ...,
        ge=0,
        description="Nominal annual rate in percent (e.g. 5.5 for 5.5%).",
    )
    loanTermYears: float = Field(
        ...,
        ge=0,
        le=100,
        validation_alias=AliasChoices("loanTermYears", "loanTerm"),
        description="Whole or fractional years of the term; the form posts it as loanTerm.",
    )
    loanTermMonths: int = Field(0, ge=0, le=1200, description="Months added on top of loanTermYears.")
    paymentFrequency: Union[int, str] = Field(
        "Monthly",
        description="Payments per year, or a label such as 'Monthly' or 'Weekly'.",
    )
    compoundFrequency: Union[int, str] = Field(
        "Monthly",
        description="Compounding periods per year, or a label such as 'Quarterly' or 'Continuously'.",
    )
    loanType: Literal["Fixed"] = "Fixed"
    additionalFees: Optional[float] = Field(None, description="Accepted only when left blank.")
    gracePeriod: Optional[float] = Field(None, description="Accepted only when left blank.")

    @field_validator("loanTermMonths", mode="before")
    @classmethod
    def blank_months_are_zero(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0
        return value

    @field_validator("additionalFees", "gracePeriod", mode="before")
    @classmethod
    def reject_unsupported_terms(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        raise ValueError("fees and grace periods are not part of a fixed-rate schedule; leave blank")

    @model_validator(mode="after")
    def ensure_term(self) -> "AmortizationRequest":
        if self.term_years <= 0:
            raise ValueError("loan term must be longer than zero")
        return self

    @property
    def term_years(self) -> float:
        return self.loanTermYears + self.loanTermMonths / MONTHS_PER_YEAR

    def to_loan_request(self) -> LoanRequest:
        """Resolve frequency labels; raises InvalidInputError for unknown ones."""
        payments = payment_frequency(self.paymentFrequency)
        compounding = resolve_frequency(self.compoundFrequency, "compoundFrequency")
        continuous = compounding == CONTINUOUS
        return LoanRequest(
            principal=self.loanAmount,
            annual_rate_percent=self.interestRate,
            term_years=self.term_years,
            payments_per_year=payments,
            compounding_per_year=payments if continuous else compounding,
            continuous_compounding=continuous,
        )


class AmortizationEntry(BaseModel):
    """Single row of an amortization schedule."""

    period: int = Field(..., ge=1)
    beginningBalance: float = Field(..., ge=0)
    interest: float = Field(..., ge=0)
    principal: float = Field(..., ge=0)
    endingBalance: float = Field(..., ge=0)


class AmortizationResponse(BaseModel):
    """Summary figures, schedule and chart series, rounded for display."""

    paymentPerPeriod: float
    totalPayments: float
    totalInterest: float
    # paymentPerPeriod as displayed, times numberOfPeriods
    totalOfRoundedPayments: float
    numberOfPeriods: int = Field(..., ge=1)
    paymentsPerYear: int = Field(..., ge=1)
    compoundingPerYear: Union[int, Literal["continuous"]]
    amortizationEntries: List[AmortizationEntry]
    principalData: List[float]
    interestData: List[float]
    loanBalanceData: List[float]

    @classmethod
    def from_result(cls, result: AmortizationResult, request: LoanRequest) -> "AmortizationResponse":
        entries = [
            AmortizationEntry(
                period=row.period,
                beginningBalance=row.beginning_balance,
                interest=row.interest,
                principal=row.principal,
                endingBalance=row.ending_balance,
            )
            for row in (entry.rounded() for entry in result.schedule)
        ]
        return cls(
            paymentPerPeriod=round_money(result.periodic_payment),
            totalPayments=round_money(result.total_paid),
            totalInterest=round_money(result.total_interest),
            totalOfRoundedPayments=round_money(round_money(result.periodic_payment) * result.number_of_periods),
            numberOfPeriods=result.number_of_periods,
            paymentsPerYear=request.payments_per_year,
            compoundingPerYear=CONTINUOUS if request.continuous_compounding else request.compounding_per_year,
            amortizationEntries=entries,
            principalData=[round_money(value) for value in result.principal_series()],
            interestData=[round_money(value) for value in result.interest_series()],
            loanBalanceData=[round_money(value) for value in result.balance_series()],
        )
