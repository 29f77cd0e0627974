"""Loan schema for the loans service."""

from pydantic import Field

from provisioning.domain.identifiers import MOBILE_PATTERN

from .common import CamelModel


class LoanSchema(CamelModel):
    mobile_number: str = Field(..., alias="mobileNumber", pattern=MOBILE_PATTERN.pattern, examples=["9848149507"])
    loan_number: str = Field(..., alias="loanNumber", pattern=r"^\d{13}$", examples=["5486302957131"])
    loan_type: str = Field(..., alias="loanType", min_length=1, examples=["Home Loan"])
    total_loan: int = Field(..., alias="totalLoan", gt=0, examples=[100000])
    amount_paid: int = Field(..., alias="amountPaid", ge=0, examples=[20000])
    outstanding_amount: int = Field(..., alias="outstandingAmount", ge=0, examples=[80000])
