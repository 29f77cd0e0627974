"""Customer and account schemas for the accounts service."""

from typing import Optional

from pydantic import Field

from provisioning.domain.identifiers import MOBILE_PATTERN

from .common import CamelModel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class AccountSchema(CamelModel):
    account_number: Optional[int] = Field(
        None, alias="accountNumber", ge=100_000_000, le=999_999_999, examples=[123456789]
    )
    account_type: Optional[str] = Field(None, alias="accountType", min_length=1, examples=["Savings"])
    branch_address: Optional[str] = Field(
        None, alias="branchAddress", min_length=1, examples=["123 Main Street, New York"]
    )


class CustomerSchema(CamelModel):
    """Customer details plus, on fetch and update, the linked account."""

    name: str = Field(..., min_length=3, max_length=50, examples=["John Doe"])
    email: str = Field(..., pattern=EMAIL_PATTERN, examples=["john.doe@example.com"])
    mobile_number: str = Field(..., alias="mobileNumber", pattern=MOBILE_PATTERN.pattern, examples=["9848149507"])
    account: Optional[AccountSchema] = Field(None, alias="accountsDto")
