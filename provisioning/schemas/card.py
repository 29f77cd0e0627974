"""Card schema for the cards service."""

from pydantic import Field

from provisioning.domain.identifiers import MOBILE_PATTERN

from .common import CamelModel


class CardSchema(CamelModel):
    mobile_number: str = Field(..., alias="mobileNumber", pattern=MOBILE_PATTERN.pattern, examples=["9848149507"])
    card_number: str = Field(..., alias="cardNumber", pattern=r"^\d{12}$", examples=["100646930341"])
    card_type: str = Field(..., alias="cardType", min_length=1, examples=["Credit Card"])
    total_limit: int = Field(..., alias="totalLimit", gt=0, examples=[100000])
    amount_used: int = Field(..., alias="amountUsed", ge=0, examples=[1000])
    available_amount: int = Field(..., alias="availableAmount", ge=0, examples=[99000])
