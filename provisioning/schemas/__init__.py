"""Pydantic request/response schemas (camelCase on the wire)."""

from .card import CardSchema
from .common import ContactInfoSchema, ErrorResponseSchema, ResponseSchema
from .customer import AccountSchema, CustomerSchema
from .loan import LoanSchema

__all__ = [
    "AccountSchema",
    "CardSchema",
    "ContactInfoSchema",
    "CustomerSchema",
    "ErrorResponseSchema",
    "LoanSchema",
    "ResponseSchema",
]
