"""Response envelopes shared by every provisioning service."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CamelModel(BaseModel):
    """Accept snake_case or camelCase input, emit camelCase."""

    model_config = ConfigDict(populate_by_name=True)


class ResponseSchema(CamelModel):
    status_code: str = Field(..., alias="statusCode", description="Status code of the response")
    status_message: str = Field(..., alias="statusMessage", description="Status message of the response")


class ErrorResponseSchema(CamelModel):
    api_path: str = Field(..., alias="apiPath", description="API path which caused the error")
    error_code: str = Field(..., alias="errorCode")
    error_message: str = Field(..., alias="errorMessage")
    error_time: datetime = Field(..., alias="errorTime")


class ContactDetails(CamelModel):
    name: str
    email: str


class ContactInfoSchema(CamelModel):
    message: str
    contact_details: ContactDetails = Field(..., alias="contactDetails")
    on_call_support: List[str] = Field(default_factory=list, alias="onCallSupport")
