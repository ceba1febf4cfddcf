"""
Pydantic models for provider data.

``ProviderCreate`` carries the validation rules for new providers and
is used both as the request body of ``POST /api/providers`` and by the
service layer for seed records.  ``ProviderRead`` is what the API
returns.  Timestamps are exposed in camelCase (``createdAt``/
``updatedAt``) because that is the shape existing front ends read.
"""

import math
from typing import Any, Dict, Iterable, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr, field_validator

REQUIRED_FIELDS = ("provider_id", "name", "price", "website_link")
TEXT_FIELDS = ("provider_id", "name", "website_link")

MISSING_FIELDS_MESSAGE = "All fields are required"
INVALID_PRICE_MESSAGE = "Price must be a positive number"
NOT_AN_OBJECT_MESSAGE = "Provider must be a JSON object"


class ProviderBase(BaseModel):
    provider_id: str = Field(..., examples=["iso_001"])
    name: str = Field(..., examples=["ISO Insurance"])
    # Integral prices stay ints so that 450 is not rendered as 450.0.
    price: Union[int, float] = Field(..., examples=[450])
    website_link: str = Field(..., examples=["https://www.isoa.org"])


class ProviderCreate(ProviderBase):
    """Schema for creating a provider.

    Text fields must be non‑blank strings; ``price`` must be a JSON
    number (not a numeric string or boolean), finite and not negative.
    Unknown keys are ignored.
    """

    provider_id: StrictStr = Field(..., examples=["iso_001"])
    name: StrictStr = Field(..., examples=["ISO Insurance"])
    price: Union[StrictInt, StrictFloat] = Field(..., examples=[450])
    website_link: StrictStr = Field(..., examples=["https://www.isoa.org"])

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "provider_id": "iso_001",
                    "name": "ISO Insurance",
                    "price": 450,
                    "website_link": "https://www.isoa.org",
                }
            ]
        }
    }

    @field_validator("provider_id", "name", "website_link")
    @classmethod
    def validate_not_blank(cls, v):
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("price")
    @classmethod
    def validate_price(cls, v):
        if not math.isfinite(v) or v < 0:
            raise ValueError(INVALID_PRICE_MESSAGE)
        return v


def describe_provider_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """Collapse pydantic errors for ``ProviderCreate`` into one message.

    Checks run in the order the API has always reported them: body
    shape, missing or blank fields, non‑string text fields, then price.
    """
    errors = list(errors)
    if any(not err.get("loc") for err in errors):
        return NOT_AN_OBJECT_MESSAGE
    for err in errors:
        field = err["loc"][0]
        if field not in REQUIRED_FIELDS:
            continue
        if err.get("type") == "missing" or err.get("input") is None:
            return MISSING_FIELDS_MESSAGE
        if field in TEXT_FIELDS and err.get("type") == "value_error":
            return MISSING_FIELDS_MESSAGE
    for err in errors:
        if err["loc"][0] in TEXT_FIELDS:
            return f"{err['loc'][0]} must be a string"
    for err in errors:
        if err["loc"][0] == "price":
            return INVALID_PRICE_MESSAGE
    return str(errors[0].get("msg", "Invalid provider"))


class ProviderRead(ProviderBase):
    """Schema for reading a provider from the API."""

    created_at: str = Field(..., alias="createdAt")
    updated_at: str = Field(..., alias="updatedAt")

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str = "OK"
    message: str


class SeedResponse(BaseModel):
    message: str
    count: int


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    error: str
