"""User Profile Request Models."""

from pydantic import BaseModel, Field


class ProfileRequest(BaseModel):
    """
    Raw profile fields as submitted by a client.

    Values are untrusted text; normalization and validation happen in the
    domain value objects, not here.

    Attributes:
        user_name: Unique user name
        first_name: Given name (optional)
        last_name: Family name (optional)
        email: E-mail address (optional)
        phone: Phone number (optional)
        birth_date: Birth date as YYYYMMDD (optional)
    """

    user_name: str = Field(..., description="User name")
    first_name: str | None = Field(None, description="Given name")
    last_name: str | None = Field(None, description="Family name")
    email: str | None = Field(None, description="E-mail address")
    phone: str | None = Field(None, description="Phone number")
    birth_date: str | None = Field(
        None,
        description="Birth date in YYYYMMDD form",
        json_schema_extra={"example": "19900115"},
    )
