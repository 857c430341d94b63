"""User Profile Response Models."""

from datetime import date

from pydantic import BaseModel, Field


class ProfileResponse(BaseModel):
    """
    Normalized user profile.

    Attributes:
        user_id: Primary key (absent for unsaved profiles)
        public_id: Public identifier (absent for unsaved profiles)
        user_name: Normalized user name
        first_name: Normalized given name
        last_name: Normalized family name
        email: Normalized e-mail address
        phone: Normalized phone number
        birth_date: Birth date
        age: Age in completed years, if the birth date is known
    """

    user_id: int | None = Field(None, description="User ID")
    public_id: str | None = Field(None, description="Public identifier")
    user_name: str = Field(..., description="User name")
    first_name: str | None = Field(None, description="Given name")
    last_name: str | None = Field(None, description="Family name")
    email: str | None = Field(None, description="E-mail address")
    phone: str | None = Field(None, description="Phone number")
    birth_date: date | None = Field(None, description="Birth date")
    age: int | None = Field(None, description="Age in completed years", ge=0)
