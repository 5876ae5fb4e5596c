from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegistrationPayload(BaseModel):
    """Body of ``POST /member``."""

    model_config = ConfigDict(extra="forbid")

    mobile: int = Field(..., description="Mobile number of the member")
    email: EmailStr = Field(..., description="Email address of the member")
    occupation: str = Field(..., min_length=1, description="Occupation of the member")
    createpassword: str = Field(..., min_length=1, description="Password chosen at registration")
