from beanie import Document
from pydantic import Field


class Member(Document):
    mobile: int = Field(..., description="Mobile number of the member, used for lookups")
    email: str = Field(..., description="Email address of the member")
    occupation: str = Field(..., description="Occupation of the member")
    password_hash: str = Field(..., description="bcrypt hash of the member password")

    class Settings:
        name = "members"
        indexes = ["mobile"]
