from beanie import Document
from pydantic import Field
from typing import Optional


class LoanRequest(Document):
    mobile: int = Field(..., description="Mobile number of the enquirer, used for lookups")
    email: str = Field(..., description="Email address of the enquirer")
    amount: float = Field(..., alias="amt", description="Requested loan amount")
    type: str = Field(..., description="Loan product type the enquiry refers to")
    message: Optional[str] = Field(None, alias="msg", description="Free-form message from the enquirer")
    code: Optional[str] = Field(None, description="Referral or promo code")

    class Settings:
        name = "requests"
        indexes = ["mobile"]

    class Config:
        populate_by_name = True
