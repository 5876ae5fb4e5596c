from beanie import Document
from pydantic import Field
from typing import Optional


class LoanService(Document):
    type: str = Field(..., description="Loan product identifier, e.g. 'personal'")
    description: Optional[str] = Field(None, description="Human readable description of the product")
    interest_rate: float = Field(..., alias="interestRate", description="Whole-number percent per tenure unit")
    max_amount: Optional[float] = Field(None, alias="maxAmount", description="Largest amount offered for this product")
    tenure: Optional[int] = Field(None, description="Tenure offered for this product")
    img_url: Optional[str] = Field(None, alias="imgUrl", description="Reference to the product image")

    class Settings:
        name = "services"
        indexes = ["type"]

    class Config:
        populate_by_name = True
