from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional, Union


class EnquiryPayload(BaseModel):
    """Body of ``POST /service/{type}/form``."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    mobile: int = Field(..., description="Mobile number of the enquirer")
    email: EmailStr = Field(..., description="Email address of the enquirer")
    amount: float = Field(..., alias="amt", description="Requested loan amount")
    type: str = Field(..., min_length=1, description="Loan product type")
    message: Optional[str] = Field(None, alias="msg", min_length=1, description="Optional message")
    code: Optional[str] = Field(None, min_length=1, description="Optional referral code")


class EnquiryUpdate(BaseModel):
    """Fields of an enquiry that ``PUT /updaterequest`` may change.

    Anything else in the request body, including the ``mobile`` lookup key,
    is dropped before the patch reaches the store.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    # required on the stored record: may be omitted here, never set to null
    email: EmailStr = None
    amount: float = Field(None, alias="amt")
    type: str = Field(None, min_length=1)
    message: Optional[str] = Field(None, alias="msg")
    code: Optional[str] = None

    def to_patch(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class LoanProductSummary(BaseModel):
    type: str
    description: Optional[str] = None
    imgUrl: Optional[str] = None


class LoanProductDetail(BaseModel):
    id: Optional[str] = None
    type: str
    description: Optional[str] = None
    interestRate: float
    maxAmount: Optional[float] = None
    tenure: Optional[int] = None
    imgUrl: Optional[str] = None


class InterestQuote(BaseModel):
    totalAmount: Union[int, float]
    interest: Union[int, float]
    loanAmount: Union[int, float]
    tenure: Union[int, float]


class LoanEnquiryRecord(BaseModel):
    id: Optional[str] = None
    mobile: int
    email: str
    amt: float
    type: str
    msg: Optional[str] = None
    code: Optional[str] = None
