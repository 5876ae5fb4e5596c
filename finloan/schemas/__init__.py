from finloan.schemas.loan_schema import (
    EnquiryPayload,
    EnquiryUpdate,
    LoanProductSummary,
    LoanProductDetail,
    InterestQuote,
    LoanEnquiryRecord,
)
from finloan.schemas.member_schema import RegistrationPayload
