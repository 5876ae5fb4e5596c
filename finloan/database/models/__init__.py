from finloan.database.models.loan_service_model import LoanService
from finloan.database.models.loan_request_model import LoanRequest
from finloan.database.models.member_model import Member

DOCUMENT_MODELS = [LoanService, LoanRequest, Member]
