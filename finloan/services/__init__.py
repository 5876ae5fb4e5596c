from finloan.services.catalog_service import CatalogService
from finloan.services.enquiry_service import EnquiryService
from finloan.services.member_service import MemberService
from finloan.services.validation import validate_payload
