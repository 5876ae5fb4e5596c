import logging
from typing import Any, Dict, Optional

from fastapi import status
from pydantic import ValidationError as PydanticValidationError

from finloan.core.exceptions import InvalidInput, NotFound, PersistenceError, ValidationError
from finloan.database.store import DocumentStore, REQUESTS
from finloan.schemas import EnquiryPayload, EnquiryUpdate, InterestQuote, LoanEnquiryRecord
from finloan.services.catalog_service import CatalogService
from finloan.services.validation import first_error_message
from finloan.utils.request_utils import parse_mobile, parse_positive_number, as_number, format_amount

logger = logging.getLogger(__name__)


class EnquiryService:
    """
    Lifecycle of loan enquiries keyed by mobile number.

    An enquiry is created on submission, may be patched or deleted, and
    gates remittance requests. Lookups by mobile apply to the first
    matching document; duplicates are not prevented.
    """

    def __init__(self, store: DocumentStore, catalog: Optional[CatalogService] = None):
        self.store = store
        self.catalog = catalog or CatalogService(store)

    # Stores a new enquiry. The payload has already passed validation.
    async def submit_enquiry(self, payload: EnquiryPayload) -> LoanEnquiryRecord:
        doc = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
        try:
            created = await self.store.insert(REQUESTS, doc)
        except Exception as e:
            logger.error(f"Failed to submit loan enquiry for mobile {payload.mobile}: {e}")
            raise PersistenceError("Failed to submit loan enquiry") from e

        logger.info(f"Loan enquiry submitted for mobile {payload.mobile} ({payload.type})")
        return LoanEnquiryRecord(**created)

    # Simple interest: amount * rate * tenure / 100, nothing is written
    async def calculate_interest(self, loan_type: str, amount: Any, tenure: Any) -> InterestQuote:
        try:
            product = await self.catalog.get_product(loan_type)
        except NotFound:
            raise NotFound("Loan type not found")

        amount = parse_positive_number(amount)
        tenure = parse_positive_number(tenure)
        if amount is None or tenure is None:
            raise InvalidInput("Amount and tenure are required")

        interest = (amount * product.interestRate * tenure) / 100
        return InterestQuote(
            totalAmount=as_number(amount + interest),
            interest=as_number(interest),
            loanAmount=as_number(amount),
            tenure=as_number(tenure),
        )

    # Approves a remittance whenever an enquiry exists for the mobile number
    async def request_remittance(self, mobile: Any, amount: Any) -> str:
        mobile = parse_mobile(mobile)
        requested = amount
        amount = parse_positive_number(amount)
        if mobile is None or amount is None:
            raise InvalidInput("Amount and mobile number are required")

        try:
            enquiry = await self.store.find_one(REQUESTS, {"mobile": mobile})
        except Exception as e:
            logger.error(f"Failed to look up enquiry for remittance (mobile {mobile}): {e}")
            raise PersistenceError("Failed to process remittance", status.HTTP_500_INTERNAL_SERVER_ERROR) from e

        if not enquiry:
            logger.warning(f"Remittance refused, no enquiry for mobile {mobile}")
            raise NotFound("No loan enquiry found for this mobile number")

        logger.info(f"Remittance of {format_amount(requested)} approved for mobile {mobile}")
        return f"Remittance of {format_amount(requested)} for loan approved successfully"

    # Patches the first enquiry for the mobile number with the permitted fields
    async def update_enquiry(self, mobile: Any, fields: Dict[str, Any]) -> LoanEnquiryRecord:
        mobile = parse_mobile(mobile)
        if mobile is None:
            raise InvalidInput("Mobile number is required")

        try:
            patch = EnquiryUpdate.model_validate(fields or {}).to_patch()
        except PydanticValidationError as e:
            raise ValidationError(first_error_message(e)) from e

        try:
            if patch:
                updated = await self.store.find_one_and_update(REQUESTS, {"mobile": mobile}, patch)
            else:
                updated = await self.store.find_one(REQUESTS, {"mobile": mobile})
        except Exception as e:
            logger.error(f"Failed to update request for mobile {mobile}: {e}")
            raise PersistenceError("Failed to update request") from e

        if not updated:
            logger.warning(f"Update refused, no request for mobile {mobile}")
            raise NotFound("Request not found")

        logger.info(f"Request for mobile {mobile} updated: {sorted(patch)}")
        return LoanEnquiryRecord(**updated)

    async def delete_enquiry(self, mobile: Any) -> LoanEnquiryRecord:
        mobile = parse_mobile(mobile)
        if mobile is None:
            raise InvalidInput("Mobile number is required")

        try:
            deleted = await self.store.find_one_and_delete(REQUESTS, {"mobile": mobile})
        except Exception as e:
            logger.error(f"Failed to delete request for mobile {mobile}: {e}")
            raise PersistenceError("Failed to delete request") from e

        if not deleted:
            logger.warning(f"Delete refused, no request for mobile {mobile}")
            raise NotFound("Request not found")

        logger.info(f"Request for mobile {mobile} deleted")
        return LoanEnquiryRecord(**deleted)
