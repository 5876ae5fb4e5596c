import logging
from typing import List

from fastapi import status

from finloan.core.exceptions import NotFound, PersistenceError
from finloan.database.store import DocumentStore, SERVICES
from finloan.schemas import LoanProductSummary, LoanProductDetail

logger = logging.getLogger(__name__)


class CatalogService:
    """Read-only access to the loan products stored in the ``services`` collection."""

    def __init__(self, store: DocumentStore):
        self.store = store

    # Lists every product with the public summary fields only
    async def list_products(self) -> List[LoanProductSummary]:
        try:
            products = await self.store.find(SERVICES, {})
        except Exception as e:
            logger.error(f"Failed to fetch services: {e}")
            raise PersistenceError("Failed to fetch services", status.HTTP_500_INTERNAL_SERVER_ERROR) from e

        if not products:
            logger.warning("Loan catalog is empty")
            raise NotFound("No loan services available")

        return [
            LoanProductSummary(
                type=p.get("type"),
                description=p.get("description"),
                imgUrl=p.get("imgUrl"),
            )
            for p in products
        ]

    # Returns the full product whose type matches exactly (case-sensitive)
    async def get_product(self, loan_type: str) -> LoanProductDetail:
        try:
            product = await self.store.find_one(SERVICES, {"type": loan_type})
        except Exception as e:
            logger.error(f"Failed to fetch service '{loan_type}': {e}")
            raise PersistenceError("Failed to fetch service details", status.HTTP_500_INTERNAL_SERVER_ERROR) from e

        if not product:
            logger.warning(f"Service not found: {loan_type}")
            raise NotFound("Service not found")

        return LoanProductDetail(**product)
