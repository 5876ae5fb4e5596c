from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from typing import List

from finloan.api.dependencies import get_catalog_service
from finloan.schemas import LoanProductSummary, LoanProductDetail
from finloan.services import CatalogService

router = APIRouter(tags=["Loan Catalog"])


@router.get("/", response_class=PlainTextResponse)
async def root():
    return "Welcome to the Civil-Finloan API"


# Lists every loan product with its public summary fields
@router.get("/allservices", response_model=List[LoanProductSummary], status_code=status.HTTP_200_OK)
async def list_services(service: CatalogService = Depends(get_catalog_service)):
    return await service.list_products()


# Returns the full definition of one loan product
@router.get("/service/{loan_type}", response_model=LoanProductDetail, status_code=status.HTTP_200_OK)
async def get_service(loan_type: str, service: CatalogService = Depends(get_catalog_service)):
    return await service.get_product(loan_type)
