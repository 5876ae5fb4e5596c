from fastapi import APIRouter, Body, Depends, status
from typing import Any, Dict, Optional
import logging

from finloan.api.dependencies import get_enquiry_service
from finloan.schemas import InterestQuote
from finloan.services import EnquiryService, validate_payload

router = APIRouter(tags=["Loan Enquiries"])

logger = logging.getLogger(__name__)


# Submits a loan enquiry after validating the payload
@router.post("/service/{loan_type}/form", status_code=status.HTTP_201_CREATED)
async def submit_enquiry(
    loan_type: str,
    payload: Any = Body(None),
    service: EnquiryService = Depends(get_enquiry_service),
):
    enquiry = validate_payload("enquiry", payload)
    if enquiry.type != loan_type:
        logger.debug(f"Enquiry posted under '{loan_type}' names type '{enquiry.type}'")
    await service.submit_enquiry(enquiry)
    return {"message": "Loan enquiry submitted successfully"}


# Computes simple interest for an amount and tenure against a product's rate
@router.post("/service/{loan_type}/calculate", response_model=InterestQuote, status_code=status.HTTP_200_OK)
async def calculate_interest(
    loan_type: str,
    payload: Optional[Dict[str, Any]] = Body(None),
    service: EnquiryService = Depends(get_enquiry_service),
):
    payload = payload or {}
    return await service.calculate_interest(loan_type, payload.get("amt"), payload.get("tenure"))


@router.post("/service/{loan_type}/remittance", status_code=status.HTTP_200_OK)
async def request_remittance(
    loan_type: str,
    payload: Optional[Dict[str, Any]] = Body(None),
    service: EnquiryService = Depends(get_enquiry_service),
):
    payload = payload or {}
    message = await service.request_remittance(payload.get("mobile"), payload.get("amt"))
    return {"message": message}


@router.put("/updaterequest", status_code=status.HTTP_200_OK)
async def update_request(
    payload: Optional[Dict[str, Any]] = Body(None),
    service: EnquiryService = Depends(get_enquiry_service),
):
    payload = payload or {}
    updated = await service.update_enquiry(payload.get("mobile"), payload)
    return {"message": "Request updated successfully", "updatedRequest": updated.model_dump()}


@router.delete("/deleterequest", status_code=status.HTTP_200_OK)
async def delete_request(
    payload: Optional[Dict[str, Any]] = Body(None),
    service: EnquiryService = Depends(get_enquiry_service),
):
    payload = payload or {}
    await service.delete_enquiry(payload.get("mobile"))
    return {"message": "Request deleted successfully"}
