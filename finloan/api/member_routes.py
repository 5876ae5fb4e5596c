from fastapi import APIRouter, Body, Depends, status
from typing import Any, Dict, Optional

from finloan.api.dependencies import get_member_service
from finloan.services import MemberService, validate_payload

router = APIRouter(tags=["Members"])


# Registers a new member after validating the payload
@router.post("/member", status_code=status.HTTP_201_CREATED)
async def register_member(
    payload: Any = Body(None),
    service: MemberService = Depends(get_member_service),
):
    registration = validate_payload("registration", payload)
    await service.register(registration)
    return {"message": "Member registered successfully"}


@router.put("/updatepassword", status_code=status.HTTP_200_OK)
async def update_password(
    payload: Optional[Dict[str, Any]] = Body(None),
    service: MemberService = Depends(get_member_service),
):
    payload = payload or {}
    await service.update_password(payload.get("mobile"), payload.get("password"))
    return {"message": "Password updated successfully"}


@router.delete("/cancelmember", status_code=status.HTTP_200_OK)
async def cancel_member(
    payload: Optional[Dict[str, Any]] = Body(None),
    service: MemberService = Depends(get_member_service),
):
    payload = payload or {}
    await service.cancel_membership(payload.get("mobile"))
    return {"message": "Membership cancelled successfully"}
