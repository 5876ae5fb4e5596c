from fastapi import Depends

from finloan.database.store import DocumentStore, get_store
from finloan.services import CatalogService, EnquiryService, MemberService


def get_catalog_service(store: DocumentStore = Depends(get_store)) -> CatalogService:
    return CatalogService(store)


def get_enquiry_service(store: DocumentStore = Depends(get_store)) -> EnquiryService:
    return EnquiryService(store)


def get_member_service(store: DocumentStore = Depends(get_store)) -> MemberService:
    return MemberService(store)
