"""
Document store used by the services.

Services talk to MongoDB only through the five operations below and only
in plain dicts keyed by the stored field names (``amt``, ``imgUrl``, ...),
with the document id exposed as the string ``id``. Lookups by a filter
apply to the first document the store returns; nothing here enforces
uniqueness.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Type

from beanie import Document, UpdateResponse
from beanie.operators import Set

from finloan.database.models import LoanService, LoanRequest, Member

logger = logging.getLogger(__name__)

SERVICES = "services"
REQUESTS = "requests"
MEMBERS = "members"


class DocumentStore(ABC):

    @abstractmethod
    async def find(self, collection: str, filter: Dict[str, Any]) -> List[Dict[str, Any]]:
        ...

    @abstractmethod
    async def find_one(self, collection: str, filter: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    async def insert(self, collection: str, doc: Dict[str, Any]) -> Dict[str, Any]:
        ...

    @abstractmethod
    async def find_one_and_update(
        self, collection: str, filter: Dict[str, Any], patch: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Apply ``patch`` as a ``$set`` on the first match and return the updated document."""

    @abstractmethod
    async def find_one_and_delete(self, collection: str, filter: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        ...


def document_to_dict(document: Document) -> Dict[str, Any]:
    data = document.model_dump(by_alias=True, exclude={"id", "revision_id"})
    data["id"] = str(document.id) if document.id is not None else None
    return data


def raw_to_dict(raw: Dict[str, Any]) -> Dict[str, Any]:
    data = {k: v for k, v in raw.items() if k not in ("_id", "revision_id")}
    data["id"] = str(raw["_id"]) if raw.get("_id") is not None else None
    return data


class BeanieDocumentStore(DocumentStore):
    """DocumentStore backed by the Beanie models registered in ``init_db``."""

    def __init__(self, models: Optional[Dict[str, Type[Document]]] = None):
        self.models = models or {
            SERVICES: LoanService,
            REQUESTS: LoanRequest,
            MEMBERS: Member,
        }

    def _model(self, collection: str) -> Type[Document]:
        try:
            return self.models[collection]
        except KeyError:
            raise KeyError(f"Unknown collection: {collection}")

    async def find(self, collection, filter):
        docs = await self._model(collection).find(filter).to_list()
        return [document_to_dict(d) for d in docs]

    async def find_one(self, collection, filter):
        doc = await self._model(collection).find_one(filter)
        return document_to_dict(doc) if doc else None

    async def insert(self, collection, doc):
        document = self._model(collection).model_validate(doc)
        await document.insert()
        logger.debug("Inserted %s document %s", collection, document.id)
        return document_to_dict(document)

    async def find_one_and_update(self, collection, filter, patch):
        model = self._model(collection)
        updated = await model.find_one(filter).update(
            Set(patch), response_type=UpdateResponse.NEW_DOCUMENT
        )
        return document_to_dict(updated) if updated else None

    async def find_one_and_delete(self, collection, filter):
        # single driver round trip, so concurrent deletes cannot both match
        raw = await self._model(collection).get_motor_collection().find_one_and_delete(filter)
        return raw_to_dict(raw) if raw else None


_STORE: Optional[DocumentStore] = None


def get_store() -> DocumentStore:
    global _STORE
    if _STORE is None:
        _STORE = BeanieDocumentStore()
    return _STORE
