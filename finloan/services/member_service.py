import logging
from typing import Any, Dict

from finloan.core.exceptions import InvalidInput, NotFound, PersistenceError
from finloan.core.security import hash_password
from finloan.database.store import DocumentStore, MEMBERS
from finloan.schemas import RegistrationPayload
from finloan.utils.request_utils import parse_mobile

logger = logging.getLogger(__name__)


def _public_member(doc: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in doc.items() if k != "password_hash"}


class MemberService:
    def __init__(self, store: DocumentStore):
        self.store = store

    # Registers a member, persisting only the bcrypt hash of the password
    async def register(self, payload: RegistrationPayload) -> Dict[str, Any]:
        try:
            password_hash = hash_password(payload.createpassword)
        except ValueError as e:
            raise InvalidInput("Invalid password") from e

        doc = {
            "mobile": payload.mobile,
            "email": str(payload.email),
            "occupation": payload.occupation,
            "password_hash": password_hash,
        }
        try:
            created = await self.store.insert(MEMBERS, doc)
        except Exception as e:
            logger.error(f"Failed to register member with mobile {payload.mobile}: {e}")
            raise PersistenceError("Failed to register member") from e

        logger.info(f"Member registered with mobile {payload.mobile}")
        return _public_member(created)

    async def update_password(self, mobile: Any, new_password: Any) -> Dict[str, Any]:
        mobile = parse_mobile(mobile)
        if mobile is None or not isinstance(new_password, str) or not new_password:
            raise InvalidInput("Mobile number and password are required")

        password_hash = hash_password(new_password)
        try:
            updated = await self.store.find_one_and_update(
                MEMBERS, {"mobile": mobile}, {"password_hash": password_hash}
            )
        except Exception as e:
            logger.error(f"Failed to update password for mobile {mobile}: {e}")
            raise PersistenceError("Failed to update password") from e

        if not updated:
            logger.warning(f"Password update refused, no member for mobile {mobile}")
            raise NotFound("Member not found")

        logger.info(f"Password updated for member with mobile {mobile}")
        return _public_member(updated)

    async def cancel_membership(self, mobile: Any) -> Dict[str, Any]:
        mobile = parse_mobile(mobile)
        if mobile is None:
            raise InvalidInput("Mobile number is required")

        try:
            deleted = await self.store.find_one_and_delete(MEMBERS, {"mobile": mobile})
        except Exception as e:
            logger.error(f"Failed to cancel membership for mobile {mobile}: {e}")
            raise PersistenceError("Failed to cancel membership") from e

        if not deleted:
            logger.warning(f"Cancellation refused, no member for mobile {mobile}")
            raise NotFound("Member not found")

        logger.info(f"Membership cancelled for mobile {mobile}")
        return _public_member(deleted)
