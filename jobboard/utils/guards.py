import logging
import uuid
from typing import Optional

from jobboard.exceptions import UnauthorizedError
from jobboard.models.user import UserRole
from jobboard.schema.auth_schema import CurrentUser

logger = logging.getLogger(__name__)


def require_session(current_user: Optional[CurrentUser]) -> CurrentUser:
    if current_user is None:
        logger.warning("Rejected anonymous call to a protected operation")
        raise UnauthorizedError()
    return current_user


def require_role(current_user: Optional[CurrentUser], role: UserRole) -> CurrentUser:
    """Check a session exists and carries the given role"""
    current_user = require_session(current_user)
    if current_user.role != role:
        logger.warning("User %s with role %s rejected, %s required",
                       current_user.id, current_user.role.value, role.value)
        raise UnauthorizedError()
    return current_user


def require_owner(current_user: CurrentUser, owner_id: Optional[uuid.UUID]) -> None:
    """The acting user must be the owner of the referenced record"""
    if owner_id is None or owner_id != current_user.id:
        logger.warning("User %s does not own the requested resource", current_user.id)
        raise UnauthorizedError()
