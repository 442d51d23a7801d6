# app/api/deps.py
from fastapi import Depends, Request

from app.core.id_generator import IdentifierGenerator
from app.core.security import ensure_acting_user, get_current_user
from app.models.user import User
from app.services.user import UserService


def get_id_generator(request: Request) -> IdentifierGenerator:
    """The process-wide generator built at startup in ``main``."""
    return request.app.state.id_generator


def get_user_service(
    id_generator: IdentifierGenerator = Depends(get_id_generator),
) -> UserService:
    return UserService(id_generator=id_generator)


def get_acting_user_id(
    user_id: int,
    current_user: User = Depends(get_current_user),
) -> int:
    """Acting user for ``/users/{user_id}/...`` routes."""
    return ensure_acting_user(user_id, current_user)
