# services/user.py
import logging

from sqlalchemy.orm import Session

from app.core.exceptions import already_exists, unauthorized, validation_failure
from app.core.id_generator import IdentifierGenerator
from app.core.security import hash_password, verify_password
from app.crud.user import crud_user
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate, LoginRequest
from app.services.merge import merge_update
from app.services.ownership import OwnershipGuard, ownership_guard

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


class UserService:
    """Signup, authentication, profile updates and deactivation."""

    def __init__(self, id_generator: IdentifierGenerator, guard: OwnershipGuard = ownership_guard):
        self.crud = crud_user
        self.id_generator = id_generator
        self.guard = guard

    # =====================================================================
    # REGISTRATION & AUTHENTICATION
    # =====================================================================

    def register_user(self, db: Session, user_data: UserCreate) -> User:
        """
        Create a user account.

        The id is taken from ``user_data.id`` when an upstream identity
        provider assigned one, otherwise minted by the identifier generator,
        passing over ids already in the store.

        Raises:
            ServiceError: VALIDATION_FAILURE on a missing or short password,
                ALREADY_EXISTS on a duplicate email or id
        """
        if not user_data.password:
            raise validation_failure("password", "is required")
        if len(user_data.password) < MIN_PASSWORD_LENGTH:
            raise validation_failure("password", f"must be at least {MIN_PASSWORD_LENGTH} characters")

        if self.crud.get_by_email(db, email=user_data.email):
            raise already_exists("email", user_data.email)

        if user_data.id is not None:
            if self.crud.exists(db, id=user_data.id):
                raise already_exists("id", user_data.id)
            user_id = user_data.id
        else:
            # the counter restarts with the process; skip ids minted by an earlier run
            user_id = self.id_generator.generate_id()
            while self.crud.exists(db, id=user_id):
                user_id = self.id_generator.generate_id()

        user = User(
            id=user_id,
            first_name=user_data.first_name,
            last_name=user_data.last_name,
            email=user_data.email,
            password_hash=hash_password(user_data.password),
            is_active=True,
        )
        user = self.crud.save(db, db_obj=user)
        logger.info(f"Registered user {user.id}")
        return user

    def authenticate_user(self, db: Session, login_data: LoginRequest) -> User:
        user = self.crud.get_by_email(db, email=login_data.email.lower())
        if not user or not verify_password(login_data.password, user.password_hash):
            raise unauthorized("Invalid email or password")
        if not user.is_active:
            raise unauthorized("Account is deactivated")
        return user

    # =====================================================================
    # READ / UPDATE
    # =====================================================================

    def get_user(self, db: Session, acting_user_id: int, user_id: int) -> User:
        return self.guard.verify_user(acting_user_id, self.crud.get(db, id=user_id), user_id)

    def update_user(
        self, db: Session, acting_user_id: int, user_id: int, update_data: UserUpdate
    ) -> User:
        """
        Merge a partial profile update. A new password is hashed before it
        reaches the entity.
        """
        user = self.get_user(db, acting_user_id, user_id)

        if update_data.email and update_data.email != user.email:
            if self.crud.get_by_email(db, email=update_data.email):
                raise already_exists("email", update_data.email)

        merge_update(
            user,
            update_data,
            fields=("first_name", "last_name", "email", "password"),
            transforms={"password": hash_password},
            renames={"password": "password_hash"},
        )

        user = self.crud.save(db, db_obj=user)
        logger.info(f"Updated user {user.id}")
        return user

    def deactivate_user(self, db: Session, acting_user_id: int, user_id: int) -> User:
        """One-way; deactivating an inactive user succeeds without a write."""
        user = self.get_user(db, acting_user_id, user_id)
        if not user.is_active:
            return user
        user.is_active = False
        user = self.crud.save(db, db_obj=user)
        logger.info(f"Deactivated user {user.id}")
        return user
