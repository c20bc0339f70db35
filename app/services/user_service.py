# app/services/user_service.py
import logging

from fastapi import HTTPException, status
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from app.core.security import create_access_token, hash_password, verify_password
from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.schemas.user import AuthResponse, AuthUser, LoginRequest, RegisterRequest, UserRead

logger = logging.getLogger(__name__)


class UserService:
    """
    Business logic for User.

    Responsibilities:
      - email uniqueness on registration
      - password hashing / verification
      - issuing access tokens
      - map domain errors to HTTP errors
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    # ----- helpers -----

    @staticmethod
    def _conflict() -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists",
        )

    @staticmethod
    def _issue(user: User) -> AuthResponse:
        token = create_access_token(user.id, user.email)
        return AuthResponse(token=token, user=UserRead.model_validate(user))

    # ----- auth -----

    def register(self, db: Database, payload: RegisterRequest) -> AuthResponse:
        """
        Create an account and log it in.

        Raises:
            HTTPException(400): if the email is already registered.
        """
        if self.repo.get_by_email(db, payload.email):
            raise self._conflict()

        pwd_hash, salt = hash_password(payload.password)
        try:
            user = self.repo.create(
                db,
                {
                    "name": payload.name,
                    "email": payload.email,
                    "password_hash": pwd_hash,
                    "salt": salt,
                },
            )
        except DuplicateKeyError:
            # registered concurrently between the lookup and the insert
            raise self._conflict()

        logger.info("Registered user %s", user.id)
        return self._issue(user)

    def login(self, db: Database, payload: LoginRequest) -> AuthResponse:
        """
        Exchange email + password for a fresh token.

        Unknown email and wrong password produce the same error.
        """
        user = self.repo.get_by_email(db, payload.email)
        if not user or not verify_password(payload.password, user.password_hash, user.salt):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid credentials",
            )
        return self._issue(user)

    # ----- profile -----

    def get_profile(self, db: Database, current_user: AuthUser) -> User:
        """
        Raises:
            HTTPException(404): if the account behind the token is gone.
        """
        user = self.repo.get_by_id(db, current_user.id)
        if not user:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found",
            )
        return user
