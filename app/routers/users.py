# app/routers/users.py
from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from app.core.auth import require_auth
from app.database import get_db
from app.repositories.user_repo import UserRepository
from app.schemas.user import AuthResponse, AuthUser, LoginRequest, RegisterRequest, UserRead
from app.services.user_service import UserService

router = APIRouter(tags=["Users"])

repo = UserRepository()
service = UserService(repo)


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(payload: RegisterRequest, db: Database = Depends(get_db)):
    """
    Create an account.

    Returns a 7-day access token and the new user.
    """
    return service.register(db, payload)


@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, db: Database = Depends(get_db)):
    """
    Log in with email + password.

    Returns a fresh access token and the user.
    """
    return service.login(db, payload)


@router.get("/profile", response_model=UserRead)
def read_profile(
    db: Database = Depends(get_db),
    current_user: AuthUser = Depends(require_auth),
):
    """
    Return the authenticated user's profile.

    Auth:
      - Requires a valid bearer token.
    """
    return service.get_profile(db, current_user)
