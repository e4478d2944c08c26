"""Login/registration endpoints and the auth dependencies (get_current_user, require_admin)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from repairshop.core.database import get_db
from repairshop.repositories.users import SqlUserRepository
from repairshop.schemas.auth import (
    AuthResponse,
    LoginRequest,
    PublicUser,
    RegisterRequest,
    UsersListResponse,
)
from repairshop.services.credentials import CredentialStore, to_public_user
from repairshop.services.tokens import TokenService

logger = logging.getLogger(__name__)

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_user_repository(db: Annotated[Session, Depends(get_db)]) -> SqlUserRepository:
    return SqlUserRepository(db)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_credential_store(
    request: Request,
    users: Annotated[SqlUserRepository, Depends(get_user_repository)],
) -> CredentialStore:
    return CredentialStore(users, bcrypt_rounds=request.app.state.settings.BCRYPT_ROUNDS)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    users: Annotated[SqlUserRepository, Depends(get_user_repository)],
) -> PublicUser:
    """Dependency: require a valid Bearer JWT and return the current user. 401 if missing or invalid."""
    token = credentials.credentials if credentials is not None else None
    return tokens.require_auth(token, users)


def require_admin(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    users: Annotated[SqlUserRepository, Depends(get_user_repository)],
) -> PublicUser:
    """Dependency: require an authenticated user with role 'admin'. 403 for other roles."""
    token = credentials.credentials if credentials is not None else None
    return tokens.require_admin(token, users)


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    store: Annotated[CredentialStore, Depends(get_credential_store)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AuthResponse:
    """
    Authenticate with username and password; returns a JWT and the user.
    Include the token in the Authorization header as: Bearer <token>
    """
    user = store.verify(body.username, body.password)
    logger.info("Login succeeded for user id=%s", user.id)
    return AuthResponse(token=tokens.issue(user), user=user)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    store: Annotated[CredentialStore, Depends(get_credential_store)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AuthResponse:
    """Create an account and log it in. Role defaults to 'user'."""
    user = store.register(body.username, body.password, body.role)
    return AuthResponse(token=tokens.issue(user), user=user)


@router.get("/me", response_model=PublicUser)
def me(current_user: Annotated[PublicUser, Depends(get_current_user)]) -> PublicUser:
    """Return the user the bearer token resolves to."""
    return current_user


@router.get("/users", response_model=UsersListResponse)
def list_users(
    _admin: Annotated[PublicUser, Depends(require_admin)],
    users: Annotated[SqlUserRepository, Depends(get_user_repository)],
) -> UsersListResponse:
    """List all users (admin only)."""
    return UsersListResponse(users=[to_public_user(u) for u in users.list_users()])
