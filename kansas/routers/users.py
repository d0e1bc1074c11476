"""User router - API endpoints for registration, sessions and profiles."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, EmailStr

from kansas.database import get_database
from kansas.models.user import User, UserCreate, UserInDB, UserUpdate
from kansas.routers.responses import to_response
from kansas.services.auth_service import (
    AccountLockedError,
    AuthService,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
)
from kansas.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user", tags=["user"])
security = HTTPBearer(auto_error=False)


class LoginRequest(BaseModel):
    """Login request model. The email is normalized like registration's."""

    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    """Token response model."""

    access_token: str
    token_type: str = "bearer"


def client_ip(request: Request) -> str | None:
    """IP address of the caller, if the server reports one."""
    return request.client.host if request.client else None


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db=Depends(get_database),
) -> UserInDB:
    """
    Dependency resolving the bearer token to its user.

    Raises:
        HTTPException: If the token is missing, invalid or revoked (401)
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        user = await AuthService(db).resolve_session(credentials.credentials)
    except Exception as e:
        logger.error("Exception resolving session: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
        )
    return user


def require_self(user_id: int, current_user: UserInDB) -> None:
    """Only the account owner may change or delete it."""
    if user_id != current_user.user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Cannot modify another user",
        )


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
async def register(user: UserCreate, db=Depends(get_database)):
    """
    Register a new user.

    Raises:
        HTTPException: If email is already registered (400)
    """
    service = AuthService(db)

    try:
        return await service.register_user(user)
    except EmailAlreadyRegisteredError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error("Exception registering user: %s", e)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.post("/login", response_model=TokenResponse)
async def login(login_req: LoginRequest, request: Request, db=Depends(get_database)):
    """
    Login user and return a session token.

    Raises:
        HTTPException: If credentials are invalid (401) or account locked (403)
    """
    service = AuthService(db)

    try:
        token = await service.login(
            email=login_req.email,
            password=login_req.password,
            ip_address=client_ip(request),
        )
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except AccountLockedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except Exception as e:
        logger.error("Exception logging in: %s", e)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return TokenResponse(access_token=token)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    request: Request,
    current_user: UserInDB = Depends(get_current_user),
    db=Depends(get_database),
):
    """End the current session."""
    service = AuthService(db)

    try:
        await service.logout(current_user.user_id, client_ip(request))
    except Exception as e:
        logger.error("Exception logging out: %s", e)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=list[User])
async def list_users(
    current_user: UserInDB = Depends(get_current_user),
    db=Depends(get_database),
):
    """List all active users."""
    service = UserService(db)
    return to_response(await service.list_users(), "listing users")


@router.get("/me", response_model=User)
async def get_me(current_user: UserInDB = Depends(get_current_user)):
    """Get the authenticated user."""
    return current_user.to_public()


@router.get("/{user_id}", response_model=User)
async def get_user(
    user_id: int,
    current_user: UserInDB = Depends(get_current_user),
    db=Depends(get_database),
):
    """
    Get a user by id.

    - Returns 404 if the user does not exist or was deleted
    """
    service = UserService(db)
    return to_response(await service.get_user(user_id), "getting user")


@router.put("/{user_id}", response_model=User)
async def update_user(
    user_id: int,
    user_update: UserUpdate,
    current_user: UserInDB = Depends(get_current_user),
    db=Depends(get_database),
):
    """Update the authenticated user's name and email."""
    require_self(user_id, current_user)
    service = UserService(db)
    return to_response(await service.update_profile(user_id, user_update), "updating user")


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    current_user: UserInDB = Depends(get_current_user),
    db=Depends(get_database),
):
    """
    Soft delete the authenticated user.

    - The row is kept, flagged inactive and deleted
    """
    require_self(user_id, current_user)
    service = UserService(db)
    return to_response(
        await service.delete_user(user_id),
        "deleting user",
        success_status=status.HTTP_204_NO_CONTENT,
    )
