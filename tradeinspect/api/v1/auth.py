from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from tradeinspect.config import Settings, get_settings
from tradeinspect.database import get_db, atomic
from tradeinspect.models.user import User, UserRole
from tradeinspect.schemas.auth import UserLogin, UserRegister, AuthResponse, TokenPayload
from tradeinspect.middleware.auth import get_current_user
from tradeinspect.core.crud import flush_or_conflict
from tradeinspect.core.errors import AuthError, ConflictError
from tradeinspect.core.security import (
    verify_password,
    get_password_hash,
    create_access_token,
)
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_CREDENTIALS = "Invalid credentials."


def _auth_response(user: User, message: str, settings: Settings) -> AuthResponse:
    role = user.role.value if hasattr(user.role, "value") else str(user.role)
    token = create_access_token(
        data={"userId": user.id, "email": user.email, "role": role},
        settings=settings
    )
    return AuthResponse(
        message=message,
        token=token,
        user_id=user.id,
        email=user.email,
        role=role,
        first_name=user.first_name,
        last_name=user.last_name
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Login and get a session token"""
    result = await db.execute(
        select(User).where(User.email == credentials.email)
    )
    user = result.scalar_one_or_none()

    # Same message for unknown email and wrong password
    if not user or not verify_password(credentials.password, user.password_hash):
        logger.warning("Failed login attempt")
        raise AuthError(INVALID_CREDENTIALS)

    return _auth_response(user, "Login successful!", settings)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Register a new customer user"""
    async with atomic(db):
        result = await db.execute(
            select(User).where(User.email == user_data.email)
        )
        if result.scalar_one_or_none():
            raise ConflictError("Email already registered.")

        new_user = User(
            email=user_data.email,
            password_hash=get_password_hash(user_data.password, rounds=settings.BCRYPT_ROUNDS),
            first_name=user_data.first_name,
            last_name=user_data.last_name,
            role=UserRole.CUSTOMER
        )
        db.add(new_user)
        await flush_or_conflict(db, "Email already registered.")

    logger.info(f"Registered user {new_user.id}")
    return _auth_response(new_user, "User registered successfully!", settings)


@router.get("/me", response_model=TokenPayload)
async def read_current_user(current_user: TokenPayload = Depends(get_current_user)):
    """Return the claims of the presented session token"""
    return current_user
