"""
Helpers shared by the registry and catalog routers
"""
from typing import Any, Dict, Type, TypeVar
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tradeinspect.core.errors import ConflictError, NotFoundError, ValidationError
from tradeinspect.core.security import get_password_hash
from tradeinspect.config import Settings

ModelT = TypeVar("ModelT")


async def get_or_404(db: AsyncSession, model: Type[ModelT], pk_column, pk_value: str, message: str) -> ModelT:
    """Fetch a row by primary key or raise NotFoundError"""
    result = await db.execute(select(model).where(pk_column == pk_value))
    obj = result.scalar_one_or_none()
    if obj is None:
        raise NotFoundError(message)
    return obj


async def flush_or_conflict(db: AsyncSession, message: str) -> None:
    """Flush pending writes, reporting unique constraint violations as conflicts"""
    try:
        await db.flush()
    except IntegrityError as e:
        raise ConflictError(message) from e


def update_fields(data: Dict[str, Any], settings: Settings) -> Dict[str, Any]:
    """
    Prepare a partial update: drops nulls and rehashes a new password.
    Raises ValidationError when nothing is left to update.
    """
    changes = {key: value for key, value in data.items() if value is not None}
    if not changes:
        raise ValidationError("No update data provided.")
    if "password" in changes:
        changes["password"] = get_password_hash(changes["password"], rounds=settings.BCRYPT_ROUNDS)
    return changes


def apply_updates(obj: Any, changes: Dict[str, Any]) -> None:
    for key, value in changes.items():
        setattr(obj, key, value)
