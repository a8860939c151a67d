from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from typing import List
from tradeinspect.config import Settings, get_settings
from tradeinspect.database import get_db, atomic
from tradeinspect.models.inspector import IndianInspector
from tradeinspect.schemas.common import DeletedResponse
from tradeinspect.schemas.inspector import (
    IndianInspectorCreate, IndianInspectorUpdate, IndianInspectorResponse, IndianInspectorEnvelope
)
from tradeinspect.core.crud import get_or_404, flush_or_conflict, update_fields, apply_updates
from tradeinspect.core.errors import ConflictError, NotFoundError
from tradeinspect.core.security import get_password_hash
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

INSPECTOR_NOT_FOUND = "Inspector not found."
DUPLICATE_EMAIL = "Inspector with this email address already exists."


@router.post("/register", response_model=IndianInspectorEnvelope, status_code=status.HTTP_201_CREATED)
async def register_inspector(
    inspector_data: IndianInspectorCreate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Register a new Indian inspector"""
    async with atomic(db):
        result = await db.execute(
            select(IndianInspector).where(IndianInspector.email_id == inspector_data.email_id)
        )
        if result.scalar_one_or_none():
            raise ConflictError(DUPLICATE_EMAIL)

        values = inspector_data.model_dump()
        values["password"] = get_password_hash(inspector_data.password, rounds=settings.BCRYPT_ROUNDS)
        new_inspector = IndianInspector(**values)
        db.add(new_inspector)
        await flush_or_conflict(db, DUPLICATE_EMAIL)

    await db.refresh(new_inspector)
    logger.info(f"Registered Indian inspector {new_inspector.id}")

    return IndianInspectorEnvelope(
        message="Indian Inspector registered successfully!",
        inspector=IndianInspectorResponse.model_validate(new_inspector)
    )


@router.get("", response_model=List[IndianInspectorResponse])
async def list_inspectors(db: AsyncSession = Depends(get_db)):
    """List all Indian inspectors ordered by name"""
    result = await db.execute(select(IndianInspector).order_by(IndianInspector.name, IndianInspector.id))
    return [IndianInspectorResponse.model_validate(inspector) for inspector in result.scalars().all()]


@router.get("/{inspector_id}", response_model=IndianInspectorResponse)
async def get_inspector(inspector_id: str, db: AsyncSession = Depends(get_db)):
    """Get a single Indian inspector"""
    inspector = await get_or_404(db, IndianInspector, IndianInspector.id, inspector_id, INSPECTOR_NOT_FOUND)
    return IndianInspectorResponse.model_validate(inspector)


@router.put("/{inspector_id}", response_model=IndianInspectorResponse)
async def update_inspector(
    inspector_id: str,
    inspector_data: IndianInspectorUpdate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Update an Indian inspector; only supplied fields change"""
    async with atomic(db):
        inspector = await get_or_404(db, IndianInspector, IndianInspector.id, inspector_id, INSPECTOR_NOT_FOUND)
        changes = update_fields(inspector_data.model_dump(exclude_unset=True), settings)
        apply_updates(inspector, changes)
        await flush_or_conflict(db, DUPLICATE_EMAIL)

    await db.refresh(inspector)
    logger.info(f"Updated Indian inspector {inspector_id}")
    return IndianInspectorResponse.model_validate(inspector)


@router.delete("/{inspector_id}", response_model=DeletedResponse)
async def delete_inspector(inspector_id: str, db: AsyncSession = Depends(get_db)):
    """Delete an Indian inspector"""
    async with atomic(db):
        result = await db.execute(delete(IndianInspector).where(IndianInspector.id == inspector_id))
        if result.rowcount == 0:
            raise NotFoundError(INSPECTOR_NOT_FOUND)

    logger.info(f"Deleted Indian inspector {inspector_id}")
    return DeletedResponse(message="Inspector deleted successfully!", id=inspector_id)
