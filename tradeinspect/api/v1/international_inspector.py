from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, or_
from typing import List
from tradeinspect.config import Settings, get_settings
from tradeinspect.database import get_db, atomic
from tradeinspect.models.inspector import InternationalInspector
from tradeinspect.schemas.common import DeletedResponse
from tradeinspect.schemas.inspector import (
    InternationalInspectorCreate, InternationalInspectorUpdate,
    InternationalInspectorResponse, InternationalInspectorEnvelope
)
from tradeinspect.core.crud import get_or_404, flush_or_conflict, update_fields, apply_updates
from tradeinspect.core.errors import ConflictError, NotFoundError
from tradeinspect.core.security import get_password_hash
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

INSPECTOR_NOT_FOUND = "Inspector not found."
DUPLICATE_INSPECTOR = "An inspector with the provided email address or code already exists."


@router.post("/register", response_model=InternationalInspectorEnvelope, status_code=status.HTTP_201_CREATED)
async def register_inspector(
    inspector_data: InternationalInspectorCreate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """
    Register a new international inspector
    The existence check and the insert share one transaction, so a lost
    uniqueness race leaves no partial record behind.
    """
    async with atomic(db):
        result = await db.execute(
            select(InternationalInspector).where(
                or_(
                    InternationalInspector.email_address == inspector_data.email_address,
                    InternationalInspector.international_inspector_code == inspector_data.international_inspector_code
                )
            )
        )
        existing = result.scalars().first()
        if existing:
            if existing.email_address == inspector_data.email_address:
                message = "Inspector with this email address already exists."
            else:
                message = "Inspector with this code already exists."
            logger.warning(f"International inspector register rejected: {message}")
            raise ConflictError(message)

        values = inspector_data.model_dump()
        values["password"] = get_password_hash(inspector_data.password, rounds=settings.BCRYPT_ROUNDS)
        new_inspector = InternationalInspector(**values)
        db.add(new_inspector)
        await flush_or_conflict(db, DUPLICATE_INSPECTOR)

    await db.refresh(new_inspector)
    logger.info(f"Registered international inspector {new_inspector.id}")

    return InternationalInspectorEnvelope(
        message="International Inspector created successfully!",
        inspector=InternationalInspectorResponse.model_validate(new_inspector)
    )


@router.get("", response_model=List[InternationalInspectorResponse])
async def list_inspectors(db: AsyncSession = Depends(get_db)):
    """List all international inspectors ordered by name"""
    result = await db.execute(
        select(InternationalInspector).order_by(InternationalInspector.full_name, InternationalInspector.id)
    )
    return [InternationalInspectorResponse.model_validate(inspector) for inspector in result.scalars().all()]


@router.get("/{inspector_id}", response_model=InternationalInspectorResponse)
async def get_inspector(inspector_id: str, db: AsyncSession = Depends(get_db)):
    """Get a single international inspector"""
    inspector = await get_or_404(
        db, InternationalInspector, InternationalInspector.id, inspector_id, INSPECTOR_NOT_FOUND
    )
    return InternationalInspectorResponse.model_validate(inspector)


@router.put("/{inspector_id}", response_model=InternationalInspectorResponse)
async def update_inspector(
    inspector_id: str,
    inspector_data: InternationalInspectorUpdate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Update an international inspector; only supplied fields change"""
    async with atomic(db):
        inspector = await get_or_404(
            db, InternationalInspector, InternationalInspector.id, inspector_id, INSPECTOR_NOT_FOUND
        )
        changes = update_fields(inspector_data.model_dump(exclude_unset=True), settings)
        apply_updates(inspector, changes)
        await flush_or_conflict(db, DUPLICATE_INSPECTOR)

    await db.refresh(inspector)
    logger.info(f"Updated international inspector {inspector_id}")
    return InternationalInspectorResponse.model_validate(inspector)


@router.delete("/{inspector_id}", response_model=DeletedResponse)
async def delete_inspector(inspector_id: str, db: AsyncSession = Depends(get_db)):
    """Delete an international inspector"""
    async with atomic(db):
        result = await db.execute(delete(InternationalInspector).where(InternationalInspector.id == inspector_id))
        if result.rowcount == 0:
            raise NotFoundError(INSPECTOR_NOT_FOUND)

    logger.info(f"Deleted international inspector {inspector_id}")
    return DeletedResponse(message="Inspector deleted successfully!", id=inspector_id)
