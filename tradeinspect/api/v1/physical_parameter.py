from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from tradeinspect.database import get_db, atomic
from tradeinspect.models.parameter import PhysicalInspectionParam
from tradeinspect.schemas.common import DeletedResponse
from tradeinspect.schemas.parameter import (
    PhysicalParameterCreate, PhysicalParameterResponse,
    PhysicalParameterEnvelope, PhysicalParameterListEnvelope
)
from tradeinspect.core.crud import get_or_404
from tradeinspect.core.errors import NotFoundError
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

PARAMETER_NOT_FOUND = "Physical parameter not found."


@router.post("/save", response_model=PhysicalParameterEnvelope, status_code=status.HTTP_201_CREATED)
async def save_parameter(
    parameter_data: PhysicalParameterCreate,
    db: AsyncSession = Depends(get_db)
):
    """Save a physical inspection template"""
    async with atomic(db):
        values = parameter_data.model_dump()
        values["milling_degree"] = parameter_data.milling_degree.value
        parameter = PhysicalInspectionParam(**values)
        db.add(parameter)
        await db.flush()

    await db.refresh(parameter)
    logger.info(f"Saved physical parameter {parameter.id}")

    return PhysicalParameterEnvelope(
        message="Physical parameters saved successfully!",
        data=PhysicalParameterResponse.model_validate(parameter)
    )


@router.get("", response_model=PhysicalParameterListEnvelope)
async def list_parameters(db: AsyncSession = Depends(get_db)):
    """List physical templates, newest first"""
    result = await db.execute(
        select(PhysicalInspectionParam).order_by(
            PhysicalInspectionParam.created_at.desc(), PhysicalInspectionParam.id
        )
    )
    return PhysicalParameterListEnvelope(
        message="Physical parameters fetched successfully!",
        data=[PhysicalParameterResponse.model_validate(parameter) for parameter in result.scalars().all()]
    )


@router.get("/{parameter_id}", response_model=PhysicalParameterEnvelope)
async def get_parameter(parameter_id: str, db: AsyncSession = Depends(get_db)):
    parameter = await get_or_404(
        db, PhysicalInspectionParam, PhysicalInspectionParam.id, parameter_id, PARAMETER_NOT_FOUND
    )
    return PhysicalParameterEnvelope(
        message="Physical parameter fetched successfully!",
        data=PhysicalParameterResponse.model_validate(parameter)
    )


@router.delete("/{parameter_id}", response_model=DeletedResponse)
async def delete_parameter(parameter_id: str, db: AsyncSession = Depends(get_db)):
    async with atomic(db):
        result = await db.execute(delete(PhysicalInspectionParam).where(PhysicalInspectionParam.id == parameter_id))
        if result.rowcount == 0:
            raise NotFoundError(PARAMETER_NOT_FOUND)

    logger.info(f"Deleted physical parameter {parameter_id}")
    return DeletedResponse(message="Physical parameter deleted successfully!", id=parameter_id)
