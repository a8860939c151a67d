from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from typing import List
from tradeinspect.database import get_db, atomic
from tradeinspect.models.parameter import ChemicalInspectionParam
from tradeinspect.schemas.common import DeletedResponse
from tradeinspect.schemas.parameter import (
    ChemicalParameterCreate, ChemicalParameterUpdate, ChemicalParameterResponse,
    ChemicalParameterEnvelope, ChemicalParameterListEnvelope
)
from tradeinspect.core.crud import get_or_404, flush_or_conflict
from tradeinspect.core.errors import NotFoundError, ValidationError
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

PARAMETER_NOT_FOUND = "Chemical parameter not found."
DUPLICATE_NAME = "Chemical parameter with this name already exists."


@router.post("/save", response_model=ChemicalParameterListEnvelope, status_code=status.HTTP_201_CREATED)
async def save_parameters(
    parameters: List[ChemicalParameterCreate],
    db: AsyncSession = Depends(get_db)
):
    """
    Save a batch of chemical parameters
    Either every parameter in the batch is stored or none is.
    """
    if not parameters:
        raise ValidationError("Request body must be a non-empty list of chemical parameters.")

    async with atomic(db):
        saved = [ChemicalInspectionParam(**parameter.model_dump()) for parameter in parameters]
        db.add_all(saved)
        await flush_or_conflict(db, DUPLICATE_NAME)

    for parameter in saved:
        await db.refresh(parameter)
    logger.info(f"Saved {len(saved)} chemical parameters")

    return ChemicalParameterListEnvelope(
        message="Chemical parameters saved successfully!",
        data=[ChemicalParameterResponse.model_validate(parameter) for parameter in saved]
    )


@router.get("", response_model=ChemicalParameterListEnvelope)
async def list_parameters(db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        select(ChemicalInspectionParam).order_by(ChemicalInspectionParam.parameter_name.asc())
    )
    return ChemicalParameterListEnvelope(
        message="Chemical parameters fetched successfully!",
        data=[ChemicalParameterResponse.model_validate(parameter) for parameter in result.scalars().all()]
    )


@router.get("/{parameter_id}", response_model=ChemicalParameterEnvelope)
async def get_parameter(parameter_id: str, db: AsyncSession = Depends(get_db)):
    parameter = await get_or_404(
        db, ChemicalInspectionParam, ChemicalInspectionParam.id, parameter_id, PARAMETER_NOT_FOUND
    )
    return ChemicalParameterEnvelope(
        message="Chemical parameter fetched successfully!",
        data=ChemicalParameterResponse.model_validate(parameter)
    )


@router.put("/{parameter_id}", response_model=ChemicalParameterEnvelope)
async def update_parameter(
    parameter_id: str,
    parameter_data: ChemicalParameterUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Update a chemical parameter; the min/max range is rechecked against stored values"""
    changes = parameter_data.model_dump(exclude_unset=True)
    if not changes:
        raise ValidationError("No update data provided.")
    if "parameter_name" in changes and changes["parameter_name"] is None:
        raise ValidationError("parameter_name cannot be null.")

    async with atomic(db):
        parameter = await get_or_404(
            db, ChemicalInspectionParam, ChemicalInspectionParam.id, parameter_id, PARAMETER_NOT_FOUND
        )
        min_value = changes.get("min_value", parameter.min_value)
        max_value = changes.get("max_value", parameter.max_value)
        if min_value is not None and max_value is not None and min_value > max_value:
            raise ValidationError("min_value cannot be greater than max_value")

        for key, value in changes.items():
            setattr(parameter, key, value)
        await flush_or_conflict(db, DUPLICATE_NAME)

    await db.refresh(parameter)
    logger.info(f"Updated chemical parameter {parameter_id}")
    return ChemicalParameterEnvelope(
        message="Chemical parameter updated successfully!",
        data=ChemicalParameterResponse.model_validate(parameter)
    )


@router.delete("/{parameter_id}", response_model=DeletedResponse)
async def delete_parameter(parameter_id: str, db: AsyncSession = Depends(get_db)):
    async with atomic(db):
        result = await db.execute(delete(ChemicalInspectionParam).where(ChemicalInspectionParam.id == parameter_id))
        if result.rowcount == 0:
            raise NotFoundError(PARAMETER_NOT_FOUND)

    logger.info(f"Deleted chemical parameter {parameter_id}")
    return DeletedResponse(message="Chemical parameter deleted successfully!", id=parameter_id)
