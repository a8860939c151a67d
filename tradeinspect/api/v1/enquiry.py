from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from typing import List
from tradeinspect.database import get_db, atomic
from tradeinspect.models.enquiry import Enquiry
from tradeinspect.schemas.common import DeletedResponse
from tradeinspect.schemas.enquiry import EnquiryCreate, EnquiryResponse, EnquiryEnvelope
from tradeinspect.core.crud import get_or_404
from tradeinspect.core.enquiry_workflow import EnquiryWorkflow
from tradeinspect.core.errors import NotFoundError
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

ENQUIRY_NOT_FOUND = "Enquiry not found."


@router.post("/inquiries", response_model=EnquiryEnvelope, status_code=status.HTTP_201_CREATED)
async def raise_enquiry(
    enquiry_data: EnquiryCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Raise an inspection enquiry
    Selected parameter templates are copied into the stored enquiry.
    """
    workflow = EnquiryWorkflow(db)
    enquiry = await workflow.create_enquiry(enquiry_data)
    return EnquiryEnvelope(
        message="Enquiry raised successfully!",
        enquiry=EnquiryResponse.model_validate(enquiry)
    )


@router.get("/inquiries", response_model=List[EnquiryResponse])
async def list_enquiries(db: AsyncSession = Depends(get_db)):
    """List enquiries, newest first"""
    result = await db.execute(select(Enquiry).order_by(Enquiry.created_at.desc(), Enquiry.id))
    return [EnquiryResponse.model_validate(enquiry) for enquiry in result.scalars().all()]


@router.get("/inquiries/{enquiry_id}", response_model=EnquiryResponse)
async def get_enquiry(enquiry_id: str, db: AsyncSession = Depends(get_db)):
    enquiry = await get_or_404(db, Enquiry, Enquiry.id, enquiry_id, ENQUIRY_NOT_FOUND)
    return EnquiryResponse.model_validate(enquiry)


@router.delete("/inquiries/{enquiry_id}", response_model=DeletedResponse)
async def delete_enquiry(enquiry_id: str, db: AsyncSession = Depends(get_db)):
    async with atomic(db):
        result = await db.execute(delete(Enquiry).where(Enquiry.id == enquiry_id))
        if result.rowcount == 0:
            raise NotFoundError(ENQUIRY_NOT_FOUND)

    logger.info(f"Deleted enquiry {enquiry_id}")
    return DeletedResponse(message="Enquiry deleted successfully!", id=enquiry_id)
