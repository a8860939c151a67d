from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from typing import List
from tradeinspect.config import Settings, get_settings
from tradeinspect.database import get_db, atomic
from tradeinspect.models.company import InternationalCompany
from tradeinspect.schemas.auth import CompanyLogin
from tradeinspect.schemas.common import DeletedResponse
from tradeinspect.schemas.company import (
    InternationalCompanyCreate, InternationalCompanyUpdate, InternationalCompanyResponse,
    InternationalCompanyEnvelope, InternationalCompanyLoginResponse
)
from tradeinspect.core.crud import get_or_404, flush_or_conflict, update_fields, apply_updates
from tradeinspect.core.errors import AuthError, ConflictError, NotFoundError
from tradeinspect.core.security import get_password_hash, verify_password, create_access_token
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

COMPANY_NOT_FOUND = "Company not found."
DUPLICATE_EMAIL = "Company with this email address already exists."
COMPANY_ROLE = "international_company"


@router.post("/register", response_model=InternationalCompanyEnvelope, status_code=status.HTTP_201_CREATED)
async def register_company(
    company_data: InternationalCompanyCreate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Register a new international company"""
    async with atomic(db):
        result = await db.execute(
            select(InternationalCompany).where(InternationalCompany.email_address == company_data.email_address)
        )
        if result.scalar_one_or_none():
            raise ConflictError(DUPLICATE_EMAIL)

        values = company_data.model_dump()
        values["password"] = get_password_hash(company_data.password, rounds=settings.BCRYPT_ROUNDS)
        new_company = InternationalCompany(**values)
        db.add(new_company)
        await flush_or_conflict(db, DUPLICATE_EMAIL)

    await db.refresh(new_company)
    logger.info(f"Registered international company {new_company.id}")

    return InternationalCompanyEnvelope(
        message="International company registered successfully!",
        company=InternationalCompanyResponse.model_validate(new_company)
    )


@router.post("/login", response_model=InternationalCompanyLoginResponse)
async def login_company(
    credentials: CompanyLogin,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Login as an international company and get a session token"""
    result = await db.execute(
        select(InternationalCompany).where(InternationalCompany.email_address == credentials.email_address)
    )
    company = result.scalar_one_or_none()

    if not company or not verify_password(credentials.password, company.password):
        logger.warning("Failed international company login attempt")
        raise AuthError("Invalid credentials.")

    token = create_access_token(
        data={"userId": company.id, "email": company.email_address, "role": COMPANY_ROLE},
        settings=settings
    )
    return InternationalCompanyLoginResponse(
        message="Login successful!",
        token=token,
        company=InternationalCompanyResponse.model_validate(company)
    )


@router.get("", response_model=List[InternationalCompanyResponse])
async def list_companies(db: AsyncSession = Depends(get_db)):
    """List all international companies, newest first"""
    result = await db.execute(
        select(InternationalCompany).order_by(InternationalCompany.created_at.desc(), InternationalCompany.id)
    )
    return [InternationalCompanyResponse.model_validate(company) for company in result.scalars().all()]


@router.get("/{company_id}", response_model=InternationalCompanyResponse)
async def get_company(company_id: str, db: AsyncSession = Depends(get_db)):
    company = await get_or_404(db, InternationalCompany, InternationalCompany.id, company_id, COMPANY_NOT_FOUND)
    return InternationalCompanyResponse.model_validate(company)


@router.put("/{company_id}", response_model=InternationalCompanyEnvelope)
async def update_company(
    company_id: str,
    company_data: InternationalCompanyUpdate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Update an international company; only supplied fields change"""
    async with atomic(db):
        company = await get_or_404(
            db, InternationalCompany, InternationalCompany.id, company_id, COMPANY_NOT_FOUND
        )
        changes = update_fields(company_data.model_dump(exclude_unset=True), settings)
        apply_updates(company, changes)
        await flush_or_conflict(db, DUPLICATE_EMAIL)

    await db.refresh(company)
    logger.info(f"Updated international company {company_id}")
    return InternationalCompanyEnvelope(
        message="International company updated successfully!",
        company=InternationalCompanyResponse.model_validate(company)
    )


@router.delete("/{company_id}", response_model=DeletedResponse)
async def delete_company(company_id: str, db: AsyncSession = Depends(get_db)):
    async with atomic(db):
        result = await db.execute(delete(InternationalCompany).where(InternationalCompany.id == company_id))
        if result.rowcount == 0:
            raise NotFoundError(COMPANY_NOT_FOUND)

    logger.info(f"Deleted international company {company_id}")
    return DeletedResponse(message="International company deleted successfully!", id=company_id)
