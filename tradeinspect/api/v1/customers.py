from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, or_
from typing import List
from tradeinspect.config import Settings, get_settings
from tradeinspect.database import get_db, atomic
from tradeinspect.models.customer import Customer
from tradeinspect.schemas.customer import CustomerCreate, CustomerUpdate, CustomerResponse, CustomerEnvelope
from tradeinspect.core.crud import get_or_404, flush_or_conflict, update_fields, apply_updates
from tradeinspect.core.errors import ConflictError, NotFoundError
from tradeinspect.core.security import get_password_hash
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

CUSTOMER_NOT_FOUND = "Customer not found"
DUPLICATE_CUSTOMER = "Email address or mobile number already exists."


@router.post("", response_model=CustomerEnvelope, status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer_data: CustomerCreate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Create a new customer"""
    async with atomic(db):
        result = await db.execute(
            select(Customer).where(
                or_(
                    Customer.email_address == customer_data.email_address,
                    Customer.mobile_number == customer_data.mobile_number
                )
            )
        )
        existing = result.scalars().first()
        if existing:
            if existing.email_address == customer_data.email_address:
                message = "Customer with this email address already exists."
            else:
                message = "Customer with this phone number already exists."
            logger.warning(f"Customer create rejected: {message}")
            raise ConflictError(message)

        new_customer = Customer(
            country_code=customer_data.country_code,
            full_name=customer_data.full_name,
            email_address=customer_data.email_address,
            mobile_number=customer_data.mobile_number,
            password=get_password_hash(customer_data.password, rounds=settings.BCRYPT_ROUNDS),
            trade_license_or_legal_document_photo_url=customer_data.trade_license_or_legal_document_photo_url,
            certificate_photo_url=customer_data.certificate_photo_url
        )
        db.add(new_customer)
        await flush_or_conflict(db, DUPLICATE_CUSTOMER)

    await db.refresh(new_customer)
    logger.info(f"Created customer {new_customer.customer_id}")

    return CustomerEnvelope(
        message="Customer created successfully!",
        customer=CustomerResponse.model_validate(new_customer)
    )


@router.get("", response_model=List[CustomerResponse])
async def list_customers(db: AsyncSession = Depends(get_db)):
    """List all customers ordered by name"""
    result = await db.execute(select(Customer).order_by(Customer.full_name, Customer.customer_id))
    return [CustomerResponse.model_validate(customer) for customer in result.scalars().all()]


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(customer_id: str, db: AsyncSession = Depends(get_db)):
    """Get a single customer"""
    customer = await get_or_404(db, Customer, Customer.customer_id, customer_id, CUSTOMER_NOT_FOUND)
    return CustomerResponse.model_validate(customer)


@router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    customer_id: str,
    customer_data: CustomerUpdate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Update a customer; only supplied fields change"""
    async with atomic(db):
        customer = await get_or_404(db, Customer, Customer.customer_id, customer_id, CUSTOMER_NOT_FOUND)
        changes = update_fields(customer_data.model_dump(exclude_unset=True), settings)
        apply_updates(customer, changes)
        await flush_or_conflict(db, DUPLICATE_CUSTOMER)

    await db.refresh(customer)
    logger.info(f"Updated customer {customer_id}")
    return CustomerResponse.model_validate(customer)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(customer_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a customer"""
    async with atomic(db):
        result = await db.execute(delete(Customer).where(Customer.customer_id == customer_id))
        if result.rowcount == 0:
            raise NotFoundError(CUSTOMER_NOT_FOUND)

    logger.info(f"Deleted customer {customer_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
