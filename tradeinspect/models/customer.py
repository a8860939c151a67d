from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from tradeinspect.database import Base
import uuid


class Customer(Base):
    __tablename__ = "customers"

    customer_id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    country_code = Column(String(3), nullable=False)  # e.g. 'USA', 'IND'
    full_name = Column(String, nullable=False, index=True)
    email_address = Column(String, unique=True, nullable=False, index=True)
    mobile_number = Column(String(20), unique=True, nullable=False, index=True)
    password = Column(String, nullable=False)  # bcrypt hash

    # URLs of uploaded documents, not the files themselves
    trade_license_or_legal_document_photo_url = Column(String, nullable=True)
    certificate_photo_url = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), server_default=func.now())
