from sqlalchemy import Column, String, DateTime, Text, JSON
from sqlalchemy.sql import func
from tradeinspect.database import Base
import uuid


class IndianCompany(Base):
    __tablename__ = "indian_companies"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    company_name = Column(String(255), nullable=False)
    office_number = Column(String(50), nullable=True)
    registered_address = Column(Text, nullable=True)
    document_paths = Column(JSON, nullable=False, default=list)  # PAN/GST/IEC document URLs
    password = Column(String(255), nullable=False)
    bank_account_number = Column(String(50), nullable=True)
    bank_name = Column(String(255), nullable=True)
    ifsc_code = Column(String(20), nullable=True)
    representative_name = Column(String(255), nullable=True)
    contact_number = Column(String(50), nullable=True)
    email_address = Column(String(255), unique=True, nullable=False, index=True)
    government_id_paths = Column(JSON, nullable=False, default=list)  # Aadhar/PAN/Passport of representative

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), server_default=func.now())


class InternationalCompany(Base):
    __tablename__ = "international_companies"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    company_name = Column(String(255), nullable=False)
    office_number = Column(String(50), nullable=True)
    registered_address = Column(Text, nullable=True)
    document_urls = Column(JSON, nullable=False, default=list)
    certificate_paths = Column(JSON, nullable=False, default=list)
    password = Column(String(255), nullable=False)
    email_address = Column(String(255), unique=True, nullable=False, index=True)
    bank_account_number = Column(String(255), nullable=True)
    bank_name = Column(String(255), nullable=True)
    ifsc_code = Column(String(50), nullable=True)
    swift_code = Column(String(50), nullable=True)
    government_id_path = Column(String(500), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), server_default=func.now())
