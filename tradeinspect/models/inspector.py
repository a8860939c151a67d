from sqlalchemy import Column, String, DateTime, Integer, Text
from sqlalchemy.sql import func
from tradeinspect.database import Base
import uuid


class IndianInspector(Base):
    __tablename__ = "indian_inspectors"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    indian_inspector_id = Column(String, unique=True, nullable=False, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False, index=True)
    mobile_number = Column(String(20), nullable=False)
    email_id = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    address = Column(Text, nullable=False)
    commodity_name = Column(String(255), nullable=False)
    experience = Column(String(100), nullable=False)  # e.g. "5 years", "10+ years"
    aadhar_card_url = Column(String(500), nullable=True)
    bank_account_number = Column(String(50), nullable=False)
    bank_name = Column(String(255), nullable=False)
    ifsc_code = Column(String(20), nullable=False)
    country_code = Column(String(10), nullable=False, default="+91")
    user_id = Column(String(255), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), server_default=func.now())


class InternationalInspector(Base):
    __tablename__ = "international_inspectors"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    country_code = Column(String(10), nullable=False)
    full_name = Column(String(255), nullable=False, index=True)
    email_address = Column(String(255), unique=True, nullable=False, index=True)
    mobile_number = Column(String(50), nullable=False)
    password = Column(String(255), nullable=False)
    address = Column(Text, nullable=True)
    international_inspector_code = Column(String(100), unique=True, nullable=False, index=True)
    commodity_name = Column(String(255), nullable=True)
    experience_years = Column(Integer, nullable=True)
    file_paths = Column(Text, nullable=True)  # Comma-separated paths/URLs to stored files
    bank_account_number = Column(String(100), nullable=True)
    bank_details = Column(Text, nullable=True)
    trade_license_or_legal_document_photo_url = Column(String(500), nullable=True)
    certificate_photo_url = Column(String(500), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), server_default=func.now())
