from pydantic import BaseModel, EmailStr, StringConstraints
from typing import Annotated, Optional
from datetime import datetime
from tradeinspect.schemas.common import NonEmptyStr, UrlStr


CountryCode = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=3)]
MobileNumber = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=20)]


class CustomerCreate(BaseModel):
    country_code: CountryCode
    full_name: NonEmptyStr
    email_address: EmailStr
    mobile_number: MobileNumber
    password: NonEmptyStr
    trade_license_or_legal_document_photo_url: Optional[UrlStr] = None
    certificate_photo_url: Optional[UrlStr] = None


class CustomerUpdate(BaseModel):
    country_code: Optional[CountryCode] = None
    full_name: Optional[NonEmptyStr] = None
    email_address: Optional[EmailStr] = None
    mobile_number: Optional[MobileNumber] = None
    password: Optional[NonEmptyStr] = None
    trade_license_or_legal_document_photo_url: Optional[UrlStr] = None
    certificate_photo_url: Optional[UrlStr] = None


class CustomerResponse(BaseModel):
    customer_id: str
    country_code: str
    full_name: str
    email_address: str
    mobile_number: str
    trade_license_or_legal_document_photo_url: Optional[str]
    certificate_photo_url: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True


class CustomerEnvelope(BaseModel):
    status: bool = True
    message: str
    customer: CustomerResponse
