from pydantic import EmailStr, Field
from typing import Optional
from datetime import datetime
from tradeinspect.schemas.common import CamelModel, NonEmptyStr, UrlStr


# Indian Inspector Schemas
class IndianInspectorCreate(CamelModel):
    name: NonEmptyStr
    mobile_number: NonEmptyStr
    email_id: EmailStr
    password: NonEmptyStr
    address: NonEmptyStr
    commodity_name: NonEmptyStr
    experience: NonEmptyStr
    aadhar_card_url: Optional[UrlStr] = None
    bank_account_number: NonEmptyStr
    bank_name: NonEmptyStr
    ifsc_code: NonEmptyStr
    country_code: NonEmptyStr = "+91"
    user_id: NonEmptyStr


class IndianInspectorUpdate(CamelModel):
    name: Optional[NonEmptyStr] = None
    mobile_number: Optional[NonEmptyStr] = None
    email_id: Optional[EmailStr] = None
    password: Optional[NonEmptyStr] = None
    address: Optional[NonEmptyStr] = None
    commodity_name: Optional[NonEmptyStr] = None
    experience: Optional[NonEmptyStr] = None
    aadhar_card_url: Optional[UrlStr] = None
    bank_account_number: Optional[NonEmptyStr] = None
    bank_name: Optional[NonEmptyStr] = None
    ifsc_code: Optional[NonEmptyStr] = None
    country_code: Optional[NonEmptyStr] = None
    user_id: Optional[NonEmptyStr] = None


class IndianInspectorResponse(CamelModel):
    id: str
    indian_inspector_id: str
    name: str
    mobile_number: str
    email_id: str
    address: str
    commodity_name: str
    experience: str
    aadhar_card_url: Optional[str]
    bank_account_number: str
    bank_name: str
    ifsc_code: str
    country_code: str
    user_id: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


class IndianInspectorEnvelope(CamelModel):
    status: bool = True
    message: str
    inspector: IndianInspectorResponse


# International Inspector Schemas
class InternationalInspectorCreate(CamelModel):
    country_code: NonEmptyStr
    full_name: NonEmptyStr
    email_address: EmailStr
    mobile_number: NonEmptyStr
    password: NonEmptyStr
    address: Optional[str] = None
    international_inspector_code: NonEmptyStr
    commodity_name: Optional[str] = None
    experience_years: Optional[int] = Field(default=None, ge=0)
    file_paths: Optional[str] = None
    bank_account_number: Optional[str] = None
    bank_details: Optional[str] = None
    trade_license_or_legal_document_photo_url: Optional[UrlStr] = None
    certificate_photo_url: Optional[UrlStr] = None


class InternationalInspectorUpdate(CamelModel):
    country_code: Optional[NonEmptyStr] = None
    full_name: Optional[NonEmptyStr] = None
    email_address: Optional[EmailStr] = None
    mobile_number: Optional[NonEmptyStr] = None
    password: Optional[NonEmptyStr] = None
    address: Optional[str] = None
    international_inspector_code: Optional[NonEmptyStr] = None
    commodity_name: Optional[str] = None
    experience_years: Optional[int] = Field(default=None, ge=0)
    file_paths: Optional[str] = None
    bank_account_number: Optional[str] = None
    bank_details: Optional[str] = None
    trade_license_or_legal_document_photo_url: Optional[UrlStr] = None
    certificate_photo_url: Optional[UrlStr] = None


class InternationalInspectorResponse(CamelModel):
    id: str
    country_code: str
    full_name: str
    email_address: str
    mobile_number: str
    address: Optional[str]
    international_inspector_code: str
    commodity_name: Optional[str]
    experience_years: Optional[int]
    file_paths: Optional[str]
    bank_account_number: Optional[str]
    bank_details: Optional[str]
    trade_license_or_legal_document_photo_url: Optional[str]
    certificate_photo_url: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


class InternationalInspectorEnvelope(CamelModel):
    status: bool = True
    message: str
    inspector: InternationalInspectorResponse
