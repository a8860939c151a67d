from pydantic import EmailStr
from typing import List, Optional
from datetime import datetime
from tradeinspect.schemas.common import CamelModel, NonEmptyStr


# Indian Company Schemas
class IndianCompanyCreate(CamelModel):
    company_name: NonEmptyStr
    office_number: Optional[str] = None
    registered_address: Optional[str] = None
    document_paths: List[str] = []
    password: NonEmptyStr
    bank_account_number: Optional[str] = None
    bank_name: Optional[str] = None
    ifsc_code: Optional[str] = None
    representative_name: Optional[str] = None
    contact_number: Optional[str] = None
    email_address: EmailStr
    government_id_paths: List[str] = []


class IndianCompanyUpdate(CamelModel):
    company_name: Optional[NonEmptyStr] = None
    office_number: Optional[str] = None
    registered_address: Optional[str] = None
    document_paths: Optional[List[str]] = None
    password: Optional[NonEmptyStr] = None
    bank_account_number: Optional[str] = None
    bank_name: Optional[str] = None
    ifsc_code: Optional[str] = None
    representative_name: Optional[str] = None
    contact_number: Optional[str] = None
    email_address: Optional[EmailStr] = None
    government_id_paths: Optional[List[str]] = None


class IndianCompanyResponse(CamelModel):
    id: str
    company_name: str
    office_number: Optional[str]
    registered_address: Optional[str]
    document_paths: List[str]
    bank_account_number: Optional[str]
    bank_name: Optional[str]
    ifsc_code: Optional[str]
    representative_name: Optional[str]
    contact_number: Optional[str]
    email_address: str
    government_id_paths: List[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


class IndianCompanyEnvelope(CamelModel):
    message: str
    company: IndianCompanyResponse


# International Company Schemas
class InternationalCompanyCreate(CamelModel):
    company_name: NonEmptyStr
    office_number: Optional[str] = None
    registered_address: Optional[str] = None
    document_urls: List[str] = []
    certificate_paths: List[str] = []
    password: NonEmptyStr
    email_address: EmailStr
    bank_account_number: Optional[str] = None
    bank_name: Optional[str] = None
    ifsc_code: Optional[str] = None
    swift_code: Optional[str] = None
    government_id_path: Optional[str] = None


class InternationalCompanyUpdate(CamelModel):
    company_name: Optional[NonEmptyStr] = None
    office_number: Optional[str] = None
    registered_address: Optional[str] = None
    document_urls: Optional[List[str]] = None
    certificate_paths: Optional[List[str]] = None
    password: Optional[NonEmptyStr] = None
    email_address: Optional[EmailStr] = None
    bank_account_number: Optional[str] = None
    bank_name: Optional[str] = None
    ifsc_code: Optional[str] = None
    swift_code: Optional[str] = None
    government_id_path: Optional[str] = None


class InternationalCompanyResponse(CamelModel):
    id: str
    company_name: str
    office_number: Optional[str]
    registered_address: Optional[str]
    document_urls: List[str]
    certificate_paths: List[str]
    email_address: str
    bank_account_number: Optional[str]
    bank_name: Optional[str]
    ifsc_code: Optional[str]
    swift_code: Optional[str]
    government_id_path: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


class InternationalCompanyEnvelope(CamelModel):
    message: str
    company: InternationalCompanyResponse


class IndianCompanyLoginResponse(CamelModel):
    message: str
    token: str
    company: IndianCompanyResponse


class InternationalCompanyLoginResponse(CamelModel):
    message: str
    token: str
    company: InternationalCompanyResponse
