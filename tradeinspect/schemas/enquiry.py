from pydantic import EmailStr, Field, StringConstraints
from typing import Annotated, List, Optional
from datetime import date, datetime
from tradeinspect.models.enquiry import Certificate, SIUnit, UrgencyLevel
from tradeinspect.schemas.common import CamelModel, NonEmptyStr


PhoneNumber = Annotated[str, StringConstraints(strip_whitespace=True, pattern=r"^\+?\d{10,15}$")]


class EnquiryCreate(CamelModel):
    """
    Raise-enquiry payload.
    Category, sub-commodity, rice type, inspection type and the parameter ids
    are interdependent and are checked by the enquiry workflow rather than here.
    """
    inspection_location: NonEmptyStr
    country: NonEmptyStr
    urgency_level: UrgencyLevel = UrgencyLevel.LOW
    commodity_category: Optional[str] = None
    sub_commodity: Optional[str] = None
    rice_type: Optional[str] = None
    volume: float = Field(ge=0)
    si_units: SIUnit
    expected_budget_usd: Optional[float] = Field(default=None, ge=0, alias="expectedBudgetUSD")
    inspection_type: Optional[str] = None
    single_day_inspection_date: Optional[date] = None
    multi_day_inspection_start_date: Optional[date] = None
    multi_day_inspection_end_date: Optional[date] = None
    physical_inspection: bool = False
    chemical_testing: bool = False
    certificates: List[Certificate] = []
    selected_phy_param_id: Optional[str] = None
    selected_chem_param_id: Optional[str] = None
    company_name: NonEmptyStr
    contact_person_name: NonEmptyStr
    email_address: EmailStr
    phone_number: PhoneNumber
    special_requirements: Optional[str] = Field(default=None, max_length=1000)


class EnquiryResponse(CamelModel):
    id: str
    inspection_location: str
    country: str
    urgency_level: str
    commodity_category: str
    sub_commodity: Optional[str]
    rice_type: Optional[str]
    volume: float
    si_units: str
    expected_budget_usd: Optional[float] = Field(alias="expectedBudgetUSD")
    inspection_type: str
    single_day_inspection_date: Optional[date]
    multi_day_inspection_start_date: Optional[date]
    multi_day_inspection_end_date: Optional[date]
    physical_inspection: bool
    chemical_testing: bool
    certificates: List[str]
    broken: Optional[float]
    purity: Optional[float]
    yellow_kernel: Optional[float]
    damage_kernel: Optional[float]
    red_kernel: Optional[float]
    paddy_kernel: Optional[float]
    chalky_rice: Optional[float]
    live_insects: Optional[float]
    milling_degree: Optional[float]
    average_grain_length: Optional[float]
    chemical_parameters: Optional[str]
    company_name: str
    contact_person_name: str
    email_address: str
    phone_number: str
    special_requirements: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


class EnquiryEnvelope(CamelModel):
    message: str
    enquiry: EnquiryResponse
