from sqlalchemy import Column, String, DateTime, Date, Float, Boolean, Text, JSON
from sqlalchemy.sql import func
import enum
from tradeinspect.database import Base
import uuid


class UrgencyLevel(str, enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class SIUnit(str, enum.Enum):
    KG = "kg"
    TON = "ton"
    LITER = "liter"
    GALLON = "gallon"
    PIECES = "pieces"
    OTHER = "other"


class InspectionType(str, enum.Enum):
    SINGLE_DAY = "single_day"
    MULTI_DAY = "multi_day"


class Certificate(str, enum.Enum):
    NABL = "NABL"
    NABCB = "NABCB"
    COC = "COC"
    FOFSE = "FOFSE"
    GAFTA = "GAFTA"
    ISO = "ISO"
    OTHER = "Other"


class Enquiry(Base):
    """
    Customer-submitted inspection request.
    Physical and chemical parameter values are copied from the selected
    templates when the enquiry is raised, so later template edits do not
    change existing enquiries.
    """
    __tablename__ = "raise_enquiries"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))

    # Location
    inspection_location = Column(String, nullable=False)
    country = Column(String, nullable=False)

    # Urgency and commodity
    urgency_level = Column(String(20), nullable=False, default=UrgencyLevel.LOW.value)
    commodity_category = Column(String, nullable=False, index=True)
    sub_commodity = Column(String, nullable=True)
    rice_type = Column(String, nullable=True)
    volume = Column(Float, nullable=False)
    si_units = Column(String(20), nullable=False)
    expected_budget_usd = Column(Float, nullable=True)

    # Inspection type and dates
    inspection_type = Column(String(20), nullable=False)
    single_day_inspection_date = Column(Date, nullable=True)
    multi_day_inspection_start_date = Column(Date, nullable=True)
    multi_day_inspection_end_date = Column(Date, nullable=True)

    # Services required
    physical_inspection = Column(Boolean, nullable=False, default=False)
    chemical_testing = Column(Boolean, nullable=False, default=False)
    certificates = Column(JSON, nullable=False, default=list)

    # Rice physical parameters copied from the selected template
    broken = Column(Float, nullable=True)
    purity = Column(Float, nullable=True)
    yellow_kernel = Column(Float, nullable=True)
    damage_kernel = Column(Float, nullable=True)
    red_kernel = Column(Float, nullable=True)
    paddy_kernel = Column(Float, nullable=True)
    chalky_rice = Column(Float, nullable=True)
    live_insects = Column(Float, nullable=True)
    milling_degree = Column(Float, nullable=True)
    average_grain_length = Column(Float, nullable=True)

    # Chemical parameter name copied from the selected template
    chemical_parameters = Column(Text, nullable=True)

    # Contact information
    company_name = Column(String, nullable=False)
    contact_person_name = Column(String, nullable=False)
    email_address = Column(String, nullable=False)
    phone_number = Column(String(20), nullable=False)
    special_requirements = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), server_default=func.now())
