from sqlalchemy import Column, String, DateTime, Float
from sqlalchemy.sql import func
import enum
from tradeinspect.database import Base
import uuid


class MillingDegree(str, enum.Enum):
    UNDER_MILLED = "Under Milled"
    WELL_MILLED = "Well Milled"
    OVER_MILLED = "Over Milled"


class PhysicalInspectionParam(Base):
    """Reusable rice physical inspection template; percentages are 0-100"""
    __tablename__ = "physical_inspection_params"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    broken = Column(Float, nullable=False)
    purity = Column(Float, nullable=False)
    yellow_kernel = Column(Float, nullable=False)
    damage_kernel = Column(Float, nullable=False)
    red_kernel = Column(Float, nullable=False)
    paddy_kernel = Column(Float, nullable=False)
    chalky_rice = Column(Float, nullable=False)
    live_insects = Column(Float, nullable=False)
    milling_degree = Column(String(20), nullable=False)  # one of MillingDegree
    average_grain_length = Column(Float, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), server_default=func.now())


class ChemicalInspectionParam(Base):
    __tablename__ = "chemical_inspection_params"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    parameter_name = Column(String(255), unique=True, nullable=False, index=True)
    min_value = Column(Float, nullable=True)
    max_value = Column(Float, nullable=True)
    unit = Column(String(50), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), server_default=func.now())
