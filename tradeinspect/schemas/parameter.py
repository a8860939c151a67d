from pydantic import BaseModel, Field, model_validator
from typing import Annotated, List, Optional
from datetime import datetime
from tradeinspect.models.parameter import MillingDegree
from tradeinspect.schemas.common import CamelModel, NonEmptyStr


# JSON numbers only; numeric strings are rejected
Percentage = Annotated[float, Field(strict=True, ge=0, le=100)]
NonNegative = Annotated[float, Field(strict=True, ge=0)]


# Physical Parameter Schemas
class PhysicalParameterCreate(CamelModel):
    broken: Percentage
    purity: Percentage
    yellow_kernel: Percentage
    damage_kernel: Percentage
    red_kernel: Percentage
    paddy_kernel: Percentage
    chalky_rice: Percentage
    live_insects: NonNegative
    milling_degree: MillingDegree
    average_grain_length: NonNegative


class PhysicalParameterResponse(CamelModel):
    id: str
    broken: float
    purity: float
    yellow_kernel: float
    damage_kernel: float
    red_kernel: float
    paddy_kernel: float
    chalky_rice: float
    live_insects: float
    milling_degree: str
    average_grain_length: float
    created_at: Optional[datetime]


class PhysicalParameterEnvelope(BaseModel):
    message: str
    data: PhysicalParameterResponse


class PhysicalParameterListEnvelope(BaseModel):
    message: str
    data: List[PhysicalParameterResponse]


# Chemical Parameter Schemas
class _MinMaxMixin(BaseModel):

    @model_validator(mode="after")
    def check_range(self):
        if self.min_value is not None and self.max_value is not None and self.min_value > self.max_value:
            raise ValueError("min_value cannot be greater than max_value")
        return self


class ChemicalParameterCreate(_MinMaxMixin):
    parameter_name: NonEmptyStr
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    unit: Optional[str] = None


class ChemicalParameterUpdate(_MinMaxMixin):
    parameter_name: Optional[NonEmptyStr] = None
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    unit: Optional[str] = None


class ChemicalParameterResponse(BaseModel):
    id: str
    parameter_name: str
    min_value: Optional[float]
    max_value: Optional[float]
    unit: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True


class ChemicalParameterEnvelope(BaseModel):
    message: str
    data: ChemicalParameterResponse


class ChemicalParameterListEnvelope(BaseModel):
    message: str
    data: List[ChemicalParameterResponse]
