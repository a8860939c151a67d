# Pydantic schemas
from tradeinspect.schemas.common import DeletedResponse
from tradeinspect.schemas.auth import UserLogin, UserRegister, AuthResponse, TokenPayload, CompanyLogin
from tradeinspect.schemas.customer import CustomerCreate, CustomerUpdate, CustomerResponse, CustomerEnvelope
from tradeinspect.schemas.inspector import (
    IndianInspectorCreate, IndianInspectorUpdate, IndianInspectorResponse, IndianInspectorEnvelope,
    InternationalInspectorCreate, InternationalInspectorUpdate, InternationalInspectorResponse,
    InternationalInspectorEnvelope
)
from tradeinspect.schemas.company import (
    IndianCompanyCreate, IndianCompanyUpdate, IndianCompanyResponse, IndianCompanyEnvelope,
    InternationalCompanyCreate, InternationalCompanyUpdate, InternationalCompanyResponse,
    InternationalCompanyEnvelope, IndianCompanyLoginResponse, InternationalCompanyLoginResponse
)
from tradeinspect.schemas.parameter import (
    PhysicalParameterCreate, PhysicalParameterResponse,
    ChemicalParameterCreate, ChemicalParameterUpdate, ChemicalParameterResponse
)
from tradeinspect.schemas.enquiry import EnquiryCreate, EnquiryResponse, EnquiryEnvelope

__all__ = [
    "DeletedResponse",
    "UserLogin", "UserRegister", "AuthResponse", "TokenPayload", "CompanyLogin",
    "CustomerCreate", "CustomerUpdate", "CustomerResponse", "CustomerEnvelope",
    "IndianInspectorCreate", "IndianInspectorUpdate", "IndianInspectorResponse", "IndianInspectorEnvelope",
    "InternationalInspectorCreate", "InternationalInspectorUpdate", "InternationalInspectorResponse",
    "InternationalInspectorEnvelope",
    "IndianCompanyCreate", "IndianCompanyUpdate", "IndianCompanyResponse", "IndianCompanyEnvelope",
    "InternationalCompanyCreate", "InternationalCompanyUpdate", "InternationalCompanyResponse",
    "InternationalCompanyEnvelope", "IndianCompanyLoginResponse", "InternationalCompanyLoginResponse",
    "PhysicalParameterCreate", "PhysicalParameterResponse",
    "ChemicalParameterCreate", "ChemicalParameterUpdate", "ChemicalParameterResponse",
    "EnquiryCreate", "EnquiryResponse", "EnquiryEnvelope",
]
