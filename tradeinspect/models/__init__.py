from tradeinspect.models.user import User, UserRole
from tradeinspect.models.customer import Customer
from tradeinspect.models.inspector import IndianInspector, InternationalInspector
from tradeinspect.models.company import IndianCompany, InternationalCompany
from tradeinspect.models.parameter import PhysicalInspectionParam, ChemicalInspectionParam, MillingDegree
from tradeinspect.models.enquiry import Enquiry, UrgencyLevel, SIUnit, InspectionType, Certificate

__all__ = [
    "User",
    "UserRole",
    "Customer",
    "IndianInspector",
    "InternationalInspector",
    "IndianCompany",
    "InternationalCompany",
    "PhysicalInspectionParam",
    "ChemicalInspectionParam",
    "MillingDegree",
    "Enquiry",
    "UrgencyLevel",
    "SIUnit",
    "InspectionType",
    "Certificate",
]
