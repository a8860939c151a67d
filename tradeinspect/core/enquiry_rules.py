"""
Validation rules for raising an enquiry
Each rule takes the enquiry draft and returns an error message, or None when the
draft passes. Rules are grouped into ordered lists and evaluated in sequence;
the first failing rule aborts the enquiry with a ValidationError.
"""
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence
import logging

from tradeinspect.core.errors import ValidationError
from tradeinspect.models.enquiry import InspectionType
from tradeinspect.schemas.enquiry import EnquiryCreate

logger = logging.getLogger(__name__)


COMMODITY_CATEGORIES = (
    "food & beverages",
    "textiles & garments",
    "electronics & electrical",
    "pharmaceuticals",
    "chemicals",
    "automotive",
    "other",
)

# 'other' is absent on purpose: its sub-commodity is free text
SUB_COMMODITIES: Dict[str, Sequence[str]] = {
    "food & beverages": ("rice", "wheat", "pulses", "spices", "tea&coffee", "oil and seeds"),
    "textiles & garments": ("cotton", "silk", "wool", "synthetic"),
    "electronics & electrical": ("components", "devices", "home appliances"),
    "pharmaceuticals": ("apis", "finished products", "medical devices"),
    "chemicals": ("industrial", "organic", "specialty"),
    "automotive": ("parts", "accessories"),
}

OTHER_CATEGORY = "other"
FOOD_AND_BEVERAGES = "food & beverages"
RICE = "rice"

RICE_TYPES = (
    "basmati rice",
    "jasmine rice",
    "brown rice",
    "white rice",
    "wild rice",
    "arborio rice",
    "black rice",
    "red rice",
    "sticky rice",
    "parboiled rice",
    "long grain rice",
    "medium grain rice",
    "short grain rice",
    "organic rice",
    "non-gmo rice",
    "broken rice",
    "rice bran",
    "rice flour",
)

INSPECTION_TYPES = tuple(inspection_type.value for inspection_type in InspectionType)

# Order matters: the first failing field is the one reported
RICE_PHYSICAL_FIELDS = (
    "broken",
    "purity",
    "yellow_kernel",
    "damage_kernel",
    "red_kernel",
    "paddy_kernel",
    "chalky_rice",
    "live_insects",
    "milling_degree",
    "average_grain_length",
)
PERCENTAGE_FIELDS = frozenset({
    "broken",
    "purity",
    "yellow_kernel",
    "damage_kernel",
    "red_kernel",
    "paddy_kernel",
    "chalky_rice",
    "milling_degree",
})
NON_NEGATIVE_FIELDS = frozenset({"live_insects", "average_grain_length"})


def _lower(value: Optional[str]) -> str:
    return value.strip().lower() if value else ""


def _readable(field_name: str) -> str:
    return field_name.replace("_", " ")


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class EnquiryDraft:
    """Submitted payload plus the values resolved from parameter templates"""
    payload: EnquiryCreate
    physical_values: Dict[str, Optional[float]] = field(default_factory=dict)
    chemical_parameters: Optional[str] = None

    @property
    def category(self) -> str:
        return _lower(self.payload.commodity_category)

    @property
    def sub_commodity(self) -> str:
        return _lower(self.payload.sub_commodity)

    @property
    def rice_type(self) -> str:
        return _lower(self.payload.rice_type)

    @property
    def inspection_type(self) -> str:
        return _lower(self.payload.inspection_type)

    @property
    def expects_predefined_sub_commodity(self) -> bool:
        return self.category in SUB_COMMODITIES

    @property
    def is_other_category(self) -> bool:
        return self.category == OTHER_CATEGORY

    @property
    def is_rice_sub_commodity(self) -> bool:
        return self.category == FOOD_AND_BEVERAGES and self.sub_commodity == RICE

    @property
    def is_specific_rice_type(self) -> bool:
        return self.is_rice_sub_commodity and self.rice_type in RICE_TYPES

    @property
    def validates_rice_physical(self) -> bool:
        return bool(self.payload.physical_inspection) and self.is_specific_rice_type


Rule = Callable[[EnquiryDraft], Optional[str]]


# Commodity classification

def check_commodity_category(draft: EnquiryDraft) -> Optional[str]:
    if draft.category not in COMMODITY_CATEGORIES:
        return f"Invalid commodity category. Allowed: {', '.join(COMMODITY_CATEGORIES)}."
    return None


def check_sub_commodity(draft: EnquiryDraft) -> Optional[str]:
    sub_commodity = draft.payload.sub_commodity
    if draft.expects_predefined_sub_commodity:
        if not sub_commodity:
            return f"Sub-commodity is required for {draft.payload.commodity_category}."
        allowed = SUB_COMMODITIES[draft.category]
        if draft.sub_commodity not in allowed:
            return (
                f"Invalid sub-commodity '{sub_commodity}'. "
                f"Allowed for {draft.payload.commodity_category}: {', '.join(allowed)}."
            )
    elif draft.is_other_category:
        if not sub_commodity or not sub_commodity.strip():
            return "Sub-commodity is required when 'Other' is selected as commodity category."
    elif sub_commodity:
        return (
            "Sub-commodity should only be provided for commodity categories that require it "
            "or when 'Other' is selected."
        )
    return None


def check_rice_type(draft: EnquiryDraft) -> Optional[str]:
    rice_type = draft.payload.rice_type
    if draft.is_rice_sub_commodity:
        if not rice_type:
            return "Rice Type is required when 'Rice' is selected as sub-commodity."
        if draft.rice_type not in RICE_TYPES:
            return f"Invalid Rice Type '{rice_type}'. Allowed for Rice sub-commodity: {', '.join(RICE_TYPES)}."
    elif rice_type:
        return "Rice Type should only be provided when 'Food & Beverages' -> 'Rice' is selected as sub-commodity."
    return None


# Resolved parameter values

def check_rice_physical_values(draft: EnquiryDraft) -> Optional[str]:
    if not draft.payload.physical_inspection:
        return None

    if draft.validates_rice_physical:
        for name in RICE_PHYSICAL_FIELDS:
            value = draft.physical_values.get(name)
            if value is None:
                return (
                    f"{_readable(name)} is required for rice physical inspection when a specific rice type "
                    f"is selected, but was not found in the selected physical parameter record ({name})."
                )
            if name in PERCENTAGE_FIELDS and (not _is_number(value) or value < 0 or value > 100):
                return f"{_readable(name)} must be a number between 0 and 100%."
            if name in NON_NEGATIVE_FIELDS and (not _is_number(value) or value < 0):
                return f"{_readable(name)} must be a non-negative number."
        return None

    # Resolved template values are only accepted for a specific rice type
    if any(draft.physical_values.get(name) is not None for name in RICE_PHYSICAL_FIELDS):
        return (
            "Rice-specific physical inspection parameters should only be provided when "
            "'Food & Beverages' -> 'Rice' and a specific Rice Type are selected for physical inspection."
        )
    return None


def check_chemical_parameters(draft: EnquiryDraft) -> Optional[str]:
    if not draft.payload.chemical_testing:
        return None
    if not draft.chemical_parameters or not draft.chemical_parameters.strip():
        return (
            "Chemical parameters are required if chemical testing is selected, "
            "but were not found in the selected chemical parameter record."
        )
    return None


# Inspection schedule

def check_inspection_type(draft: EnquiryDraft) -> Optional[str]:
    if draft.inspection_type not in INSPECTION_TYPES:
        return f"Invalid inspection type. Allowed: {', '.join(INSPECTION_TYPES)}."
    return None


def check_single_day_dates(draft: EnquiryDraft) -> Optional[str]:
    if draft.inspection_type != InspectionType.SINGLE_DAY.value:
        return None
    payload = draft.payload
    if not payload.single_day_inspection_date:
        return "Single day inspection date is required for 'Single Day' inspection type."
    if payload.multi_day_inspection_start_date or payload.multi_day_inspection_end_date:
        return "Multi-day inspection dates should not be provided for 'Single Day' inspection type."
    return None


def check_multi_day_dates(draft: EnquiryDraft) -> Optional[str]:
    if draft.inspection_type != InspectionType.MULTI_DAY.value:
        return None
    payload = draft.payload
    if not payload.multi_day_inspection_start_date or not payload.multi_day_inspection_end_date:
        return "Multi-day inspection start and end dates are required for 'Multi Day' inspection type."
    if payload.multi_day_inspection_start_date > payload.multi_day_inspection_end_date:
        return "Multi-day inspection start date cannot be after end date."
    if payload.single_day_inspection_date:
        return "Single day inspection date should not be provided for 'Multi Day' inspection type."
    return None


CLASSIFICATION_RULES: List[Rule] = [
    check_commodity_category,
    check_sub_commodity,
    check_rice_type,
]

PARAMETER_RULES: List[Rule] = [
    check_rice_physical_values,
    check_chemical_parameters,
]

SCHEDULE_RULES: List[Rule] = [
    check_inspection_type,
    check_single_day_dates,
    check_multi_day_dates,
]


def run_rules(rules: Sequence[Rule], draft: EnquiryDraft) -> None:
    """Evaluate rules in order and raise on the first failure"""
    for rule in rules:
        message = rule(draft)
        if message:
            logger.warning(f"Enquiry rejected by {rule.__name__}: {message}")
            raise ValidationError(message)
