"""
Enquiry workflow
Validates a raised enquiry, copies the selected physical/chemical template values
into it and persists one row, all inside a single transaction
"""
import logging
import math
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tradeinspect.core.enquiry_rules import (
    CLASSIFICATION_RULES,
    PARAMETER_RULES,
    RICE_PHYSICAL_FIELDS,
    SCHEDULE_RULES,
    EnquiryDraft,
    run_rules,
)
from tradeinspect.core.errors import NotFoundError, ValidationError
from tradeinspect.database import atomic
from tradeinspect.models.enquiry import Enquiry, InspectionType
from tradeinspect.models.parameter import ChemicalInspectionParam, PhysicalInspectionParam
from tradeinspect.schemas.enquiry import EnquiryCreate

logger = logging.getLogger(__name__)


def coerce_milling_degree(value) -> float:
    """
    Templates store milling degree as a label ("Well Milled") while enquiries
    store a number. Non-numeric labels become 0.0.
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number


class EnquiryWorkflow:
    """Creates enquiries from validated payloads"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_enquiry(self, payload: EnquiryCreate) -> Enquiry:
        """
        Steps:
        1. Validate commodity category, sub-commodity and rice type
        2. Resolve the selected physical and chemical templates
        3. Validate the resolved values
        4. Validate inspection type and dates
        5. Persist the enquiry
        Any failure rolls the transaction back.
        """
        draft = EnquiryDraft(payload=payload)

        async with atomic(self.db):
            run_rules(CLASSIFICATION_RULES, draft)

            if payload.physical_inspection:
                await self._resolve_physical_parameters(draft)
            if payload.chemical_testing:
                await self._resolve_chemical_parameters(draft)

            run_rules(PARAMETER_RULES, draft)
            run_rules(SCHEDULE_RULES, draft)

            enquiry = self._build_enquiry(draft)
            self.db.add(enquiry)
            await self.db.flush()

        await self.db.refresh(enquiry)
        logger.info(f"Enquiry {enquiry.id} raised for {enquiry.commodity_category}")
        return enquiry

    async def _resolve_physical_parameters(self, draft: EnquiryDraft) -> None:
        param_id = draft.payload.selected_phy_param_id
        if not param_id:
            raise ValidationError(
                "Physical Inspection is selected but no Physical Parameter ID was provided."
            )

        result = await self.db.execute(
            select(PhysicalInspectionParam).where(PhysicalInspectionParam.id == param_id)
        )
        template = result.scalar_one_or_none()
        if template is None:
            raise NotFoundError(f"Physical Inspection Parameter with ID {param_id} not found.")

        for name in RICE_PHYSICAL_FIELDS:
            draft.physical_values[name] = getattr(template, name)
        draft.physical_values["milling_degree"] = coerce_milling_degree(template.milling_degree)

    async def _resolve_chemical_parameters(self, draft: EnquiryDraft) -> None:
        param_id = draft.payload.selected_chem_param_id
        if not param_id:
            raise ValidationError(
                "Chemical Testing is selected but no Chemical Parameter ID was provided."
            )

        result = await self.db.execute(
            select(ChemicalInspectionParam).where(ChemicalInspectionParam.id == param_id)
        )
        template = result.scalar_one_or_none()
        if template is None:
            raise NotFoundError(f"Chemical Inspection Parameter with ID {param_id} not found.")

        draft.chemical_parameters = template.parameter_name

    def _build_enquiry(self, draft: EnquiryDraft) -> Enquiry:
        payload = draft.payload
        single_day = draft.inspection_type == InspectionType.SINGLE_DAY.value
        multi_day = draft.inspection_type == InspectionType.MULTI_DAY.value

        sub_commodity: Optional[str] = None
        if draft.expects_predefined_sub_commodity or draft.is_other_category:
            sub_commodity = payload.sub_commodity

        physical = {
            name: (draft.physical_values.get(name) if draft.validates_rice_physical else None)
            for name in RICE_PHYSICAL_FIELDS
        }

        return Enquiry(
            inspection_location=payload.inspection_location,
            country=payload.country,
            urgency_level=payload.urgency_level.value,
            commodity_category=payload.commodity_category,
            sub_commodity=sub_commodity,
            rice_type=payload.rice_type if draft.is_rice_sub_commodity else None,
            volume=payload.volume,
            si_units=payload.si_units.value,
            expected_budget_usd=payload.expected_budget_usd,
            inspection_type=draft.inspection_type,
            single_day_inspection_date=payload.single_day_inspection_date if single_day else None,
            multi_day_inspection_start_date=payload.multi_day_inspection_start_date if multi_day else None,
            multi_day_inspection_end_date=payload.multi_day_inspection_end_date if multi_day else None,
            physical_inspection=payload.physical_inspection,
            chemical_testing=payload.chemical_testing,
            certificates=[certificate.value for certificate in payload.certificates],
            chemical_parameters=draft.chemical_parameters if payload.chemical_testing else None,
            company_name=payload.company_name,
            contact_person_name=payload.contact_person_name,
            email_address=payload.email_address,
            phone_number=payload.phone_number,
            special_requirements=payload.special_requirements,
            **physical,
        )
