"""Tests for raising enquiries through /raiseenquiry."""

from sqlalchemy import func, select

from tradeinspect.models.enquiry import Enquiry


RICE_FIELDS = (
    "broken",
    "purity",
    "yellowKernel",
    "damageKernel",
    "redKernel",
    "paddyKernel",
    "chalkyRice",
    "liveInsects",
    "millingDegree",
    "averageGrainLength",
)


def rice_enquiry(enquiry_payload, **overrides):
    values = {
        "commodityCategory": "Food & Beverages",
        "subCommodity": "Rice",
        "riceType": "Basmati Rice",
    }
    values.update(overrides)
    return enquiry_payload(**values)


async def _count_enquiries(db_session) -> int:
    return await db_session.scalar(select(func.count()).select_from(Enquiry))


async def test_raise_enquiry_without_inspections(client, api, enquiry_payload):
    resp = await client.post(f"{api}/raiseenquiry/inquiries", json=enquiry_payload())

    assert resp.status_code == 201
    body = resp.json()
    enquiry = body["enquiry"]
    assert body["message"]
    assert enquiry["commodityCategory"] == "Electronics & Electrical"
    assert enquiry["subCommodity"] == "Devices"
    assert enquiry["riceType"] is None
    assert enquiry["inspectionType"] == "single_day"
    assert enquiry["singleDayInspectionDate"] == "2026-11-02"
    assert enquiry["expectedBudgetUSD"] == 2500
    assert enquiry["certificates"] == ["ISO"]
    assert all(enquiry[name] is None for name in RICE_FIELDS)
    assert enquiry["chemicalParameters"] is None


async def test_rice_physical_values_are_copied_from_template(
    client, api, enquiry_payload, make_physical_parameter
):
    template = await make_physical_parameter(broken=4.0, purity=97.5, milling_degree="Well Milled")

    resp = await client.post(
        f"{api}/raiseenquiry/inquiries",
        json=rice_enquiry(enquiry_payload, physicalInspection=True, selectedPhyParamId=template.id),
    )

    assert resp.status_code == 201
    enquiry = resp.json()["enquiry"]
    assert enquiry["riceType"] == "Basmati Rice"
    assert enquiry["broken"] == 4.0
    assert enquiry["purity"] == 97.5
    assert enquiry["averageGrainLength"] == 7.2
    # Milling degree labels are not numeric and are stored as 0
    assert enquiry["millingDegree"] == 0.0


async def test_category_match_is_case_insensitive(client, api, enquiry_payload):
    resp = await client.post(
        f"{api}/raiseenquiry/inquiries",
        json=enquiry_payload(commodityCategory="FOOD & BEVERAGES", subCommodity="wheat"),
    )

    assert resp.status_code == 201
    assert resp.json()["enquiry"]["subCommodity"] == "wheat"


async def test_other_category_accepts_free_text_sub_commodity(client, api, enquiry_payload):
    resp = await client.post(
        f"{api}/raiseenquiry/inquiries",
        json=enquiry_payload(commodityCategory="Other", subCommodity="Handmade Toys"),
    )

    assert resp.status_code == 201
    assert resp.json()["enquiry"]["subCommodity"] == "Handmade Toys"


async def test_rice_without_rice_type_rejected(client, api, enquiry_payload, db_session):
    resp = await client.post(
        f"{api}/raiseenquiry/inquiries",
        json=rice_enquiry(enquiry_payload, riceType=None),
    )

    assert resp.status_code == 400
    assert resp.json()["message"] == "Rice Type is required when 'Rice' is selected as sub-commodity."
    assert await _count_enquiries(db_session) == 0


async def test_rice_type_outside_rice_rejected(client, api, enquiry_payload):
    resp = await client.post(
        f"{api}/raiseenquiry/inquiries",
        json=enquiry_payload(riceType="Basmati Rice"),
    )

    assert resp.status_code == 400
    assert "Rice Type should only be provided" in resp.json()["message"]


async def test_invalid_category_rejected(client, api, enquiry_payload):
    resp = await client.post(
        f"{api}/raiseenquiry/inquiries",
        json=enquiry_payload(commodityCategory="Furniture"),
    )

    assert resp.status_code == 400
    assert resp.json()["message"].startswith("Invalid commodity category.")


async def test_sub_commodity_required_for_predefined_category(client, api, enquiry_payload):
    resp = await client.post(
        f"{api}/raiseenquiry/inquiries",
        json=enquiry_payload(subCommodity=None),
    )

    assert resp.status_code == 400
    assert resp.json()["message"] == "Sub-commodity is required for Electronics & Electrical."


async def test_out_of_range_template_value_rejected(
    client, api, enquiry_payload, make_physical_parameter, db_session
):
    template = await make_physical_parameter(broken=150.0)

    resp = await client.post(
        f"{api}/raiseenquiry/inquiries",
        json=rice_enquiry(enquiry_payload, physicalInspection=True, selectedPhyParamId=template.id),
    )

    assert resp.status_code == 400
    assert resp.json()["message"] == "broken must be a number between 0 and 100%."
    assert await _count_enquiries(db_session) == 0


async def test_physical_inspection_without_template_id(client, api, enquiry_payload, db_session):
    resp = await client.post(
        f"{api}/raiseenquiry/inquiries",
        json=rice_enquiry(enquiry_payload, physicalInspection=True),
    )

    assert resp.status_code == 400
    assert resp.json()["message"] == "Physical Inspection is selected but no Physical Parameter ID was provided."
    assert await _count_enquiries(db_session) == 0


async def test_unknown_physical_template(client, api, enquiry_payload, db_session):
    resp = await client.post(
        f"{api}/raiseenquiry/inquiries",
        json=rice_enquiry(enquiry_payload, physicalInspection=True, selectedPhyParamId="missing"),
    )

    assert resp.status_code == 404
    assert resp.json()["message"] == "Physical Inspection Parameter with ID missing not found."
    assert await _count_enquiries(db_session) == 0


async def test_physical_inspection_for_non_rice_commodity_rejected(
    client, api, enquiry_payload, make_physical_parameter, db_session
):
    template = await make_physical_parameter()

    resp = await client.post(
        f"{api}/raiseenquiry/inquiries",
        json=enquiry_payload(physicalInspection=True, selectedPhyParamId=template.id),
    )

    assert resp.status_code == 400
    assert resp.json()["message"].startswith(
        "Rice-specific physical inspection parameters should only be provided"
    )
    assert await _count_enquiries(db_session) == 0


async def test_physical_inspection_for_rice_without_specific_type_rejected(
    client, api, enquiry_payload, make_physical_parameter
):
    template = await make_physical_parameter()

    resp = await client.post(
        f"{api}/raiseenquiry/inquiries",
        json=enquiry_payload(
            commodityCategory="Food & Beverages",
            subCommodity="Wheat",
            physicalInspection=True,
            selectedPhyParamId=template.id,
        ),
    )

    assert resp.status_code == 400
    assert "Rice-specific physical inspection parameters" in resp.json()["message"]


async def test_chemical_parameter_name_is_copied(client, api, enquiry_payload, make_chemical_parameter):
    template = await make_chemical_parameter("Aflatoxin")

    resp = await client.post(
        f"{api}/raiseenquiry/inquiries",
        json=enquiry_payload(chemicalTesting=True, selectedChemParamId=template.id),
    )

    assert resp.status_code == 201
    assert resp.json()["enquiry"]["chemicalParameters"] == "Aflatoxin"


async def test_unknown_chemical_template(client, api, enquiry_payload):
    resp = await client.post(
        f"{api}/raiseenquiry/inquiries",
        json=enquiry_payload(chemicalTesting=True, selectedChemParamId="nope"),
    )

    assert resp.status_code == 404
    assert resp.json()["message"] == "Chemical Inspection Parameter with ID nope not found."


async def test_single_day_requires_date(client, api, enquiry_payload):
    resp = await client.post(
        f"{api}/raiseenquiry/inquiries",
        json=enquiry_payload(singleDayInspectionDate=None),
    )

    assert resp.status_code == 400
    assert resp.json()["message"] == "Single day inspection date is required for 'Single Day' inspection type."


async def test_single_day_with_multi_day_dates_rejected(client, api, enquiry_payload):
    resp = await client.post(
        f"{api}/raiseenquiry/inquiries",
        json=enquiry_payload(multiDayInspectionStartDate="2026-11-01"),
    )

    assert resp.status_code == 400
    assert resp.json()["message"] == (
        "Multi-day inspection dates should not be provided for 'Single Day' inspection type."
    )


async def test_multi_day_enquiry(client, api, enquiry_payload):
    resp = await client.post(
        f"{api}/raiseenquiry/inquiries",
        json=enquiry_payload(
            inspectionType="Multi_Day",
            singleDayInspectionDate=None,
            multiDayInspectionStartDate="2026-11-01",
            multiDayInspectionEndDate="2026-11-05",
        ),
    )

    assert resp.status_code == 201
    enquiry = resp.json()["enquiry"]
    assert enquiry["inspectionType"] == "multi_day"
    assert enquiry["singleDayInspectionDate"] is None
    assert enquiry["multiDayInspectionEndDate"] == "2026-11-05"


async def test_multi_day_start_after_end_rejected(client, api, enquiry_payload):
    resp = await client.post(
        f"{api}/raiseenquiry/inquiries",
        json=enquiry_payload(
            inspectionType="multi_day",
            singleDayInspectionDate=None,
            multiDayInspectionStartDate="2026-11-09",
            multiDayInspectionEndDate="2026-11-05",
        ),
    )

    assert resp.status_code == 400
    assert resp.json()["message"] == "Multi-day inspection start date cannot be after end date."


async def test_invalid_phone_rejected_while_parsing(client, api, enquiry_payload):
    resp = await client.post(f"{api}/raiseenquiry/inquiries", json=enquiry_payload(phoneNumber="12-34"))

    assert resp.status_code == 400
    assert resp.json()["message"] == "Validation failed: phoneNumber"


async def test_unknown_certificate_rejected(client, api, enquiry_payload):
    resp = await client.post(f"{api}/raiseenquiry/inquiries", json=enquiry_payload(certificates=["FDA"]))

    assert resp.status_code == 400
    assert resp.json()["message"] == "Validation failed: certificates.0"


async def test_list_get_and_delete(client, api, enquiry_payload):
    created = (await client.post(f"{api}/raiseenquiry/inquiries", json=enquiry_payload())).json()["enquiry"]

    listed = await client.get(f"{api}/raiseenquiry/inquiries")
    assert [e["id"] for e in listed.json()] == [created["id"]]

    fetched = await client.get(f"{api}/raiseenquiry/inquiries/{created['id']}")
    assert fetched.json() == created

    deleted = await client.delete(f"{api}/raiseenquiry/inquiries/{created['id']}")
    assert deleted.status_code == 200
    assert (await client.get(f"{api}/raiseenquiry/inquiries/{created['id']}")).status_code == 404


async def test_lowercase_rice_selection_copies_purity(client, api, enquiry_payload, make_physical_parameter):
    template = await make_physical_parameter(purity=95.0, broken=3.0)

    resp = await client.post(
        f"{api}/raiseenquiry/inquiries",
        json=rice_enquiry(
            enquiry_payload,
            subCommodity="rice",
            riceType="basmati rice",
            physicalInspection=True,
            selectedPhyParamId=template.id,
        ),
    )

    assert resp.status_code == 201
    enquiry = resp.json()["enquiry"]
    assert enquiry["purity"] == 95.0
    assert enquiry["broken"] == 3.0
