"""Tests for the physical and chemical parameter catalogs."""

from sqlalchemy import func, select

from tradeinspect.models.parameter import ChemicalInspectionParam


def physical_body(**overrides):
    body = {
        "broken": 4.5,
        "purity": 96,
        "yellowKernel": 0.5,
        "damageKernel": 0.8,
        "redKernel": 0.0,
        "paddyKernel": 0.2,
        "chalkyRice": 2.5,
        "liveInsects": 0,
        "millingDegree": "Well Milled",
        "averageGrainLength": 7.8,
    }
    body.update(overrides)
    return body


class TestPhysicalParameters:

    async def test_save_and_fetch(self, client, api):
        resp = await client.post(f"{api}/physical-parameter/save", json=physical_body())

        assert resp.status_code == 201
        saved = resp.json()["data"]
        assert saved["millingDegree"] == "Well Milled"
        assert saved["purity"] == 96

        fetched = await client.get(f"{api}/physical-parameter/{saved['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["data"] == saved

    async def test_percentage_above_range_names_field(self, client, api):
        resp = await client.post(f"{api}/physical-parameter/save", json=physical_body(broken=101))

        assert resp.status_code == 400
        assert resp.json()["message"] == "Validation failed: broken"

    async def test_negative_count_rejected(self, client, api):
        resp = await client.post(f"{api}/physical-parameter/save", json=physical_body(liveInsects=-2))

        assert resp.status_code == 400
        assert resp.json()["message"] == "Validation failed: liveInsects"

    async def test_numeric_strings_rejected(self, client, api):
        resp = await client.post(f"{api}/physical-parameter/save", json=physical_body(purity="96"))

        assert resp.status_code == 400
        assert resp.json()["message"] == "Validation failed: purity"

    async def test_unknown_milling_degree_rejected(self, client, api):
        resp = await client.post(f"{api}/physical-parameter/save", json=physical_body(millingDegree="Polished"))

        assert resp.status_code == 400
        assert resp.json()["message"] == "Validation failed: millingDegree"

    async def test_list_and_delete(self, client, api):
        first = (await client.post(f"{api}/physical-parameter/save", json=physical_body())).json()["data"]
        await client.post(f"{api}/physical-parameter/save", json=physical_body(broken=1))

        listed = await client.get(f"{api}/physical-parameter")
        assert listed.status_code == 200
        assert len(listed.json()["data"]) == 2

        deleted = await client.delete(f"{api}/physical-parameter/{first['id']}")
        assert deleted.status_code == 200

        assert (await client.get(f"{api}/physical-parameter/{first['id']}")).status_code == 404
        assert len((await client.get(f"{api}/physical-parameter")).json()["data"]) == 1


class TestChemicalParameters:

    async def test_batch_save_and_list_sorted_by_name(self, client, api):
        resp = await client.post(
            f"{api}/chemical-parameter/save",
            json=[
                {"parameter_name": "Moisture", "min_value": 0, "max_value": 14, "unit": "%"},
                {"parameter_name": "Aflatoxin", "max_value": 10, "unit": "ppb"},
            ],
        )

        assert resp.status_code == 201
        assert len(resp.json()["data"]) == 2

        listed = await client.get(f"{api}/chemical-parameter")
        assert [p["parameter_name"] for p in listed.json()["data"]] == ["Aflatoxin", "Moisture"]

    async def test_empty_batch_rejected(self, client, api):
        resp = await client.post(f"{api}/chemical-parameter/save", json=[])

        assert resp.status_code == 400

    async def test_invalid_item_rejects_whole_batch(self, client, api, db_session):
        resp = await client.post(
            f"{api}/chemical-parameter/save",
            json=[
                {"parameter_name": "Moisture", "min_value": 0, "max_value": 14},
                {"parameter_name": "Ash", "min_value": 5, "max_value": 1},
            ],
        )

        assert resp.status_code == 400
        count = await db_session.scalar(select(func.count()).select_from(ChemicalInspectionParam))
        assert count == 0

    async def test_duplicate_name_in_batch_rolls_back(self, client, api, db_session):
        resp = await client.post(
            f"{api}/chemical-parameter/save",
            json=[{"parameter_name": "Protein"}, {"parameter_name": "Protein"}],
        )

        assert resp.status_code == 409
        count = await db_session.scalar(select(func.count()).select_from(ChemicalInspectionParam))
        assert count == 0

    async def test_update_rechecks_range_against_stored_values(self, client, api, make_chemical_parameter):
        template = await make_chemical_parameter("Moisture", min_value=2.0, max_value=14.0)

        bad = await client.put(f"{api}/chemical-parameter/{template.id}", json={"max_value": 1.0})
        assert bad.status_code == 400

        good = await client.put(f"{api}/chemical-parameter/{template.id}", json={"unit": "percent"})
        assert good.status_code == 200
        assert good.json()["data"]["unit"] == "percent"
        assert good.json()["data"]["max_value"] == 14.0

    async def test_update_rejects_null_name(self, client, api, make_chemical_parameter):
        template = await make_chemical_parameter("Moisture")

        resp = await client.put(f"{api}/chemical-parameter/{template.id}", json={"parameter_name": None})

        assert resp.status_code == 400
        assert resp.json()["message"] == "parameter_name cannot be null."
        fetched = await client.get(f"{api}/chemical-parameter/{template.id}")
        assert fetched.json()["data"]["parameter_name"] == "Moisture"

    async def test_get_and_delete_unknown(self, client, api):
        assert (await client.get(f"{api}/chemical-parameter/nope")).status_code == 404
        assert (await client.delete(f"{api}/chemical-parameter/nope")).status_code == 404

    async def test_delete(self, client, api, make_chemical_parameter):
        template = await make_chemical_parameter("Iron")

        resp = await client.delete(f"{api}/chemical-parameter/{template.id}")

        assert resp.status_code == 200
        assert resp.json()["id"] == template.id


async def test_chemical_listing_is_stable_between_reads(client, api, make_chemical_parameter):
    for name in ("Sodium", "Ash", "Lead"):
        await make_chemical_parameter(name)

    first = (await client.get(f"{api}/chemical-parameter")).json()
    second = (await client.get(f"{api}/chemical-parameter")).json()

    assert first == second
    assert [p["parameter_name"] for p in first["data"]] == ["Ash", "Lead", "Sodium"]
