"""Tests for the Indian and international company registries."""

import pytest

from tradeinspect.core.security import decode_token


def indian_company(**overrides):
    body = {
        "companyName": "Kerala Spice Exports",
        "emailAddress": "accounts@keralaspice.in",
        "password": "spice-pass",
        "officeNumber": "0484-222333",
        "documentPaths": ["https://docs.keralaspice.in/pan.pdf", "https://docs.keralaspice.in/gst.pdf"],
        "governmentIdPaths": ["https://docs.keralaspice.in/aadhar.pdf"],
        "representativeName": "Lakshmi Nair",
    }
    body.update(overrides)
    return body


def international_company(**overrides):
    body = {
        "companyName": "Rotterdam Grain Traders",
        "emailAddress": "ops@rotterdamgrain.nl",
        "password": "grain-pass",
        "documentUrls": ["https://files.rotterdamgrain.nl/kvk.pdf"],
        "certificatePaths": ["https://files.rotterdamgrain.nl/iso.pdf"],
        "swiftCode": "ABNANL2A",
    }
    body.update(overrides)
    return body


COMPANY_KINDS = [
    ("indiancompany", indian_company, "indian_company"),
    ("internationalcompany", international_company, "international_company"),
]


@pytest.mark.parametrize("resource, make_body, role", COMPANY_KINDS)
class TestCompanyRegistry:

    async def test_register_and_fetch(self, client, api, resource, make_body, role):
        resp = await client.post(f"{api}/{resource}/register", json=make_body())

        assert resp.status_code == 201
        company = resp.json()["company"]
        assert "password" not in company

        fetched = await client.get(f"{api}/{resource}/{company['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == company

    async def test_duplicate_email_conflicts(self, client, api, resource, make_body, role):
        await client.post(f"{api}/{resource}/register", json=make_body())
        resp = await client.post(f"{api}/{resource}/register", json=make_body(companyName="Copycat Ltd"))

        assert resp.status_code == 409
        assert resp.json()["message"] == "Company with this email address already exists."

    async def test_invalid_email_rejected(self, client, api, resource, make_body, role):
        resp = await client.post(f"{api}/{resource}/register", json=make_body(emailAddress="not-an-email"))

        assert resp.status_code == 400
        assert resp.json()["message"] == "Validation failed: emailAddress"

    async def test_login_issues_company_token(self, client, api, settings, resource, make_body, role):
        body = make_body()
        company = (await client.post(f"{api}/{resource}/register", json=body)).json()["company"]

        resp = await client.post(
            f"{api}/{resource}/login",
            json={"emailAddress": body["emailAddress"], "password": body["password"]},
        )

        assert resp.status_code == 200
        data = resp.json()
        assert data["company"]["id"] == company["id"]
        claims = decode_token(data["token"], settings)
        assert claims["userId"] == company["id"]
        assert claims["role"] == role

    async def test_login_with_wrong_password(self, client, api, resource, make_body, role):
        body = make_body()
        await client.post(f"{api}/{resource}/register", json=body)

        resp = await client.post(
            f"{api}/{resource}/login",
            json={"emailAddress": body["emailAddress"], "password": "wrong"},
        )

        assert resp.status_code == 401
        assert resp.json()["message"] == "Invalid credentials."

    async def test_login_with_malformed_email(self, client, api, resource, make_body, role):
        resp = await client.post(
            f"{api}/{resource}/login",
            json={"emailAddress": "not-an-email", "password": "wrong"},
        )

        assert resp.status_code == 401
        assert resp.json()["message"] == "Invalid credentials."

    async def test_update_keeps_other_fields(self, client, api, resource, make_body, role):
        company = (await client.post(f"{api}/{resource}/register", json=make_body())).json()["company"]

        resp = await client.put(f"{api}/{resource}/{company['id']}", json={"officeNumber": "555-0100"})

        assert resp.status_code == 200
        updated = resp.json()["company"]
        assert updated["officeNumber"] == "555-0100"
        assert updated["companyName"] == company["companyName"]

    async def test_updated_password_is_used_for_login(self, client, api, resource, make_body, role):
        body = make_body()
        company = (await client.post(f"{api}/{resource}/register", json=body)).json()["company"]
        await client.put(f"{api}/{resource}/{company['id']}", json={"password": "brand-new"})

        old = await client.post(
            f"{api}/{resource}/login", json={"emailAddress": body["emailAddress"], "password": body["password"]}
        )
        new = await client.post(
            f"{api}/{resource}/login", json={"emailAddress": body["emailAddress"], "password": "brand-new"}
        )

        assert old.status_code == 401
        assert new.status_code == 200

    async def test_empty_update_rejected(self, client, api, resource, make_body, role):
        company = (await client.post(f"{api}/{resource}/register", json=make_body())).json()["company"]

        resp = await client.put(f"{api}/{resource}/{company['id']}", json={})

        assert resp.status_code == 400
        assert resp.json()["message"] == "No update data provided."

    async def test_delete(self, client, api, resource, make_body, role):
        company = (await client.post(f"{api}/{resource}/register", json=make_body())).json()["company"]
        url = f"{api}/{resource}/{company['id']}"

        resp = await client.delete(url)

        assert resp.status_code == 200
        assert "deleted successfully" in resp.json()["message"]
        assert (await client.get(url)).status_code == 404

    async def test_list_contains_registered(self, client, api, resource, make_body, role):
        await client.post(f"{api}/{resource}/register", json=make_body())
        second = make_body(companyName="Second Co", emailAddress="second@secondco.com")
        await client.post(f"{api}/{resource}/register", json=second)

        resp = await client.get(f"{api}/{resource}")

        assert resp.status_code == 200
        assert {c["companyName"] for c in resp.json()} == {make_body()["companyName"], "Second Co"}


async def test_indian_company_lists_keep_document_order(client, api):
    company = (await client.post(f"{api}/indiancompany/register", json=indian_company())).json()["company"]

    assert company["documentPaths"] == indian_company()["documentPaths"]
    assert company["governmentIdPaths"] == ["https://docs.keralaspice.in/aadhar.pdf"]
