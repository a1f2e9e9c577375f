"""
Pet Store Backend: Pet Store API Integration Tests
=====================================================

What:  End-to-end tests of the /pet_store endpoints.
How:   HTTPX AsyncClient drives the app in-process; the session dependencies
       point at a fresh SQLite file per test (see conftest.session_factory).

What we test:
    ✅ Create / update / get / list / delete round trips
    ✅ Employees and customers appear in the store they were added to
    ✅ A customer added twice is one membership
    ✅ Deleting a store removes its employees and keeps its customers
    ✅ 404 for unknown ids, 400 for ids that belong to another store
    ✅ Error body shape and X-Request-ID header
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from pet_store.models import Customer, Employee, pet_store_customer


async def create_store(client, **fields):
    payload = {"pet_store_name": "Store", **fields}
    response = await client.post("/pet_store", json=payload)
    assert response.status_code == 201
    return response.json()


class TestPetStoreCrud:
    """Store lifecycle through the HTTP API."""

    @pytest.mark.asyncio
    async def test_create_returns_store_with_new_id(self, test_client, sample_pet_store_data):
        response = await test_client.post("/pet_store", json=sample_pet_store_data)

        assert response.status_code == 201
        body = response.json()
        assert body["pet_store_id"] is not None
        assert body["pet_store_name"] == "Paws & Claws"
        assert body["pet_store_zip"] == "62701"
        assert body["employees"] == []
        assert body["customers"] == []

    @pytest.mark.asyncio
    async def test_creates_get_distinct_ids(self, test_client):
        first = await create_store(test_client, pet_store_name="One")
        second = await create_store(test_client, pet_store_name="Two")

        assert first["pet_store_id"] != second["pet_store_id"]

    @pytest.mark.asyncio
    async def test_update_keeps_id_and_overwrites_fields(self, test_client, sample_pet_store_data):
        created = await create_store(test_client, **sample_pet_store_data)
        store_id = created["pet_store_id"]

        response = await test_client.put(
            f"/pet_store/{store_id}",
            json={"pet_store_id": 999, "pet_store_name": "Renamed", "pet_store_city": "Peoria"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["pet_store_id"] == store_id
        assert body["pet_store_name"] == "Renamed"
        assert body["pet_store_city"] == "Peoria"
        assert body["pet_store_phone"] is None

        fetched = (await test_client.get(f"/pet_store/{store_id}")).json()
        assert fetched["pet_store_name"] == "Renamed"

    @pytest.mark.asyncio
    async def test_update_unknown_store_returns_404(self, test_client):
        response = await test_client.put("/pet_store/404", json={"pet_store_name": "Ghost"})

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "not_found"
        assert body["message"] == "Pet store with ID=404 was not found"

    @pytest.mark.asyncio
    async def test_get_unknown_store_returns_404(self, test_client):
        response = await test_client.get("/pet_store/12345")

        assert response.status_code == 404
        assert "12345" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_list_returns_summaries_in_id_order(self, test_client, sample_employee_data):
        first = await create_store(test_client, pet_store_name="One")
        await create_store(test_client, pet_store_name="Two")
        await test_client.post(
            f"/pet_store/{first['pet_store_id']}/employee", json=sample_employee_data
        )

        response = await test_client.get("/pet_store")

        assert response.status_code == 200
        stores = response.json()
        assert [s["pet_store_name"] for s in stores] == ["One", "Two"]
        assert all(s["employees"] == [] and s["customers"] == [] for s in stores)

    @pytest.mark.asyncio
    async def test_list_empty(self, test_client):
        response = await test_client.get("/pet_store")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_delete_returns_message(self, test_client):
        store_id = (await create_store(test_client))["pet_store_id"]

        response = await test_client.delete(f"/pet_store/{store_id}")

        assert response.status_code == 200
        assert response.json() == {
            "message": f"Pet store with ID={store_id} was deleted successfully"
        }
        assert (await test_client.get(f"/pet_store/{store_id}")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_unknown_store_returns_404(self, test_client):
        response = await test_client.delete("/pet_store/77")

        assert response.status_code == 404
        assert response.json()["message"] == "Pet store with ID=77 was not found"

    @pytest.mark.asyncio
    async def test_field_too_long_rejected(self, test_client):
        response = await test_client.post("/pet_store", json={"pet_store_name": "x" * 61})

        assert response.status_code == 422


class TestEmployees:
    """POST /pet_store/{id}/employee."""

    @pytest.mark.asyncio
    async def test_added_employee_appears_in_store(self, test_client, sample_employee_data):
        store_id = (await create_store(test_client))["pet_store_id"]

        response = await test_client.post(
            f"/pet_store/{store_id}/employee", json=sample_employee_data
        )

        assert response.status_code == 201
        employee = response.json()
        assert employee["employee_id"] is not None
        assert employee["employee_job_title"] == "Clerk"
        assert "pet_store" not in employee

        store = (await test_client.get(f"/pet_store/{store_id}")).json()
        assert store["employees"] == [employee]

    @pytest.mark.asyncio
    async def test_update_employee_in_same_store(self, test_client, sample_employee_data):
        store_id = (await create_store(test_client))["pet_store_id"]
        employee = (
            await test_client.post(f"/pet_store/{store_id}/employee", json=sample_employee_data)
        ).json()

        response = await test_client.post(
            f"/pet_store/{store_id}/employee",
            json={**sample_employee_data, "employee_id": employee["employee_id"], "employee_job_title": "Manager"},
        )

        assert response.status_code == 201
        assert response.json()["employee_id"] == employee["employee_id"]
        store = (await test_client.get(f"/pet_store/{store_id}")).json()
        assert [e["employee_job_title"] for e in store["employees"]] == ["Manager"]

    @pytest.mark.asyncio
    async def test_employee_of_other_store_returns_400(self, test_client, sample_employee_data):
        store_x = (await create_store(test_client, pet_store_name="X"))["pet_store_id"]
        store_y = (await create_store(test_client, pet_store_name="Y"))["pet_store_id"]
        employee = (
            await test_client.post(f"/pet_store/{store_y}/employee", json=sample_employee_data)
        ).json()

        response = await test_client.post(
            f"/pet_store/{store_x}/employee",
            json={"employee_id": employee["employee_id"], "employee_first_name": "Moved"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["message"] == (
            f"Employee with ID={employee['employee_id']} does not belong to "
            f"pet store with ID={store_x}"
        )

        # Nothing changed in either store
        assert (await test_client.get(f"/pet_store/{store_x}")).json()["employees"] == []
        store_y_body = (await test_client.get(f"/pet_store/{store_y}")).json()
        assert store_y_body["employees"] == [employee]

    @pytest.mark.asyncio
    async def test_unknown_employee_returns_404(self, test_client):
        store_id = (await create_store(test_client))["pet_store_id"]

        response = await test_client.post(
            f"/pet_store/{store_id}/employee", json={"employee_id": 31}
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Employee with ID=31 was not found"

    @pytest.mark.asyncio
    async def test_unknown_store_returns_404(self, test_client, sample_employee_data):
        response = await test_client.post("/pet_store/8/employee", json=sample_employee_data)

        assert response.status_code == 404
        assert response.json()["message"] == "Pet store with ID=8 was not found"


class TestCustomers:
    """POST /pet_store/{id}/customer."""

    @pytest.mark.asyncio
    async def test_added_customer_appears_in_store(self, test_client, sample_customer_data):
        store_id = (await create_store(test_client))["pet_store_id"]

        response = await test_client.post(
            f"/pet_store/{store_id}/customer", json=sample_customer_data
        )

        assert response.status_code == 201
        customer = response.json()
        assert customer["customer_email"] == "dana@example.com"
        assert "pet_stores" not in customer

        store = (await test_client.get(f"/pet_store/{store_id}")).json()
        assert store["customers"] == [customer]

    @pytest.mark.asyncio
    async def test_same_customer_twice_is_one_membership(
        self, test_client, session_factory, sample_customer_data
    ):
        store_id = (await create_store(test_client))["pet_store_id"]
        customer = (
            await test_client.post(f"/pet_store/{store_id}/customer", json=sample_customer_data)
        ).json()

        response = await test_client.post(
            f"/pet_store/{store_id}/customer",
            json={**sample_customer_data, "customer_id": customer["customer_id"], "customer_last_name": "Jones"},
        )

        assert response.status_code == 201
        store = (await test_client.get(f"/pet_store/{store_id}")).json()
        assert len(store["customers"]) == 1
        assert store["customers"][0]["customer_last_name"] == "Jones"

        async with session_factory() as session:
            memberships = await session.scalar(
                select(func.count()).select_from(pet_store_customer)
            )
        assert memberships == 1

    @pytest.mark.asyncio
    async def test_customer_of_other_store_returns_400(self, test_client, sample_customer_data):
        store_a = (await create_store(test_client, pet_store_name="A"))["pet_store_id"]
        store_b = (await create_store(test_client, pet_store_name="B"))["pet_store_id"]
        customer = (
            await test_client.post(f"/pet_store/{store_a}/customer", json=sample_customer_data)
        ).json()

        response = await test_client.post(
            f"/pet_store/{store_b}/customer", json={"customer_id": customer["customer_id"]}
        )

        assert response.status_code == 400
        assert response.json()["details"] == {
            "customer_id": customer["customer_id"],
            "pet_store_id": store_b,
        }
        assert (await test_client.get(f"/pet_store/{store_b}")).json()["customers"] == []

    @pytest.mark.asyncio
    async def test_unknown_customer_returns_404(self, test_client):
        store_id = (await create_store(test_client))["pet_store_id"]

        response = await test_client.post(
            f"/pet_store/{store_id}/customer", json={"customer_id": 5}
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Customer with ID=5 was not found"


class TestDeleteCascade:
    """Deleting a store: employees go, customers stay."""

    @pytest.mark.asyncio
    async def test_delete_removes_employees_and_keeps_customers(
        self, test_client, session_factory, sample_employee_data, sample_customer_data
    ):
        doomed = (await create_store(test_client, pet_store_name="Doomed"))["pet_store_id"]
        other = (await create_store(test_client, pet_store_name="Other"))["pet_store_id"]
        await test_client.post(f"/pet_store/{doomed}/employee", json=sample_employee_data)
        await test_client.post(f"/pet_store/{other}/employee", json=sample_employee_data)
        customer = (
            await test_client.post(f"/pet_store/{doomed}/customer", json=sample_customer_data)
        ).json()

        response = await test_client.delete(f"/pet_store/{doomed}")
        assert response.status_code == 200

        async with session_factory() as session:
            employees = (await session.scalars(select(Employee))).all()
            customers = (
                await session.scalars(select(Customer).options(selectinload(Customer.pet_stores)))
            ).all()

        assert [e.pet_store_id for e in employees] == [other]
        assert [c.customer_id for c in customers] == [customer["customer_id"]]
        assert customers[0].pet_stores == set()

        other_store = (await test_client.get(f"/pet_store/{other}")).json()
        assert len(other_store["employees"]) == 1


class TestRequestId:
    """Correlation id header on every response."""

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get("/pet_store")

        assert response.headers.get("X-Request-ID")

    @pytest.mark.asyncio
    async def test_request_id_echoed_and_in_error_body(self, test_client):
        response = await test_client.get("/pet_store/1", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"
        assert response.json()["request_id"] == "abc123"
