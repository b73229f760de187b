"""
Job API tests: CRUD, assignment endpoints and the enriched job view.
"""

import uuid

import pytest


@pytest.mark.asyncio
async def test_assign_and_unassign_scenario(test_client, create_client, create_person, create_job):
    """Acme gets an Install job; Jane is assigned and then removed."""
    acme = await create_client("Acme")
    job = await create_job(acme["id"], "Install")
    jane = await create_person("Jane")

    jobs = (await test_client.get("/api/jobs")).json()
    assert [(j["title"], j["assignedPeople"]) for j in jobs] == [("Install", [])]

    response = await test_client.post(f"/api/jobs/{job['id']}/people", json={"personId": jane["id"]})
    assert response.status_code == 201
    assert response.json() == {"message": "Person added to job successfully"}

    jobs = (await test_client.get("/api/jobs")).json()
    assert jobs[0]["assignedPeople"] == [jane["id"]]

    response = await test_client.delete(f"/api/jobs/{job['id']}/people/{jane['id']}")
    assert response.status_code == 204

    jobs = (await test_client.get("/api/jobs")).json()
    assert jobs[0]["assignedPeople"] == []


@pytest.mark.asyncio
async def test_create_job_defaults(test_client, create_client, create_job):
    acme = await create_client("Acme")

    job = await create_job(acme["id"], "Install")

    assert uuid.UUID(job["id"])
    assert job["status"] == "pending"
    assert job["assignedPeople"] == []
    assert job["fee"] is None
    assert job["clientId"] == acme["id"]
    assert job["createdAt"] is not None

    response = await test_client.get(f"/api/jobs/{job['id']}")
    assert response.status_code == 200
    assert response.json() == job


@pytest.mark.asyncio
async def test_create_job_with_people_and_fields(test_client, create_client, create_person, create_job):
    acme = await create_client("Acme")
    jane = await create_person("Jane")
    john = await create_person("John")

    job = await create_job(
        acme["id"],
        "Install",
        description="Fit the new boiler",
        status="in-progress",
        jobDate="2026-11-02T09:30:00",
        address="1 Industrial Way",
        fee=125050,
        assignedPeople=[jane["id"], john["id"], jane["id"]],
    )

    assert job["status"] == "in-progress"
    assert job["fee"] == 125050
    assert job["jobDate"].startswith("2026-11-02T09:30:00")
    assert job["assignedPeople"] == sorted([jane["id"], john["id"]])

    fetched = (await test_client.get(f"/api/jobs/{job['id']}")).json()
    assert fetched == job


@pytest.mark.asyncio
async def test_assigned_people_order_is_stable_across_reads(test_client, create_client, create_person, create_job):
    """Create, get, list and details all report assignedPeople in the same order."""
    acme = await create_client("Acme")
    people = [await create_person(f"Worker {n}") for n in range(6)]
    person_ids = sorted((person["id"] for person in people), reverse=True)

    job = await create_job(acme["id"], "Install", assignedPeople=person_ids)

    assert job["assignedPeople"] == sorted(person_ids)
    assert (await test_client.get(f"/api/jobs/{job['id']}")).json() == job
    assert (await test_client.get("/api/jobs")).json() == [job]
    [details] = (await test_client.get("/api/jobs/details")).json()
    assert details["assignedPeople"] == job["assignedPeople"]


@pytest.mark.asyncio
async def test_fee_beyond_32_bits_is_stored(test_client, create_client, create_job):
    acme = await create_client("Acme")

    job = await create_job(acme["id"], "Install", fee=3_000_000_000)

    assert job["fee"] == 3_000_000_000
    assert (await test_client.get(f"/api/jobs/{job['id']}")).json()["fee"] == 3_000_000_000


@pytest.mark.asyncio
async def test_fee_above_column_maximum_is_rejected(test_client, create_client, create_job):
    acme = await create_client("Acme")
    job = await create_job(acme["id"], "Install")

    response = await test_client.post("/api/jobs", json={"title": "Install", "clientId": acme["id"], "fee": 2**63})
    assert response.status_code == 400
    assert any("fee" in detail["loc"] for detail in response.json()["details"])

    response = await test_client.put(f"/api/jobs/{job['id']}", json={"fee": 2**63})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_create_job_with_unknown_client(test_client):
    response = await test_client.post(
        "/api/jobs",
        json={"title": "Install", "clientId": str(uuid.uuid4())},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation failed"
    assert any("clientId" in detail["loc"] for detail in body["details"])


@pytest.mark.asyncio
async def test_create_job_with_unknown_person_writes_nothing(test_client, create_client, create_person):
    """A bad person id rejects the whole job; no job row is left behind."""
    acme = await create_client("Acme")
    jane = await create_person("Jane")

    response = await test_client.post(
        "/api/jobs",
        json={"title": "Install", "clientId": acme["id"], "assignedPeople": [jane["id"], str(uuid.uuid4())]},
    )

    assert response.status_code == 400
    assert any("assignedPeople" in detail["loc"] for detail in response.json()["details"])
    assert (await test_client.get("/api/jobs")).json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload, field",
    [
        ({"title": ""}, "title"),
        ({"fee": -1}, "fee"),
        ({"fee": 10.5}, "fee"),
        ({"status": "on-hold"}, "status"),
    ],
)
async def test_create_job_field_validation(test_client, create_client, payload, field):
    acme = await create_client("Acme")

    response = await test_client.post("/api/jobs", json={"title": "Install", "clientId": acme["id"], **payload})

    assert response.status_code == 400
    assert any(field in detail["loc"] for detail in response.json()["details"])


@pytest.mark.asyncio
async def test_create_job_requires_client(test_client):
    response = await test_client.post("/api/jobs", json={"title": "Install"})

    assert response.status_code == 400
    assert any("clientId" in detail["loc"] for detail in response.json()["details"])


@pytest.mark.asyncio
async def test_list_jobs_in_creation_order_with_filters(test_client, create_client, create_job):
    acme = await create_client("Acme")
    globex = await create_client("Globex")
    await create_job(acme["id"], "First")
    await create_job(globex["id"], "Second", status="completed")
    await create_job(acme["id"], "Third", status="completed")

    jobs = (await test_client.get("/api/jobs")).json()
    assert [j["title"] for j in jobs] == ["First", "Second", "Third"]

    jobs = (await test_client.get("/api/jobs", params={"status": "completed"})).json()
    assert [j["title"] for j in jobs] == ["Second", "Third"]

    jobs = (await test_client.get("/api/jobs", params={"status": "completed", "clientId": acme["id"]})).json()
    assert [j["title"] for j in jobs] == ["Third"]


@pytest.mark.asyncio
async def test_update_job_partial_keeps_assignments(test_client, create_client, create_person, create_job):
    acme = await create_client("Acme")
    jane = await create_person("Jane")
    job = await create_job(acme["id"], "Install", fee=1000, assignedPeople=[jane["id"]])

    response = await test_client.put(f"/api/jobs/{job['id']}", json={"title": "Install boiler"})

    assert response.status_code == 200
    updated = response.json()
    assert updated["title"] == "Install boiler"
    assert updated["fee"] == 1000
    assert updated["assignedPeople"] == [jane["id"]]


@pytest.mark.asyncio
async def test_update_job_replaces_assignment_set(test_client, create_client, create_person, create_job):
    """assignedPeople on update is the complete membership, not an addition."""
    acme = await create_client("Acme")
    jane = await create_person("Jane")
    john = await create_person("John")
    ann = await create_person("Ann")
    job = await create_job(acme["id"], "Install", assignedPeople=[jane["id"], john["id"]])

    response = await test_client.put(f"/api/jobs/{job['id']}", json={"assignedPeople": [ann["id"], john["id"]]})

    assert response.status_code == 200
    assert response.json()["assignedPeople"] == sorted([ann["id"], john["id"]])
    fetched = (await test_client.get(f"/api/jobs/{job['id']}")).json()
    assert fetched == response.json()


@pytest.mark.asyncio
async def test_update_job_with_empty_list_removes_all_assignments(
    test_client, create_client, create_person, create_job
):
    acme = await create_client("Acme")
    jane = await create_person("Jane")
    john = await create_person("John")
    job = await create_job(acme["id"], "Install", assignedPeople=[jane["id"], john["id"]])

    response = await test_client.put(f"/api/jobs/{job['id']}", json={"assignedPeople": []})

    assert response.status_code == 200
    assert response.json()["assignedPeople"] == []
    assert (await test_client.get(f"/api/jobs/{job['id']}")).json()["assignedPeople"] == []


@pytest.mark.asyncio
async def test_update_job_status_has_no_transition_rules(test_client, create_client, create_job):
    acme = await create_client("Acme")
    job = await create_job(acme["id"], "Install", status="completed")

    response = await test_client.put(f"/api/jobs/{job['id']}", json={"status": "pending"})

    assert response.status_code == 200
    assert response.json()["status"] == "pending"


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["title", "status", "clientId", "assignedPeople"])
async def test_update_job_rejects_null_for_required_fields(test_client, create_client, create_job, field):
    acme = await create_client("Acme")
    job = await create_job(acme["id"], "Install")

    response = await test_client.put(f"/api/jobs/{job['id']}", json={field: None})

    assert response.status_code == 400
    assert any(field in detail["loc"] for detail in response.json()["details"])


@pytest.mark.asyncio
async def test_update_job_with_unknown_client(test_client, create_client, create_job):
    acme = await create_client("Acme")
    job = await create_job(acme["id"], "Install")

    response = await test_client.put(f"/api/jobs/{job['id']}", json={"clientId": str(uuid.uuid4())})

    assert response.status_code == 400
    assert (await test_client.get(f"/api/jobs/{job['id']}")).json()["clientId"] == acme["id"]


@pytest.mark.asyncio
async def test_update_missing_job_returns_404(test_client):
    response = await test_client.put(f"/api/jobs/{uuid.uuid4()}", json={"title": "Ghost"})

    assert response.status_code == 404
    assert response.json() == {"error": "Job not found"}


@pytest.mark.asyncio
async def test_delete_job_cascades_assignments(test_client, create_client, create_person, create_job):
    acme = await create_client("Acme")
    jane = await create_person("Jane")
    job = await create_job(acme["id"], "Install", assignedPeople=[jane["id"]])

    response = await test_client.delete(f"/api/jobs/{job['id']}")
    assert response.status_code == 204

    assert (await test_client.get(f"/api/jobs/{job['id']}")).status_code == 404
    assert (await test_client.get(f"/api/people/{jane['id']}/jobs")).json() == []
    assert (await test_client.delete(f"/api/jobs/{job['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_add_person_twice_keeps_one_assignment(test_client, create_client, create_person, create_job):
    acme = await create_client("Acme")
    jane = await create_person("Jane")
    job = await create_job(acme["id"], "Install")

    first = await test_client.post(f"/api/jobs/{job['id']}/people", json={"personId": jane["id"]})
    second = await test_client.post(f"/api/jobs/{job['id']}/people", json={"personId": jane["id"]})

    assert first.status_code == 201
    assert second.status_code == 404
    assert second.json() == {"error": "Job not found or person already assigned"}
    assert (await test_client.get(f"/api/jobs/{job['id']}")).json()["assignedPeople"] == [jane["id"]]


@pytest.mark.asyncio
async def test_add_person_requires_person_id(test_client, create_client, create_job):
    acme = await create_client("Acme")
    job = await create_job(acme["id"], "Install")

    response = await test_client.post(f"/api/jobs/{job['id']}/people", json={})

    assert response.status_code == 400
    assert any("personId" in detail["loc"] for detail in response.json()["details"])


@pytest.mark.asyncio
async def test_add_person_to_missing_job_or_unknown_person(test_client, create_client, create_person, create_job):
    acme = await create_client("Acme")
    jane = await create_person("Jane")
    job = await create_job(acme["id"], "Install")

    response = await test_client.post(f"/api/jobs/{uuid.uuid4()}/people", json={"personId": jane["id"]})
    assert response.status_code == 404

    response = await test_client.post(f"/api/jobs/{job['id']}/people", json={"personId": str(uuid.uuid4())})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_remove_person_leaves_other_assignments(test_client, create_client, create_person, create_job):
    acme = await create_client("Acme")
    jane = await create_person("Jane")
    john = await create_person("John")
    job = await create_job(acme["id"], "Install", assignedPeople=[jane["id"], john["id"]])

    response = await test_client.delete(f"/api/jobs/{job['id']}/people/{jane['id']}")
    assert response.status_code == 204
    assert (await test_client.get(f"/api/jobs/{job['id']}")).json()["assignedPeople"] == [john["id"]]

    response = await test_client.delete(f"/api/jobs/{job['id']}/people/{jane['id']}")
    assert response.status_code == 404
    assert response.json() == {"error": "Job assignment not found"}


@pytest.mark.asyncio
async def test_deleting_person_removes_their_assignments(test_client, create_client, create_person, create_job):
    acme = await create_client("Acme")
    jane = await create_person("Jane")
    john = await create_person("John")
    job = await create_job(acme["id"], "Install", assignedPeople=[jane["id"], john["id"]])

    assert (await test_client.delete(f"/api/people/{jane['id']}")).status_code == 204

    assert (await test_client.get(f"/api/jobs/{job['id']}")).json()["assignedPeople"] == [john["id"]]


@pytest.mark.asyncio
async def test_job_details_joins_client_and_people(test_client, create_client, create_person, create_job):
    acme = await create_client("Acme")
    jane = await create_person("Jane")
    await create_person("Zed")
    job = await create_job(acme["id"], "Install", assignedPeople=[jane["id"]])

    response = await test_client.get("/api/jobs/details")

    assert response.status_code == 200
    [details] = response.json()
    assert details["id"] == job["id"]
    assert details["client"]["name"] == "Acme"
    assert [p["name"] for p in details["assignedPeopleDetails"]] == ["Jane"]
    assert details["assignedPeople"] == [jane["id"]]


@pytest.mark.asyncio
async def test_job_details_search_and_status_filter(test_client, create_client, create_job):
    acme = await create_client("Acme")
    globex = await create_client("Globex")
    await create_job(acme["id"], "Install", description="boiler")
    await create_job(globex["id"], "Repair", status="completed")
    await create_job(globex["id"], "Paint", status="pending")

    def titles(response):
        return [job["title"] for job in response.json()]

    assert titles(await test_client.get("/api/jobs/details", params={"q": "BOILER"})) == ["Install"]
    assert titles(await test_client.get("/api/jobs/details", params={"q": "globex"})) == ["Repair", "Paint"]
    assert titles(await test_client.get("/api/jobs/details", params={"status": "completed"})) == ["Repair"]
    assert titles(
        await test_client.get("/api/jobs/details", params={"q": "globex", "status": "pending"})
    ) == ["Paint"]
    assert len((await test_client.get("/api/jobs/details", params={"status": "all"})).json()) == 3

    response = await test_client.get("/api/jobs/details", params={"status": "on-hold"})
    assert response.status_code == 400
