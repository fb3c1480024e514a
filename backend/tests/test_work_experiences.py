def _payload(**overrides):
    data = {
        "position": "Backend Engineer",
        "employment_type": "full_time",
        "company": "Example Corp",
        "location": "Jakarta",
        "location_type": "hybrid",
        "description": ["Built APIs", "  ", "Ran migrations"],
        "start_date": "2023-01-01",
        "end_date": None,
    }
    data.update(overrides)
    return data


def test_create_work_experience_with_skills(client, admin_headers, seed_skills):
    resp = client.post(
        "/api/work-experiences",
        json=_payload(skill_ids=[seed_skills[0].id, seed_skills[1].id]),
        headers=admin_headers,
    )
    assert resp.status_code == 201, resp.text
    data = resp.json()
    assert data["description"] == ["Built APIs", "Ran migrations"]
    assert data["is_current"] is True
    assert {s["id"] for s in data["skills"]} == {seed_skills[0].id, seed_skills[1].id}


def test_create_rejects_unknown_skill(client, admin_headers):
    resp = client.post("/api/work-experiences", json=_payload(skill_ids=["nope"]), headers=admin_headers)
    assert resp.status_code == 409
    assert client.get("/api/work-experiences").json() == []


def test_create_rejects_inverted_period(client, admin_headers):
    resp = client.post(
        "/api/work-experiences",
        json=_payload(start_date="2023-05-01", end_date="2023-01-01"),
        headers=admin_headers,
    )
    assert resp.status_code == 422


def test_update_skill_set_and_clear(client, admin_headers, seed_work_experience, seed_skills):
    url = f"/api/work-experiences/{seed_work_experience.id}"

    resp = client.put(url, json={"skill_ids": [seed_skills[2].id]}, headers=admin_headers)
    assert [s["id"] for s in resp.json()["skills"]] == [seed_skills[2].id]

    resp = client.put(url, json={"company": "New Corp"}, headers=admin_headers)
    assert resp.json()["company"] == "New Corp"
    assert [s["id"] for s in resp.json()["skills"]] == [seed_skills[2].id]

    resp = client.put(url, json={"skill_ids": []}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["skills"] == []


def test_update_end_date_and_validation(client, admin_headers, seed_work_experience):
    url = f"/api/work-experiences/{seed_work_experience.id}"

    resp = client.put(url, json={"end_date": "2024-06-30"}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["is_current"] is False

    resp = client.put(url, json={"end_date": "2020-01-01"}, headers=admin_headers)
    assert resp.status_code == 400

    resp = client.put(url, json={"position": "  "}, headers=admin_headers)
    assert resp.status_code == 400


def test_list_is_ordered_by_start_date(client, admin_headers):
    client.post("/api/work-experiences", json=_payload(company="Old", start_date="2019-01-01"), headers=admin_headers)
    client.post("/api/work-experiences", json=_payload(company="New", start_date="2024-01-01"), headers=admin_headers)
    rows = client.get("/api/work-experiences").json()
    assert [row["company"] for row in rows] == ["New", "Old"]


def test_delete_work_experience(client, admin_headers, seed_work_experience):
    url = f"/api/work-experiences/{seed_work_experience.id}"
    assert client.delete(url, headers=admin_headers).status_code == 200
    assert client.get(url).status_code == 404
