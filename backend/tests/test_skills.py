from app.models.skill import Skill
from app.models.work_experience import WorkExperience


def test_skill_crud(client, admin_headers):
    resp = client.post("/api/skills", json={"name": "Python", "icon": "python"}, headers=admin_headers)
    assert resp.status_code == 201
    skill_id = resp.json()["id"]

    resp = client.put(f"/api/skills/{skill_id}", json={"name": "Python 3"}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["name"] == "Python 3"
    assert resp.json()["icon"] == "python"

    rows = client.get("/api/skills").json()
    assert [row["id"] for row in rows] == [skill_id]

    resp = client.delete(f"/api/skills/{skill_id}", headers=admin_headers)
    assert resp.status_code == 200
    assert client.get(f"/api/skills/{skill_id}").status_code == 404


def test_skill_create_requires_admin(client):
    resp = client.post("/api/skills", json={"name": "Python", "icon": "python"})
    assert resp.status_code in (401, 403)


def test_skill_create_validates_body(client, admin_headers):
    resp = client.post("/api/skills", json={"name": "", "icon": "x"}, headers=admin_headers)
    assert resp.status_code == 422


def test_deleting_skill_unlinks_it(client, admin_headers, db, seed_work_experience, seed_skills):
    skill_id = seed_skills[0].id
    resp = client.delete(f"/api/skills/{skill_id}", headers=admin_headers)
    assert resp.status_code == 200

    db.expire_all()
    row = db.query(WorkExperience).filter(WorkExperience.id == seed_work_experience.id).first()
    assert row.skills == []
    assert db.query(Skill).filter(Skill.id == skill_id).first() is None


def test_update_missing_skill(client, admin_headers):
    resp = client.put("/api/skills/missing", json={"name": "x"}, headers=admin_headers)
    assert resp.status_code == 404
    assert resp.json()["error"] == "not_found"


def test_sosmed_crud(client, admin_headers):
    resp = client.post(
        "/api/sosmed",
        json={"name": "GitHub", "url": "https://github.com/example"},
        headers=admin_headers,
    )
    assert resp.status_code == 201
    sosmed_id = resp.json()["id"]

    resp = client.put(f"/api/sosmed/{sosmed_id}", json={"url": "https://github.com/other"}, headers=admin_headers)
    assert resp.json()["url"] == "https://github.com/other"

    assert len(client.get("/api/sosmed").json()) == 1

    assert client.delete(f"/api/sosmed/{sosmed_id}", headers=admin_headers).status_code == 200
    assert client.get(f"/api/sosmed/{sosmed_id}").status_code == 404
