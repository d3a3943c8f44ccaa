import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_embedding_provider
from main import app

LONG = " with several years of professional experience building production systems."


@pytest.fixture
def client(fake_provider):
    app.dependency_overrides[get_embedding_provider] = lambda: fake_provider()
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["embedding_model"] == "fake-model"
    assert data["embedding_version"] == "v1"


def test_extract_skills(client):
    response = client.post(
        "/skills/extract",
        json={"text": "We need a JavaScript developer with React and Node.js experience. Python is a plus."},
    )
    assert response.status_code == 200
    data = response.json()
    skills = {s["name"]: s for s in data["skills"]}
    assert data["total"] == len(data["skills"])
    assert skills["python"]["importance"] == "preferred"
    assert skills["react"]["importance"] == "required"


def test_extract_skills_with_industry(client):
    response = client.post(
        "/skills/extract",
        json={"text": "Python and patient care experience", "industry": "healthcare-nursing-jobs"},
    )
    assert response.status_code == 200
    assert "python" not in {s["name"] for s in response.json()["skills"]}


def test_extract_skills_rejects_blank_and_unknown_industry(client):
    assert client.post("/skills/extract", json={"text": "   "}).status_code == 400
    response = client.post("/skills/extract", json={"text": "Python", "industry": "pirate-jobs"})
    assert response.status_code == 400


def test_market_skills(client):
    response = client.post(
        "/skills/market",
        json={
            "jobs": [
                {"id": "j1", "description": "Python and Docker" + LONG},
                {"id": "j2", "description": "Python and SQL" + LONG},
                {"id": "j3", "description": "short"},
            ],
            "limit": 2,
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["job_count"] == 3
    assert len(data["skills"]) == 2
    assert data["skills"][0]["name"] == "python"
    assert data["skills"][0]["demand_rate"] == 100.0


def test_gap_analysis(client):
    response = client.post(
        "/analysis/gap",
        json={
            "curriculum": {
                "id": "cs",
                "program_name": "Computer Science",
                "description": "Software development and data foundations",
                "courses": [
                    {"name": "Programming I", "skills": [{"name": "python", "category": "programming"}]},
                    {"name": "Databases", "skills": [{"name": "sql", "category": "programming"}]},
                ],
            },
            "jobs": [
                {"id": "j1", "description": "Python developer with Docker" + LONG},
                {"id": "j2", "description": "SQL analyst with Tableau" + LONG},
            ],
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["data"]["job_sample_size"] == 2
    assert data["data"]["target_industry"] == "General"
    assert data["data"]["metrics"]["overall_match_rate"] > 0


def test_gap_analysis_no_market_skills(client):
    response = client.post(
        "/analysis/gap",
        json={
            "curriculum": {"id": "cs", "program_name": "Computer Science"},
            "jobs": [{"id": "j1", "description": "Apply today"}],
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["reason"] == "no_market_skills"


def test_gap_analysis_requires_jobs(client):
    response = client.post(
        "/analysis/gap",
        json={"curriculum": {"id": "cs", "program_name": "Computer Science"}, "jobs": []},
    )
    assert response.status_code == 400
