"""HTTP tests for the FastAPI application."""
import json

import pytest
from fastapi.testclient import TestClient

from curagennie.infrastructure.articles import InMemoryArticleCatalog
from curagennie.infrastructure.config import Settings
from curagennie.infrastructure.doctor_search import google_places
from curagennie.infrastructure.doctor_search.google_places import GooglePlacesDoctorDirectory
from curagennie.infrastructure.doctor_search.in_memory import InMemoryDoctorDirectory
from curagennie.presentation.api import create_app


MEDICINE_REPLY = {
    "name": "Ibuprofen",
    "generic_name": "Ibuprofen",
    "uses": ["Pain", "Fever"],
    "warnings": ["Take with food"],
    "sideEffects": ["Heartburn"],
    "category": "NSAID",
}


class DummyLLM:
    def __init__(self, reply=MEDICINE_REPLY):
        self.reply = json.dumps(reply)

    def is_configured(self):
        return True

    def generate(self, prompt, system=None):
        return self.reply

    def identify_image(self, image_base64, instruction):
        return "Ibuprofen"


class BrokenLLM(DummyLLM):
    def is_configured(self):
        raise RuntimeError("config store unavailable")


def _client(llm=None):
    app = create_app(directory=InMemoryDoctorDirectory(), articles=InMemoryArticleCatalog(), llm=llm)
    return TestClient(app)


@pytest.fixture
def client():
    return _client()


class TestAnalyzeSymptoms:
    """Test POST /api/analyze-symptoms."""

    def test_rule_based_analysis(self, client):
        resp = client.post("/api/analyze-symptoms", json={"symptoms": ["fever", "cough", "sore throat"]})
        assert resp.status_code == 200
        data = resp.json()
        top = data["conditions"][0]
        assert top["name"] == "Viral upper respiratory infection"
        assert top["probability"] == 75
        assert top["severity"] == "moderate"
        assert top["detailedInfo"]["selfCare"]
        assert "whenToSeeDoctor" in top["detailedInfo"]
        assert data["recommendedSpecialist"] == "General Physician / Pulmonologist"
        assert data["lifestyleTips"]
        assert data["guidance"][0].startswith("This is not a medical diagnosis")
        assert [d["specialty"] for d in data["doctors"]] == [
            "General Physician", "General Physician", "Pulmonologist",
        ]
        assert data["nearbyDoctors"] == data["doctors"]

    def test_input_echo(self, client):
        body = {
            "symptoms": ["chest pain", "shortness of breath"],
            "age": "61",
            "gender": "male",
            "duration": "today",
            "vitals": {"temperature": None, "pulse": "110", "spo2": 90, "bp": None},
        }
        data = client.post("/api/analyze-symptoms", json=body).json()
        assert data["input"] == {
            "symptoms": ["chest pain", "shortness of breath"],
            "age": 61,
            "gender": "male",
            "duration": "today",
            "vitals": {"temperature": None, "pulse": "110", "spo2": "90", "bp": None},
        }
        assert data["conditions"][0]["probability"] == 90
        assert data["conditions"][0]["severity"] == "high"

    @pytest.mark.parametrize("body", [
        {"symptoms": []},
        {"symptoms": ["  "]},
        {"symptoms": ["cough"], "age": 0},
        {"age": 30},
        ["fever"],
    ])
    def test_invalid_request(self, client, body):
        resp = client.post("/api/analyze-symptoms", json=body)
        assert resp.status_code == 400
        data = resp.json()
        assert data["error"] == "Invalid symptom analysis request"
        assert data["message"]

    def test_missing_body(self, client):
        resp = client.post("/api/analyze-symptoms")
        assert resp.status_code == 400
        assert set(resp.json()) == {"error", "message"}

    def test_malformed_json(self, client):
        resp = client.post(
            "/api/analyze-symptoms",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert resp.json()["error"] == "Invalid request"

    def test_unexpected_error(self):
        resp = _client(llm=BrokenLLM()).post("/api/analyze-symptoms", json={"symptoms": ["cough"]})
        assert resp.status_code == 500
        assert resp.json() == {
            "error": "Failed to analyze symptoms",
            "message": "config store unavailable",
        }


class TestMedicineInfo:
    """Test the medicine lookup endpoints."""

    def test_not_configured(self, client):
        resp = client.post("/api/medicine-info", json={"query": "Ibuprofen"})
        assert resp.status_code == 503
        assert resp.json()["error"] == "Medicine lookup unavailable"

    def test_lookup(self):
        resp = _client(llm=DummyLLM()).post("/api/medicine-info", json={"query": "Ibuprofen"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["sideEffects"] == ["Heartburn"]
        assert data["generic_name"] == "Ibuprofen"
        assert data["pharmacy_links"] == [{
            "label": "View on partner pharmacy",
            "url": "https://example-pharmacy.com/search?query=Ibuprofen",
        }]

    def test_empty_query(self):
        resp = _client(llm=DummyLLM()).post("/api/medicine-info", json={"query": ""})
        assert resp.status_code == 400
        assert resp.json()["error"] == "Medicine name is required"

    def test_bad_reply(self):
        resp = _client(llm=DummyLLM(reply=["not", "an", "object"])).post(
            "/api/medicine-info", json={"query": "Ibuprofen"}
        )
        assert resp.status_code == 500
        assert resp.json()["error"] == "Failed to fetch medicine information"

    def test_lookup_by_image(self):
        resp = _client(llm=DummyLLM()).post("/api/medicine-info-image", json={"imageBase64": "aGVsbG8="})
        assert resp.status_code == 200
        assert resp.json()["name"] == "Ibuprofen"

    def test_image_required(self):
        resp = _client(llm=DummyLLM()).post("/api/medicine-info-image", json={"imageBase64": ""})
        assert resp.status_code == 400
        assert resp.json()["error"] == "Image data is required"


class TestDirectoryEndpoints:
    """Test doctor and article listings."""

    def test_health(self, client):
        assert client.get("/health").json() == {"ok": True, "aiConfigured": False}

    def test_health_with_ai(self):
        assert _client(llm=DummyLLM()).get("/health").json()["aiConfigured"] is True

    def test_list_doctors(self, client):
        data = client.get("/api/doctors").json()
        assert len(data) == len(InMemoryDoctorDirectory().get_all_doctors())

    def test_filter_doctors(self, client):
        data = client.get("/api/doctors", params={"specialty": "cardio"}).json()
        assert [d["name"] for d in data] == ["Dr. James Wilson"]

    def test_get_doctor(self, client):
        resp = client.get("/api/doctors/2")
        assert resp.status_code == 200
        assert resp.json()["specialty"] == "Cardiologist"

    def test_doctor_not_found(self, client):
        resp = client.get("/api/doctors/999")
        assert resp.status_code == 404
        assert resp.json()["error"] == "Doctor not found"

    def test_unknown_place_is_not_found(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_PLACES_API_KEY", "test-key")

        class NotFoundResponse:
            def raise_for_status(self):
                pass

            def json(self):
                return {"status": "NOT_FOUND"}

        monkeypatch.setattr(google_places.requests, "get",
                            lambda url, params=None, timeout=None: NotFoundResponse())
        directory = GooglePlacesDoctorDirectory(settings=Settings())
        client = TestClient(create_app(directory=directory, articles=InMemoryArticleCatalog()))
        resp = client.get("/api/doctors/1")
        assert resp.status_code == 404
        assert resp.json()["error"] == "Doctor not found"

    def test_list_articles(self, client):
        data = client.get("/api/articles").json()
        assert len(data) == 4
        assert "readTime" in data[0]
        assert "publishedDate" in data[0]

    def test_filter_articles(self, client):
        data = client.get("/api/articles", params={"category": "heart"}).json()
        assert [a["id"] for a in data] == [3]

    def test_get_article(self, client):
        resp = client.get("/api/articles/1")
        assert resp.status_code == 200
        assert resp.json()["author"] == "Cura Gennie Health Team"

    def test_article_not_found(self, client):
        assert client.get("/api/articles/42").status_code == 404

    def test_article_id_must_be_numeric(self, client):
        assert client.get("/api/articles/abc").status_code == 400
