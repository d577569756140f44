import pytest
from fastapi.testclient import TestClient

import main
from conftest import make_service
from resume_ai.dependencies import get_transformation_service

client = TestClient(main.app)


@pytest.fixture
def use_service():
    """Install a TransformationService backed by a fake AI backend."""

    def _install(*args, **kwargs):
        svc, factory = make_service(*args, **kwargs)
        main.app.dependency_overrides[get_transformation_service] = lambda: svc
        return factory

    yield _install
    main.app.dependency_overrides.clear()


def test_health_check() -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_startup_validates_schemas() -> None:
    with TestClient(main.app) as started:
        assert started.get("/").status_code == 200


def test_parse_returns_structured_resume(use_service, john_doe_payload) -> None:
    use_service(john_doe_payload)

    response = client.post("/resume/parse", json={"text": "John Doe, Software Engineer, john@x.com"})

    assert response.status_code == 200
    body = response.json()
    assert body["fullName"] == "John Doe"
    assert body["contact"] == {"email": "john@x.com", "phone": "", "location": ""}
    assert body["experience"] == [] and body["skills"] == []


def test_parse_rejects_blank_text(use_service, john_doe_payload) -> None:
    factory = use_service(john_doe_payload)
    response = client.post("/resume/parse", json={"text": "   "})
    assert response.status_code == 422
    assert factory.backend.calls == []


def test_caller_key_header_is_used(use_service) -> None:
    factory = use_service(["Pulled 300 shots a day."])
    response = client.post("/resume/suggestions", json={"role": "Barista"}, headers={"X-API-Key": "user-key"})
    assert response.status_code == 200
    assert factory.keys == ["user-key"]


def test_missing_credential_is_a_distinct_401(use_service, john_doe_payload) -> None:
    factory = use_service(john_doe_payload, fallback_key=None)

    response = client.post("/resume/parse", json={"text": "John Doe"})

    assert response.status_code == 401
    assert response.json()["detail"]["kind"] == "missing_credential"
    assert factory.backend.calls == []


def test_unparseable_extraction_is_a_502(use_service) -> None:
    use_service("Sorry, I cannot do that")
    response = client.post("/resume/parse", json={"text": "John Doe"})
    assert response.status_code == 502
    detail = response.json()["detail"]
    assert detail["kind"] == "extraction_error"
    assert detail["message"]


def test_analyze_returns_score_and_band(use_service, fit_payload) -> None:
    use_service({**fit_payload, "score": 85})

    response = client.post(
        "/resume/analyze",
        json={"resume": {"fullName": "Jo"}, "jobDescription": "Product designer, Figma"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["score"] == 85
    assert body["band"] == "strong"
    assert body["missingKeywords"] == ["Accessibility", "WCAG"]


def test_analyze_rejects_blank_job_description(use_service, fit_payload) -> None:
    factory = use_service(fit_payload)
    response = client.post("/resume/analyze", json={"resume": {}, "jobDescription": " \n "})
    assert response.status_code == 422
    assert factory.backend.calls == []


def test_analysis_failure_is_a_502(use_service, backend_error) -> None:
    use_service(error=backend_error)
    response = client.post("/resume/analyze", json={"resume": {}, "jobDescription": "jd"})
    assert response.status_code == 502
    assert response.json()["detail"]["kind"] == "analysis_error"


def test_suggestions_preserve_order(use_service) -> None:
    bullets = [f"Bullet {n}" for n in range(1, 6)]
    use_service(bullets)

    response = client.post("/resume/suggestions", json={"role": "  Barista "})

    assert response.status_code == 200
    assert response.json() == {"role": "Barista", "suggestions": bullets}


def test_suggestion_failure_is_a_502(use_service) -> None:
    use_service("[]")
    response = client.post("/resume/suggestions", json={"role": "Barista"})
    assert response.status_code == 502
    assert response.json()["detail"]["kind"] == "suggestion_error"


def test_add_bullets_compacts_blank_lines() -> None:
    resume = {"experience": [{"role": "Barista", "description": ["Opened daily.", ""]}]}

    response = client.post("/resume/experience/0/bullets", json={"resume": resume, "bullets": ["Trained staff."]})

    assert response.status_code == 200
    assert response.json()["experience"][0]["description"] == ["Opened daily.", "Trained staff."]


def test_add_bullets_unknown_entry_is_404() -> None:
    response = client.post("/resume/experience/3/bullets", json={"resume": {}, "bullets": ["x"]})
    assert response.status_code == 404


def test_normalize_fills_missing_fields() -> None:
    response = client.post("/resume/normalize", json={"fullName": "Jo", "skills": ["Go", "Go"], "summary": None})
    assert response.status_code == 200
    body = response.json()
    assert body["summary"] == ""
    assert body["skills"] == ["Go"]
    assert body["contact"] == {"email": "", "phone": "", "location": ""}


def test_normalize_rejects_wrong_shapes() -> None:
    response = client.post("/resume/normalize", json={"experience": "ten years"})
    assert response.status_code == 422


def test_sample_resume() -> None:
    response = client.get("/resume/sample")
    assert response.status_code == 200
    body = response.json()
    assert body["fullName"] == "Alex Taylor"
    assert len(body["experience"]) == 2
    assert "website" not in body["contact"]


def test_parse_file_runs_extraction_on_document_text(use_service, john_doe_payload) -> None:
    factory = use_service(john_doe_payload)
    text = "John Doe\nSoftware Engineer\njohn@x.com"

    response = client.post("/resume/parse-file", files={"file": ("resume.txt", text.encode(), "text/plain")})

    assert response.status_code == 200
    assert response.json()["fullName"] == "John Doe"
    assert text in factory.backend.calls[0]["user"]


def test_parse_file_rejects_unsupported_type(use_service, john_doe_payload) -> None:
    factory = use_service(john_doe_payload)
    response = client.post("/resume/parse-file", files={"file": ("resume.exe", b"MZ" * 40, "application/octet-stream")})
    assert response.status_code == 422
    assert factory.backend.calls == []


def test_parse_file_rejects_empty_upload(use_service, john_doe_payload) -> None:
    use_service(john_doe_payload)
    response = client.post("/resume/parse-file", files={"file": ("resume.pdf", b"", "application/pdf")})
    assert response.status_code == 400


@pytest.mark.parametrize("filename", ["resume.pdf", "resume.docx"])
def test_parse_file_rejects_corrupt_document(use_service, john_doe_payload, filename) -> None:
    factory = use_service(john_doe_payload)

    response = client.post(
        "/resume/parse-file",
        files={"file": (filename, b"this is not a pdf at all, just text", "application/octet-stream")},
    )

    assert response.status_code == 422
    assert "could not be read" in response.json()["detail"]
    assert factory.backend.calls == []
