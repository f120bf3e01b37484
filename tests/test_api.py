import asyncio

import pytest
from fastapi.testclient import TestClient

from src.api import server
from src.api.server import app
from src.core.data_models import ExtractedData
from config.settings import settings

DOCX_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@pytest.fixture
def client():
    return TestClient(app)


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"status": "online", "service": "resume-parser"}


def test_parse_docx(client, resume_docx):
    response = client.post("/parse", files={"file": ("resume.docx", resume_docx, DOCX_TYPE)})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["personal_info"]["name"] == "Jane Roe"
    assert body["data"]["experience"][0]["startDate"] == "2019"
    assert body["data"]["experience"][0]["endDate"] == "2022"
    assert [skill["name"] for skill in body["data"]["skills"]] == ["python", "sql", "leadership"]


def test_parse_sniffs_missing_content_type(client, resume_docx):
    response = client.post(
        "/parse", files={"file": ("resume.docx", resume_docx, "application/octet-stream")}
    )

    assert response.status_code == 200
    assert response.json()["data"]["personal_info"]["email"] == "jane.roe@example.org"


def test_parse_unsupported_type(client):
    response = client.post("/parse", files={"file": ("resume.txt", b"John Doe", "text/plain")})

    assert response.status_code == 415


def test_parse_corrupt_document(client):
    response = client.post("/parse", files={"file": ("resume.docx", b"not a docx", DOCX_TYPE)})

    assert response.status_code == 422


def test_parse_too_large(client, resume_docx, monkeypatch):
    monkeypatch.setattr(settings, "MAX_DOCUMENT_SIZE", 16)

    response = client.post("/parse", files={"file": ("resume.docx", resume_docx, DOCX_TYPE)})

    assert response.status_code == 413


def test_parse_batch_reports_per_file_errors(client, resume_docx):
    response = client.post("/parse-batch", files=[
        ("files", ("good.docx", resume_docx, DOCX_TYPE)),
        ("files", ("notes.txt", b"hello", "text/plain")),
    ])

    assert response.status_code == 200
    body = response.json()
    assert body["total_files"] == 2
    assert body["processed"] == 1
    assert body["failed"] == 1
    assert body["results"][0]["data"]["personal_info"]["name"] == "Jane Roe"
    assert body["results"][1]["status_code"] == 415


def test_parse_runs_decoding_off_the_event_loop(client, resume_docx, monkeypatch):
    seen = []

    def fake_parse_document(buffer, media_type):
        try:
            asyncio.get_running_loop()
            seen.append("event loop")
        except RuntimeError:
            seen.append("worker thread")
        return ExtractedData()

    monkeypatch.setattr(server.parser, "parse_document", fake_parse_document)

    response = client.post("/parse", files={"file": ("resume.docx", resume_docx, DOCX_TYPE)})

    assert response.status_code == 200
    assert seen == ["worker thread"]
