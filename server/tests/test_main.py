import pytest
from fastapi.testclient import TestClient

from server.main import app

@pytest.fixture
def client(monkeypatch):
    for name in ("PAGE_TAG", "FULL_PAGE", "MAX_WORKERS", "STYLESHEET_HREF"):
        monkeypatch.delenv(f"SLIDEMARKUP_{name}", raising=False)
    return TestClient(app)

def upload(client, filename, content, **form):
    return client.post(
        "/api/convert",
        files={"file": (filename, content, "application/octet-stream")},
        data=form,
    )

def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"

def test_convert(client, sample_deck):
    response = upload(client, "review.pptx", sample_deck)
    assert response.status_code == 200

    body = response.json()
    assert body["filename"] == "review.pptx"
    assert body["slide_count"] == 2
    assert body["html"].startswith('<div><p align="center"><strong>')

def test_convert_with_form_settings(client, sample_deck):
    response = upload(client, "review.pptx", sample_deck, page_tag="section", full_page="true")
    html = response.json()["html"]
    assert html.startswith("<!DOCTYPE html>")
    assert "<title>review</title>" in html
    assert "<section>" in html

def test_convert_rejects_other_extensions(client):
    response = upload(client, "notes.pdf", b"%PDF-1.4")
    assert response.status_code == 400
    assert response.json()["detail"] == "Only .pptx files are allowed"

def test_convert_rejects_broken_package(client):
    response = upload(client, "broken.pptx", b"not a zip file")
    assert response.status_code == 422
    assert "Not a readable package" in response.json()["detail"]

def test_convert_reports_dangling_relationship(client, pptx):
    presentation = pptx.presentation([("256", "rId5")])
    response = upload(client, "deck.pptx", pptx.build([pptx.slide()], presentation=presentation))
    assert response.status_code == 422
    assert "rId5" in response.json()["detail"]

def test_settings_from_environment(client, monkeypatch):
    monkeypatch.setenv("SLIDEMARKUP_PAGE_TAG", "article")
    response = client.get("/api/settings")
    assert response.status_code == 200
    assert response.json()["page_tag"] == "article"
