# tests/test_api.py

from fastapi.testclient import TestClient

from api.main import app

client = TestClient(app)


def test_annotate_endpoint():
    resp = client.post(
        "/annotate",
        json={
            "text": "Obama #usPrez",
            "spans": [
                {"startIndex": 0, "endIndex": 5, "type": "entity"},
                {"startIndex": 6, "endIndex": 13, "type": "twitterHashtag"},
                {"startIndex": 0, "endIndex": 5, "type": "entityInvalid"},
            ],
        },
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["annotated_text"] == (
        '<strong>Obama</strong> #<a href="https://twitter.com/hashtag/usPrez">usPrez</a>'
    )
    assert body["spans"][0]["rendered"] == "<strong>Obama</strong>"
    assert body["spans"][2]["rendered"] is None


def test_annotate_strict_rejects_bad_span():
    resp = client.post(
        "/annotate",
        json={
            "text": "Obama",
            "spans": [{"startIndex": 0, "endIndex": 50, "type": "entity"}],
            "strict": True,
        },
    )
    assert resp.status_code == 422
    assert "Invalid span" in resp.json()["detail"]


def test_types_endpoint():
    resp = client.get("/types")
    assert resp.status_code == 200
    assert "twitterHashtag" in resp.json()["types"]


def test_annotate_rejects_rendered_in_request():
    resp = client.post(
        "/annotate",
        json={
            "text": "Obama",
            "spans": [{"startIndex": 0, "endIndex": 5, "type": "entity", "rendered": "x"}],
        },
    )
    assert resp.status_code == 422
