import pytest
from fastapi.testclient import TestClient

from api.app import app
from api.routers.gloss import get_reference_data
from core.versions import APP_VERSION, ENGINE_VERSION


@pytest.fixture
def client(reference_data):
    # no lifespan: reference data comes from the fixtures
    app.dependency_overrides[get_reference_data] = lambda: reference_data
    yield TestClient(app)
    app.dependency_overrides.clear()


def _payload(**overrides):
    payload = {
        "source_lang": "de",
        "target_lang": "en",
        "freqThreshold": 0,
        "show_all": False,
        "text": "Die Haustür!",
    }
    payload.update(overrides)
    return payload


def test_gloss(client):
    response = client.post("/gloss", json=_payload())

    assert response.status_code == 200
    assert response.json() == {
        "results": [
            {
                "key": "Haus",
                "source": "Haus {n}",
                "wordType": "noun",
                "target": "house; home",
                "freq": "6",
            },
            {
                "key": "Tür",
                "source": "Tür {f}",
                "wordType": "noun",
                "target": "door",
                "freq": "9",
            },
        ]
    }


def test_gloss_unknown_language_is_bad_request(client):
    response = client.post("/gloss", json=_payload(source_lang="sv"))

    assert response.status_code == 400
    assert "sv" in response.json()["detail"]


@pytest.mark.parametrize(
    "overrides",
    [
        {"show_all": "yes"},
        {"text": 42},
        {"freqThreshold": -1},
        {"freqThreshold": True},
        {"source_lang": "german"},
    ],
)
def test_gloss_invalid_request_shape(client, overrides):
    response = client.post("/gloss", json=_payload(**overrides))

    assert response.status_code == 422


def test_gloss_missing_field(client):
    payload = _payload()
    del payload["text"]

    assert client.post("/gloss", json=payload).status_code == 422


def test_languages(client):
    response = client.get("/languages")

    assert response.status_code == 200
    assert response.json() == {"languages": ["de"], "dictionaries": {"de-en": 8}}


def test_root_reports_versions(client):
    body = client.get("/").json()

    assert body["app_version"] == APP_VERSION
    assert body["engine_version"] == ENGINE_VERSION
