from fastapi.testclient import TestClient

from polspell.main import create_app


def test_application_imports_and_starts(resource_settings, stub_stemmer_factory) -> None:
    app = create_app(settings=resource_settings, stemmer_factory=stub_stemmer_factory)
    client = TestClient(app)

    response = client.get("/api/")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
