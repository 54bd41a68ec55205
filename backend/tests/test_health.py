from dataclasses import replace

from fastapi.testclient import TestClient

from polspell.main import create_app


def test_health_route_returns_expected_shape(resource_settings) -> None:
    app = create_app(settings=resource_settings)
    with TestClient(app) as client:
        response = client.get("/api/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["service"] == "backend"
    assert payload["components"] == {"speller": "ok", "tagger": "ok"}


def test_health_reports_missing_dictionary(tmp_path, resource_settings) -> None:
    settings = replace(resource_settings, dictionary_paths=(tmp_path / "absent.txt",))
    app = create_app(settings=settings)

    with TestClient(app) as client:
        payload = client.get("/api/health").json()

    assert payload["status"] == "degraded"
    assert payload["components"] == {"speller": "degraded", "tagger": "ok"}
    assert "absent.txt" in payload["speller_error"]
    assert app.state.speller_rule is None


def test_health_reports_failing_stemmer(resource_settings) -> None:
    def _broken_factory(_settings):
        raise RuntimeError("lexicon exploded")

    app = create_app(settings=resource_settings, stemmer_factory=_broken_factory)

    with TestClient(app) as client:
        payload = client.get("/api/health").json()

    assert payload["components"]["tagger"] == "degraded"
    assert payload["tagger_error"] == "lexicon exploded"


def test_cors_allows_configured_origin(resource_settings, stub_stemmer_factory) -> None:
    settings = replace(resource_settings, cors_origins=("http://127.0.0.1:5173",))
    app = create_app(settings=settings, stemmer_factory=stub_stemmer_factory)

    with TestClient(app) as client:
        response = client.options(
            "/api/health",
            headers={
                "Origin": "http://127.0.0.1:5173",
                "Access-Control-Request-Method": "GET",
            },
        )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://127.0.0.1:5173"
