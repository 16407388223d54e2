"""
Tests for the health check and the fallback routing.
"""
import logging
import os


def test_health_check(client):
    """
    Test the health check endpoint returns an unconditional liveness flag.
    """
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_responses_carry_request_id(client):
    response = client.get("/health")
    assert "X-Request-ID" in response.headers
    assert "X-Process-Time" in response.headers


def test_unknown_api_path_echoes_method_and_path(client):
    response = client.post("/api/nao-existe")
    assert response.status_code == 404
    assert response.text == "Rota não encontrada: POST /api/nao-existe"


def test_reserved_prefixes_without_route_return_404(client):
    for method, path in [
        ("GET", "/prontuario/1"),
        ("PATCH", "/prontuarios"),
        ("GET", "/exames/123/detalhes"),
        ("GET", "/ai-outra-coisa"),
    ]:
        response = client.request(method, path)
        assert response.status_code == 404
        assert response.text == f"Rota não encontrada: {method} {path}"


def test_static_assets_are_served_outside_reserved_prefixes(client):
    static_dir = os.environ["STATIC_DIR"]
    os.makedirs(os.path.join(static_dir, "css"), exist_ok=True)
    with open(os.path.join(static_dir, "index.html"), "w", encoding="utf-8") as f:
        f.write("<h1>MedVibe</h1>")
    with open(os.path.join(static_dir, "css", "app.css"), "w", encoding="utf-8") as f:
        f.write("body { margin: 0; }")

    assert client.get("/").text == "<h1>MedVibe</h1>"
    assert client.get("/css/app.css").text == "body { margin: 0; }"


def test_missing_static_asset_is_not_found(client):
    response = client.get("/nao-existe.js")
    assert response.status_code == 404
    assert "Rota não encontrada" not in response.text


def test_static_lookup_does_not_escape_frontend_dir(client):
    response = client.get("/..%2Ftest.db")
    assert response.status_code == 404


def test_caller_request_id_is_propagated(client):
    response = client.get("/prontuarios", headers={"X-Request-ID": "triagem-42"})
    assert response.headers["X-Request-ID"] == "triagem-42"


def test_api_calls_are_logged_and_health_checks_are_quiet(client, caplog):
    caplog.set_level(logging.INFO, logger="medvibe.core.middleware")

    client.get("/health")
    client.get("/prontuarios", headers={"X-Request-ID": "lista-1"})
    client.post("/prontuario", json={}, headers={"X-Request-ID": "invalido-1"})

    logged = [(record.levelno, record.getMessage()) for record in caplog.records]
    assert not any("/health" in message for _, message in logged)
    assert any(
        level == logging.INFO and message.startswith("[lista-1] GET /prontuarios -> 200")
        for level, message in logged
    )
    assert any(
        level == logging.WARNING and message.startswith("[invalido-1] POST /prontuario -> 400")
        for level, message in logged
    )
