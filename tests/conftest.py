"""
Test configuration for the prontuários backend.

Settings are read when the application package is imported, so the test
database, upload and frontend directories are pointed at a temporary
directory before anything from ``medvibe`` is imported.
"""
import os
import shutil
import tempfile

TEST_ROOT = tempfile.mkdtemp(prefix="medvibe-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(TEST_ROOT, 'test.db')}"
os.environ["UPLOAD_DIR"] = os.path.join(TEST_ROOT, "uploads")
os.environ["STATIC_DIR"] = os.path.join(TEST_ROOT, "frontend")
os.environ["OLLAMA_HOST"] = "http://oracle.test"
os.environ["OLLAMA_MODEL"] = "test-model"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

from medvibe.database import SessionLocal, engine, get_db, run_migrations
from medvibe.main import app
from medvibe.triage.dependencies import get_inference_client


class FakeInferenceClient:
    """Stands in for the inference service; records every prompt it receives."""

    model = "test-model"
    host = "http://oracle.test"

    def __init__(self):
        self.prompts = []
        self.reply = '{"hipoteses": ["resfriado comum"], "gravidade": "baixa"}'
        self.error = None

    async def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture(scope="session", autouse=True)
def migrated_database():
    """
    Apply the migrations once for the whole test session.
    """
    run_migrations()
    yield
    engine.dispose()
    shutil.rmtree(TEST_ROOT, ignore_errors=True)


@pytest.fixture(scope="function")
def db():
    """
    Provide a session and empty the tables after each test.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.execute(text("DELETE FROM exames"))
        db.execute(text("DELETE FROM prontuarios"))
        db.commit()
        db.close()


@pytest.fixture(scope="function")
def fake_oracle():
    return FakeInferenceClient()


@pytest.fixture(scope="function")
def client(db, fake_oracle):
    """
    Create a test client with the test database session and a fake oracle.
    """
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_inference_client] = lambda: fake_oracle

    with TestClient(app) as client:
        yield client

    app.dependency_overrides = {}


@pytest.fixture
def record_payload():
    return {
        "nome": "Maria da Silva",
        "cpf": "123.456.789-00",
        "data_consulta": "2025-10-10",
        "diagnostico": "Síndrome gripal",
        "sintomas": "Febre e tosse há 2 dias",
        "anamnese": "Sem comorbidades",
        "exames_solicitados": ["Hemograma", "PCR"],
    }


@pytest.fixture
def record_id(client, record_payload):
    response = client.post("/prontuario", json=record_payload)
    assert response.status_code == 201
    return response.json()["id"]
