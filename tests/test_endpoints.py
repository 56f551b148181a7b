from fastapi.testclient import TestClient

from chat_relay.app import app, get_generator
from chat_relay.generate import SYSTEM_ERROR_MESSAGE, ResponseGenerator, EchoDevClient


class FailingSession:
    async def send(self, text):
        raise ValueError("invalid request")


class FailingClient:
    model = "failing"

    async def open_session(self, history, params):
        return FailingSession()


echo_client = EchoDevClient()


def echo_generator():
    return ResponseGenerator(model_client=echo_client)


def failing_generator():
    return ResponseGenerator(model_client=FailingClient())


client = TestClient(app)


def test_root_ok():
    r = client.get("/")
    assert r.status_code == 200
    assert "message" in r.json()


def test_health_ok():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_healthz_ok():
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["ok"] is True


def test_chat_echo():
    app.dependency_overrides[get_generator] = echo_generator
    try:
        r = client.post(
            "/chat",
            json={
                "message": "What is this?",
                "history": [
                    {"role": "assistant", "content": "welcome"},
                    {"role": "user", "content": "hi"},
                    {"role": "assistant", "content": "hello"},
                ],
            },
        )
    finally:
        app.dependency_overrides.clear()

    assert r.status_code == 200
    data = r.json()
    assert data["text"] == "[ECHO RESPONSE]\nWhat is this?"
    assert data["meta"] == {"model": "echo-dev", "engine": "EchoDevClient"}
    assert [m.role for m in echo_client.last_session.history] == ["user", "model"]


def test_chat_without_history():
    app.dependency_overrides[get_generator] = echo_generator
    try:
        r = client.post("/chat", json={"message": "first"})
    finally:
        app.dependency_overrides.clear()

    assert r.status_code == 200
    assert r.json()["text"].endswith("first")


def test_chat_model_failure_is_still_200():
    app.dependency_overrides[get_generator] = failing_generator
    try:
        r = client.post("/chat", json={"message": "hi", "history": []})
    finally:
        app.dependency_overrides.clear()

    assert r.status_code == 200
    assert r.json()["text"] == SYSTEM_ERROR_MESSAGE


def test_chat_requires_message():
    r = client.post("/chat", json={"history": []})
    assert r.status_code == 422
