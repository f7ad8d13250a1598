import json
import logging

import pytest
import requests

from function_client.config import REQUIRED_VARS
from function_client.logging_config import HANDLER_NAME

ENV = {
    "CLIENT_ID": "11111111-2222-3333-4444-555555555555",
    "CLIENT_SECRET": "s3cr3t",
    "TENANT_ID": "contoso-tenant",
    "FUNCTION_URL": "https://contoso-func.azurewebsites.net/api/HttpTrigger",
}


class FakeSession(requests.Session):
    """Session that records prepared requests and replays canned outcomes instead of opening sockets."""

    def __init__(self, outcomes=()):
        super().__init__()
        self.outcomes = list(outcomes)
        self.sent = []

    def send(self, request, **kwargs):  # type: ignore[override]
        self.sent.append(request)
        if not self.outcomes:
            raise AssertionError(f"unexpected request to {request.url}")
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        outcome.request = request
        outcome.url = request.url
        return outcome


def make_response(status_code, text="", json_body=None):
    resp = requests.Response()
    resp.status_code = status_code
    if json_body is not None:
        text = json.dumps(json_body)
        resp.headers["Content-Type"] = "application/json"
    resp._content = text.encode("utf-8")
    resp.encoding = "utf-8"
    return resp


def token_response(token="T"):
    return make_response(200, json_body={"access_token": token, "token_type": "Bearer", "expires_in": 3600})


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Start every test with none of the required variables set and no .env in reach."""
    for name in REQUIRED_VARS + ("LOG_LEVEL",):
        # setenv first so teardown also removes anything load_dotenv adds
        monkeypatch.setenv(name, "x")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
    for h in list(root.handlers):
        if h.get_name() == HANDLER_NAME:
            root.removeHandler(h)


@pytest.fixture
def env(monkeypatch):
    for name, value in ENV.items():
        monkeypatch.setenv(name, value)
    return dict(ENV)


@pytest.fixture
def fake_session(monkeypatch):
    """Make requests.Session() hand out one FakeSession; tests queue outcomes on it."""
    session = FakeSession()
    created = []

    def _factory(*args, **kw):
        created.append(session)
        return session

    monkeypatch.setattr(requests, "Session", _factory)
    session.created = created
    return session
