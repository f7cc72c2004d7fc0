"""Pytest fixtures for the verification mailer tests."""

import json

import pytest
import requests


def make_response(status_code, payload):
    """Build a real requests.Response carrying a JSON body."""
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(payload).encode("utf-8")
    response.headers["Content-Type"] = "application/json"
    return response


@pytest.fixture
def resend_env(monkeypatch):
    """Environment with a Resend key and no sender or endpoint overrides."""
    monkeypatch.setenv("RESEND_API_KEY", "re_test_key")
    monkeypatch.delenv("RESEND_FROM", raising=False)
    monkeypatch.delenv("RESEND_API_URL", raising=False)


@pytest.fixture
def no_key_env(monkeypatch):
    monkeypatch.delenv("RESEND_API_KEY", raising=False)
    monkeypatch.delenv("RESEND_FROM", raising=False)
    monkeypatch.delenv("RESEND_API_URL", raising=False)
