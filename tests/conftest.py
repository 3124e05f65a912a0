"""Pytest configuration and fixtures."""

import json
from unittest.mock import Mock

import pytest
import requests

from finnhub_client import FinnhubClient

TOKEN = "test-token-123"


@pytest.fixture
def session():
    """A stand-in for requests.Session; no network traffic."""
    return Mock(spec=requests.Session)


@pytest.fixture
def client(session):
    """Client wired to the fake session."""
    return FinnhubClient(TOKEN, session=session)


@pytest.fixture
def respond(session):
    """Make the fake session return the given body (dict/list → JSON) and status."""

    def _respond(body, status_code=200):
        text = body if isinstance(body, str) else json.dumps(body)
        session.get.return_value = Mock(status_code=status_code, text=text)
        return session

    return _respond
