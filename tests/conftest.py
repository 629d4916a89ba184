"""
Shared test fixtures.

Provides fixtures for:
- The oracle Flask app and its test client, serving a fixed KISS generator
- Routing the requests-based client into that test client
"""

import os

# headless plotting for the experiments tests
os.environ.setdefault('MPLBACKEND', 'Agg')

import pytest
import requests

from rngjump import KISS
from rngjump.oracle.app import create_app

ORACLE_URL = 'http://oracle.test'
KISS_SEEDS = (2247183469, 99545079, 3269400377, 3950144837)


class RoutedResponse:
    """Minimal requests.Response stand-in around a Flask test response."""

    def __init__(self, response):
        self._response = response
        self.status_code = response.status_code

    def json(self):
        return self._response.get_json()

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


@pytest.fixture
def oracle_rng():
    return KISS(*KISS_SEEDS)


@pytest.fixture
def app(oracle_rng):
    app = create_app(rng=oracle_rng)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def routed_requests(monkeypatch, client):
    """Send requests.get/post for ORACLE_URL to the Flask test client."""

    def path_of(url):
        assert url.startswith(ORACLE_URL), url
        return url[len(ORACLE_URL):]

    def fake_get(url, timeout=None, **kwargs):
        return RoutedResponse(client.get(path_of(url)))

    def fake_post(url, json=None, timeout=None, **kwargs):
        return RoutedResponse(client.post(path_of(url), json=json))

    monkeypatch.setattr(requests, 'get', fake_get)
    monkeypatch.setattr(requests, 'post', fake_post)
    return ORACLE_URL
