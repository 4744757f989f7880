"""
Fixtures for the POS acceptance scenarios.

Scenarios talk to a real HTTP server (pytest-django's live_server) through
requests, the way an external client would.
"""
import pytest
import requests
from apps.pos import services


class PosApi:
    """Thin HTTP client for /api/pos"""

    def __init__(self, base_url):
        self.url = f"{base_url.rstrip('/')}/api/pos"
        self.session = requests.Session()

    def retrieve_all(self):
        response = self.session.get(self.url, timeout=10)
        assert response.status_code == 200, response.text
        return response.json()

    def create(self, payloads):
        response = self.session.post(self.url, json=payloads, timeout=10)
        assert response.status_code == 201, response.text
        return response.json()

    def try_create(self, payload):
        return self.session.post(self.url, json=payload, timeout=10)

    def update(self, pos_id, payload):
        response = self.session.put(f"{self.url}/{pos_id}", json=payload, timeout=10)
        assert response.status_code == 200, response.text
        return response.json()


@pytest.fixture
def pos_api(live_server, transactional_db):
    """Client against the live server; every scenario starts and ends with no POS"""
    services.clear()
    api = PosApi(live_server.url)
    yield api
    api.session.close()
    services.clear()


@pytest.fixture
def scenario_state():
    """Data passed between the steps of one scenario"""
    return {}
