import os
from unittest.mock import patch

import pytest

from api.health import app as health_app


@pytest.fixture
def client():
    health_app.config['TESTING'] = True
    return health_app.test_client()


class TestHealthEndpoint:

    def test_reports_key_set_without_value(self, client):
        with patch.dict(os.environ, {'GEMINI_API_KEY': 'super-secret'}, clear=True):
            response = client.get('/api/health')

        data = response.get_json()
        assert response.status_code == 200
        assert data['ok'] is True
        assert data['gemini_api_key'] == 'set'
        assert data['model'] == 'gemini-2.0-flash'
        assert data['path_seen'] == '/api/health'
        assert b'super-secret' not in response.data

    def test_reports_key_not_set(self, client):
        with patch.dict(os.environ, {}, clear=True):
            response = client.get('/')

        assert response.get_json()['gemini_api_key'] == 'not set'

    def test_post_not_allowed(self, client):
        response = client.post('/api/health')

        assert response.status_code == 405
