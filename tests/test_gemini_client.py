import pytest
from unittest.mock import MagicMock, patch

from app_core.config import GeminiSettings
from llm.gemini_client import GeminiClient, is_success


class TestGeminiClient:
    """Tests for the generateContent client"""

    def test_requires_api_key(self):
        with pytest.raises(RuntimeError, match="Gemini client not available"):
            GeminiClient(GeminiSettings(api_key=None))

    def test_endpoint(self):
        client = GeminiClient(GeminiSettings(api_key='k', model='gemini-1.5-pro', base_url='http://localhost:9000/v1'))

        assert client.endpoint == 'http://localhost:9000/v1/models/gemini-1.5-pro:generateContent'
        assert 'k' not in client.endpoint

    @patch('llm.gemini_client.requests.post')
    def test_generate_content_returns_raw_response(self, mock_post):
        mock_response = MagicMock(status_code=503)
        mock_post.return_value = mock_response

        client = GeminiClient(GeminiSettings(api_key='abc123'))
        payload = {'contents': [{'parts': [{'text': 'hi'}]}]}

        assert client.generate_content(payload) is mock_response
        mock_post.assert_called_once_with(
            'https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent',
            params={'key': 'abc123'},
            headers={'Content-Type': 'application/json'},
            json=payload,
        )

    @patch('llm.gemini_client.requests.post')
    def test_network_errors_propagate(self, mock_post):
        mock_post.side_effect = ConnectionError("Connection refused")

        client = GeminiClient(GeminiSettings(api_key='abc123'))
        with pytest.raises(ConnectionError, match="Connection refused"):
            client.generate_content({})

    @pytest.mark.parametrize('status_code,expected', [
        (200, True),
        (204, True),
        (299, True),
        (301, False),
        (400, False),
        (429, False),
        (500, False),
    ])
    def test_is_success(self, status_code, expected):
        assert is_success(MagicMock(status_code=status_code)) is expected
