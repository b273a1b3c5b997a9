import logging
from typing import Any, Dict

import requests

from app_core.config import GeminiSettings

logger = logging.getLogger(__name__)


class GeminiClient:
    """Thin client for the Gemini generateContent REST endpoint"""

    def __init__(self, settings: GeminiSettings):
        if not settings.api_key:
            raise RuntimeError(
                "Gemini client not available. Please set GEMINI_API_KEY environment variable."
            )
        self.api_key = settings.api_key
        self.model = settings.model
        self.base_url = settings.base_url

    @property
    def endpoint(self) -> str:
        """generateContent URL without the key"""
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate_content(self, payload: Dict[str, Any]) -> requests.Response:
        """
        POST the payload and return the raw response, whatever its status.
        The key travels as the `key` query parameter.
        """
        logger.debug("Calling Gemini model %s", self.model)
        return requests.post(
            self.endpoint,
            params={'key': self.api_key},
            headers={'Content-Type': 'application/json'},
            json=payload,
        )


def is_success(response: requests.Response) -> bool:
    # fetch-style ok: 2xx only
    return 200 <= response.status_code < 300
