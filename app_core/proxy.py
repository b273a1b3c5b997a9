"""
Receipt image analysis proxy.
Keeps the Gemini API key server-side: validates the inbound request, forwards the
image with a fixed prompt, and relays Gemini's JSON back untouched.
"""
import json
import logging
from dataclasses import dataclass
from typing import Optional, Union

from app_core.config import GeminiSettings
from app_core.prompts import RECEIPT_PROMPT
from app_core.schemas import GenerateContentRequest, ImageAnalysisRequest
from llm.gemini_client import GeminiClient, is_success

logger = logging.getLogger(__name__)

TEXT_PLAIN = 'text/plain; charset=utf-8'
APPLICATION_JSON = 'application/json'


@dataclass
class ProxyResponse:
    """Framework independent result of one invocation"""
    status: int
    body: str
    content_type: str = TEXT_PLAIN

    @classmethod
    def text(cls, body: str, status: int) -> 'ProxyResponse':
        return cls(status=status, body=body, content_type=TEXT_PLAIN)

    @classmethod
    def json_body(cls, data, status: int = 200) -> 'ProxyResponse':
        return cls(status=status, body=json.dumps(data, ensure_ascii=False), content_type=APPLICATION_JSON)


class ImageAnalysisProxy:
    def __init__(self, settings: GeminiSettings, prompt: str = RECEIPT_PROMPT):
        self.settings = settings
        self.prompt = prompt

    def handle(self, method: str, body: Union[bytes, str, None]) -> ProxyResponse:
        """
        Run one request through the proxy. Always returns a response, never raises.
        """
        if method.upper() != 'POST':
            return ProxyResponse.text('Method Not Allowed', 405)

        try:
            image_request = self._parse_request(body)
            if image_request is None:
                return ProxyResponse.text('Image data is required', 400)

            if not self.settings.has_api_key():
                return ProxyResponse.text('API Key not configured on server', 500)

            client = GeminiClient(self.settings)
            payload = GenerateContentRequest.for_image(
                self.prompt, image_request.base64_payload()
            )

            gemini_response = client.generate_content(payload.to_json_dict())

            if not is_success(gemini_response):
                error_text = gemini_response.text
                logger.error("Gemini API error (%s): %s", gemini_response.status_code, error_text)
                return ProxyResponse.text(
                    f"Error from Gemini API: {error_text}", gemini_response.status_code
                )

            return ProxyResponse.json_body(gemini_response.json())

        except Exception as e:
            message = self._redact(str(e))
            # No traceback: exception args can hold the request URL with its key
            logger.error("Internal Server Error: %s: %s", type(e).__name__, message)
            return ProxyResponse.text(f"Internal Server Error: {message}", 500)

    def _parse_request(self, body: Union[bytes, str, None]) -> Optional[ImageAnalysisRequest]:
        """
        Decode the JSON body. Returns None when no usable image was sent:
        a falsy imageDataUrl, or a JSON value that is not an object.
        """
        data = json.loads(body or b'')
        if data is None:
            raise TypeError("Cannot read 'imageDataUrl' from a null request body")
        if not isinstance(data, dict) or not data.get('imageDataUrl'):
            return None
        return ImageAnalysisRequest.model_validate(data)

    def _redact(self, message: str) -> str:
        # requests errors embed the full URL, query key included
        if self.settings.api_key:
            return message.replace(self.settings.api_key, '***')
        return message
