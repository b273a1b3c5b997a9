"""
Gemini settings loaded from the environment
"""
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_MODEL = 'gemini-2.0-flash'
DEFAULT_BASE_URL = 'https://generativelanguage.googleapis.com/v1beta'


class GeminiSettings(BaseModel):
    """Configuration for the Gemini proxy. api_key is never logged."""
    api_key: Optional[str] = Field(default=None, repr=False)
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL

    def has_api_key(self) -> bool:
        return bool(self.api_key)


def load_settings() -> GeminiSettings:
    """
    Read settings from environment variables (and .env if present).
    Called once per invocation so a rotated key is picked up without redeploying.
    """
    load_dotenv()

    return GeminiSettings(
        api_key=os.getenv('GEMINI_API_KEY') or None,
        model=os.getenv('GEMINI_MODEL') or DEFAULT_MODEL,
        base_url=(os.getenv('GEMINI_BASE_URL') or DEFAULT_BASE_URL).rstrip('/'),
    )
