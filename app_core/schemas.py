"""
Request schemas for the image analysis proxy.
The upstream response is relayed as-is and has no schema here.
"""
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Always declared upstream, whatever the data URL header says
IMAGE_MIME_TYPE = 'image/jpeg'


class ImageAnalysisRequest(BaseModel):
    """Inbound body from the frontend. Only imageDataUrl is read."""
    model_config = ConfigDict(extra='ignore')

    imageDataUrl: str

    def base64_payload(self) -> Optional[str]:
        """Everything after the first comma of the data URL, unmodified."""
        return split_data_url(self.imageDataUrl)


class InlineData(BaseModel):
    # None when the data URL had no comma; the field is then left out of the request
    data: Optional[str] = None
    mime_type: str = Field(default=IMAGE_MIME_TYPE, serialization_alias='mimeType')


class TextPart(BaseModel):
    text: str


class InlineDataPart(BaseModel):
    inline_data: InlineData = Field(serialization_alias='inlineData')


class Content(BaseModel):
    parts: List[Union[TextPart, InlineDataPart]]


class GenerateContentRequest(BaseModel):
    """Body for the Gemini generateContent call"""
    contents: List[Content]

    @classmethod
    def for_image(cls, prompt: str, image_base64: Optional[str]) -> 'GenerateContentRequest':
        return cls(contents=[Content(parts=[
            TextPart(text=prompt),
            InlineDataPart(inline_data=InlineData(data=image_base64)),
        ])])

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


def split_data_url(data_url: str) -> Optional[str]:
    """Strip the `data:<mime>;base64,` header from a data URL. None if there is no comma."""
    header, sep, payload = data_url.partition(',')
    if not sep:
        return None
    return payload
