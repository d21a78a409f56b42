"""Image payloads exchanged with the generative service."""

import base64
import re

from pydantic import BaseModel

_DATA_URI_PATTERN = re.compile(
    r"^data:(?P<mime>[^;,]+);base64,(?P<data>.+)$", re.DOTALL
)


class ImagePayload(BaseModel):
    """Base64 encoded image with its media type."""

    mime_type: str
    data: str

    @property
    def data_uri(self) -> str:
        """Render the payload as a self-describing data URI."""
        return f"data:{self.mime_type};base64,{self.data}"

    @classmethod
    def from_data_uri(cls, data_uri: str) -> "ImagePayload":
        """Parse a base64 data URI."""
        match = _DATA_URI_PATTERN.match(data_uri)
        if match is None:
            raise ValueError("Invalid data URI format")
        return cls(mime_type=match.group("mime"), data=match.group("data"))

    @classmethod
    def from_bytes(cls, content: bytes, mime_type: str) -> "ImagePayload":
        """Encode raw image bytes."""
        return cls(mime_type=mime_type, data=base64.b64encode(content).decode("utf-8"))

    def to_bytes(self) -> bytes:
        """Decode the base64 payload."""
        return base64.b64decode(self.data, validate=True)
