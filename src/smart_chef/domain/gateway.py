"""Provider-neutral shape of generative service responses."""

from pydantic import BaseModel, Field


class InlineData(BaseModel):
    """Binary payload returned inline, base64 encoded."""

    mime_type: str
    data: str


class ResponsePart(BaseModel):
    """Single fragment of a candidate response."""

    text: str | None = None
    inline_data: InlineData | None = None


class GatewayResponse(BaseModel):
    """Raw result of a generative call before decoding."""

    text: str | None = None
    parts: list[ResponsePart] = Field(default_factory=list)
    envelope_key: str | None = None
