"""Google Gemini client for structured output and image generation."""

import base64
from dataclasses import dataclass

from google import genai
from google.genai import types

from smart_chef.domain.gateway import GatewayResponse, InlineData, ResponsePart
from smart_chef.domain.images import ImagePayload
from smart_chef.services.gateway import GenerativeClient


@dataclass
class GeminiGenerativeClient(GenerativeClient):
    """Generative client backed by the google-genai SDK."""

    client: genai.Client

    @classmethod
    def create(cls, api_key: str) -> "GeminiGenerativeClient":
        """Create a Gemini client."""
        return cls(client=genai.Client(api_key=api_key))

    async def generate_structured(
        self, *, model: str, prompt: str, schema: dict[str, object]
    ) -> GatewayResponse:
        """Call Gemini in JSON mode constrained by ``schema``."""
        response = await self.client.aio.models.generate_content(
            model=model,
            contents=prompt,
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=schema,
            ),
        )
        return _to_gateway_response(response)

    async def generate_image(
        self, *, model: str, prompt: str, source: ImagePayload | None
    ) -> GatewayResponse:
        """Call the Gemini image model, optionally editing ``source``."""
        parts: list[types.Part] = []
        if source is not None:
            parts.append(
                types.Part.from_bytes(
                    data=source.to_bytes(), mime_type=source.mime_type
                )
            )
        parts.append(types.Part.from_text(text=prompt))
        response = await self.client.aio.models.generate_content(
            model=model,
            contents=[types.Content(role="user", parts=parts)],
            config=types.GenerateContentConfig(
                response_modalities=[types.Modality.IMAGE],
            ),
        )
        return _to_gateway_response(response)


def _to_gateway_response(response: types.GenerateContentResponse) -> GatewayResponse:
    """Map the first candidate's parts into the neutral response shape."""
    parts: list[ResponsePart] = []
    candidates = response.candidates or []
    content = candidates[0].content if candidates else None
    for part in (content.parts if content else None) or []:
        inline = part.inline_data
        if inline is not None and inline.data:
            parts.append(
                ResponsePart(
                    inline_data=InlineData(
                        mime_type=inline.mime_type or "image/png",
                        data=base64.b64encode(inline.data).decode("utf-8"),
                    )
                )
            )
        elif part.text is not None and not part.thought:
            parts.append(ResponsePart(text=part.text))
    text = "".join(part.text for part in parts if part.text)
    return GatewayResponse(text=text or None, parts=parts)
