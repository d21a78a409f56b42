"""OpenAI client for structured output and image generation."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from smart_chef.domain.gateway import GatewayResponse, InlineData, ResponsePart
from smart_chef.domain.images import ImagePayload
from smart_chef.services.gateway import GenerativeClient

_ENVELOPE_KEY = "result"
_IMAGE_MIME_TYPE = "image/png"


@dataclass
class OpenAIGenerativeClient(GenerativeClient):
    """Generative client backed by the OpenAI Responses and Images APIs."""

    client: AsyncOpenAI
    reasoning_effort: str | None = None
    store: bool = False

    @classmethod
    def create(
        cls, api_key: str, reasoning_effort: str | None = None, store: bool = False
    ) -> "OpenAIGenerativeClient":
        """Create an OpenAI generative client."""
        return cls(
            client=AsyncOpenAI(api_key=api_key),
            reasoning_effort=reasoning_effort,
            store=store,
        )

    async def generate_structured(
        self, *, model: str, prompt: str, schema: dict[str, object]
    ) -> GatewayResponse:
        """Call the Responses API with a JSON schema text format.

        Structured outputs require an object at the root, so other schemas
        are wrapped under an envelope key that the decoder removes.
        """
        envelope_key = None
        if schema.get("type") != "object":
            envelope_key = _ENVELOPE_KEY
            schema = {
                "type": "object",
                "properties": {_ENVELOPE_KEY: schema},
                "required": [_ENVELOPE_KEY],
            }
        request_payload: dict[str, object] = {
            "model": model,
            "input": [
                {
                    "role": "user",
                    "content": [{"type": "input_text", "text": prompt}],
                }
            ],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": "structured_output",
                    "strict": False,
                    "schema": schema,
                }
            },
            "store": self.store,
        }
        if self.reasoning_effort:
            request_payload["reasoning"] = {"effort": self.reasoning_effort}

        response = await self.client.responses.create(**request_payload)
        return GatewayResponse(
            text=response.output_text or None, envelope_key=envelope_key
        )

    async def generate_image(
        self, *, model: str, prompt: str, source: ImagePayload | None
    ) -> GatewayResponse:
        """Generate an image, or edit ``source`` when it is given."""
        if source is None:
            result = await self.client.images.generate(model=model, prompt=prompt)
        else:
            extension = source.mime_type.rsplit("/", 1)[-1]
            result = await self.client.images.edit(
                model=model,
                image=(f"source.{extension}", source.to_bytes(), source.mime_type),
                prompt=prompt,
            )
        parts = [
            ResponsePart(
                inline_data=InlineData(mime_type=_IMAGE_MIME_TYPE, data=item.b64_json)
            )
            for item in result.data or []
            if item.b64_json
        ]
        return GatewayResponse(parts=parts)
