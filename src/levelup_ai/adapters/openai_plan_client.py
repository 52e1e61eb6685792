"""OpenAI Responses API client for plan generation."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI, OpenAIError

from levelup_ai.domain.errors import BackendError
from levelup_ai.services.drafting import PlanClient

_INSTRUCTIONS = (
    "You are a certified fitness coach and nutritionist. "
    "Answer only with data matching the requested JSON schema."
)


@dataclass
class OpenAIPlanClient(PlanClient):
    """Plan client backed by OpenAI Responses API."""

    client: AsyncOpenAI
    model: str
    reasoning_effort: str | None = None
    store: bool = False

    @classmethod
    def create(
        cls,
        api_key: str,
        model: str,
        reasoning_effort: str | None = None,
        store: bool = False,
    ) -> "OpenAIPlanClient":
        """Create an OpenAI plan client."""
        return cls(
            client=AsyncOpenAI(api_key=api_key),
            model=model,
            reasoning_effort=reasoning_effort,
            store=store,
        )

    async def generate(
        self,
        *,
        prompt: str,
        schema_name: str,
        schema: dict[str, object],
    ) -> dict[str, object]:
        """Call OpenAI Responses API with structured outputs."""
        request_payload: dict[str, object] = {
            "model": self.model,
            "instructions": _INSTRUCTIONS,
            "input": [
                {
                    "role": "user",
                    "content": [{"type": "input_text", "text": prompt}],
                }
            ],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": schema_name,
                    "strict": True,
                    "schema": schema,
                }
            },
            "store": self.store,
        }
        if self.reasoning_effort:
            request_payload["reasoning"] = {"effort": self.reasoning_effort}

        try:
            response = await self.client.responses.create(**request_payload)
        except OpenAIError as exc:
            raise BackendError(str(exc)) from exc
        output_text = response.output_text
        if not output_text:
            raise BackendError("OpenAI returned an empty response")
        try:
            return json.loads(output_text)
        except json.JSONDecodeError as exc:
            raise BackendError(f"OpenAI returned invalid JSON: {exc}") from exc

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
