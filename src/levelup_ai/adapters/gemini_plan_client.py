"""Google Gemini client for plan generation."""

import json
from dataclasses import dataclass

from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

from levelup_ai.domain.errors import BackendError
from levelup_ai.services.drafting import PlanClient

_SYSTEM_INSTRUCTION = (
    "You are a certified fitness coach and nutritionist. "
    "Respond with a single JSON object matching the provided schema."
)


@dataclass
class GeminiPlanClient(PlanClient):
    """Plan client backed by the google-genai async API."""

    client: genai.Client
    model: str

    @classmethod
    def create(cls, api_key: str, model: str) -> "GeminiPlanClient":
        """Create a Gemini plan client."""
        return cls(client=genai.Client(api_key=api_key), model=model)

    async def generate(
        self,
        *,
        prompt: str,
        schema_name: str,
        schema: dict[str, object],
    ) -> dict[str, object]:
        """Call Gemini with a JSON response schema."""
        config = genai_types.GenerateContentConfig(
            system_instruction=_SYSTEM_INSTRUCTION,
            response_mime_type="application/json",
            response_json_schema=schema,
        )
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config,
            )
        except genai_errors.APIError as exc:
            raise BackendError(str(exc)) from exc
        output_text = response.text
        if not output_text:
            raise BackendError(f"Gemini returned an empty {schema_name} response")
        try:
            payload = json.loads(output_text)
        except json.JSONDecodeError as exc:
            raise BackendError(f"Gemini returned invalid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise BackendError(f"Gemini returned a non-object {schema_name}")
        return payload

    async def close(self) -> None:
        """Close the underlying async HTTP session."""
        await self.client.aio.aclose()
