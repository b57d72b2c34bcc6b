"""OpenAI Responses API client for narrative generation."""

from collections.abc import Callable
from dataclasses import dataclass

from openai import AsyncOpenAI

from menu_pricing.services.narrative import NarrativeClient


def _build_client(api_key: str) -> AsyncOpenAI:
    return AsyncOpenAI(api_key=api_key)


@dataclass
class OpenAINarrativeClient(NarrativeClient):
    """Narrative client backed by OpenAI Responses API.

    A client is built per call because the key can change at runtime.
    """

    client_factory: Callable[[str], AsyncOpenAI] = _build_client

    async def generate(  # noqa: PLR0913
        self,
        *,
        api_key: str,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
    ) -> str:
        """Call OpenAI Responses API and return the output text."""
        request_payload: dict[str, object] = {
            "model": model,
            "input": prompt,
            "store": store,
        }
        if reasoning_effort:
            request_payload["reasoning"] = {"effort": reasoning_effort}

        client = self.client_factory(api_key)
        try:
            response = await client.responses.create(**request_payload)
        finally:
            await client.close()
        return response.output_text or ""
