"""Tests for the OpenAI narrative adapter."""

import asyncio

from menu_pricing.adapters.openai_narrative_client import OpenAINarrativeClient


class _FakeResponses:
    def __init__(self, output_text: str) -> None:
        self.output_text = output_text
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"output_text": self.output_text})()


class _FakeOpenAI:
    def __init__(self, api_key: str, output_text: str = "Análise") -> None:
        self.api_key = api_key
        self.responses = _FakeResponses(output_text)
        self.closed = False

    async def close(self) -> None:
        self.closed = True


def test_openai_client_sends_prompt_and_closes() -> None:
    created: list[_FakeOpenAI] = []

    def factory(api_key: str) -> _FakeOpenAI:
        client = _FakeOpenAI(api_key)
        created.append(client)
        return client

    client = OpenAINarrativeClient(client_factory=factory)

    text = asyncio.run(
        client.generate(
            api_key="sk-test",
            model="gpt-5.2",
            reasoning_effort="low",
            store=False,
            prompt="Analise",
        )
    )

    assert text == "Análise"
    [fake] = created
    assert fake.api_key == "sk-test"
    assert fake.closed
    assert fake.responses.last_payload == {
        "model": "gpt-5.2",
        "input": "Analise",
        "store": False,
        "reasoning": {"effort": "low"},
    }


def test_openai_client_omits_reasoning_and_handles_empty_output() -> None:
    fake = _FakeOpenAI("sk-test", output_text="")
    client = OpenAINarrativeClient(client_factory=lambda _key: fake)

    text = asyncio.run(
        client.generate(
            api_key="sk-test",
            model="gpt-5.2",
            reasoning_effort=None,
            store=True,
            prompt="Analise",
        )
    )

    assert text == ""
    assert fake.responses.last_payload is not None
    assert "reasoning" not in fake.responses.last_payload
