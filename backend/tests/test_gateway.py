import asyncio
import json

import httpx
import pytest

from lingualeap.errors import GatewayError
from lingualeap.gateway import GeminiGateway, extract_json_block
from lingualeap.gemini_client import GeminiClient
from lingualeap.prompts import GRAMMAR_CHECK
from lingualeap.schemas import GrammarCheckInput, GrammarResult


def gemini_reply(text: str) -> dict:
	return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def make_gateway(handler) -> GeminiGateway:
	client = GeminiClient(api_key="test-key", model="gemini-test", transport=httpx.MockTransport(handler))
	return GeminiGateway(client, timeout=5)


INPUT = GrammarCheckInput(text="I has a cat", native_language="English")


def test_extract_json_block_plain_and_fenced():
	assert extract_json_block('{"a": 1}') == {"a": 1}
	assert extract_json_block('```json\n{"a": {"b": 2}}\n```') == {"a": {"b": 2}}
	with pytest.raises(ValueError):
		extract_json_block("no json here")


@pytest.mark.asyncio
async def test_invoke_returns_validated_model():
	seen = {}

	def handler(request: httpx.Request) -> httpx.Response:
		seen["url"] = str(request.url)
		seen["body"] = json.loads(request.content)
		return httpx.Response(200, json=gemini_reply(json.dumps({
			"isCorrect": False, "correctedText": "I have a cat", "explanation": "has -> have",
		})))

	gateway = make_gateway(handler)
	try:
		result = await gateway.invoke(GRAMMAR_CHECK, INPUT, GrammarResult)
	finally:
		await gateway.aclose()

	assert result == GrammarResult(is_correct=False, corrected_text="I have a cat", explanation="has -> have")
	assert "models/gemini-test:generateContent" in seen["url"]
	assert "key=test-key" in seen["url"]
	assert seen["body"]["generationConfig"] == {"responseMimeType": "application/json"}
	prompt_text = seen["body"]["contents"][0]["parts"][0]["text"]
	assert "Text to check: I has a cat" in prompt_text
	assert '"correctedText"' in prompt_text


@pytest.mark.asyncio
async def test_schema_mismatch_is_gateway_error():
	gateway = make_gateway(lambda request: httpx.Response(200, json=gemini_reply('{"isCorrect": "maybe"}')))
	with pytest.raises(GatewayError) as info:
		await gateway.invoke(GRAMMAR_CHECK, INPUT, GrammarResult)
	assert info.value.step == "grammar_check"


@pytest.mark.asyncio
async def test_http_error_is_gateway_error():
	gateway = make_gateway(lambda request: httpx.Response(503, text="overloaded"))
	with pytest.raises(GatewayError) as info:
		await gateway.invoke(GRAMMAR_CHECK, INPUT, GrammarResult)
	assert "503" in str(info.value)
	assert info.value.step == "grammar_check"


@pytest.mark.asyncio
async def test_unexpected_payload_is_gateway_error():
	gateway = make_gateway(lambda request: httpx.Response(200, json={"candidates": []}))
	with pytest.raises(GatewayError):
		await gateway.invoke(GRAMMAR_CHECK, INPUT, GrammarResult)


@pytest.mark.asyncio
async def test_slow_call_times_out():
	class SlowClient:
		async def generate(self, prompt, *, json_mode=False):
			await asyncio.sleep(1)
			return "{}"

	gateway = GeminiGateway(SlowClient(), timeout=0.01)
	with pytest.raises(GatewayError) as info:
		await gateway.invoke(GRAMMAR_CHECK, INPUT, GrammarResult)
	assert "timed out" in str(info.value)


def test_client_requires_api_key(monkeypatch):
	from lingualeap.settings import settings
	monkeypatch.setattr(settings, "gemini_api_key", None)
	with pytest.raises(ValueError):
		GeminiClient()
