"""
Language-model gateway.

The orchestration core only ever talks to :class:`LanguageModelGateway`:
``invoke(prompt, input, output_schema)`` renders a named prompt template with a
typed input model and returns an instance of the typed output model, or raises
:class:`GatewayError`. :class:`GeminiGateway` is the production implementation
on top of :class:`GeminiClient`.
"""

from __future__ import annotations
import asyncio
import json
import logging
import re
from typing import Any, Dict, Optional, Protocol, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import GatewayError
from .gemini_client import GeminiClient
from .prompts import PromptTemplate
from .settings import settings

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT", bound=BaseModel)


class LanguageModelGateway(Protocol):
	async def invoke(self, prompt: PromptTemplate, input: BaseModel, output_schema: Type[OutputT]) -> OutputT:
		...


def extract_json_block(text: str) -> Dict[str, Any]:
	"""Extract a JSON object from model output.

	Tries the whole text first, then the outermost ``{...}`` span, which covers
	answers wrapped in markdown fences or preceded by commentary.

	Raises:
		ValueError: If no valid JSON object can be found
	"""
	try:
		data = json.loads(text)
		if isinstance(data, dict):
			return data
	except Exception:
		pass
	match = re.search(r"\{[\s\S]*\}", text or "")
	if match:
		try:
			data = json.loads(match.group(0))
			if isinstance(data, dict):
				return data
		except Exception:
			pass
	raise ValueError("Failed to parse JSON from model output")


def schema_instruction(output_schema: Type[BaseModel]) -> str:
	schema = output_schema.model_json_schema(by_alias=True)
	return (
		"Return STRICT JSON only, no markdown, no commentary. "
		"The JSON object must validate against this JSON schema:\n"
		f"{json.dumps(schema, ensure_ascii=False)}"
	)


class GeminiGateway:
	def __init__(self, client: Optional[GeminiClient] = None, *, timeout: Optional[float] = None) -> None:
		self._client = client or GeminiClient()
		self.timeout = timeout if timeout is not None else settings.llm_timeout_seconds

	async def invoke(self, prompt: PromptTemplate, input: BaseModel, output_schema: Type[OutputT]) -> OutputT:
		text = f"{prompt.render(input.model_dump())}\n\n{schema_instruction(output_schema)}"
		try:
			raw = await asyncio.wait_for(self._client.generate(text, json_mode=True), timeout=self.timeout)
		except asyncio.TimeoutError as err:
			raise GatewayError(f"{prompt.name} timed out after {self.timeout}s", step=prompt.name) from err
		except GatewayError as err:
			err.step = prompt.name
			raise
		try:
			data = extract_json_block(raw)
			return output_schema.model_validate(data)
		except (ValueError, ValidationError) as err:
			logger.debug("%s returned unusable output: %s", prompt.name, raw[:1000])
			raise GatewayError(f"{prompt.name} returned invalid output: {err}", step=prompt.name) from err

	async def aclose(self) -> None:
		await self._client.aclose()
