from __future__ import annotations
import logging
import httpx
from typing import Any, Dict, Optional
from .errors import GatewayError
from .settings import settings

logger = logging.getLogger(__name__)


class GeminiClient:
	def __init__(
		self,
		api_key: Optional[str] = None,
		*,
		base_url: Optional[str] = None,
		model: Optional[str] = None,
		timeout: Optional[float] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None,
	) -> None:
		self.api_key = api_key or settings.gemini_api_key
		if not self.api_key:
			raise ValueError("GEMINI_API_KEY is not configured")
		self.model = model or settings.gemini_model
		self.provider = settings.gemini_provider
		if self.provider == "vertex":
			region = settings.vertex_region
			project = settings.vertex_project or "placeholder-project"
			# Vertex AI Generative REST endpoint (API key via header)
			self.base_url = base_url or (
				f"https://{region}-aiplatform.googleapis.com/v1/projects/{project}/locations/{region}/publishers/google/models/{self.model}:generateContent"
			)
			self._auth_in_query = False
		else:
			# Google AI Studio (Generative Language API)
			self.base_url = base_url or f"https://generativelanguage.googleapis.com/v1beta/models/{self.model}:generateContent"
			self._auth_in_query = True
		self.timeout = timeout if timeout is not None else settings.llm_timeout_seconds
		self._client = httpx.AsyncClient(timeout=self.timeout, transport=transport)

	async def generate(self, prompt: str, *, json_mode: bool = False) -> str:
		payload: Dict[str, Any] = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
		if json_mode:
			payload["generationConfig"] = {"responseMimeType": "application/json"}
		return await self._post_payload(payload)

	async def _post_payload(self, payload: Dict[str, Any]) -> str:
		params: Dict[str, Any] = {}
		headers: Dict[str, str] = {}
		if self._auth_in_query:
			params["key"] = self.api_key
		else:
			headers["x-goog-api-key"] = self.api_key
		try:
			r = await self._client.post(self.base_url, params=params, headers=headers, json=payload)
			r.raise_for_status()
		except httpx.TimeoutException as timeout_err:
			raise GatewayError(f"Gemini call timed out after {self.timeout}s") from timeout_err
		except httpx.HTTPStatusError as http_err:
			raise GatewayError(
				f"Gemini returned HTTP {http_err.response.status_code}: {http_err.response.text[:500]}"
			) from http_err
		except httpx.RequestError as net_err:
			raise GatewayError(f"Gemini request failed: {net_err}") from net_err
		try:
			data = r.json()
			return data["candidates"][0]["content"]["parts"][0]["text"]
		except Exception as err:
			logger.debug("Unexpected Gemini payload: %s", r.text[:1000])
			raise GatewayError(f"Unexpected Gemini response: {r.text[:500]}") from err

	async def aclose(self) -> None:
		await self._client.aclose()
