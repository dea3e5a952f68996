"""
Azure Speech text-to-speech over the REST API.

Produces MP3 (24 kHz, 48 kbit/s, mono) for a text in a given language tag.
When no voice is given the voice comes from ``VOICE_MAP`` and falls back to
``DEFAULT_VOICE`` for unmapped tags.
"""

from __future__ import annotations
import logging
from typing import Dict, Optional
from xml.sax.saxutils import escape, quoteattr

import httpx

from .errors import SpeechConfigurationError, SpeechSynthesisError
from .settings import settings

logger = logging.getLogger(__name__)

OUTPUT_FORMAT = "audio-24khz-48kbitrate-mono-mp3"
DEFAULT_RATE = 1.2
DEFAULT_VOICE = "en-US-AvaMultilingualNeural"

VOICE_MAP: Dict[str, str] = {
	"en-US": "en-US-AvaMultilingualNeural",
	"es-ES": "es-ES-ElviraNeural",
	"fr-FR": "fr-FR-DeniseNeural",
	"de-DE": "de-DE-KatjaNeural",
	"it-IT": "it-IT-ElsaNeural",
	"ja-JP": "ja-JP-NanamiNeural",
	"ko-KR": "ko-KR-SunHiNeural",
	"pt-BR": "pt-BR-FranciscaNeural",
	"fa-IR": "fa-IR-DilaraNeural",
}


def select_voice(lang: str, voice: Optional[str] = None) -> str:
	if voice:
		return str(voice)
	return VOICE_MAP.get(lang, DEFAULT_VOICE)


def build_ssml(text: str, lang: str, voice: str, rate: float = DEFAULT_RATE) -> str:
	body = escape(str(text), {"'": "&apos;", '"': "&quot;"})
	return (
		f'<speak version="1.0" xmlns="http://www.w3.org/2001/10/synthesis" xml:lang={quoteattr(lang)}>'
		f"<voice name={quoteattr(voice)}>"
		f"<prosody rate={quoteattr(str(rate))}>{body}</prosody>"
		"</voice></speak>"
	)


class AzureSpeechSynthesizer:
	def __init__(
		self,
		key: Optional[str] = None,
		region: Optional[str] = None,
		*,
		timeout: Optional[float] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None,
	) -> None:
		self.key = key or settings.azure_speech_key
		self.region = region or settings.azure_speech_region
		self.timeout = timeout if timeout is not None else settings.tts_timeout_seconds
		self._transport = transport

	@property
	def endpoint(self) -> str:
		return f"https://{self.region}.tts.speech.microsoft.com/cognitiveservices/v1"

	async def synthesize(
		self,
		text: str,
		lang: str,
		*,
		rate: float = DEFAULT_RATE,
		voice: Optional[str] = None,
	) -> bytes:
		if not self.key or not self.region:
			raise SpeechConfigurationError("Azure Speech key or region not configured")
		voice_name = select_voice(lang, voice)
		ssml = build_ssml(text, lang, voice_name, rate)
		logger.debug("Synthesizing speech with SSML: %s", ssml)
		headers = {
			"Ocp-Apim-Subscription-Key": self.key,
			"Content-Type": "application/ssml+xml",
			"X-Microsoft-OutputFormat": OUTPUT_FORMAT,
			"User-Agent": "lingualeap",
		}
		try:
			async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
				r = await client.post(self.endpoint, headers=headers, content=ssml.encode("utf-8"))
		except httpx.TimeoutException as err:
			raise SpeechSynthesisError(f"timed out after {self.timeout}s") from err
		except httpx.RequestError as err:
			raise SpeechSynthesisError(f"could not reach Azure Speech: {err}") from err
		if r.status_code != 200:
			reason = r.text.strip() or r.reason_phrase
			raise SpeechSynthesisError(f"HTTP {r.status_code} {reason}", status_code=r.status_code)
		if not r.content:
			raise SpeechSynthesisError("provider returned no audio")
		logger.info("Synthesized %d bytes of audio with voice %s", len(r.content), voice_name)
		return r.content
