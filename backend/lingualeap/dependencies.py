from __future__ import annotations
import logging
from typing import AsyncIterator, Optional

from .gateway import GeminiGateway, LanguageModelGateway
from .speech import AzureSpeechSynthesizer

logger = logging.getLogger(__name__)


async def get_gateway() -> AsyncIterator[Optional[LanguageModelGateway]]:
	"""Yield a per-request gateway, or None when Gemini is not configured."""
	try:
		gateway = GeminiGateway()
	except ValueError as e:
		logger.error("Language model gateway unavailable: %s", e)
		yield None
		return
	try:
		yield gateway
	finally:
		await gateway.aclose()


def get_synthesizer() -> AzureSpeechSynthesizer:
	return AzureSpeechSynthesizer()
