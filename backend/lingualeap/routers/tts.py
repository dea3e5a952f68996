from __future__ import annotations
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from ..dependencies import get_synthesizer
from ..errors import SpeechConfigurationError, SpeechSynthesisError
from ..speech import DEFAULT_RATE, AzureSpeechSynthesizer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["speech"])


@router.post("/tts")
async def text_to_speech(request: Request, synthesizer: AzureSpeechSynthesizer = Depends(get_synthesizer)):
	try:
		body: Dict[str, Any] = await request.json()
		if not isinstance(body, dict):
			raise ValueError("body must be a JSON object")
	except Exception as e:
		logger.error("Error parsing JSON from request: %s", e)
		return JSONResponse({"error": "Invalid request body"}, status_code=400)

	text = body.get("text")
	lang = body.get("lang")
	voice = body.get("voice")
	voice = str(voice) if voice else None
	if not text or not lang:
		logger.error("Missing text or lang in request body")
		return JSONResponse({"error": "Missing text or lang"}, status_code=400)
	try:
		rate = float(body.get("rate", DEFAULT_RATE))
	except (TypeError, ValueError):
		return JSONResponse({"error": "rate must be a number"}, status_code=400)

	try:
		audio = await synthesizer.synthesize(str(text), str(lang), rate=rate, voice=voice)
	except SpeechConfigurationError as e:
		logger.error("%s", e)
		return JSONResponse({"error": "Server configuration error for TTS."}, status_code=500)
	except SpeechSynthesisError as e:
		logger.error("TTS synthesis failed: %s", e.reason)
		return JSONResponse({"error": f"Failed to synthesize audio: {e.reason}"}, status_code=500)

	return Response(
		content=audio,
		media_type="audio/mpeg",
		headers={"Cache-Control": "public, max-age=31536000, immutable"},
	)
