import logging

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from .logging_config import configure_logging
from .settings import settings
from .routers import health, tutor, tts, catalog

logger = logging.getLogger(__name__)

app = FastAPI(title="LinguaLeap Tutor API")
app.include_router(health.router)
app.include_router(tutor.router)
app.include_router(tts.router)
app.include_router(catalog.router)


@app.get("/", include_in_schema=False)
async def redirect_root_to_docs():
	return RedirectResponse(url="/docs")


@app.get("/info")
def root():
	return {
		"status": "ok",
		"gemini_configured": bool(settings.gemini_api_key),
		"tts_configured": bool(settings.azure_speech_key and settings.azure_speech_region),
	}


@app.on_event("startup")
async def startup_event():
	configure_logging(settings.log_level)
	if not settings.gemini_api_key:
		logger.warning("GEMINI_API_KEY is not set; tutor endpoints will fail until it is configured")
	if not (settings.azure_speech_key and settings.azure_speech_region):
		logger.warning("Azure Speech key or region not set; /api/tts will return 500")
