from __future__ import annotations
from typing import Dict

from fastapi import APIRouter, HTTPException

from ..catalog import CatalogResponse
from ..i18n import TRANSLATIONS, is_rtl, strings_for

router = APIRouter(tags=["catalog"])


@router.get("/catalog", response_model=CatalogResponse)
async def catalog():
	return CatalogResponse()


@router.get("/i18n/{native_language}")
async def ui_strings(native_language: str) -> Dict[str, object]:
	if native_language not in TRANSLATIONS:
		raise HTTPException(status_code=404, detail=f"No strings for {native_language}")
	return {"language": native_language, "rtl": is_rtl(native_language), "strings": strings_for(native_language)}
