from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Depends

from ..actions import SUGGESTIONS_FAILED_MESSAGE, TURN_FAILED_MESSAGE, run_answer_suggestions, run_tutor_turn
from ..dependencies import get_gateway
from ..gateway import LanguageModelGateway
from ..schemas import (
	ActionResult,
	AnswerSuggestionsRequest,
	AnswerSuggestionsResult,
	TutorTurnRequest,
	TutorTurnResponse,
)

router = APIRouter(prefix="/tutor", tags=["tutor"])


@router.post("/turn", response_model=ActionResult[TutorTurnResponse], response_model_exclude_none=True)
async def tutor_turn(req: TutorTurnRequest, gateway: Optional[LanguageModelGateway] = Depends(get_gateway)):
	if gateway is None:
		return ActionResult[TutorTurnResponse].failed(TURN_FAILED_MESSAGE)
	return await run_tutor_turn(req, gateway)


@router.post("/suggestions", response_model=ActionResult[AnswerSuggestionsResult], response_model_exclude_none=True)
async def answer_suggestions(req: AnswerSuggestionsRequest, gateway: Optional[LanguageModelGateway] = Depends(get_gateway)):
	if gateway is None:
		return ActionResult[AnswerSuggestionsResult].failed(SUGGESTIONS_FAILED_MESSAGE)
	return await run_answer_suggestions(req, gateway)
