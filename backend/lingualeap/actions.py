"""
Entry points used by the presentation layer.

Both functions always return an :class:`ActionResult`; model failures are
logged with their cause here and replaced with a generic, retryable message.
"""

from __future__ import annotations
import logging

from . import requesters
from .errors import LinguaLeapError, TurnFailedError
from .gateway import LanguageModelGateway
from .orchestrator import TutorOrchestrator
from .schemas import (
	ActionResult,
	AnswerSuggestionsRequest,
	AnswerSuggestionsResult,
	TutorTurnRequest,
	TutorTurnResponse,
)

logger = logging.getLogger(__name__)

TURN_FAILED_MESSAGE = "Failed to get response from AI. Please try again."
SUGGESTIONS_FAILED_MESSAGE = "Failed to get suggestions. Please try again."


async def run_tutor_turn(
	request: TutorTurnRequest, gateway: LanguageModelGateway
) -> ActionResult[TutorTurnResponse]:
	try:
		response = await TutorOrchestrator(gateway).run_turn(request)
	except TurnFailedError as err:
		for step, cause in err.failures.items():
			logger.error("Tutor turn step %s failed: %r", step, cause)
		return ActionResult[TutorTurnResponse].failed(TURN_FAILED_MESSAGE)
	except Exception:
		logger.exception("Unexpected error getting AI tutor response")
		return ActionResult[TutorTurnResponse].failed(TURN_FAILED_MESSAGE)
	return ActionResult[TutorTurnResponse].ok(response)


async def run_answer_suggestions(
	request: AnswerSuggestionsRequest, gateway: LanguageModelGateway
) -> ActionResult[AnswerSuggestionsResult]:
	try:
		result = await requesters.suggest_answers(gateway, request)
	except LinguaLeapError as err:
		logger.error("Error getting answer suggestions: %r", err)
		return ActionResult[AnswerSuggestionsResult].failed(SUGGESTIONS_FAILED_MESSAGE)
	except Exception:
		logger.exception("Unexpected error getting answer suggestions")
		return ActionResult[AnswerSuggestionsResult].failed(SUGGESTIONS_FAILED_MESSAGE)
	return ActionResult[AnswerSuggestionsResult].ok(result)
