"""
Response Orchestration
======================

Runs one tutor turn as a small task graph:

	conversation ──► translation ─┐
	grammar ──────────────────────┤
	refinement ───────────────────┼──► merge
	correction ───────────────────┘

Conversation, grammar, refinement and correction start together. Translation
needs the tutor reply, so it starts as soon as the conversation call returns
and overlaps with whatever is still running. The merge is all-or-nothing: every
started call is awaited, and if any of them failed the turn raises a single
:class:`TurnFailedError` listing each failed step.
"""

from __future__ import annotations
import asyncio
import logging
from typing import Any, Dict, Optional

from . import requesters
from .errors import TurnFailedError
from .gateway import LanguageModelGateway
from .schemas import (
	ConversationResult,
	CorrectionInput,
	GrammarCheckInput,
	RefinementInput,
	TranslationInput,
	TutorTurnRequest,
	TutorTurnResponse,
)

logger = logging.getLogger(__name__)

# Step names, also used as keys of TurnFailedError.failures
CONVERSATION = "conversation"
GRAMMAR = "grammar"
REFINEMENT = "refinement"
CORRECTION = "correction"
TRANSLATION = "translation"


async def _drain(tasks: Dict[str, "asyncio.Task[Any]"]) -> Dict[str, Any]:
	"""Wait for every task and return its result or the exception it raised."""
	results = await asyncio.gather(*tasks.values(), return_exceptions=True)
	return dict(zip(tasks.keys(), results))


class TutorOrchestrator:
	"""Stateless coordinator; one instance may serve any number of turns."""

	def __init__(self, gateway: LanguageModelGateway) -> None:
		self.gateway = gateway

	async def run_turn(self, request: TutorTurnRequest) -> TutorTurnResponse:
		gateway = self.gateway
		conversation_task = asyncio.create_task(requesters.converse(gateway, request))
		independent: Dict[str, "asyncio.Task[Any]"] = {
			GRAMMAR: asyncio.create_task(requesters.check_grammar(
				gateway, GrammarCheckInput(text=request.user_input, native_language=request.native_language)
			)),
			REFINEMENT: asyncio.create_task(requesters.suggest_refinements(
				gateway,
				RefinementInput(
					text=request.user_input,
					language=request.language,
					level=request.level,
					native_language=request.native_language,
				),
			)),
			CORRECTION: asyncio.create_task(requesters.correct_sentence(
				gateway, CorrectionInput(incorrect_sentence=request.user_input, native_language=request.native_language)
			)),
		}

		failures: Dict[str, BaseException] = {}
		conversation: Optional[ConversationResult] = None
		try:
			conversation = await conversation_task
		except asyncio.CancelledError:
			for task in independent.values():
				task.cancel()
			raise
		except Exception as exc:
			failures[CONVERSATION] = exc

		pending = dict(independent)
		if conversation is not None:
			pending[TRANSLATION] = asyncio.create_task(requesters.translate_text(
				gateway, TranslationInput(text=conversation.tutor_response, target_language=request.native_language)
			))

		outcomes = await _drain(pending)
		for step, outcome in outcomes.items():
			if isinstance(outcome, asyncio.CancelledError):
				raise outcome
			if isinstance(outcome, BaseException):
				failures[step] = outcome

		if failures:
			logger.warning("Tutor turn failed at: %s", ", ".join(failures))
			raise TurnFailedError(failures)

		return TutorTurnResponse(
			tutor_response=conversation.tutor_response,
			translation=outcomes[TRANSLATION].translated_text,
			grammar=outcomes[GRAMMAR],
			refinement=outcomes[REFINEMENT],
			correction=outcomes[CORRECTION],
		)
