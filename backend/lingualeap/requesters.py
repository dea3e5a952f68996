"""One function per language-model call. Each issues exactly one gateway request."""

from __future__ import annotations

from . import prompts
from .gateway import LanguageModelGateway
from .schemas import (
	AnswerSuggestionsRequest,
	AnswerSuggestionsResult,
	ConversationResult,
	CorrectionInput,
	CorrectionResult,
	GrammarCheckInput,
	GrammarResult,
	RefinementInput,
	RefinementResult,
	TranslationInput,
	TranslationResult,
	TutorTurnRequest,
)


async def converse(gateway: LanguageModelGateway, request: TutorTurnRequest) -> ConversationResult:
	return await gateway.invoke(prompts.CONVERSATION, request, ConversationResult)


async def check_grammar(gateway: LanguageModelGateway, data: GrammarCheckInput) -> GrammarResult:
	result = await gateway.invoke(prompts.GRAMMAR_CHECK, data, GrammarResult)
	# A correct sentence is echoed back untouched, whatever the model rewrote
	if result.is_correct and result.corrected_text != data.text:
		result = result.model_copy(update={"corrected_text": data.text})
	return result


async def suggest_refinements(gateway: LanguageModelGateway, data: RefinementInput) -> RefinementResult:
	# At least three are requested; fewer is still a valid answer
	return await gateway.invoke(prompts.REFINEMENT, data, RefinementResult)


async def correct_sentence(gateway: LanguageModelGateway, data: CorrectionInput) -> CorrectionResult:
	return await gateway.invoke(prompts.FULL_CORRECTION, data, CorrectionResult)


async def translate_text(gateway: LanguageModelGateway, data: TranslationInput) -> TranslationResult:
	return await gateway.invoke(prompts.TRANSLATION, data, TranslationResult)


async def suggest_answers(gateway: LanguageModelGateway, data: AnswerSuggestionsRequest) -> AnswerSuggestionsResult:
	return await gateway.invoke(prompts.ANSWER_SUGGESTIONS, data, AnswerSuggestionsResult)
