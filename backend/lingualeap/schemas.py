"""
Request and result models shared by the requesters, the orchestration core and
the HTTP routers.

Every model serializes with camelCase keys (``tutorResponse``, ``isCorrect``)
because that is the shape both the chat UI and the language model are asked to
produce. Python code uses the snake_case attribute names; input accepts either.
"""

from __future__ import annotations
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _NonBlankInput(CamelModel):
	model_config = ConfigDict(
		alias_generator=to_camel,
		populate_by_name=True,
		str_strip_whitespace=True,
		frozen=True,
	)


# ============================================================================
# TURN
# ============================================================================

class TutorTurnRequest(_NonBlankInput):
	user_input: str = Field(min_length=1, description="The learner's message")
	language: str = Field(min_length=1, description="Language being practiced, e.g. German")
	native_language: str = Field(min_length=1, description="The learner's native language")
	level: str = Field(min_length=1, description="Proficiency level label")
	topic: str = Field(min_length=1, description="Conversation topic")


class ConversationResult(CamelModel):
	tutor_response: str


class GrammarCheckInput(CamelModel):
	text: str
	native_language: str


class GrammarResult(CamelModel):
	is_correct: bool = Field(description="Whether the input text is grammatically correct")
	corrected_text: str = Field(description="Corrected version of the input; the input itself when correct")
	explanation: str = Field(description="Explanation of the errors, in the learner's native language")


class RefinementInput(CamelModel):
	text: str
	language: str
	level: str
	native_language: str


class RefinementResult(CamelModel):
	suggestions: List[str] = Field(description="Alternative phrasings in the practice language")


class CorrectionInput(CamelModel):
	incorrect_sentence: str
	native_language: str


class CorrectionResult(CamelModel):
	corrected_sentence: str = Field(description="Fully corrected sentence, in the sentence's original language")


class TranslationInput(CamelModel):
	text: str
	target_language: str


class TranslationResult(CamelModel):
	translated_text: str


class TutorTurnResponse(CamelModel):
	tutor_response: str
	translation: str
	grammar: GrammarResult
	refinement: RefinementResult
	correction: CorrectionResult


# ============================================================================
# ANSWER SUGGESTIONS
# ============================================================================

class AnswerSuggestionsRequest(_NonBlankInput):
	tutor_response: str = Field(min_length=1)
	language: str = Field(min_length=1)
	level: str = Field(min_length=1)
	topic: str = Field(min_length=1)


class AnswerSuggestionsResult(CamelModel):
	suggestions: List[str] = Field(description="Short replies the learner could say next")


# ============================================================================
# ENDPOINT RESULT
# ============================================================================

T = TypeVar("T")


class ActionResult(CamelModel, Generic[T]):
	success: bool
	data: Optional[T] = None
	error: Optional[str] = None

	@classmethod
	def ok(cls, data: T) -> "ActionResult[T]":
		return cls(success=True, data=data)

	@classmethod
	def failed(cls, error: str) -> "ActionResult[T]":
		return cls(success=False, error=error)
