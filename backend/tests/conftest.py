from __future__ import annotations
import asyncio
from typing import Any, Dict, List, Tuple

import pytest
from pydantic import BaseModel

from lingualeap.schemas import TutorTurnRequest


class FakeGateway:
	"""Answers each prompt by name: a dict/model is returned, an exception raised,
	an async callable awaited with the input."""

	def __init__(self, responses: Dict[str, Any]) -> None:
		self.responses = responses
		self.calls: List[Tuple[str, BaseModel]] = []

	def called(self, name: str) -> int:
		return sum(1 for step, _ in self.calls if step == name)

	def input_for(self, name: str) -> BaseModel:
		return next(data for step, data in self.calls if step == name)

	async def invoke(self, prompt, input, output_schema):
		self.calls.append((prompt.name, input))
		await asyncio.sleep(0)
		value = self.responses[prompt.name]
		if callable(value) and not isinstance(value, type):
			value = await value(input)
		if isinstance(value, BaseException):
			raise value
		if isinstance(value, BaseModel):
			return value
		return output_schema.model_validate(value)


def good_responses() -> Dict[str, Any]:
	return {
		"conversation": {"tutorResponse": "Sehr gut! Was isst du gern zum Frühstück?"},
		"grammar_check": {"isCorrect": False, "correctedText": "Ich möchte einen Kaffee.", "explanation": "Akkusativ: einen"},
		"refinement": {"suggestions": ["Ich hätte gern einen Kaffee.", "Einen Kaffee, bitte.", "Könnte ich einen Kaffee haben?"]},
		"full_correction": {"correctedSentence": "Ich möchte einen Kaffee."},
		"translation": {"translatedText": "Very good! What do you like to eat for breakfast?"},
		"answer_suggestions": {"suggestions": ["Ich esse gern Brot.", "Ich trinke nur Kaffee.", "Meistens Müsli."]},
	}


@pytest.fixture
def turn_request() -> TutorTurnRequest:
	return TutorTurnRequest(
		user_input="Ich möchte ein Kaffee.",
		language="German",
		native_language="English",
		level="Intermediate",
		topic="Ordering food",
	)


@pytest.fixture
def gateway() -> FakeGateway:
	return FakeGateway(good_responses())
