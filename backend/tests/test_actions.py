import logging

import pytest

from conftest import FakeGateway, good_responses
from lingualeap.actions import (
	SUGGESTIONS_FAILED_MESSAGE,
	TURN_FAILED_MESSAGE,
	run_answer_suggestions,
	run_tutor_turn,
)
from lingualeap.errors import GatewayError
from lingualeap.schemas import AnswerSuggestionsRequest


@pytest.fixture
def suggestions_request():
	return AnswerSuggestionsRequest(
		tutor_response="Was isst du gern?",
		language="German",
		level="Beginner",
		topic="Ordering food",
	)


@pytest.mark.asyncio
async def test_successful_turn_returns_data(gateway, turn_request):
	result = await run_tutor_turn(turn_request, gateway)

	assert result.success is True
	assert result.error is None
	assert result.data.translation


@pytest.mark.asyncio
async def test_failed_turn_returns_generic_message_and_logs_cause(turn_request, caplog):
	responses = good_responses()
	responses["full_correction"] = GatewayError("HTTP 503 from upstream")
	caplog.set_level(logging.ERROR, logger="lingualeap.actions")

	result = await run_tutor_turn(turn_request, FakeGateway(responses))

	assert result.success is False
	assert result.data is None
	assert result.error == TURN_FAILED_MESSAGE
	assert "correction" in caplog.text
	assert "HTTP 503 from upstream" in caplog.text


@pytest.mark.asyncio
async def test_answer_suggestions_shape(gateway, suggestions_request):
	result = await run_answer_suggestions(suggestions_request, gateway)

	assert result.success is True
	assert result.data.suggestions
	assert all(isinstance(s, str) for s in result.data.suggestions)


@pytest.mark.asyncio
async def test_answer_suggestions_are_not_cached(gateway, suggestions_request):
	await run_answer_suggestions(suggestions_request, gateway)
	await run_answer_suggestions(suggestions_request, gateway)

	assert gateway.called("answer_suggestions") == 2
	assert gateway.called("conversation") == 0


@pytest.mark.asyncio
async def test_answer_suggestions_failure(suggestions_request):
	responses = good_responses()
	responses["answer_suggestions"] = GatewayError("invalid output")

	result = await run_answer_suggestions(suggestions_request, FakeGateway(responses))

	assert result.success is False
	assert result.error == SUGGESTIONS_FAILED_MESSAGE
