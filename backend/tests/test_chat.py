import asyncio

import httpx
import pytest

from conftest import FakeGateway, good_responses
from lingualeap.catalog import ChatConfig, resolve_turn_request
from lingualeap.chat import (
	ENDED,
	PAUSED,
	PLAYING,
	ChatSession,
	PlaybackState,
	TurnInProgressError,
	load_audio,
	request_suggestions,
	take_turn,
)
from lingualeap.errors import GatewayError, InputValidationError
from lingualeap.i18n import translate
from lingualeap.speech import AzureSpeechSynthesizer


@pytest.fixture
def session():
	s = ChatSession(ChatConfig(language="de-DE", native_language="English", topic="topicOrderingFood", level="levelBeginner"))
	s.start()
	return s


def test_start_greets_with_localized_topic():
	s = ChatSession(ChatConfig(native_language="Persian", topic="topicJobInterview"))
	greeting = s.start()
	assert "مصاحبه کاری" in greeting.content
	assert s.messages == [greeting]


def test_translation_falls_back_to_english_and_interpolates():
	assert translate("initialMessage", "Klingon", topic="food") == "Hello! Let's talk about food. Say something to get started."
	with pytest.raises(KeyError):
		translate("noSuchKey")


def test_turn_request_uses_labels():
	config = ChatConfig(language="ja-JP", native_language="English", topic="custom", custom_topic="Anime", level="levelAdvanced")
	request = resolve_turn_request(config, "こんにちは")
	assert (request.language, request.level, request.topic) == ("Japanese", "Advanced", "Anime")


@pytest.mark.parametrize("config, text", [
	(ChatConfig(topic="custom", custom_topic="  "), "Hallo"),
	(ChatConfig(language="xx-XX"), "Hallo"),
	(ChatConfig(), "   "),
])
def test_invalid_input_rejected_before_turn(config, text):
	with pytest.raises(InputValidationError):
		resolve_turn_request(config, text)


@pytest.mark.asyncio
async def test_successful_turn_appends_reply(session, gateway):
	result = await take_turn(session, "Ich möchte ein Kaffee.", gateway)

	assert result.success
	roles = [m.role for m in session.messages]
	assert roles == ["assistant", "user", "assistant"]
	reply = session.last_message
	assert reply.translation == "Very good! What do you like to eat for breakfast?"
	assert reply.analysis.correction.corrected_sentence == "Ich möchte einen Kaffee."
	assert session.busy is False


@pytest.mark.asyncio
async def test_failed_turn_rolls_back_user_message(session):
	responses = good_responses()
	responses["translation"] = GatewayError("boom")

	result = await take_turn(session, "Hallo", FakeGateway(responses))

	assert not result.success
	assert [m.role for m in session.messages] == ["assistant"]
	assert session.busy is False


@pytest.mark.asyncio
async def test_invalid_input_leaves_session_untouched(gateway):
	s = ChatSession(ChatConfig(native_language="English"))
	s.start()
	s.config = s.config.model_copy(update={"topic": "custom", "custom_topic": ""})

	with pytest.raises(InputValidationError):
		await take_turn(s, "Hallo", gateway)

	assert len(s.messages) == 1
	assert gateway.calls == []


def test_second_turn_while_busy_is_rejected(session):
	session.begin_turn("eins")
	with pytest.raises(TurnInProgressError):
		session.begin_turn("zwei")


@pytest.mark.asyncio
async def test_suggestions_stored_then_cleared_by_next_turn(session, gateway):
	result = await request_suggestions(session, gateway)
	assert result.success
	assert len(session.suggestions) == 3

	session.begin_turn(session.suggestions[0])
	assert session.suggestions == []
	assert not session.can_suggest


def test_playback_toggle_and_events():
	events = []
	playback = PlaybackState()
	playback.subscribe(lambda event, mid: events.append((event, mid)))

	playback.play("a")
	playback.play("a")
	playback.play("b")
	playback.ended()
	playback.ended()

	assert events == [(PLAYING, "a"), (PAUSED, "a"), (PLAYING, "b"), (ENDED, "b")]
	assert not playback.is_playing


@pytest.mark.asyncio
async def test_audio_autoplay_marks_single_message_playing(session, gateway):
	await take_turn(session, "Hallo", gateway)
	reply = session.last_message
	synth = AzureSpeechSynthesizer("k", "r", transport=httpx.MockTransport(lambda r: httpx.Response(200, content=b"mp3")))

	assert await load_audio(session, reply, synth) is True

	assert reply.audio == b"mp3"
	assert [m.is_playing for m in session.messages] == [False, False, True]
	session.playback.ended()
	assert not any(m.is_playing for m in session.messages)


@pytest.mark.asyncio
async def test_audio_failure_keeps_reply(session, gateway):
	await take_turn(session, "Hallo", gateway)
	reply = session.last_message
	synth = AzureSpeechSynthesizer("k", "r", transport=httpx.MockTransport(lambda r: httpx.Response(500, text="down")))

	assert await load_audio(session, reply, synth) is False

	assert reply.audio is None
	assert session.last_message is reply
	assert not session.playback.is_playing


@pytest.mark.asyncio
async def test_cancelled_turn_rolls_back_and_frees_session(session):
	responses = good_responses()
	never = asyncio.Event()

	async def hanging_conversation(_):
		await never.wait()

	responses["conversation"] = hanging_conversation
	gateway = FakeGateway(responses)
	task = asyncio.create_task(take_turn(session, "Hallo", gateway))
	while not gateway.called("conversation"):
		await asyncio.sleep(0)

	task.cancel()
	with pytest.raises(asyncio.CancelledError):
		await task

	assert [m.role for m in session.messages] == ["assistant"]
	assert session.busy is False
