"""
Chat state for a single learner.

:class:`ChatSession` owns the message list the UI renders. A turn is optimistic:
the learner's message is shown as soon as it is sent and removed again if the
turn fails. :class:`PlaybackState` owns the single audio player shared by every
message and reports ``playing`` / ``paused`` / ``ended`` events, which the
session mirrors into each message's ``is_playing`` flag.
"""

from __future__ import annotations
import logging
import uuid
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .actions import run_answer_suggestions, run_tutor_turn
from .catalog import ChatConfig, require_topic, resolve_suggestions_request, resolve_turn_request
from .errors import LinguaLeapError, SpeechConfigurationError, SpeechSynthesisError
from .gateway import LanguageModelGateway
from .i18n import translate
from .schemas import (
	ActionResult,
	AnswerSuggestionsResult,
	CorrectionResult,
	GrammarResult,
	RefinementResult,
	TutorTurnResponse,
)
from .speech import AzureSpeechSynthesizer

logger = logging.getLogger(__name__)

PLAYING = "playing"
PAUSED = "paused"
ENDED = "ended"

PlaybackListener = Callable[[str, str], None]


class TurnInProgressError(LinguaLeapError):
	"""A message was sent while the previous turn was still running."""


@dataclass
class Analysis:
	grammar: GrammarResult
	refinement: RefinementResult
	correction: CorrectionResult


@dataclass
class Message:
	role: str
	content: str
	id: str = field(default_factory=lambda: uuid.uuid4().hex)
	translation: Optional[str] = None
	analysis: Optional[Analysis] = None
	audio: Optional[bytes] = None
	is_playing: bool = False


class PlaybackState:
	def __init__(self) -> None:
		self.current: Optional[str] = None
		self.paused: bool = True
		self._listeners: List[PlaybackListener] = []

	def subscribe(self, listener: PlaybackListener) -> None:
		self._listeners.append(listener)

	def _emit(self, event: str, message_id: str) -> None:
		for listener in list(self._listeners):
			listener(event, message_id)

	@property
	def is_playing(self) -> bool:
		return self.current is not None and not self.paused

	def play(self, message_id: str) -> None:
		# Pressing play on the message that is already playing pauses it
		if self.current == message_id and not self.paused:
			self.pause()
			return
		self.current = message_id
		self.paused = False
		self._emit(PLAYING, message_id)

	def pause(self) -> None:
		if self.current is not None and not self.paused:
			self.paused = True
			self._emit(PAUSED, self.current)

	def stop(self) -> None:
		self.pause()
		self.current = None

	def ended(self) -> None:
		if self.current is not None and not self.paused:
			self.paused = True
			self._emit(ENDED, self.current)


class ChatSession:
	def __init__(self, config: ChatConfig, playback: Optional[PlaybackState] = None) -> None:
		self.config = config
		self.messages: List[Message] = []
		self.suggestions: List[str] = []
		self.busy = False
		self._pending: Optional[Message] = None
		self.playback = playback or PlaybackState()
		self.playback.subscribe(self._on_playback)

	def t(self, key: str, **variables: str) -> str:
		return translate(key, self.config.native_language, **variables)

	def start(self) -> Message:
		topic = require_topic(self.config)
		self.playback.stop()
		greeting = Message(role="assistant", content=self.t("initialMessage", topic=topic))
		self.messages = [greeting]
		self.suggestions = []
		return greeting

	@property
	def last_message(self) -> Optional[Message]:
		return self.messages[-1] if self.messages else None

	@property
	def can_suggest(self) -> bool:
		last = self.last_message
		return not self.busy and last is not None and last.role == "assistant"

	def get_message(self, message_id: str) -> Message:
		for msg in self.messages:
			if msg.id == message_id:
				return msg
		raise KeyError(message_id)

	def begin_turn(self, text: str) -> Message:
		if self.busy:
			raise TurnInProgressError("Wait for the tutor to answer before sending another message")
		self.suggestions = []
		msg = Message(role="user", content=text)
		self.messages.append(msg)
		self._pending = msg
		self.busy = True
		return msg

	def complete_turn(self, response: TutorTurnResponse) -> Message:
		reply = Message(
			role="assistant",
			content=response.tutor_response,
			translation=response.translation,
			analysis=Analysis(
				grammar=response.grammar,
				refinement=response.refinement,
				correction=response.correction,
			),
		)
		self.messages.append(reply)
		self._pending = None
		self.busy = False
		return reply

	def fail_turn(self) -> None:
		if self._pending is not None and self._pending in self.messages:
			self.messages.remove(self._pending)
		self._pending = None
		self.busy = False

	def attach_audio(self, message_id: str, audio: bytes) -> None:
		self.get_message(message_id).audio = audio

	def play(self, message_id: str) -> None:
		if self.get_message(message_id).audio is None:
			logger.warning("Message %s has no audio to play", message_id)
			return
		self.playback.play(message_id)

	def _on_playback(self, event: str, message_id: str) -> None:
		for msg in self.messages:
			msg.is_playing = event == PLAYING and msg.id == message_id


async def take_turn(session: ChatSession, text: str, gateway: LanguageModelGateway) -> ActionResult[TutorTurnResponse]:
	"""Send one learner message through the tutor and update the session.

	Input problems raise InputValidationError before the session is touched; a
	failed turn rolls back the optimistic user message.
	"""
	request = resolve_turn_request(session.config, text)
	session.begin_turn(text)
	try:
		result = await run_tutor_turn(request, gateway)
	except BaseException:
		session.fail_turn()
		raise
	if result.success and result.data is not None:
		session.complete_turn(result.data)
	else:
		session.fail_turn()
	return result


async def request_suggestions(session: ChatSession, gateway: LanguageModelGateway) -> ActionResult[AnswerSuggestionsResult]:
	last = session.last_message
	if not session.can_suggest or last is None:
		return ActionResult[AnswerSuggestionsResult].failed("No tutor message to reply to")
	session.suggestions = []
	result = await run_answer_suggestions(resolve_suggestions_request(session.config, last.content), gateway)
	if result.success and result.data is not None:
		session.suggestions = list(result.data.suggestions)
	return result


async def load_audio(session: ChatSession, message: Message, synthesizer: AzureSpeechSynthesizer) -> bool:
	"""Synthesize audio for an assistant message; failure only leaves it silent."""
	try:
		audio = await synthesizer.synthesize(message.content, session.config.language)
	except (SpeechConfigurationError, SpeechSynthesisError) as err:
		logger.error("Error fetching TTS audio for message %s: %s", message.id, err)
		return False
	session.attach_audio(message.id, audio)
	if session.config.auto_play_audio:
		session.play(message.id)
	return True
