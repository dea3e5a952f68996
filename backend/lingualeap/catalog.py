from __future__ import annotations
from typing import Dict, List

from pydantic import Field

from .errors import InputValidationError
from .i18n import ENGLISH, PERSIAN, translate
from .schemas import AnswerSuggestionsRequest, CamelModel, TutorTurnRequest

# Practice languages: BCP-47 tag (used for speech) -> label (used in prompts)
LANGUAGES: List[Dict[str, str]] = [
	{"value": "en-US", "label": "English"},
	{"value": "es-ES", "label": "Spanish"},
	{"value": "fr-FR", "label": "French"},
	{"value": "de-DE", "label": "German"},
	{"value": "it-IT", "label": "Italian"},
	{"value": "ja-JP", "label": "Japanese"},
	{"value": "ko-KR", "label": "Korean"},
	{"value": "pt-BR", "label": "Portuguese"},
	{"value": "fa-IR", "label": "Persian"},
]

NATIVE_LANGUAGES: List[str] = [ENGLISH, PERSIAN]

TOPIC_KEYS: List[str] = [
	"topicOrderingFood",
	"topicAskingForDirections",
	"topicTalkingAboutHobbies",
	"topicMakingTravelPlans",
	"topicDiscussingWork",
	"topicJobInterview",
	"topicNurseryDay",
	"topicArtAndMuseums",
	"topicDailyRoutines",
	"topicGroceryShopping",
	"topicDoctorsAppointment",
]
CUSTOM_TOPIC = "custom"

LEVEL_KEYS: List[str] = ["levelBeginner", "levelIntermediate", "levelAdvanced"]


class ChatConfig(CamelModel):
	language: str = "de-DE"
	native_language: str = PERSIAN
	topic: str = TOPIC_KEYS[0]
	level: str = "levelIntermediate"
	custom_topic: str = ""
	auto_play_audio: bool = True


class CatalogResponse(CamelModel):
	languages: List[Dict[str, str]] = Field(default_factory=lambda: list(LANGUAGES))
	native_languages: List[str] = Field(default_factory=lambda: list(NATIVE_LANGUAGES))
	topics: List[str] = Field(default_factory=lambda: TOPIC_KEYS + [CUSTOM_TOPIC])
	levels: List[str] = Field(default_factory=lambda: list(LEVEL_KEYS))


def language_label(code: str) -> str:
	for lang in LANGUAGES:
		if lang["value"] == code:
			return lang["label"]
	raise InputValidationError(f"Unsupported practice language: {code}")


def topic_label(config: ChatConfig) -> str:
	if config.topic == CUSTOM_TOPIC:
		return config.custom_topic.strip()
	if config.topic not in TOPIC_KEYS:
		raise InputValidationError(f"Unknown topic: {config.topic}")
	return translate(config.topic, config.native_language)


def level_label(config: ChatConfig) -> str:
	if config.level not in LEVEL_KEYS:
		raise InputValidationError(f"Unknown level: {config.level}")
	return translate(config.level, config.native_language)


def require_topic(config: ChatConfig) -> str:
	topic = topic_label(config)
	if not topic:
		raise InputValidationError(translate("topicRequiredDescription", config.native_language))
	return topic


def resolve_turn_request(config: ChatConfig, text: str) -> TutorTurnRequest:
	"""Turn a chat configuration plus the learner's message into a turn request.

	Raises InputValidationError before anything is sent when the message or the
	topic is blank or the practice language is unknown.
	"""
	if not (text or "").strip():
		raise InputValidationError("Message is empty")
	return TutorTurnRequest(
		user_input=text,
		language=language_label(config.language),
		native_language=config.native_language,
		level=level_label(config),
		topic=require_topic(config),
	)


def resolve_suggestions_request(config: ChatConfig, tutor_response: str) -> AnswerSuggestionsRequest:
	return AnswerSuggestionsRequest(
		tutor_response=tutor_response,
		language=language_label(config.language),
		level=level_label(config),
		topic=require_topic(config),
	)
