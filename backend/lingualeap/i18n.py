"""UI strings for the supported native languages. Missing keys fall back to English."""

from __future__ import annotations
import re
from typing import Dict

ENGLISH = "English"
PERSIAN = "Persian"

# Native languages rendered right-to-left
RTL_LANGUAGES = {PERSIAN}

TRANSLATIONS: Dict[str, Dict[str, str]] = {
	ENGLISH: {
		"appDescription": "Practice a new language through conversation with your AI tutor.",
		"yourLanguageLabel": "Your language",
		"selectYourLanguagePlaceholder": "Select your language",
		"languageToPracticeLabel": "Language to practice",
		"selectLanguagePlaceholder": "Select a language",
		"topicLabel": "Topic",
		"selectTopicPlaceholder": "Select a topic",
		"customTopic": "Custom topic...",
		"customTopicPlaceholder": "Enter your topic",
		"proficiencyLevelLabel": "Proficiency level",
		"selectLevelPlaceholder": "Select your level",
		"autoPlayAudioLabel": "Play tutor audio automatically",
		"startChattingButton": "Start chatting",
		"English": "English",
		"Persian": "Persian",
		"topicOrderingFood": "Ordering food",
		"topicAskingForDirections": "Asking for directions",
		"topicTalkingAboutHobbies": "Talking about hobbies",
		"topicMakingTravelPlans": "Making travel plans",
		"topicDiscussingWork": "Discussing work",
		"topicJobInterview": "Job interview",
		"topicNurseryDay": "A day at nursery",
		"topicArtAndMuseums": "Art and museums",
		"topicDailyRoutines": "Daily routines",
		"topicGroceryShopping": "Grocery shopping",
		"topicDoctorsAppointment": "Doctor's appointment",
		"levelBeginner": "Beginner",
		"levelIntermediate": "Intermediate",
		"levelAdvanced": "Advanced",
		"initialMessage": "Hello! Let's talk about {{topic}}. Say something to get started.",
		"thinking": "Thinking",
		"textareaPlaceholder": "Type your message...",
		"listenButton": "Listen",
		"translationLabel": "Translation",
		"grammarCheckLabel": "Grammar check",
		"refinementSuggestionsLabel": "Refinement suggestions",
		"fullCorrectionLabel": "Full correction",
		"suggestReplyButton": "Suggest a reply",
		"copiedToClipboard": "Copied to clipboard",
		"errorTitle": "Something went wrong",
		"audioErrorTitle": "Audio error",
		"audioErrorDescription": "Could not load audio for this message.",
		"playbackErrorTitle": "Playback error",
		"playbackErrorDescription": "Could not play the audio.",
		"topicRequiredTitle": "Topic required",
		"topicRequiredDescription": "Please enter a topic for your conversation.",
		"suggestionErrorTitle": "Could not get suggestions",
		"speechRecognitionErrorTitle": "Speech recognition error",
		"speechRecognitionErrorDescription": "Something went wrong while listening. Please try again.",
		"microphoneAccessDenied": "Microphone access was denied.",
	},
	PERSIAN: {
		"appDescription": "با معلم هوش مصنوعی خود از طریق گفتگو یک زبان جدید تمرین کنید.",
		"yourLanguageLabel": "زبان شما",
		"selectYourLanguagePlaceholder": "زبان خود را انتخاب کنید",
		"languageToPracticeLabel": "زبان مورد تمرین",
		"selectLanguagePlaceholder": "یک زبان انتخاب کنید",
		"topicLabel": "موضوع",
		"selectTopicPlaceholder": "یک موضوع انتخاب کنید",
		"customTopic": "موضوع دلخواه...",
		"customTopicPlaceholder": "موضوع خود را وارد کنید",
		"proficiencyLevelLabel": "سطح مهارت",
		"selectLevelPlaceholder": "سطح خود را انتخاب کنید",
		"autoPlayAudioLabel": "پخش خودکار صدای معلم",
		"startChattingButton": "شروع گفتگو",
		"English": "انگلیسی",
		"Persian": "فارسی",
		"topicOrderingFood": "سفارش غذا",
		"topicAskingForDirections": "پرسیدن مسیر",
		"topicTalkingAboutHobbies": "صحبت درباره سرگرمی‌ها",
		"topicMakingTravelPlans": "برنامه‌ریزی سفر",
		"topicDiscussingWork": "صحبت درباره کار",
		"topicJobInterview": "مصاحبه کاری",
		"topicNurseryDay": "یک روز در مهدکودک",
		"topicArtAndMuseums": "هنر و موزه‌ها",
		"topicDailyRoutines": "کارهای روزمره",
		"topicGroceryShopping": "خرید مواد غذایی",
		"topicDoctorsAppointment": "وقت دکتر",
		"levelBeginner": "مبتدی",
		"levelIntermediate": "متوسط",
		"levelAdvanced": "پیشرفته",
		"initialMessage": "سلام! بیایید درباره {{topic}} صحبت کنیم. برای شروع چیزی بگویید.",
		"thinking": "در حال فکر کردن",
		"textareaPlaceholder": "پیام خود را بنویسید...",
		"listenButton": "گوش دادن",
		"translationLabel": "ترجمه",
		"grammarCheckLabel": "بررسی دستور زبان",
		"refinementSuggestionsLabel": "پیشنهادهای بهبود",
		"fullCorrectionLabel": "تصحیح کامل",
		"suggestReplyButton": "پیشنهاد پاسخ",
		"copiedToClipboard": "در کلیپ‌بورد کپی شد",
		"errorTitle": "مشکلی پیش آمد",
		"audioErrorTitle": "خطای صدا",
		"audioErrorDescription": "صدای این پیام بارگذاری نشد.",
		"playbackErrorTitle": "خطای پخش",
		"playbackErrorDescription": "پخش صدا ممکن نشد.",
		"topicRequiredTitle": "موضوع لازم است",
		"topicRequiredDescription": "لطفاً یک موضوع برای گفتگو وارد کنید.",
		"suggestionErrorTitle": "دریافت پیشنهادها ممکن نشد",
		"speechRecognitionErrorTitle": "خطای تشخیص گفتار",
		"speechRecognitionErrorDescription": "هنگام گوش دادن مشکلی پیش آمد. دوباره تلاش کنید.",
		"microphoneAccessDenied": "دسترسی به میکروفون رد شد.",
	},
}

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


def strings_for(native_language: str) -> Dict[str, str]:
	"""Full table for a native language, English filling any gaps."""
	return {**TRANSLATIONS[ENGLISH], **TRANSLATIONS.get(native_language, {})}


def translate(key: str, native_language: str = ENGLISH, **variables: str) -> str:
	table = TRANSLATIONS.get(native_language, {})
	text = table.get(key) or TRANSLATIONS[ENGLISH].get(key)
	if text is None:
		raise KeyError(f"Unknown translation key: {key}")
	return _PLACEHOLDER.sub(lambda m: str(variables.get(m.group(1), m.group(0))), text)


def is_rtl(native_language: str) -> bool:
	return native_language in RTL_LANGUAGES
