"""
Interactive terminal chat with the tutor.

Type a message to get a reply with translation and feedback.
Commands: /suggest for reply ideas, /1 /2 /3 to send a suggestion,
/play to save the last reply's audio, /exit to quit.
"""

from __future__ import annotations
import argparse
import asyncio
from pathlib import Path
from typing import List, Optional

from .catalog import CUSTOM_TOPIC, LANGUAGES, LEVEL_KEYS, NATIVE_LANGUAGES, TOPIC_KEYS, ChatConfig
from .chat import ChatSession, Message, load_audio, request_suggestions, take_turn
from .errors import InputValidationError
from .gateway import GeminiGateway
from .logging_config import configure_logging
from .settings import settings
from .speech import AzureSpeechSynthesizer


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="lingualeap", description="Practice a language with an AI tutor.")
	parser.add_argument("--language", default="de-DE", choices=[l["value"] for l in LANGUAGES])
	parser.add_argument("--native-language", default="English", choices=NATIVE_LANGUAGES)
	parser.add_argument("--topic", default=TOPIC_KEYS[0], choices=TOPIC_KEYS + [CUSTOM_TOPIC])
	parser.add_argument("--custom-topic", default="", help="Topic text when --topic custom")
	parser.add_argument("--level", default="levelIntermediate", choices=LEVEL_KEYS)
	parser.add_argument("--no-audio", action="store_true", help="Skip speech synthesis")
	parser.add_argument("--audio-dir", type=Path, default=Path("audio"), help="Where /play writes MP3 files")
	parser.add_argument("--log-level", default=settings.log_level)
	return parser


def render_reply(session: ChatSession, msg: Message) -> str:
	lines = [f"tutor> {msg.content}"]
	if msg.translation:
		lines.append(f"  [{session.t('translationLabel')}] {msg.translation}")
	if msg.analysis is not None:
		grammar = msg.analysis.grammar
		lines.append(f"  [{session.t('grammarCheckLabel')}] {grammar.explanation}")
		if not grammar.is_correct:
			lines.append(f"    -> {grammar.corrected_text}")
		if msg.analysis.refinement.suggestions:
			lines.append(f"  [{session.t('refinementSuggestionsLabel')}]")
			lines.extend(f"    - {s}" for s in msg.analysis.refinement.suggestions)
		lines.append(f"  [{session.t('fullCorrectionLabel')}] {msg.analysis.correction.corrected_sentence}")
	return "\n".join(lines)


def save_audio(session: ChatSession, msg: Message, audio_dir: Path) -> Optional[Path]:
	if msg.audio is None:
		return None
	if not (session.playback.current == msg.id and session.playback.is_playing):
		session.play(msg.id)
	audio_dir.mkdir(parents=True, exist_ok=True)
	path = audio_dir / f"{msg.id}.mp3"
	path.write_bytes(msg.audio)
	# Nothing plays in a terminal; the file is the playback
	session.playback.ended()
	return path


async def chat_loop(session: ChatSession, gateway: GeminiGateway, synthesizer: Optional[AzureSpeechSynthesizer], audio_dir: Path) -> None:
	greeting = session.start()
	print(f"tutor> {greeting.content}")
	while True:
		try:
			text = input("you> ").strip()
		except EOFError:
			break
		if not text:
			continue
		if text in ("/exit", "/quit"):
			break
		if text == "/suggest":
			result = await request_suggestions(session, gateway)
			if not result.success:
				print(f"! {session.t('suggestionErrorTitle')}: {result.error}")
			for i, suggestion in enumerate(session.suggestions, start=1):
				print(f"  /{i} {suggestion}")
			continue
		if text == "/play":
			last = session.last_message
			path = save_audio(session, last, audio_dir) if last is not None else None
			print(f"  audio saved to {path}" if path else f"! {session.t('audioErrorDescription')}")
			continue
		if text[1:].isdigit() and text.startswith("/"):
			index = int(text[1:]) - 1
			suggestions: List[str] = session.suggestions
			if not 0 <= index < len(suggestions):
				continue
			text = suggestions[index]
			print(f"you> {text}")

		print(f"  {session.t('thinking')}...")
		try:
			result = await take_turn(session, text, gateway)
		except InputValidationError as e:
			print(f"! {e}")
			continue
		if not result.success:
			print(f"! {session.t('errorTitle')}: {result.error}")
			continue
		reply = session.last_message
		print(render_reply(session, reply))
		if synthesizer is not None and not await load_audio(session, reply, synthesizer):
			print(f"! {session.t('audioErrorTitle')}: {session.t('audioErrorDescription')}")
		elif synthesizer is not None and session.config.auto_play_audio:
			print(f"  audio saved to {save_audio(session, reply, audio_dir)}")


async def run(args: argparse.Namespace) -> None:
	config = ChatConfig(
		language=args.language,
		native_language=args.native_language,
		topic=args.topic,
		custom_topic=args.custom_topic,
		level=args.level,
		auto_play_audio=not args.no_audio,
	)
	session = ChatSession(config)
	synthesizer = None if args.no_audio else AzureSpeechSynthesizer()
	gateway = GeminiGateway()
	try:
		await chat_loop(session, gateway, synthesizer, args.audio_dir)
	finally:
		await gateway.aclose()


def main(argv: Optional[List[str]] = None) -> None:
	args = build_parser().parse_args(argv)
	configure_logging(args.log_level)
	try:
		asyncio.run(run(args))
	except (InputValidationError, ValueError) as e:
		raise SystemExit(str(e))


if __name__ == "__main__":
	main()
