from __future__ import annotations
from typing import Dict, Optional


class LinguaLeapError(Exception):
	"""Base class for every error raised by the tutoring backend."""


class InputValidationError(LinguaLeapError):
	"""A turn was requested with missing text, topic or language."""


class GatewayError(LinguaLeapError):
	"""A single language-model call failed: transport, timeout or invalid output."""

	def __init__(self, message: str, *, step: Optional[str] = None) -> None:
		super().__init__(message)
		self.step = step


class TurnFailedError(LinguaLeapError):
	"""One or more calls of a tutor turn failed; the turn has no result."""

	def __init__(self, failures: Dict[str, BaseException]) -> None:
		self.failures = dict(failures)
		detail = "; ".join(f"{step}: {exc!r}" for step, exc in self.failures.items())
		super().__init__(f"Tutor turn failed ({detail})")


class SpeechConfigurationError(LinguaLeapError):
	"""Azure Speech key or region is not configured."""


class SpeechSynthesisError(LinguaLeapError):
	def __init__(self, reason: str, *, status_code: Optional[int] = None) -> None:
		super().__init__(f"Speech synthesis failed: {reason}")
		self.reason = reason
		self.status_code = status_code
