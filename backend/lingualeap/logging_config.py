from __future__ import annotations
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: int | str = "INFO") -> logging.Logger:
	"""Send application logs to stdout with a timestamped single-line format."""
	handler = logging.StreamHandler(sys.stdout)
	handler.setFormatter(logging.Formatter(LOG_FORMAT))
	logging.basicConfig(level=level, handlers=[handler], force=True)
	# Request lines from the HTTP clients are too chatty at INFO
	logging.getLogger("httpx").setLevel(logging.WARNING)
	logging.getLogger("httpcore").setLevel(logging.WARNING)
	return logging.getLogger("lingualeap")
