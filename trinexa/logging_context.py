"""Session id tagging for log output.

Every record that reaches the root handler is stamped with the id of the
chat session being processed, taken from a ContextVar set by the agent.
Dialogue, persister, and store logs all pass through that one handler, so
they carry the tag without each module wiring anything up.
"""

import logging
from contextvars import ContextVar
from typing import IO, Optional

NO_SESSION = "-"

LOG_FORMAT = "%(asctime)s [%(name)s] [%(session_id)s] %(levelname)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_session_id: ContextVar[str] = ContextVar("session_id", default=NO_SESSION)


def set_session_id(session_id: str) -> None:
    """Tag log records emitted from the current async context."""
    _session_id.set(session_id)


class SessionIdFilter(logging.Filter):
    """Adds ``session_id`` to records that do not carry one yet."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session_id"):
            record.session_id = _session_id.get()  # type: ignore[attr-defined]
        return True


def session_handler(stream: Optional[IO[str]] = None) -> logging.Handler:
    """Stream handler whose format includes the session tag."""
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    handler.addFilter(SessionIdFilter())
    return handler
