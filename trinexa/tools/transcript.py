"""
Chat transcript persistence.

The widget keeps the whole message list under one fixed key, loads it when
a session starts, and overwrites it after every message. Stores implement
``load``/``save`` so the dialogue code never touches the storage medium.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Protocol

from pydantic import TypeAdapter, ValidationError

from trinexa.config import settings
from trinexa.schemas.conversation_schema import ChatMessage

logger = logging.getLogger(__name__)

_MESSAGES = TypeAdapter(list[ChatMessage])


class TranscriptStore(Protocol):
    def load(self) -> list[ChatMessage]:
        ...

    def save(self, messages: list[ChatMessage]) -> None:
        ...


class InMemoryTranscriptStore:
    """Keeps the serialized transcript in a dict keyed like browser storage."""

    def __init__(self, key: str = settings.storage.transcript_key) -> None:
        self.key = key
        self._data: dict[str, str] = {}

    def load(self) -> list[ChatMessage]:
        raw = self._data.get(self.key)
        if raw is None:
            return []
        return _MESSAGES.validate_json(raw)

    def save(self, messages: list[ChatMessage]) -> None:
        self._data[self.key] = _MESSAGES.dump_json(messages).decode("utf-8")


class JsonFileTranscriptStore:
    """One JSON file per key, rewritten after every message."""

    def __init__(
        self,
        directory: Optional[Path] = None,
        key: str = settings.storage.transcript_key,
    ) -> None:
        self.directory = Path(directory or settings.storage.transcript_dir)
        self.key = key
        self.directory.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self.directory / f"{self.key}.json"

    def load(self) -> list[ChatMessage]:
        """Load the saved transcript; a missing or corrupt file starts fresh."""
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return _MESSAGES.validate_python(data)
        except (json.JSONDecodeError, ValidationError) as exc:
            logger.warning("Discarding unreadable transcript %s: %s", self.path, exc)
            return []

    def save(self, messages: list[ChatMessage]) -> None:
        payload = [m.model_dump(mode="json") for m in messages]
        self.path.write_text(
            json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8"
        )
