"""
Progress events of a menu processing run and their text/event-stream wire form.

Wire grammar, one frame per event:

    event: <type>\\n
    data: <json>\\n
    \\n

Lines starting with ':' are comments (keep-alive padding) and are ignored.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Generator, List, Optional, Tuple, TypeVar

STATUS = "status"
PARSED = "parsed"
PROCESSING = "processing"
ITEM_COMPLETE = "item-complete"
ITEM_ERROR = "item-error"
COMPLETE = "complete"
ERROR = "error"

EVENT_TYPES = (STATUS, PARSED, PROCESSING, ITEM_COMPLETE, ITEM_ERROR, COMPLETE, ERROR)
TERMINAL_EVENT_TYPES = (COMPLETE, ERROR)


class SSEDecodeError(ValueError):
    """A frame's data line was not valid JSON."""


class StreamInterruptedError(ConnectionError):
    """The stream ended before a terminal event arrived."""


@dataclass(frozen=True)
class ProgressEvent:
    type: str
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def terminal(self) -> bool:
        return self.type in TERMINAL_EVENT_TYPES

    @classmethod
    def status(cls, message: str) -> "ProgressEvent":
        return cls(STATUS, {"message": message})

    @classmethod
    def parsed(cls, names: List[str]) -> "ProgressEvent":
        return cls(PARSED, {
            "count": len(names),
            "items": list(names),
            "message": f"Found {len(names)} food items",
        })

    @classmethod
    def processing(cls, current: int, total: int, name: str) -> "ProgressEvent":
        return cls(PROCESSING, {
            "current": current,
            "total": total,
            "item": name,
            "message": f"Processing {name} ({current}/{total})...",
        })

    @classmethod
    def item_complete(cls, item: Dict[str, Any], current: int, total: int) -> "ProgressEvent":
        return cls(ITEM_COMPLETE, {
            "item": item,
            "current": current,
            "total": total,
            "message": f"Completed {item.get('name')} ({current}/{total})",
        })

    @classmethod
    def item_error(cls, name: str, current: int, total: int, reason: str) -> "ProgressEvent":
        return cls(ITEM_ERROR, {
            "item": name,
            "current": current,
            "total": total,
            "message": f"Failed to process {name}: {reason}",
        })

    @classmethod
    def complete(cls, session_id: int, menu_items: List[Dict[str, Any]]) -> "ProgressEvent":
        return cls(COMPLETE, {
            "sessionId": session_id,
            "menuItems": menu_items,
            "success": True,
            "message": f"Successfully processed {len(menu_items)} menu items",
        })

    @classmethod
    def error(cls, message: str, status: int = 500) -> "ProgressEvent":
        return cls(ERROR, {"message": message, "status": status})


def encode_sse(event: ProgressEvent) -> str:
    """Pack one event as a text/event-stream frame"""
    return f"event: {event.type}\n" + "data: " + json.dumps(event.data, ensure_ascii=False) + "\n\n"


def hb_line(txt: str = "hb") -> str:
    """Create heartbeat comment line for SSE"""
    return f": {txt}\n\n"


class SSEDecoder:
    """
    Incremental decoder for the frames produced by `encode_sse`.
    Feed it arbitrary chunks; complete frames come back as ProgressEvents.
    """

    def __init__(self) -> None:
        self._buffer = ""
        self._event_type: Optional[str] = None
        self._data_lines: List[str] = []
        self.saw_terminal = False

    def feed(self, chunk: str) -> List[ProgressEvent]:
        self._buffer += chunk
        events: List[ProgressEvent] = []
        while "\n" in self._buffer:
            line, self._buffer = self._buffer.split("\n", 1)
            event = self._consume_line(line.rstrip("\r"))
            if event is not None:
                events.append(event)
        return events

    def close(self) -> None:
        """Signal end of stream. Raises StreamInterruptedError unless a terminal event was seen."""
        if not self.saw_terminal:
            raise StreamInterruptedError("stream ended before a complete or error event")

    def _consume_line(self, line: str) -> Optional[ProgressEvent]:
        if line == "":
            return self._dispatch()
        if line.startswith(":"):
            return None

        name, _, value = line.partition(":")
        if value.startswith(" "):
            value = value[1:]
        if name == "event":
            self._event_type = value
        elif name == "data":
            self._data_lines.append(value)
        # other fields (id, retry) are not used by this protocol
        return None

    def _dispatch(self) -> Optional[ProgressEvent]:
        event_type, data_lines = self._event_type, self._data_lines
        self._event_type, self._data_lines = None, []
        if not data_lines:
            return None

        payload = "\n".join(data_lines)
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise SSEDecodeError(f"invalid JSON in '{event_type}' frame: {e}") from e

        event = ProgressEvent(event_type or "message", data)
        if event.terminal:
            self.saw_terminal = True
        return event


def decode_sse(text: str, require_terminal: bool = True) -> List[ProgressEvent]:
    """Decode a complete event-stream body."""
    decoder = SSEDecoder()
    events = decoder.feed(text)
    if require_terminal:
        decoder.close()
    return events


T = TypeVar("T")


def drain_events(gen: Generator[ProgressEvent, None, T]) -> Tuple[List[ProgressEvent], T]:
    """Run a progress generator to completion, returning its events and its return value."""
    events: List[ProgressEvent] = []
    while True:
        try:
            events.append(next(gen))
        except StopIteration as stop:
            return events, stop.value
