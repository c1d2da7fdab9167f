from .menu_processor import MenuProcessor
from .menu_processing_events import (
    ProgressEvent, SSEDecoder, encode_sse, decode_sse, drain_events,
    SSEDecodeError, StreamInterruptedError, EVENT_TYPES,
)

__all__ = [
    "MenuProcessor", "ProgressEvent", "SSEDecoder", "encode_sse", "decode_sse", "drain_events",
    "SSEDecodeError", "StreamInterruptedError", "EVENT_TYPES",
]
