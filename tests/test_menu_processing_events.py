import pytest

from menuviz.services.menu_processing.menu_processing_events import (
    ProgressEvent,
    SSEDecodeError,
    SSEDecoder,
    StreamInterruptedError,
    decode_sse,
    encode_sse,
    hb_line,
)


def test_encode_is_two_lines_and_blank_separator():
    frame = encode_sse(ProgressEvent.status("Parsing menu text..."))
    assert frame == 'event: status\ndata: {"message": "Parsing menu text..."}\n\n'


def test_encode_keeps_unicode():
    frame = encode_sse(ProgressEvent.processing(1, 2, "Crème Brûlée"))
    assert "Crème Brûlée" in frame
    assert frame.startswith("event: processing\n")


def test_decoder_handles_split_chunks_and_comments():
    body = (
        hb_line("open")
        + encode_sse(ProgressEvent.status("Starting menu processing..."))
        + encode_sse(ProgressEvent.parsed(["Pho"]))
        + encode_sse(ProgressEvent.complete(1, []))
    )
    decoder = SSEDecoder()
    events = []
    for i in range(0, len(body), 7):
        events.extend(decoder.feed(body[i:i + 7]))
    decoder.close()

    assert [e.type for e in events] == ["status", "parsed", "complete"]
    assert events[1].data == {"count": 1, "items": ["Pho"], "message": "Found 1 food items"}
    assert events[-1].terminal


def test_decoder_accepts_crlf_and_missing_space():
    events = decode_sse('event:error\r\ndata:{"message": "boom", "status": 500}\r\n\r\n')
    assert events == [ProgressEvent.error("boom", 500)]


def test_data_without_event_line_is_a_message():
    events = decode_sse('data: {"a": 1}\n\n', require_terminal=False)
    assert events == [ProgressEvent("message", {"a": 1})]


def test_stream_end_without_terminal_event_is_an_interruption():
    decoder = SSEDecoder()
    decoder.feed(encode_sse(ProgressEvent.processing(1, 3, "Pizza")))
    with pytest.raises(StreamInterruptedError):
        decoder.close()


def test_incomplete_frame_is_not_emitted():
    decoder = SSEDecoder()
    assert decoder.feed('event: complete\ndata: {"sessionId": 1}\n') == []
    with pytest.raises(StreamInterruptedError):
        decoder.close()


def test_invalid_json_raises():
    with pytest.raises(SSEDecodeError):
        decode_sse("event: status\ndata: {not json}\n\n")


def test_item_event_payloads():
    item = {"id": 3, "name": "Pizza"}
    complete = ProgressEvent.item_complete(item, 2, 4)
    assert complete.data == {"item": item, "current": 2, "total": 4, "message": "Completed Pizza (2/4)"}
    failed = ProgressEvent.item_error("Taco", 3, 4, "timeout")
    assert failed.data["item"] == "Taco"
    assert failed.data["message"] == "Failed to process Taco: timeout"
    assert not failed.terminal
