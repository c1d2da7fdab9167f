# gemini_client.py
import base64
from typing import Optional

from google import genai
from google.genai import types

from ....errors import CapabilityConfigError


def make_client(api_key: Optional[str], timeout_s: Optional[float] = None) -> genai.Client:
    """Create an API-key authenticated Gemini client with an HTTP timeout."""
    if not api_key:
        raise CapabilityConfigError("Gemini API key not configured")

    http_options = None
    if timeout_s:
        # HttpOptions.timeout is expressed in milliseconds
        http_options = types.HttpOptions(timeout=int(timeout_s * 1000))
    return genai.Client(api_key=api_key, http_options=http_options)


def encode_image_bytes_to_part(data: bytes, mime_type: str) -> types.Part:
    return types.Part.from_bytes(data=data, mime_type=mime_type or "image/jpeg")


def extract_text_from_response(resp) -> str:
    """Return JSON/text from parts; also decode inline_data if needed."""
    for cand in (getattr(resp, "candidates", None) or []):
        content = getattr(cand, "content", None)
        if not content:
            continue
        for part in (getattr(content, "parts", None) or []):
            t = getattr(part, "text", None)
            if isinstance(t, str) and t.strip():
                return t
            inline = getattr(part, "inline_data", None)
            if not inline:
                continue
            data = getattr(inline, "data", None)
            if isinstance(data, (bytes, bytearray)):
                return data.decode("utf-8", "ignore")
            if isinstance(data, str):
                try:
                    return base64.b64decode(data).decode("utf-8", "ignore")
                except ValueError:
                    # not base64, the payload is already text
                    return data
    top = getattr(resp, "text", None)
    return top if isinstance(top, str) else ""
