# gemini_capability.py
"""
Gemini implementation of the MenuCapability.
"""

from google.genai import errors as genai_errors
from google.genai import types

from .menu_capability import MenuCapability
from ..gemini.gemini_client import make_client, extract_text_from_response, encode_image_bytes_to_part
from ....errors import CapabilityError, CapabilityConfigError, CapabilityRateLimitError


class GeminiCapability(MenuCapability):
    """
    Gemini-based text and vision understanding.
    """

    provider = "gemini"
    missing_key_message = "Gemini API key not configured"

    def _generate(self, parts) -> str:
        client = make_client(self.api_key, self.timeout_s)
        cfg = types.GenerateContentConfig(
            temperature=0.2,
            max_output_tokens=2048,
        )
        resp = client.models.generate_content(
            model=self.model,
            contents=[types.Content(role="user", parts=parts)],
            config=cfg,
        )
        return extract_text_from_response(resp) or getattr(resp, "text", "") or ""

    def _understand_text(self, prompt: str) -> str:
        return self._generate([types.Part.from_text(text=prompt)])

    def _understand_image(self, image_bytes: bytes, mime_type: str, prompt: str) -> str:
        return self._generate([
            types.Part.from_text(text=prompt),
            encode_image_bytes_to_part(image_bytes, mime_type),
        ])

    def translate_error(self, error: Exception) -> CapabilityError:
        msg = str(error)
        lowered = msg.lower()
        if isinstance(error, genai_errors.APIError):
            code = getattr(error, "code", None)
            if code == 429:
                return CapabilityRateLimitError()
            if code in (401, 403):
                return CapabilityConfigError("Gemini API key is invalid or missing")
        if "rate limit" in lowered or "quota" in lowered:
            return CapabilityRateLimitError()
        if "api key" in lowered:
            return CapabilityConfigError("Gemini API key is invalid or missing")
        return CapabilityError(f"Gemini request failed: {msg}")
