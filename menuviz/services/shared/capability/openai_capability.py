# openai_capability.py
"""
OpenAI implementation of the MenuCapability.
"""

import base64

import openai
from openai import OpenAI

from .menu_capability import MenuCapability
from ....errors import (
    CapabilityError,
    CapabilityConfigError,
    CapabilityRateLimitError,
    CapabilityTimeoutError,
)


def extract_text_from_response(response) -> str:
    """
    Extract text from OpenAI response.
    """
    if hasattr(response, 'choices') and response.choices:
        return response.choices[0].message.content or ""
    return ""


class OpenAICapability(MenuCapability):
    """
    OpenAI-based text and vision understanding.
    """

    provider = "openai"
    missing_key_message = "OpenAI API key not configured"

    def _complete(self, content) -> str:
        client = OpenAI(api_key=self.api_key, timeout=self.timeout_s)
        resp = client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": content}],
            temperature=0.2,
            max_tokens=2048,
        )
        return extract_text_from_response(resp)

    def _understand_text(self, prompt: str) -> str:
        return self._complete(prompt)

    def _understand_image(self, image_bytes: bytes, mime_type: str, prompt: str) -> str:
        b64 = base64.b64encode(image_bytes).decode("utf-8")
        return self._complete([
            {"type": "text", "text": prompt},
            {"type": "image_url", "image_url": {"url": f"data:{mime_type or 'image/jpeg'};base64,{b64}"}},
        ])

    def translate_error(self, error: Exception) -> CapabilityError:
        if isinstance(error, openai.RateLimitError):
            return CapabilityRateLimitError()
        if isinstance(error, openai.AuthenticationError):
            return CapabilityConfigError("OpenAI API key is invalid or missing")
        if isinstance(error, openai.APITimeoutError):
            return CapabilityTimeoutError()
        return CapabilityError(f"OpenAI request failed: {error}")
