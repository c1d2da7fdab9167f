# menu_capability.py
"""
Interface for the external language/vision capability.
Defines the contract that all providers must implement.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ....errors import (
    MenuProcessingError,
    CapabilityError,
    CapabilityConfigError,
    CapabilityTimeoutError,
)
from ....utils.helpers import call_with_timeout


class MenuCapability(ABC):
    """
    A black-box function from (prompt, optional media) to free-form text.
    Each provider (Gemini, OpenAI, etc.) implements the two `_understand_*` hooks;
    the public methods add the credential check and the bounded timeout.
    """

    provider = "capability"
    missing_key_message = "API key not configured"

    def __init__(self, api_key: Optional[str], model: str, timeout_s: float = 30.0):
        self.api_key = api_key
        self.model = model
        self.timeout_s = timeout_s

    def ensure_configured(self) -> None:
        if not self.api_key:
            raise CapabilityConfigError(self.missing_key_message)

    def understand_text(self, prompt: str) -> str:
        self.ensure_configured()
        return self._call(self._understand_text, prompt)

    def understand_image(self, image_bytes: bytes, mime_type: str, prompt: str) -> str:
        self.ensure_configured()
        return self._call(self._understand_image, image_bytes, mime_type, prompt)

    def _call(self, fn, *args) -> str:
        try:
            text = call_with_timeout(fn, *args, timeout=self.timeout_s)
        except MenuProcessingError:
            raise
        except TimeoutError as e:
            raise CapabilityTimeoutError() from e
        except Exception as e:
            raise self.translate_error(e) from e

        if not isinstance(text, str) or not text.strip():
            raise CapabilityError(f"No response text received from {self.provider}")
        return text

    @abstractmethod
    def _understand_text(self, prompt: str) -> str:
        pass

    @abstractmethod
    def _understand_image(self, image_bytes: bytes, mime_type: str, prompt: str) -> str:
        pass

    @abstractmethod
    def translate_error(self, error: Exception) -> CapabilityError:
        """Map a provider SDK error onto the capability error taxonomy."""
        pass
