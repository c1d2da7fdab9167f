# capability_factory.py
"""
Factory for creating capability instances.
"""

from typing import Optional

from .menu_capability import MenuCapability


class CapabilityFactory:
    """
    Factory for creating capability instances based on provider configuration.
    """

    @staticmethod
    def create_capability(settings, provider: Optional[str] = None) -> MenuCapability:
        """
        Create a capability for the specified provider.

        Args:
            settings: MenuProcessingConfig carrying keys, models and timeouts
            provider: Provider name ("gemini", "openai").
                     If None, uses settings.capability_provider.

        Returns:
            MenuCapability instance for the specified provider

        Raises:
            ValueError: If provider is not supported
        """
        provider = (provider or settings.capability_provider or "gemini").lower()

        if provider == "gemini":
            from .gemini_capability import GeminiCapability
            return GeminiCapability(settings.gemini_api_key, settings.default_model, settings.capability_timeout_s)
        elif provider == "openai":
            from .openai_capability import OpenAICapability
            return OpenAICapability(settings.openai_api_key, settings.default_openai_model, settings.capability_timeout_s)
        else:
            raise ValueError(f"Unsupported provider: {provider}")
