# image_resolver_factory.py
"""
Factory for creating image resolver strategy instances.
"""

from typing import Optional

from .strategies.image_resolver_strategy import ImageResolverStrategy


class ImageResolverFactory:
    """
    Factory for creating image resolver strategy instances based on provider configuration.
    """

    @staticmethod
    def create_resolver(provider: Optional[str] = None, timeout_s: float = 2.0) -> ImageResolverStrategy:
        """
        Create an image resolver for the specified provider.

        Args:
            provider: "keyword" (default) or "placeholder"
            timeout_s: Upper bound for a single lookup

        Raises:
            ValueError: If provider is not supported
        """
        provider = (provider or "keyword").lower()

        if provider == "keyword":
            from .strategies.keyword_image_strategy import KeywordImageStrategy
            return KeywordImageStrategy(timeout_s=timeout_s)
        elif provider == "placeholder":
            from .strategies.placeholder_image_strategy import PlaceholderImageStrategy
            return PlaceholderImageStrategy(timeout_s=timeout_s)
        else:
            raise ValueError(f"Unsupported image provider: {provider}")
