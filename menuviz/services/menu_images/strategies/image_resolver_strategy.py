# image_resolver_strategy.py
"""
Strategy interface for image resolution.
Defines the contract that all image sources must implement.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ....utils.helpers import call_with_timeout

logger = logging.getLogger(__name__)

GENERIC_FOOD_IMAGE = "https://images.unsplash.com/photo-1504674900247-0877df9cc836?w=400&h=300&fit=crop"


class ImageResolverStrategy(ABC):
    """
    Maps a food name to an image reference (URL or data URI).
    A generative image service can be plugged in by implementing `lookup`;
    `resolve` keeps the contract: string in, string out, never raises.
    """

    def __init__(self, timeout_s: float = 2.0, default_image: str = GENERIC_FOOD_IMAGE):
        self.timeout_s = timeout_s
        self.default_image = default_image

    def resolve(self, name: str, description: str = "") -> str:
        try:
            ref = call_with_timeout(self.lookup, name, description, timeout=self.timeout_s)
        except Exception as e:
            logger.warning(f"Image lookup for '{name}' failed, using generic image: {e}")
            return self.default_image
        return ref or self.default_image

    @abstractmethod
    def lookup(self, name: str, description: str) -> Optional[str]:
        """
        Find an image for the dish.

        Args:
            name: Dish name, title-cased
            description: Short dish description

        Returns:
            Image reference, or None when nothing specific applies
        """
        pass
