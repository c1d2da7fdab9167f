# placeholder_image_strategy.py
"""
Placeholder-service implementation of the ImageResolverStrategy.
"""

from typing import Optional

from .image_resolver_strategy import ImageResolverStrategy
from ....utils.helpers import slugify


class PlaceholderImageStrategy(ImageResolverStrategy):
    """
    Seeded placeholder photos: the same dish name always maps to the same picture.
    """

    base_url = "https://picsum.photos/seed/{seed}/400/300"

    def lookup(self, name: str, description: str) -> Optional[str]:
        return self.base_url.format(seed=slugify(name))
