from .image_resolver_strategy import ImageResolverStrategy, GENERIC_FOOD_IMAGE
from .keyword_image_strategy import KeywordImageStrategy, CATEGORY_IMAGES
from .placeholder_image_strategy import PlaceholderImageStrategy

__all__ = [
    "ImageResolverStrategy", "GENERIC_FOOD_IMAGE",
    "KeywordImageStrategy", "CATEGORY_IMAGES", "PlaceholderImageStrategy",
]
