from .image_resolver_factory import ImageResolverFactory
from .strategies import ImageResolverStrategy, GENERIC_FOOD_IMAGE

__all__ = ["ImageResolverFactory", "ImageResolverStrategy", "GENERIC_FOOD_IMAGE"]
