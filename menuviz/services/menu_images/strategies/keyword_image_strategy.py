# keyword_image_strategy.py
"""
Keyword-category implementation of the ImageResolverStrategy.
"""

from typing import Optional

from .image_resolver_strategy import ImageResolverStrategy

_UNSPLASH = "https://images.unsplash.com/{}?w=400&h=300&fit=crop"

# Ordered: the first keyword contained in the dish name wins
CATEGORY_IMAGES = (
    ("salmon", _UNSPLASH.format("photo-1467003909585-2f8a72700288")),
    ("salad", _UNSPLASH.format("photo-1512621776951-a57141f2eefd")),
    ("pasta", _UNSPLASH.format("photo-1621996346565-e3dbc646d9a9")),
    ("pizza", _UNSPLASH.format("photo-1565299624946-b28f40a0ae38")),
    ("taco", _UNSPLASH.format("photo-1565299585323-38d6b0865b47")),
    ("burger", _UNSPLASH.format("photo-1568901346375-23c9450c58cd")),
    ("chicken", _UNSPLASH.format("photo-1598103442097-8b74394b95c6")),
    ("fish", _UNSPLASH.format("photo-1519708227418-c8fd9a32b7a2")),
    ("soup", _UNSPLASH.format("photo-1547592166-23ac45744acd")),
    ("dessert", _UNSPLASH.format("photo-1551024601-bec78aea704b")),
    ("steak", _UNSPLASH.format("photo-1600891964092-4316c288032e")),
    ("sushi", _UNSPLASH.format("photo-1579871494447-9811cf80d66c")),
    ("noodle", _UNSPLASH.format("photo-1569718212165-3a8278d5f624")),
    ("sandwich", _UNSPLASH.format("photo-1528735602780-2552fd46c7af")),
    ("cake", _UNSPLASH.format("photo-1578985545062-69928b1d9587")),
)


class KeywordImageStrategy(ImageResolverStrategy):
    """
    Case-insensitive substring match of the dish name against CATEGORY_IMAGES.
    """

    def lookup(self, name: str, description: str) -> Optional[str]:
        lowered = (name or "").lower()
        for keyword, url in CATEGORY_IMAGES:
            if keyword in lowered:
                return url
        return None
