# parse_image_prompt.py
"""
Centralized prompt for extracting dishes from a photographed menu.
"""

from .parse_text_prompt import ITEM_RULES


def build_parse_image_prompt() -> str:
    return (
        "This image shows a restaurant menu. Read it and extract only valid food items. "
        + ITEM_RULES
        + "If the image is not a menu or no dishes are legible, return an empty JSON array [].\n"
        "Return only the JSON array, no other text."
    )
