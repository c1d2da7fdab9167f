# parse_text_prompt.py
"""
Centralized prompt for extracting dishes from menu text.
Used by both Gemini and OpenAI implementations.
"""

ITEM_RULES = (
    "For each food item, provide:\n"
    "1. A clean name (title case)\n"
    "2. A brief, appetizing description (if not provided, create one based on the dish name)\n\n"
    "Return a JSON array of objects with \"name\" and \"description\" fields. "
    "Ignore any non-food items like prices, restaurant info, section headers or categories. "
    "Only include actual food dishes.\n"
)


def build_parse_text_prompt(menu_text: str) -> str:
    """
    Build the menu text parsing prompt.

    Args:
        menu_text: Raw menu text as the user supplied it

    Returns:
        Complete prompt string
    """
    return (
        "Parse this menu text and extract only valid food items. "
        + ITEM_RULES
        + "\nMenu text:\n"
        + menu_text
        + "\n\nReturn only the JSON array, no other text."
    )
