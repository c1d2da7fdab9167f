import re
from typing import List

from pydantic import ValidationError

from ...models.menu_candidate import MenuCandidate

# Lines that look like prices, section headers or restaurant info
NON_FOOD_LINE = re.compile(r"^\$|price|restaurant|menu|category|appetizer|dessert|drinks", re.IGNORECASE)
ORDINAL_PREFIX = re.compile(r"^\d+\.\s*")

MIN_LINE_LENGTH = 3    # exclusive
MAX_LINE_LENGTH = 100  # exclusive
MAX_FALLBACK_ITEMS = 10


def parse_menu_text_simple(menu_text: str) -> List[MenuCandidate]:
    """
    Deterministic line-based parser used when the AI capability is unavailable.
    Every plausible line becomes one item, in input order, capped at MAX_FALLBACK_ITEMS.
    """
    candidates: List[MenuCandidate] = []
    for line in (menu_text or "").splitlines():
        trimmed = line.strip()
        if not trimmed or NON_FOOD_LINE.search(trimmed):
            continue
        if not MIN_LINE_LENGTH < len(trimmed) < MAX_LINE_LENGTH:
            continue

        name = ORDINAL_PREFIX.sub("", trimmed).strip()
        try:
            candidates.append(MenuCandidate(
                name=name,
                description=f"Delicious {trimmed.lower()} prepared fresh",
            ))
        except ValidationError:
            continue

        if len(candidates) >= MAX_FALLBACK_ITEMS:
            break
    return candidates
