import logging
from typing import List

from .menu_text_fallback import parse_menu_text_simple
from ..shared.capability.menu_capability import MenuCapability
from ...errors import MenuParseError
from ...models.menu import RawMenuInput, ImageMenuInput
from ...models.menu_candidate import MenuCandidate, validate_candidates
from ...prompts.menu_parsing import build_parse_text_prompt, build_parse_image_prompt
from ...utils.helpers import first_json_array

logger = logging.getLogger(__name__)


class MenuParser:
    """Turns raw menu text or a menu photo into an ordered list of candidates"""

    def __init__(self, capability: MenuCapability):
        self.capability = capability

    def parse(self, raw: RawMenuInput) -> List[MenuCandidate]:
        if isinstance(raw, ImageMenuInput):
            return self.parse_image(raw.image_bytes, raw.mime_type)
        return self.parse_text(raw.text)

    def parse_text(self, menu_text: str) -> List[MenuCandidate]:
        """
        Ask the capability for a JSON array of dishes.
        Any failure (capability error, timeout, missing or malformed JSON)
        degrades to the line-based parser instead of raising.
        """
        if not menu_text or not menu_text.strip():
            return []

        try:
            response = self.capability.understand_text(build_parse_text_prompt(menu_text))
            candidates = self._candidates_from_response(response)
        except Exception as e:
            logger.warning(f"AI menu parsing failed, using line-based fallback: {e}")
            return parse_menu_text_simple(menu_text)

        logger.info(f"AI menu parsing extracted {len(candidates)} items")
        return candidates

    def parse_image(self, image_bytes: bytes, mime_type: str) -> List[MenuCandidate]:
        """Vision parsing. There is no fallback: errors propagate to the caller."""
        response = self.capability.understand_image(image_bytes, mime_type, build_parse_image_prompt())
        candidates = self._candidates_from_response(response)
        logger.info(f"AI image parsing extracted {len(candidates)} items")
        return candidates

    @staticmethod
    def _candidates_from_response(response: str) -> List[MenuCandidate]:
        items = first_json_array(response)
        if items is None:
            raise MenuParseError("No valid JSON array found in the AI response")
        return validate_candidates(items)
