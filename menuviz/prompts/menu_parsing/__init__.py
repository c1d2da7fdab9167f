from .parse_text_prompt import build_parse_text_prompt
from .parse_image_prompt import build_parse_image_prompt

__all__ = ["build_parse_text_prompt", "build_parse_image_prompt"]
