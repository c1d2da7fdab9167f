from .menu import MenuItem, MenuSession, TextMenuInput, ImageMenuInput, RawMenuInput
from .menu_candidate import MenuCandidate, validate_candidates, title_case

__all__ = [
    "MenuItem", "MenuSession", "TextMenuInput", "ImageMenuInput", "RawMenuInput",
    "MenuCandidate", "validate_candidates", "title_case",
]
