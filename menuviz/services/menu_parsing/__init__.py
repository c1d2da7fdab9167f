from .menu_parser import MenuParser
from .menu_text_fallback import parse_menu_text_simple

__all__ = ["MenuParser", "parse_menu_text_simple"]
