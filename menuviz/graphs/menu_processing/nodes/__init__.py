from .validation_node import validate_input
from .parsing_node import parse_menu
from .enrichment_node import enrich_items

__all__ = ["validate_input", "parse_menu", "enrich_items"]
