from .menu_processing_graph import build_menu_processing_graph, run_menu_processing
from .state.menu_processing_state import MenuProcessingState

__all__ = ["build_menu_processing_graph", "run_menu_processing", "MenuProcessingState"]
