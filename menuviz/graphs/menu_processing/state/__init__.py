from .menu_processing_state import MenuProcessingState

__all__ = ["MenuProcessingState"]
