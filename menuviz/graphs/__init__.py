from .menu_processing import run_menu_processing

__all__ = ["run_menu_processing"]
