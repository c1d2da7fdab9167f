from .menu_store import MenuStore

__all__ = ["MenuStore"]
