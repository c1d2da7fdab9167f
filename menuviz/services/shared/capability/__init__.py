from .menu_capability import MenuCapability
from .capability_factory import CapabilityFactory

__all__ = ["MenuCapability", "CapabilityFactory"]
