"""
Error taxonomy for menu processing.
Every error carries the HTTP status the routes answer with.
"""


class MenuProcessingError(Exception):
    """Base class for failures surfaced to the caller."""

    status_code = 500
    default_message = "Failed to process menu. Please try again."

    def __init__(self, message: str = None, status_code: int = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class MenuInputError(MenuProcessingError):
    """Missing, unsupported or oversized input. Nothing was processed."""

    status_code = 400
    default_message = "Menu text or file is required"


class NoMenuItemsError(MenuProcessingError):
    """Parsing succeeded but produced zero food items."""

    status_code = 400
    default_message = "No valid food items found in the menu"


class MenuParseError(MenuProcessingError):
    """The capability answered, but nothing usable could be read from it."""

    status_code = 500
    default_message = "Failed to read menu items from the image. Please try again."


class CapabilityError(MenuProcessingError):
    """Any failure of the external language/vision capability."""

    status_code = 500
    default_message = "Failed to process menu. Please try again."


class CapabilityConfigError(CapabilityError):
    status_code = 500
    default_message = "Gemini API key not configured"


class CapabilityRateLimitError(CapabilityError):
    status_code = 429
    default_message = "Rate limit exceeded. Please try again later."


class CapabilityTimeoutError(CapabilityError):
    status_code = 500
    default_message = "The AI service took too long to respond. Please try again."
