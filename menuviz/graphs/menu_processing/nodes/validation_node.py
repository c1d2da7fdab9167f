import time

from ..state.menu_processing_state import MenuProcessingState
from ....models.menu import TextMenuInput, ImageMenuInput


def validate_input(state: MenuProcessingState) -> MenuProcessingState:
    """
    Validate the raw menu input before any work is done.

    Args:
        state: Current state containing the raw input

    Returns:
        Updated state with validation results
    """
    t0 = time.perf_counter()

    try:
        raw = state.get("raw_input")
        if isinstance(raw, TextMenuInput):
            if not isinstance(raw.text, str):
                raise ValueError("menu text must be a string")
        elif isinstance(raw, ImageMenuInput):
            if not raw.image_bytes:
                raise ValueError("uploaded image is empty")
            if not raw.mime_type.startswith("image/"):
                raise ValueError(f"unsupported image type '{raw.mime_type}'")
        else:
            raise ValueError("menu text or file is required")

        state["validation_passed"] = True

    except ValueError as e:
        state["validation_passed"] = False
        state["error"] = f"Invalid menu input: {e}"
        state["status_code"] = 400

    state["timings"]["validation"] = round((time.perf_counter() - t0) * 1000.0, 2)

    return state
