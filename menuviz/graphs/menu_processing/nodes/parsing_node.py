import time
import logging

from ..state.menu_processing_state import MenuProcessingState
from ....errors import MenuProcessingError

logger = logging.getLogger(__name__)


def parse_menu(state: MenuProcessingState) -> MenuProcessingState:
    """
    Turn the raw input into candidates. Zero candidates is an error here.

    Args:
        state: Current state containing validated input

    Returns:
        Updated state with candidates, or with error/status_code set
    """
    t0 = time.perf_counter()

    try:
        state["candidates"] = state["processor"].parse(state["raw_input"])
    except MenuProcessingError as e:
        state["candidates"] = []
        state["error"] = e.message
        state["status_code"] = e.status_code

    state["timings"]["parsing"] = round((time.perf_counter() - t0) * 1000.0, 2)
    logger.debug(f"parse_menu: {len(state['candidates'])} candidates")

    return state
