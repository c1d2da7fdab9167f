import time

from ..state.menu_processing_state import MenuProcessingState
from ....services.menu_processing.menu_processing_events import drain_events, ITEM_ERROR


def enrich_items(state: MenuProcessingState) -> MenuProcessingState:
    """
    Create the session, then resolve and store every candidate.
    Runs the same per-item loop as the streaming endpoint and drops its events.

    Args:
        state: Current state containing parsed candidates

    Returns:
        Updated state with stored items and the names of failed items
    """
    t0 = time.perf_counter()

    processor = state["processor"]
    session = processor.store.create_session(state["raw_input"].original_text)
    events, menu_items = drain_events(processor.enrich(session, state["candidates"]))

    state["session_id"] = session.id
    state["menu_items"] = menu_items
    state["failed_items"] = [e.data["item"] for e in events if e.type == ITEM_ERROR]

    state["timings"]["enrichment"] = round((time.perf_counter() - t0) * 1000.0, 2)

    return state
