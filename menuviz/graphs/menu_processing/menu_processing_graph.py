import time
from typing import Any, Dict

from langgraph.graph import StateGraph, END

from .state.menu_processing_state import MenuProcessingState
from .nodes.validation_node import validate_input
from .nodes.parsing_node import parse_menu
from .nodes.enrichment_node import enrich_items
from .utils.timing import log_pipeline_summary
from ...errors import MenuProcessingError
from ...models.menu import RawMenuInput


def _continue_unless_error(state: MenuProcessingState) -> str:
    return "end" if state.get("error") else "continue"


def build_menu_processing_graph():
    """
    Build the blocking menu processing graph with three main nodes:
    1. validate - Validates the raw input
    2. parse - Extracts candidate dishes (AI first, line-based fallback for text)
    3. enrich - Creates the session, resolves images and stores items

    Returns:
        Compiled LangGraph workflow
    """
    # Create the state graph
    workflow = StateGraph(MenuProcessingState)

    # Add nodes
    workflow.add_node("validate", validate_input)
    workflow.add_node("parse", parse_menu)
    workflow.add_node("enrich", enrich_items)

    # Define the workflow; any error ends the run before the next node
    workflow.set_entry_point("validate")
    workflow.add_conditional_edges("validate", _continue_unless_error, {"continue": "parse", "end": END})
    workflow.add_conditional_edges("parse", _continue_unless_error, {"continue": "enrich", "end": END})
    workflow.add_edge("enrich", END)

    return workflow.compile()


def run_menu_processing(raw_input: RawMenuInput, processor) -> Dict[str, Any]:
    """
    Run the complete menu processing workflow and return the API payload.

    Args:
        raw_input: Text or image menu input
        processor: MenuProcessor providing parser, resolver and store

    Returns:
        {"sessionId", "menuItems", "success": True}

    Raises:
        MenuProcessingError: carrying the HTTP status of the failure
    """
    t0 = time.perf_counter()

    # Initialize state
    initial_state: MenuProcessingState = {
        "raw_input": raw_input,
        "processor": processor,
        "validation_passed": None,
        "candidates": [],
        "session_id": None,
        "menu_items": [],
        "failed_items": [],
        "timings": {},
        "total_ms": None,
        "error": None,
        "status_code": None,
    }

    # Execute the workflow
    graph = build_menu_processing_graph()
    final_state = graph.invoke(initial_state)

    total_ms = round((time.perf_counter() - t0) * 1000.0, 2)
    log_pipeline_summary(final_state["timings"], total_ms)

    if final_state.get("error"):
        raise MenuProcessingError(final_state["error"], status_code=final_state.get("status_code") or 500)

    return {
        "sessionId": final_state["session_id"],
        "menuItems": [item.to_dict() for item in final_state["menu_items"]],
        "success": True,
    }
