from typing import Any, Dict, List, Optional, TypedDict

from ....models.menu import MenuItem, RawMenuInput
from ....models.menu_candidate import MenuCandidate


class MenuProcessingState(TypedDict):
    """State for the blocking menu processing workflow"""

    # Input data
    raw_input: RawMenuInput
    processor: Any  # MenuProcessor

    # Validation results
    validation_passed: Optional[bool]

    # Parsing results
    candidates: List[MenuCandidate]

    # Enrichment results
    session_id: Optional[int]
    menu_items: List[MenuItem]
    failed_items: List[str]

    # Performance tracking
    timings: Dict[str, float]   # per-node ms
    total_ms: Optional[float]

    # Error handling
    error: Optional[str]
    status_code: Optional[int]
