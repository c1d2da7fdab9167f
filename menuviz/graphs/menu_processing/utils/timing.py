import logging
from typing import Dict

logger = logging.getLogger(__name__)


def log_pipeline_summary(timings: Dict[str, float], total_ms: float = None) -> None:
    """
    Log a summary of the menu processing pipeline timings.

    Args:
        timings: Dictionary of timing data for each step
        total_ms: Total execution time in milliseconds
    """
    steps = "  ".join(f"{step.replace('_', ' ')}={ms:.2f}ms" for step, ms in timings.items())
    if total_ms is not None:
        steps += f"  total={total_ms:.2f}ms"
    logger.info(f"menu pipeline: {steps}")
