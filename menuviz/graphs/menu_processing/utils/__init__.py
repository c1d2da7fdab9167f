from .timing import log_pipeline_summary

__all__ = ["log_pipeline_summary"]
