from .tables import report_to_frame, repeats_to_frame, summary_to_frame

__all__ = ["report_to_frame", "repeats_to_frame", "summary_to_frame"]
