"""Form reports and slate ranking."""

from .form import blended_probability, blended_projection, build_form_report, form_confidence
from .slate import SlateAnalyzer, SlateReport, rank

__all__ = [
    "blended_probability",
    "blended_projection",
    "build_form_report",
    "form_confidence",
    "SlateAnalyzer",
    "SlateReport",
    "rank"
]
