"""Event-study estimation: pyfixest fit and coefficient extraction."""

from .coefficients import EventStudyExtractionError, ParsedTerm, extract_event_study, parse_term
from .fitter import FittingError, build_formula, coefficient_table, fit_event_study, prepare_model_data

__all__ = [
    "FittingError",
    "EventStudyExtractionError",
    "ParsedTerm",
    "build_formula",
    "prepare_model_data",
    "fit_event_study",
    "coefficient_table",
    "parse_term",
    "extract_event_study",
]
