"""zero-bail-ddd: triple-difference event study on a synthetic zero-bail panel."""

from ._types import StudyConfig
from .estimation import EventStudyExtractionError, FittingError, extract_event_study, fit_event_study
from .panels import DDDPanel
from .simulation import OutcomeGenerator
from .treatment import PolicySchedule

__all__ = [
    "StudyConfig",
    "PolicySchedule",
    "DDDPanel",
    "OutcomeGenerator",
    "fit_event_study",
    "extract_event_study",
    "FittingError",
    "EventStudyExtractionError",
]

__version__ = "0.1.0"
