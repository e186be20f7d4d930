"""
Exceptions raised by the hazard analysis pipeline.

All package errors derive from ``ClimateHazardError`` and also from
``ValueError`` so callers that already catch ``ValueError`` around numeric
routines keep working.
"""


class ClimateHazardError(ValueError):
    """Base exception for hazard analysis failures."""


class EmptyInputError(ClimateHazardError):
    """
    A percentile threshold was requested over an empty sample.

    Detectors check their threshold sample before asking for a percentile,
    so this normally only surfaces from direct calls.
    """

    def __init__(self, what: str = "sample"):
        super().__init__(f"Cannot compute a percentile over an empty {what}")
        self.what = what


class InvalidObservationsError(ClimateHazardError):
    """
    Observation series violates the ordering or value constraints.

    Attributes:
        index: Position of the first offending row, when known
    """

    def __init__(self, message: str, index: int = None):
        if index is not None:
            message = f"{message} (index={index})"
        super().__init__(message)
        self.index = index
