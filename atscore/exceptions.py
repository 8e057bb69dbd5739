"""
Exception hierarchy for the scoring engine
"""
from typing import Optional, Dict, Any


class AtsScoreError(Exception):
    """Base exception for all scoring engine errors"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__.upper()
        self.details = details or {}
        super().__init__(self.message)


class EmptyInputError(AtsScoreError):
    """Document or target text is empty or whitespace-only"""

    def __init__(self, field: str = "text", details: Optional[Dict[str, Any]] = None):
        error_details = details or {}
        error_details["field"] = field

        super().__init__(
            message=f"'{field}' must not be empty",
            error_code="EMPTY_INPUT",
            details=error_details
        )


class InvalidWeightsError(AtsScoreError):
    """Role weight tuple does not sum to 1"""

    def __init__(self, weights: Dict[str, float], total: float, role_id: Optional[str] = None):
        error_details = {"weights": weights, "total": total}
        if role_id:
            error_details["role_id"] = role_id

        super().__init__(
            message=f"Role weights must sum to 1.0, got {total:.4f}",
            error_code="INVALID_WEIGHTS",
            details=error_details
        )
