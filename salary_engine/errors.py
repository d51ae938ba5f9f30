"""Typed failures raised by the estimator."""
from __future__ import annotations


class SalaryEstimationError(Exception):
    """Base class for errors the estimator raises on purpose."""


class MissingFieldsError(SalaryEstimationError):
    def __init__(self, fields: list[str]) -> None:
        self.fields = list(fields)
        super().__init__(f"Missing required fields: {', '.join(self.fields)}")


class InsufficientDataError(SalaryEstimationError):
    def __init__(self, specialty: str, location: str) -> None:
        self.specialty = specialty
        self.location = location
        self.suggestion = (
            f"We don't have enough data for {specialty} in {location} yet. "
            "Try a different location or specialty."
        )
        super().__init__(f"No salary data available. {self.suggestion}")
