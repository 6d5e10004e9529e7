"""
Custom Exceptions - SOC Efficacy Calculator
soc_efficacy/core/exceptions.py

The scorers themselves are total over non-negative input and raise nothing.
These exceptions belong to the caller boundary: questionnaire validation and
score-state bookkeeping.
"""

from typing import List


class AssessmentException(Exception):
    """Base exception for assessment operations."""

    pass


class InputValidationException(AssessmentException):
    """Questionnaire input failed caller-side validation."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid assessment input")


class UnknownDomainException(AssessmentException):
    """Domain key is not one of the five assessed domains."""

    def __init__(self, domain: str):
        self.domain = domain
        super().__init__(f"Unknown domain '{domain}'")
