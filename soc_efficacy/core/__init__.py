"""
Core Package - SOC Efficacy Calculator
soc_efficacy/core/__init__.py

Core infrastructure: exceptions.
"""

from soc_efficacy.core.exceptions import (
    AssessmentException,
    InputValidationException,
    UnknownDomainException,
)

__all__ = [
    "AssessmentException",
    "InputValidationException",
    "UnknownDomainException",
]
