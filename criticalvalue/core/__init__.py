"""
criticalvalue.core
==================

Infrastructure shared by every test family: option names, error types and
result records.
"""

from criticalvalue.core.errors import CriticalValueWarning, InvalidArgument
from criticalvalue.core.names import Diagnostic, Hypothesis, TestMethod
from criticalvalue.core.results import (
    CoefficientResult,
    CorrelationResult,
    CriticalRecord,
    OneSampleResult,
    PairedResult,
    TwoSampleResult,
)

__all__ = [
    "CriticalValueWarning",
    "InvalidArgument",
    "Diagnostic",
    "Hypothesis",
    "TestMethod",
    "CriticalRecord",
    "OneSampleResult",
    "TwoSampleResult",
    "PairedResult",
    "CorrelationResult",
    "CoefficientResult",
]
