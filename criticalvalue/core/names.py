"""
criticalvalue.core.names
========================

Typed names shared across the package.

- `Hypothesis`, `TestMethod`: Literal option sets accepted by the entry points.
- `Diagnostic`: an Enum of non-fatal diagnostic codes attached to results.

Examples
--------
>>> from criticalvalue.core.names import Diagnostic, HYPOTHESES
>>> Diagnostic.R12_DEFAULTED.value
'r12_defaulted'
>>> "two.sided" in HYPOTHESES
True
"""

from __future__ import annotations
from enum import Enum
from typing import Literal, Tuple

Hypothesis = Literal["two.sided", "greater", "less"]
TestMethod = Literal["t", "z"]

HYPOTHESES: Tuple[str, ...] = ("two.sided", "greater", "less")
TEST_METHODS: Tuple[str, ...] = ("t", "z")


class Diagnostic(str, Enum):
    """Non-fatal diagnostic codes.

    - EFFECT_SIZE_UNAVAILABLE: no test statistic, raw effect size is NaN
    - CRITICAL_NUMERATOR_UNAVAILABLE: no standard error, `bc` is NaN
    - EQUAL_SD_ASSUMED: Welch requested but only `t` given, sd1 = sd2 assumed
    - R12_DEFAULTED: paired correlation missing, 0 used
    - BIAS_CORRECTION_UNAVAILABLE: df <= 1, Hedges' g fields are NaN
    """

    EFFECT_SIZE_UNAVAILABLE = "effect_size_unavailable"
    CRITICAL_NUMERATOR_UNAVAILABLE = "critical_numerator_unavailable"
    EQUAL_SD_ASSUMED = "equal_sd_assumed"
    R12_DEFAULTED = "r12_defaulted"
    BIAS_CORRECTION_UNAVAILABLE = "bias_correction_unavailable"
