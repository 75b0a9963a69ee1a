"""
criticalvalue.core.results
==========================

Result records returned by the critical value functions.

One frozen dataclass per test family. Fields that cannot be derived from the
supplied inputs hold NaN rather than being omitted, and the reason is listed
in `diagnostics`.

Examples
--------
>>> import math
>>> from criticalvalue.core.results import OneSampleResult
>>> res = OneSampleResult(d=math.nan, dc=0.37, bc=math.nan, se=math.nan, df=29.0, qc=2.05)
>>> res.missing
('d', 'bc', 'se', 'g', 'gc')
>>> sorted(res.to_dict())[:3]
['bc', 'd', 'dc']
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Tuple, Union

import numpy as np

from criticalvalue.core.names import Diagnostic

NAN = math.nan


def is_missing(value: Any) -> bool:
    """True if `value` is the NaN sentinel, or an array holding any NaN."""
    if isinstance(value, np.ndarray):
        return bool(np.isnan(value).any())
    return isinstance(value, float) and math.isnan(value)


@dataclass(frozen=True, kw_only=True)
class CriticalRecord:
    """Base class for result records.

    Attributes:
        diagnostics: Non-fatal diagnostic codes raised while computing the record
    """

    diagnostics: Tuple[Diagnostic, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Flat mapping of the result fields, without diagnostics."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "diagnostics"
        }

    @property
    def missing(self) -> Tuple[str, ...]:
        """Names of the fields holding the NaN sentinel."""
        return tuple(k for k, v in self.to_dict().items() if is_missing(v))


@dataclass(frozen=True, kw_only=True)
class OneSampleResult(CriticalRecord):
    """One-sample t-test critical values.

    Attributes:
        d: Cohen's d
        dc: Critical d
        bc: Critical mean (numerator of d)
        se: Standard error of the mean
        df: Degrees of freedom
        qc: Critical t quantile (absolute value)
        g: Hedges' g
        gc: Critical Hedges' g
    """

    d: float
    dc: float
    bc: float
    se: float
    df: float
    qc: float
    g: float = NAN
    gc: float = NAN


@dataclass(frozen=True, kw_only=True)
class TwoSampleResult(CriticalRecord):
    """Two-sample (independent) t-test critical values.

    Attributes:
        d: Cohen's d
        dc: Critical d
        bc: Critical mean difference
        se: Standard error of the mean difference
        df: Degrees of freedom (Welch-Satterthwaite when variances differ)
        qc: Critical t quantile (absolute value)
        g: Hedges' g
        gc: Critical Hedges' g
    """

    d: float
    dc: float
    bc: float
    se: float
    df: float
    qc: float
    g: float = NAN
    gc: float = NAN


@dataclass(frozen=True, kw_only=True)
class PairedResult(CriticalRecord):
    """Paired t-test critical values.

    `dz` standardizes by the SD of the differences, `d` by the average
    SD of the two conditions.
    """

    dz: float
    dzc: float
    d: float
    dc: float
    bc: float
    se: float
    df: float
    qc: float
    g: float = NAN
    gc: float = NAN
    gz: float = NAN
    gzc: float = NAN


@dataclass(frozen=True, kw_only=True)
class CorrelationResult(CriticalRecord):
    """Correlation test critical values.

    Attributes:
        rc: Critical correlation
        rzc: Critical Fisher z (NaN for the t method)
        df: Degrees of freedom (n - 2)
        se_r: Standard error of the observed correlation
        se_rc: Standard error of the critical correlation
        se_rzc: Standard error in Fisher z units (NaN for the t method)
        qc: Critical quantile (absolute value)
        test: Method used, "t" or "z"
    """

    rc: float
    rzc: float
    df: float
    se_r: float
    se_rc: float
    se_rzc: float
    qc: float
    test: str


@dataclass(frozen=True, kw_only=True)
class CoefficientResult(CriticalRecord):
    """Regression coefficient critical values.

    Attributes:
        bc: Critical coefficient(s), same shape as the standard errors given
        test: Method used, "t" or "z"
    """

    bc: Union[float, np.ndarray]
    test: str
