"""
criticalvalue — critical values for common hypothesis tests.

A critical value is the smallest effect that would reach significance for a
given sample, confidence level and direction of the hypothesis. This package
computes them for one-sample, two-sample and paired t-tests, correlations
and regression coefficients, either from summary statistics or from an
already computed test statistic, together with Cohen's d and the Hedges' g
small-sample correction.

Quantities that cannot be derived from the inputs are returned as NaN and
reported through a `CriticalValueWarning`; the codes are also kept on the
result's `diagnostics`.

Example
-------
>>> import criticalvalue
>>> res = criticalvalue.critical_t2s(t=2.5, n1=30, n2=30, se=0.4)
>>> res.df
58.0
>>> res.diagnostics
()
"""

import logging

from criticalvalue.__version__ import __version__
from criticalvalue.api.critical import (
    CriticalConfig,
    critical_coef,
    critical_cor,
    critical_one_sample,
    critical_paired,
    critical_t1s,
    critical_t2s,
    critical_t2sp,
    critical_two_sample,
)
from criticalvalue.core.errors import CriticalValueWarning, InvalidArgument
from criticalvalue.core.names import Diagnostic
from criticalvalue.stats.schemes.one_sample import (
    OneSampleStatistic,
    OneSampleSummary,
)
from criticalvalue.stats.schemes.paired import PairedStatistic, PairedSummary
from criticalvalue.stats.schemes.two_sample import (
    TwoSampleStatistic,
    TwoSampleSummary,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "CriticalConfig",
    "CriticalValueWarning",
    "Diagnostic",
    "InvalidArgument",
    "OneSampleStatistic",
    "OneSampleSummary",
    "PairedStatistic",
    "PairedSummary",
    "TwoSampleStatistic",
    "TwoSampleSummary",
    "critical_coef",
    "critical_cor",
    "critical_one_sample",
    "critical_paired",
    "critical_t1s",
    "critical_t2s",
    "critical_t2sp",
    "critical_two_sample",
]
