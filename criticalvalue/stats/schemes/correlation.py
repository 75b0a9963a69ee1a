"""
criticalvalue.stats.schemes.correlation
=======================================

Critical values for the test of a Pearson correlation.

**t method:**
    df = n - 2, qc = |qt(alpha, df)|
    rc = qc / sqrt(n - 2 + qc²)

**z method (Fisher):**
    qc = |qnorm(alpha)|
    rc = tanh(qc / sqrt(n - 3)), rzc = atanh(rc), se_rzc = 1 / sqrt(n - 3)

Standard errors in r units always use sqrt((1 - r²) / (n - 2)).

Examples
--------
>>> from criticalvalue.stats.schemes.correlation import crit_cor
>>> res = crit_cor(n=30, alpha=0.025, test="t")
>>> res.test, res.df
('t', 28.0)
>>> 0 < res.rc < 1
True
"""

from __future__ import annotations
import logging
import math
from typing import Optional

from criticalvalue.core.errors import InvalidArgument
from criticalvalue.core.names import TEST_METHODS, TestMethod
from criticalvalue.core.results import NAN, CorrelationResult
from criticalvalue.stats.common.statistical import critical_t, critical_z

logger = logging.getLogger(__name__)


def se_correlation(r: float, n: float) -> float:
    """Standard error of a correlation coefficient in r units."""
    return math.sqrt((1 - r**2) / (n - 2))


def crit_cor(
    n: float, alpha: float, test: TestMethod = "t", r: Optional[float] = None
) -> CorrelationResult:
    """Critical correlation for a sample of size `n`.

    Args:
        n: Sample size
        alpha: Tail probability from `resolve_alpha`
        test: "t" for the raw-correlation t test, "z" for Fisher's z
        r: Observed correlation, used for `se_r`

    Returns:
        CorrelationResult; the field that does not apply to `test` is NaN
    """
    if test not in TEST_METHODS:
        raise InvalidArgument(f"test must be one of {TEST_METHODS}, got {test!r}")
    min_n = 2 if test == "t" else 3
    if not n > min_n:
        raise InvalidArgument(
            f"n must be greater than {min_n} for the {test} method, got {n}"
        )

    df = float(n - 2)
    logger.debug("critical correlation with the %s method (n=%s)", test, n)

    if test == "t":
        qc = critical_t(alpha, df)
        rc = qc / math.sqrt(n - 2 + qc**2)
        se_rc = se_correlation(rc, n)
        se_r = se_correlation(r, n) if r is not None else NAN
        rzc = NAN
        se_rzc = NAN
    else:
        qc = critical_z(alpha)
        rc = math.tanh(qc / math.sqrt(n - 3))
        rzc = math.atanh(rc)
        se_rzc = 1 / math.sqrt(n - 3)
        se_rc = se_correlation(rc, n)
        # observed r reported with the critical-value standard error
        se_r = se_rc if r is not None else NAN

    return CorrelationResult(
        rc=rc,
        rzc=rzc,
        df=df,
        se_r=se_r,
        se_rc=se_rc,
        se_rzc=se_rzc,
        qc=qc,
        test=test,
    )
