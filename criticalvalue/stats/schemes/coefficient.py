"""
criticalvalue.stats.schemes.coefficient
=======================================

Critical values for regression coefficients.

    df = n - p - 1 (unless given)
    bc = |q(alpha)| * se_b

where q is the Student-t quantile with `df` degrees of freedom or the
standard Normal quantile.

Examples
--------
>>> from criticalvalue.stats.schemes.coefficient import crit_coef
>>> res = crit_coef([0.1, 0.2], alpha=0.025, df=100)
>>> res.bc.shape
(2,)
"""

from __future__ import annotations
import logging
from typing import Optional, Sequence, Union

import numpy as np

from criticalvalue.core.errors import InvalidArgument
from criticalvalue.core.names import TEST_METHODS, TestMethod
from criticalvalue.core.results import CoefficientResult
from criticalvalue.stats.common.statistical import critical_t, critical_z

logger = logging.getLogger(__name__)


def resolve_coef_df(
    df: Optional[float] = None, n: Optional[float] = None, p: Optional[float] = None
) -> float:
    """Residual degrees of freedom, either given or n - p - 1."""
    if df is not None:
        return float(df)
    if n is None or p is None:
        raise InvalidArgument("df or both n and p must be supplied")
    return float(n - p - 1)


def crit_coef(
    seb: Union[float, Sequence[float], np.ndarray],
    alpha: float,
    df: Optional[float] = None,
    n: Optional[float] = None,
    p: Optional[float] = None,
    test: TestMethod = "t",
) -> CoefficientResult:
    """Critical coefficient(s) from the coefficient standard error(s).

    Args:
        seb: Standard error of each coefficient
        alpha: Tail probability from `resolve_alpha`
        df: Residual degrees of freedom
        n: Sample size, used with `p` when `df` is not given
        p: Number of predictors
        test: "t" or "z"

    Returns:
        CoefficientResult with `bc` shaped like `seb`
    """
    df = resolve_coef_df(df, n, p)
    if test not in TEST_METHODS:
        raise InvalidArgument(f"test must be one of {TEST_METHODS}, got {test!r}")

    qc = critical_t(alpha, df) if test == "t" else critical_z(alpha)
    logger.debug("critical coefficients with the %s method (df=%s)", test, df)

    if np.ndim(seb) == 0:
        bc: Union[float, np.ndarray] = qc * float(seb)
    else:
        bc = qc * np.asarray(seb, dtype=float)
    return CoefficientResult(bc=bc, test=test)
