"""
criticalvalue.stats.schemes.one_sample
======================================

Critical values for the one-sample t-test.

Two input modes are supported:

- `OneSampleSummary`: mean, standard deviation and sample size
- `OneSampleStatistic`: t statistic and sample size, with an optional
  standard error

Mathematical background:
    df = n - 1, qc = |qt(alpha, df)|
    d = m / s (or t * sqrt(1/n)), dc = qc * sqrt(1/n), bc = qc * se

Examples
--------
>>> from criticalvalue.stats.schemes.one_sample import OneSampleSummary, crit_from_data_t1s
>>> res = crit_from_data_t1s(OneSampleSummary(m=0.5, s=1.0, n=30), alpha=0.025)
>>> res.df
29.0
>>> round(res.d, 2)
0.5
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Union

from criticalvalue.core.errors import InvalidArgument, emit_diagnostic
from criticalvalue.core.names import Diagnostic
from criticalvalue.core.results import NAN, OneSampleResult
from criticalvalue.stats.common.statistical import critical_t

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OneSampleSummary:
    """Summary statistics of a single sample."""

    m: float
    s: float
    n: float
    se: Optional[float] = None
    df: Optional[float] = None


@dataclass(frozen=True)
class OneSampleStatistic:
    """A computed one-sample t statistic."""

    n: float
    t: Optional[float] = None
    se: Optional[float] = None
    df: Optional[float] = None


OneSampleInputs = Union[OneSampleSummary, OneSampleStatistic]


def resolve_one_sample_inputs(
    n: float,
    m: Optional[float] = None,
    s: Optional[float] = None,
    t: Optional[float] = None,
    se: Optional[float] = None,
    df: Optional[float] = None,
) -> OneSampleInputs:
    """Pick the input mode: summary statistics when `m` is given, else `t`."""
    if m is not None:
        if s is None:
            raise InvalidArgument("s is required when m is supplied")
        return OneSampleSummary(m=m, s=s, n=n, se=se, df=df)
    return OneSampleStatistic(n=n, t=t, se=se, df=df)


def crit_from_data_t1s(inputs: OneSampleSummary, alpha: float) -> OneSampleResult:
    """Critical d and mean from a sample's mean, SD and size."""
    n = inputs.n
    df = float(inputs.df if inputs.df is not None else n - 1)
    se = float(inputs.se if inputs.se is not None else inputs.s / math.sqrt(n))
    qc = critical_t(alpha, df)

    return OneSampleResult(
        d=inputs.m / inputs.s,
        dc=qc * math.sqrt(1 / n),
        bc=qc * se,
        se=se,
        df=df,
        qc=qc,
    )


def crit_from_t_t1s(inputs: OneSampleStatistic, alpha: float) -> OneSampleResult:
    """Critical d from a one-sample t statistic.

    Missing `t` leaves `d` undefined; missing `se` leaves `bc` undefined.
    Both cases emit a `CriticalValueWarning`.
    """
    diagnostics: List[Diagnostic] = []
    n = inputs.n
    df = float(inputs.df if inputs.df is not None else n - 1)
    qc = critical_t(alpha, df)

    if inputs.t is None:
        emit_diagnostic(
            diagnostics,
            Diagnostic.EFFECT_SIZE_UNAVAILABLE,
            "When t is None, d cannot be computed, returning NaN",
        )
        d = NAN
    else:
        d = inputs.t * math.sqrt(1 / n)

    if inputs.se is None:
        emit_diagnostic(
            diagnostics,
            Diagnostic.CRITICAL_NUMERATOR_UNAVAILABLE,
            "When se is None, bc cannot be computed, returning NaN",
        )
        se = bc = NAN
    else:
        se = float(inputs.se)
        bc = qc * se

    return OneSampleResult(
        d=d,
        dc=qc * math.sqrt(1 / n),
        bc=bc,
        se=se,
        df=df,
        qc=qc,
        diagnostics=tuple(diagnostics),
    )


def crit_t1s(inputs: OneSampleInputs, alpha: float) -> OneSampleResult:
    """Dispatch on the input mode."""
    if isinstance(inputs, OneSampleSummary):
        logger.debug("one-sample critical values from summary statistics")
        return crit_from_data_t1s(inputs, alpha)
    logger.debug("one-sample critical values from t statistic")
    return crit_from_t_t1s(inputs, alpha)
