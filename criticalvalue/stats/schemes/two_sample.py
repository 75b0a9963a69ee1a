"""
criticalvalue.stats.schemes.two_sample
======================================

Critical values for the two-sample (independent groups) t-test.

Two variance assumptions are supported:

**Equal variances (Student):**
    df = n1 + n2 - 2
    s = sqrt((sd1²(n1-1) + sd2²(n2-1)) / (n1 + n2 - 2))
    se = s * sqrt(1/n1 + 1/n2)

**Unequal variances (Welch):**
    se = sqrt(sd1²/n1 + sd2²/n2)
    df = se⁴ / (se1⁴/(n1-1) + se2⁴/(n2-1))
    s = sqrt((sd1² + sd2²) / 2)

In both cases d = (m1 - m2) / s and dc = qc * sqrt(1/n1 + 1/n2).

Examples
--------
>>> from criticalvalue.stats.schemes.two_sample import TwoSampleSummary, crit_from_data_t2s
>>> inputs = TwoSampleSummary(m1=1.0, m2=0.5, sd1=1.0, sd2=1.0, n1=30, n2=30)
>>> crit_from_data_t2s(inputs, alpha=0.025, var_equal=True).df
58.0
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Union

from criticalvalue.core.errors import InvalidArgument, emit_diagnostic
from criticalvalue.core.names import Diagnostic
from criticalvalue.core.results import NAN, TwoSampleResult
from criticalvalue.stats.common.statistical import (
    average_sd,
    critical_t,
    pooled_sd,
    welch_df,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TwoSampleSummary:
    """Summary statistics of two independent groups."""

    m1: float
    m2: float
    sd1: float
    sd2: float
    n1: float
    n2: float
    se: Optional[float] = None
    df: Optional[float] = None


@dataclass(frozen=True)
class TwoSampleStatistic:
    """A computed two-sample t statistic."""

    n1: float
    n2: float
    t: Optional[float] = None
    se: Optional[float] = None
    df: Optional[float] = None


TwoSampleInputs = Union[TwoSampleSummary, TwoSampleStatistic]


def resolve_two_sample_inputs(
    n1: float,
    n2: float,
    m1: Optional[float] = None,
    m2: Optional[float] = None,
    sd1: Optional[float] = None,
    sd2: Optional[float] = None,
    t: Optional[float] = None,
    se: Optional[float] = None,
    df: Optional[float] = None,
) -> TwoSampleInputs:
    """Pick the input mode: summary statistics when either mean is given, else `t`."""
    if m1 is not None or m2 is not None:
        absent = [
            name
            for name, value in (("m1", m1), ("m2", m2), ("sd1", sd1), ("sd2", sd2))
            if value is None
        ]
        if absent:
            raise InvalidArgument(
                f"{', '.join(absent)} required when group means are supplied"
            )
        return TwoSampleSummary(
            m1=m1, m2=m2, sd1=sd1, sd2=sd2, n1=n1, n2=n2, se=se, df=df
        )
    return TwoSampleStatistic(n1=n1, n2=n2, t=t, se=se, df=df)


def crit_from_data_t2s(
    inputs: TwoSampleSummary, alpha: float, var_equal: bool = False
) -> TwoSampleResult:
    """Critical d and mean difference from two groups' summary statistics.

    `se` and `df` on the inputs, when given, replace the derived values.
    """
    n1, n2 = inputs.n1, inputs.n2
    sd1, sd2 = inputs.sd1, inputs.sd2

    if var_equal:
        s = pooled_sd(sd1, sd2, n1, n2)
        se = inputs.se if inputs.se is not None else s * math.sqrt(1 / n1 + 1 / n2)
        df = inputs.df if inputs.df is not None else n1 + n2 - 2
    else:
        se1 = sd1 / math.sqrt(n1)
        se2 = sd2 / math.sqrt(n2)
        s = average_sd(sd1, sd2)
        se = inputs.se if inputs.se is not None else math.sqrt(se1**2 + se2**2)
        df = inputs.df if inputs.df is not None else welch_df(se1, se2, n1, n2)

    df = float(df)
    qc = critical_t(alpha, df)

    return TwoSampleResult(
        d=(inputs.m1 - inputs.m2) / s,
        # pooled-style denominator in both branches
        dc=qc * math.sqrt(1 / n1 + 1 / n2),
        bc=qc * float(se),
        se=float(se),
        df=df,
        qc=qc,
    )


def crit_from_t_t2s(
    inputs: TwoSampleStatistic, alpha: float, var_equal: Optional[bool] = None
) -> TwoSampleResult:
    """Critical d from a two-sample t statistic.

    The unequal-variance denominator cannot be rebuilt from `t`, so an
    explicit `var_equal=False` warns that sd1 = sd2 is assumed.
    """
    diagnostics: List[Diagnostic] = []
    n1, n2 = inputs.n1, inputs.n2

    if var_equal is False:
        emit_diagnostic(
            diagnostics,
            Diagnostic.EQUAL_SD_ASSUMED,
            "When var_equal = False the critical value calculated from t assumes sd1 = sd2",
        )

    df = float(inputs.df if inputs.df is not None else n1 + n2 - 2)
    qc = critical_t(alpha, df)

    if inputs.t is None:
        emit_diagnostic(
            diagnostics,
            Diagnostic.EFFECT_SIZE_UNAVAILABLE,
            "When t is None, d cannot be computed, returning NaN",
        )
        d = NAN
    else:
        d = inputs.t * math.sqrt(1 / n1 + 1 / n2)

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

    return TwoSampleResult(
        d=d,
        dc=qc * math.sqrt(1 / n1 + 1 / n2),
        bc=bc,
        se=se,
        df=df,
        qc=qc,
        diagnostics=tuple(diagnostics),
    )


def crit_t2s(
    inputs: TwoSampleInputs, alpha: float, var_equal: Optional[bool] = None
) -> TwoSampleResult:
    """Dispatch on the input mode.

    `var_equal=None` means the caller expressed no variance assumption; the
    summary mode then uses the Welch branch.
    """
    if isinstance(inputs, TwoSampleSummary):
        logger.debug(
            "two-sample critical values from summary statistics (var_equal=%s)",
            var_equal,
        )
        return crit_from_data_t2s(inputs, alpha, var_equal=bool(var_equal))
    logger.debug("two-sample critical values from t statistic")
    return crit_from_t_t2s(inputs, alpha, var_equal=var_equal)
