"""
criticalvalue.stats.schemes.paired
==================================

Critical values for the paired-samples t-test.

Two effect size families are reported:

- `dz`: mean difference standardized by the SD of the differences
- `d`: mean difference standardized by the average SD of the two conditions

They are linked through the correlation between conditions:
    sd_pooled = sd_diff / sqrt(2(1 - r12)),  d = dz * sqrt(2(1 - r12))

Examples
--------
>>> from criticalvalue.stats.schemes.paired import PairedSummary, crit_from_data_t2sp
>>> res = crit_from_data_t2sp(PairedSummary(m1=0.4, sd1=1.0, n=25, r12=0.5), alpha=0.025)
>>> round(res.dz, 2), round(res.d, 2)
(0.4, 0.4)
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Union

from criticalvalue.core.errors import InvalidArgument, emit_diagnostic
from criticalvalue.core.names import Diagnostic
from criticalvalue.core.results import NAN, PairedResult
from criticalvalue.stats.common.statistical import average_sd, critical_t

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PairedSummary:
    """Summary statistics of a paired design.

    With `m2` and `sd2` left out, `m1` and `sd1` are the mean and standard
    deviation of the differences.
    """

    m1: float
    sd1: float
    n: float
    m2: Optional[float] = None
    sd2: Optional[float] = None
    r12: Optional[float] = None
    se: Optional[float] = None
    df: Optional[float] = None

    @property
    def of_differences(self) -> bool:
        return self.m2 is None


@dataclass(frozen=True)
class PairedStatistic:
    """A computed paired t statistic."""

    n: float
    t: Optional[float] = None
    se: Optional[float] = None
    r12: Optional[float] = None
    df: Optional[float] = None


PairedInputs = Union[PairedSummary, PairedStatistic]


def resolve_paired_inputs(
    n: float,
    m1: Optional[float] = None,
    m2: Optional[float] = None,
    sd1: Optional[float] = None,
    sd2: Optional[float] = None,
    r12: Optional[float] = None,
    t: Optional[float] = None,
    se: Optional[float] = None,
    df: Optional[float] = None,
) -> PairedInputs:
    """Pick the input mode: summary statistics when `m1` is given, else `t`."""
    if r12 is not None and not (-1 < r12 < 1):
        raise InvalidArgument(f"r12 must be in (-1, 1), got {r12}")
    if m1 is not None:
        if sd1 is None:
            raise InvalidArgument("sd1 is required when m1 is supplied")
        if (m2 is None) != (sd2 is None):
            raise InvalidArgument("m2 and sd2 must be supplied together")
        return PairedSummary(
            m1=m1, sd1=sd1, n=n, m2=m2, sd2=sd2, r12=r12, se=se, df=df
        )
    return PairedStatistic(n=n, t=t, se=se, r12=r12, df=df)


def _resolve_r12(r12: Optional[float], diagnostics: List[Diagnostic], message: str) -> float:
    if r12 is None:
        emit_diagnostic(diagnostics, Diagnostic.R12_DEFAULTED, message)
        return 0.0
    return float(r12)


def crit_from_data_t2sp(inputs: PairedSummary, alpha: float) -> PairedResult:
    """Critical dz, d and mean difference from paired summary statistics."""
    diagnostics: List[Diagnostic] = []
    n = inputs.n
    df = float(inputs.df if inputs.df is not None else n - 1)
    qc = critical_t(alpha, df)

    if inputs.of_differences:
        r12 = _resolve_r12(
            inputs.r12,
            diagnostics,
            "When r12 is None, d and dc are converted from dz assuming r12 = 0",
        )
        b = inputs.m1
        sdiff = inputs.sd1
        sp = sdiff / math.sqrt(2 * (1 - r12))
    else:
        r12 = _resolve_r12(
            inputs.r12,
            diagnostics,
            "When m2 and sd2 are provided and r12 is None, dz and dzc assume r12 = 0",
        )
        sd1, sd2 = inputs.sd1, inputs.sd2
        b = inputs.m1 - inputs.m2
        sdiff = math.sqrt(sd1**2 + sd2**2 - 2 * r12 * sd1 * sd2)
        sp = average_sd(sd1, sd2)

    se = float(inputs.se if inputs.se is not None else sdiff / math.sqrt(n))
    dzc = qc * math.sqrt(1 / n)

    return PairedResult(
        dz=b / sdiff,
        dzc=dzc,
        d=b / sp,
        dc=dzc * math.sqrt(2 * (1 - r12)),
        bc=qc * se,
        se=se,
        df=df,
        qc=qc,
        diagnostics=tuple(diagnostics),
    )


def crit_from_t_t2sp(inputs: PairedStatistic, alpha: float) -> PairedResult:
    """Critical dz and d from a paired t statistic.

    Only the difference-standardized family follows from `t` directly; the
    pooled family is converted through `r12`.
    """
    diagnostics: List[Diagnostic] = []
    n = inputs.n
    df = float(inputs.df if inputs.df is not None else n - 1)
    qc = critical_t(alpha, df)

    r12 = _resolve_r12(
        inputs.r12,
        diagnostics,
        "When r12 is None, d and dc are converted from dz assuming r12 = 0",
    )
    dzc = qc * math.sqrt(1 / n)
    dc = dzc * math.sqrt(2 * (1 - r12))

    if inputs.t is None:
        emit_diagnostic(
            diagnostics,
            Diagnostic.EFFECT_SIZE_UNAVAILABLE,
            "When t is None, dz and d cannot be computed, returning NaN",
        )
        dz = d = NAN
    else:
        dz = inputs.t * math.sqrt(1 / n)
        d = dz * math.sqrt(2 * (1 - r12))

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

    return PairedResult(
        dz=dz,
        dzc=dzc,
        d=d,
        dc=dc,
        bc=bc,
        se=se,
        df=df,
        qc=qc,
        diagnostics=tuple(diagnostics),
    )


def crit_t2sp(inputs: PairedInputs, alpha: float) -> PairedResult:
    """Dispatch on the input mode."""
    if isinstance(inputs, PairedSummary):
        logger.debug(
            "paired critical values from summary statistics (differences=%s)",
            inputs.of_differences,
        )
        return crit_from_data_t2sp(inputs, alpha)
    logger.debug("paired critical values from t statistic")
    return crit_from_t_t2sp(inputs, alpha)
