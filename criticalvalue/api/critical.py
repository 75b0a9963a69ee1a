"""
criticalvalue.api.critical
==========================

Public entry points, one per test family.

Each function accepts loose keyword arguments, resolves them once into a
typed input variant, runs the matching derivation and, for the t-test
families, appends Hedges-corrected effect sizes.

Examples
--------
>>> from criticalvalue.api.critical import critical_t1s, critical_cor
>>> res = critical_t1s(m=0.5, s=1, n=30)
>>> round(res.dc, 4)
0.3734
>>> critical_cor(n=60, test="z").test
'z'
"""

from __future__ import annotations
import dataclasses
import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, TypeVar, Union

import numpy as np

from criticalvalue.core.errors import emit_diagnostic
from criticalvalue.core.names import Diagnostic, Hypothesis, TestMethod
from criticalvalue.core.results import (
    CoefficientResult,
    CorrelationResult,
    CriticalRecord,
    OneSampleResult,
    PairedResult,
    TwoSampleResult,
)
from criticalvalue.stats.common.statistical import hedges_j, resolve_alpha
from criticalvalue.stats.schemes.coefficient import crit_coef
from criticalvalue.stats.schemes.correlation import crit_cor
from criticalvalue.stats.schemes.one_sample import (
    OneSampleInputs,
    crit_t1s,
    resolve_one_sample_inputs,
)
from criticalvalue.stats.schemes.paired import (
    PairedInputs,
    crit_t2sp,
    resolve_paired_inputs,
)
from criticalvalue.stats.schemes.two_sample import (
    TwoSampleInputs,
    crit_t2s,
    resolve_two_sample_inputs,
)

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=CriticalRecord)


@dataclass
class CriticalConfig:
    """
    Test configuration shared by every entry point.

    Parameters
    ----------
    hypothesis : {"two.sided", "greater", "less"}, default="two.sided"
        Direction of the alternative hypothesis
    conf_level : float, default=0.95
        Confidence level of the interval

    Examples
    --------
    >>> cfg = CriticalConfig(hypothesis="greater", conf_level=0.9)
    >>> round(cfg.alpha, 6)
    0.1
    """

    hypothesis: Hypothesis = "two.sided"
    conf_level: float = 0.95

    def validate(self) -> None:
        """Validate the configuration."""
        resolve_alpha(self.conf_level, self.hypothesis)

    @property
    def alpha(self) -> float:
        return resolve_alpha(self.conf_level, self.hypothesis)


def _config(hypothesis: Hypothesis, conf_level: float) -> CriticalConfig:
    config = CriticalConfig(hypothesis=hypothesis, conf_level=conf_level)
    config.validate()
    return config


def _corrected(value: float, j: float) -> float:
    return j * value if not math.isnan(value) else math.nan


def apply_hedges_correction(result: R) -> R:
    """Return `result` with the Hedges' g counterparts of its Cohen's d fields.

    J is undefined for df <= 1; the g fields are then NaN and the record
    carries `BIAS_CORRECTION_UNAVAILABLE`.
    """
    df = result.df  # type: ignore[attr-defined]
    diagnostics = list(result.diagnostics)
    if df > 1:
        j = hedges_j(df)
    else:
        emit_diagnostic(
            diagnostics,
            Diagnostic.BIAS_CORRECTION_UNAVAILABLE,
            f"When df <= 1 (got {df}), Hedges' g cannot be computed, returning NaN",
        )
        j = math.nan
    updates: Dict[str, Any] = {
        "g": _corrected(result.d, j),  # type: ignore[attr-defined]
        "gc": _corrected(result.dc, j),  # type: ignore[attr-defined]
        "diagnostics": tuple(diagnostics),
    }
    if isinstance(result, PairedResult):
        updates["gz"] = _corrected(result.dz, j)
        updates["gzc"] = _corrected(result.dzc, j)
    return dataclasses.replace(result, **updates)


# --- Variant-level entry points ---


def critical_one_sample(
    inputs: OneSampleInputs, config: Optional[CriticalConfig] = None
) -> OneSampleResult:
    """One-sample critical values from an already resolved input variant."""
    config = config or CriticalConfig()
    config.validate()
    return apply_hedges_correction(crit_t1s(inputs, config.alpha))


def critical_two_sample(
    inputs: TwoSampleInputs,
    config: Optional[CriticalConfig] = None,
    var_equal: Optional[bool] = None,
) -> TwoSampleResult:
    """Two-sample critical values from an already resolved input variant."""
    config = config or CriticalConfig()
    config.validate()
    return apply_hedges_correction(crit_t2s(inputs, config.alpha, var_equal))


def critical_paired(
    inputs: PairedInputs, config: Optional[CriticalConfig] = None
) -> PairedResult:
    """Paired critical values from an already resolved input variant."""
    config = config or CriticalConfig()
    config.validate()
    return apply_hedges_correction(crit_t2sp(inputs, config.alpha))


# --- Keyword entry points ---


def critical_t1s(
    m: Optional[float] = None,
    s: Optional[float] = None,
    t: Optional[float] = None,
    *,
    n: float,
    se: Optional[float] = None,
    df: Optional[float] = None,
    hypothesis: Hypothesis = "two.sided",
    conf_level: float = 0.95,
) -> OneSampleResult:
    """
    Critical values for a one-sample t-test.

    Parameters
    ----------
    m : float, optional
        Sample mean (or mean difference from the reference value). When
        given, the summary-statistics path is used.
    s : float, optional
        Sample standard deviation, required with `m`
    t : float, optional
        t statistic, used when `m` is not given
    n : float
        Sample size
    se : float, optional
        Standard error; replaces s / sqrt(n) when given
    df : float, optional
        Degrees of freedom; replaces n - 1 when given
    hypothesis : {"two.sided", "greater", "less"}, default="two.sided"
    conf_level : float, default=0.95

    Returns
    -------
    OneSampleResult
        `d`, `dc`, `bc`, `se`, `df`, `qc`, `g`, `gc`

    Examples
    --------
    >>> res = critical_t1s(t=2.1, n=20, se=0.3)
    >>> res.df
    19.0
    """
    config = _config(hypothesis, conf_level)
    inputs = resolve_one_sample_inputs(n=n, m=m, s=s, t=t, se=se, df=df)
    return critical_one_sample(inputs, config)


def critical_t2s(
    m1: Optional[float] = None,
    m2: Optional[float] = None,
    t: Optional[float] = None,
    sd1: Optional[float] = None,
    sd2: Optional[float] = None,
    *,
    n1: float,
    n2: float,
    se: Optional[float] = None,
    df: Optional[float] = None,
    var_equal: Optional[bool] = None,
    hypothesis: Hypothesis = "two.sided",
    conf_level: float = 0.95,
) -> TwoSampleResult:
    """
    Critical values for a two-sample (independent groups) t-test.

    Parameters
    ----------
    m1, m2 : float, optional
        Group means. Supplying either selects the summary-statistics path.
    t : float, optional
        t statistic, used when no mean is given
    sd1, sd2 : float, optional
        Group standard deviations, required with the means
    n1, n2 : float
        Group sizes
    se : float, optional
        Standard error of the mean difference; replaces the derived value
    df : float, optional
        Degrees of freedom; replaces the derived value
    var_equal : bool, optional
        True for the pooled (Student) test, False for Welch. Left as None,
        summary statistics use Welch and a t statistic uses n1 + n2 - 2
        without warning.
    hypothesis : {"two.sided", "greater", "less"}, default="two.sided"
    conf_level : float, default=0.95

    Returns
    -------
    TwoSampleResult
        `d`, `dc`, `bc`, `se`, `df`, `qc`, `g`, `gc`

    Examples
    --------
    >>> res = critical_t2s(m1=1.0, m2=0.5, sd1=1.0, sd2=1.0, n1=30, n2=30, var_equal=True)
    >>> res.df
    58.0
    """
    config = _config(hypothesis, conf_level)
    inputs = resolve_two_sample_inputs(
        n1=n1, n2=n2, m1=m1, m2=m2, sd1=sd1, sd2=sd2, t=t, se=se, df=df
    )
    return critical_two_sample(inputs, config, var_equal=var_equal)


def critical_t2sp(
    m1: Optional[float] = None,
    m2: Optional[float] = None,
    t: Optional[float] = None,
    sd1: Optional[float] = None,
    sd2: Optional[float] = None,
    r12: Optional[float] = None,
    *,
    n: float,
    se: Optional[float] = None,
    df: Optional[float] = None,
    hypothesis: Hypothesis = "two.sided",
    conf_level: float = 0.95,
) -> PairedResult:
    """
    Critical values for a paired-samples t-test.

    Parameters
    ----------
    m1, m2 : float, optional
        Condition means. With `m2` omitted, `m1` is the mean of the
        differences. Supplying `m1` selects the summary-statistics path.
    t : float, optional
        t statistic, used when `m1` is not given
    sd1, sd2 : float, optional
        Condition standard deviations. With `sd2` omitted, `sd1` is the
        standard deviation of the differences.
    r12 : float, optional
        Correlation between the conditions; 0 (with a warning) when omitted
    n : float
        Number of pairs
    se : float, optional
        Standard error of the mean difference
    df : float, optional
        Degrees of freedom; replaces n - 1 when given
    hypothesis : {"two.sided", "greater", "less"}, default="two.sided"
    conf_level : float, default=0.95

    Returns
    -------
    PairedResult
        `dz`, `dzc`, `d`, `dc`, `bc`, `se`, `df`, `qc`, `g`, `gc`, `gz`, `gzc`
    """
    config = _config(hypothesis, conf_level)
    inputs = resolve_paired_inputs(
        n=n, m1=m1, m2=m2, sd1=sd1, sd2=sd2, r12=r12, t=t, se=se, df=df
    )
    return critical_paired(inputs, config)


def critical_cor(
    r: Optional[float] = None,
    *,
    n: float,
    conf_level: float = 0.95,
    hypothesis: Hypothesis = "two.sided",
    test: TestMethod = "t",
) -> CorrelationResult:
    """
    Critical correlation coefficient.

    Parameters
    ----------
    r : float, optional
        Observed correlation, used for its standard error
    n : float
        Sample size
    conf_level : float, default=0.95
    hypothesis : {"two.sided", "greater", "less"}, default="two.sided"
    test : {"t", "z"}, default="t"
        "t" for the t test on r, "z" for Fisher's z transformation

    Returns
    -------
    CorrelationResult
        `rc`, `rzc`, `df`, `se_r`, `se_rc`, `se_rzc`, `qc`, `test`
    """
    config = _config(hypothesis, conf_level)
    return crit_cor(n=n, alpha=config.alpha, test=test, r=r)


def critical_coef(
    seb: Union[float, Sequence[float], np.ndarray],
    n: Optional[float] = None,
    p: Optional[float] = None,
    df: Optional[float] = None,
    *,
    conf_level: float = 0.95,
    hypothesis: Hypothesis = "two.sided",
    test: TestMethod = "t",
) -> CoefficientResult:
    """
    Critical regression coefficient(s).

    Parameters
    ----------
    seb : float or sequence of float
        Standard error of each coefficient
    n : float, optional
        Sample size, used with `p` when `df` is not given
    p : float, optional
        Number of predictors
    df : float, optional
        Residual degrees of freedom
    conf_level : float, default=0.95
    hypothesis : {"two.sided", "greater", "less"}, default="two.sided"
    test : {"t", "z"}, default="t"

    Returns
    -------
    CoefficientResult
        `bc` shaped like `seb`, and `test`

    Examples
    --------
    >>> res = critical_coef(0.5, test="z", df=50)
    >>> round(res.bc, 3)
    0.98
    """
    config = _config(hypothesis, conf_level)
    return crit_coef(seb, alpha=config.alpha, df=df, n=n, p=p, test=test)
