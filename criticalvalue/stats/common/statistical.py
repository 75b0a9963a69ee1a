"""
criticalvalue.stats.common.statistical
======================================

Core statistical operations shared by every test family.

Provides the tail probability for a confidence level and hypothesis, the
critical quantiles of the Student-t and standard Normal distributions, the
Hedges small-sample correction and the standard deviation estimators used to
standardize mean differences. These functions are test-agnostic.
"""

from __future__ import annotations
import math

from scipy.special import gammaln
from scipy.stats import norm, t as student_t

from criticalvalue.core.errors import InvalidArgument
from criticalvalue.core.names import HYPOTHESES, Hypothesis


def resolve_alpha(conf_level: float, hypothesis: Hypothesis) -> float:
    """Tail probability used for the quantile lookup.

    Args:
        conf_level: Confidence level in (0, 1)
        hypothesis: "two.sided", "greater" or "less"

    Returns:
        (1 - conf_level) / 2 for two-sided tests, 1 - conf_level otherwise

    Examples:
        >>> round(resolve_alpha(0.95, "two.sided"), 6)
        0.025
        >>> round(resolve_alpha(0.95, "less"), 6)
        0.05
    """
    if hypothesis not in HYPOTHESES:
        raise InvalidArgument(
            f"hypothesis must be one of {HYPOTHESES}, got {hypothesis!r}"
        )
    if not (0 < conf_level < 1):
        raise InvalidArgument(f"conf_level must be in (0, 1), got {conf_level}")

    if hypothesis == "two.sided":
        return (1 - conf_level) / 2
    return 1 - conf_level


def critical_t(alpha: float, df: float) -> float:
    """Absolute Student-t quantile at tail probability `alpha`."""
    return abs(float(student_t.ppf(alpha, df)))


def critical_z(alpha: float) -> float:
    """Absolute standard Normal quantile at tail probability `alpha`."""
    return abs(float(norm.ppf(alpha)))


def hedges_j(df: float) -> float:
    """Hedges' small-sample bias correction factor.

    Exact form J = Γ(df/2) / (sqrt(df/2) Γ((df-1)/2)), computed on the log
    scale so large df do not overflow.

    Args:
        df: Degrees of freedom, must exceed 1

    Returns:
        Multiplicative correction applied to Cohen's d

    Examples:
        >>> round(hedges_j(10), 3)
        0.923
        >>> round(hedges_j(10000), 4)
        0.9999
    """
    if not df > 1:
        raise InvalidArgument(f"df must be greater than 1, got {df}")
    log_j = gammaln(df / 2) - 0.5 * math.log(df / 2) - gammaln((df - 1) / 2)
    return float(math.exp(log_j))


def pooled_sd(sd1: float, sd2: float, n1: float, n2: float) -> float:
    """Pooled standard deviation weighted by each group's degrees of freedom."""
    return math.sqrt((sd1**2 * (n1 - 1) + sd2**2 * (n2 - 1)) / (n1 + n2 - 2))


def average_sd(sd1: float, sd2: float) -> float:
    """Square root of the average of the two variances."""
    return math.sqrt((sd1**2 + sd2**2) / 2)


def welch_df(se1: float, se2: float, n1: float, n2: float) -> float:
    """Welch-Satterthwaite degrees of freedom from the per-group standard errors.

    Examples:
        >>> round(welch_df(0.2, 0.2, 30, 30), 6)
        58.0
    """
    se = math.sqrt(se1**2 + se2**2)
    return se**4 / (se1**4 / (n1 - 1) + se2**4 / (n2 - 1))
