"""
criticalvalue.stats.common
==========================

Test-agnostic statistical building blocks: alpha resolution, critical
quantiles, Hedges' correction and standard deviation estimators.
"""

from criticalvalue.stats.common.statistical import (
    average_sd,
    critical_t,
    critical_z,
    hedges_j,
    pooled_sd,
    resolve_alpha,
    welch_df,
)

__all__ = [
    "average_sd",
    "critical_t",
    "critical_z",
    "hedges_j",
    "pooled_sd",
    "resolve_alpha",
    "welch_df",
]
