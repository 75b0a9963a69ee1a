"""
Statistical methods for critical values.

1. **Common** (criticalvalue.stats.common):
   Test-agnostic building blocks such as alpha resolution, critical
   quantiles and Hedges' correction.

2. **Schemes** (criticalvalue.stats.schemes):
   Per-test derivations that combine the common blocks for a particular
   design (one-sample, two-sample, paired, correlation, coefficient).

Example:
--------
>>> from criticalvalue.stats.common import resolve_alpha, critical_t
>>> round(critical_t(resolve_alpha(0.95, "two.sided"), 1e6), 2)
1.96
"""
