"""
criticalvalue.api - User-Friendly Facade
========================================

One entry point per test family, accepting summary statistics or an
already computed test statistic:

- `critical_t1s()`: one-sample t-test
- `critical_t2s()`: independent two-sample t-test
- `critical_t2sp()`: paired-samples t-test
- `critical_cor()`: correlation test
- `critical_coef()`: regression coefficients

`critical_one_sample()`, `critical_two_sample()` and `critical_paired()`
take a prebuilt input variant instead of keyword arguments, for adapters
that extract fields from other result objects.
"""

from criticalvalue.api.critical import (
    CriticalConfig,
    apply_hedges_correction,
    critical_coef,
    critical_cor,
    critical_one_sample,
    critical_paired,
    critical_t1s,
    critical_t2s,
    critical_t2sp,
    critical_two_sample,
)

__all__ = [
    "CriticalConfig",
    "apply_hedges_correction",
    "critical_coef",
    "critical_cor",
    "critical_one_sample",
    "critical_paired",
    "critical_t1s",
    "critical_t2s",
    "critical_t2sp",
    "critical_two_sample",
]
