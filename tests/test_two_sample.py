import math
import warnings

import pytest
from scipy import stats

from criticalvalue import Diagnostic, InvalidArgument, critical_t2s
from criticalvalue.core.errors import CriticalValueWarning
from criticalvalue.stats.schemes.two_sample import (
    TwoSampleStatistic,
    TwoSampleSummary,
    resolve_two_sample_inputs,
)


def test_equal_variance_round_trip_reproduces_alpha():
    res = critical_t2s(m1=1.1, m2=0.6, sd1=1.0, sd2=1.2, n1=25, n2=30, var_equal=True)
    p = (1 - stats.t.cdf(res.bc / res.se, res.df)) * 2
    assert p == pytest.approx(0.05)


def test_equal_variance_uses_pooled_sd():
    res = critical_t2s(m1=1.0, m2=0.0, sd1=1.0, sd2=2.0, n1=11, n2=11, var_equal=True)
    s = math.sqrt(2.5)
    assert res.df == 20
    assert res.d == pytest.approx(1 / s)
    assert res.se == pytest.approx(s * math.sqrt(2 / 11))
    assert res.bc == pytest.approx(res.qc * res.se)


def test_matches_scipy_ttest_from_stats():
    kwargs = dict(mean1=1.0, std1=1.0, nobs1=20, mean2=0.4, std2=1.5, nobs2=35)
    ref = stats.ttest_ind_from_stats(**kwargs, equal_var=False)
    res = critical_t2s(m1=1.0, m2=0.4, sd1=1.0, sd2=1.5, n1=20, n2=35, var_equal=False)
    t = (1.0 - 0.4) / res.se
    assert t == pytest.approx(ref.statistic)
    assert (1 - stats.t.cdf(t, res.df)) * 2 == pytest.approx(ref.pvalue)


def test_welch_branch():
    res = critical_t2s(m1=1.0, m2=0.0, sd1=1.0, sd2=3.0, n1=20, n2=40)
    se1, se2 = 1 / math.sqrt(20), 3 / math.sqrt(40)
    se = math.sqrt(se1**2 + se2**2)
    assert res.se == pytest.approx(se)
    assert res.df == pytest.approx(se**4 / (se1**4 / 19 + se2**4 / 39))
    assert res.d == pytest.approx(1 / math.sqrt(5))
    # dc keeps the pooled-style denominator
    assert res.dc == pytest.approx(res.qc * math.sqrt(1 / 20 + 1 / 40))


def test_var_equal_none_uses_welch_for_summary_statistics():
    a = critical_t2s(m1=1.0, m2=0.0, sd1=1.0, sd2=3.0, n1=20, n2=40)
    b = critical_t2s(m1=1.0, m2=0.0, sd1=1.0, sd2=3.0, n1=20, n2=40, var_equal=False)
    assert a.df == pytest.approx(b.df)


def test_overrides_are_used_verbatim():
    res = critical_t2s(m1=1.0, m2=0.0, sd1=1.0, sd2=1.0, n1=20, n2=20, se=0.25, df=30)
    assert res.se == 0.25
    assert res.df == 30


def test_from_t_without_se_emits_one_diagnostic():
    with pytest.warns(CriticalValueWarning) as record:
        res = critical_t2s(t=2.5, n1=30, n2=30)
    assert len(record) == 1
    assert math.isnan(res.bc)
    for value in (res.d, res.dc, res.df):
        assert math.isfinite(value)
    assert res.d == pytest.approx(2.5 * math.sqrt(2 / 30))
    assert res.df == 58
    assert res.diagnostics == (Diagnostic.CRITICAL_NUMERATOR_UNAVAILABLE,)


def test_from_t_with_explicit_welch_warns_equal_sd():
    with pytest.warns(CriticalValueWarning, match="sd1 = sd2"):
        res = critical_t2s(t=2.5, n1=30, n2=30, se=0.3, var_equal=False)
    assert res.diagnostics == (Diagnostic.EQUAL_SD_ASSUMED,)
    assert res.bc == pytest.approx(res.qc * 0.3)


def test_from_t_with_equal_variances_is_silent():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        res = critical_t2s(t=2.5, n1=30, n2=30, se=0.3, var_equal=True)
    assert res.diagnostics == ()


def test_input_resolution():
    summary = resolve_two_sample_inputs(n1=5, n2=5, m1=1, m2=0, sd1=1, sd2=1)
    assert isinstance(summary, TwoSampleSummary)
    assert isinstance(resolve_two_sample_inputs(n1=5, n2=5, t=1.0), TwoSampleStatistic)
    with pytest.raises(InvalidArgument, match="sd1, sd2"):
        resolve_two_sample_inputs(n1=5, n2=5, m1=1.0, m2=0.0)
    with pytest.raises(InvalidArgument):
        resolve_two_sample_inputs(n1=5, n2=5, m2=0.0, sd1=1, sd2=1)
