import math

import pytest
from scipy import stats

from criticalvalue import InvalidArgument, critical_cor


def test_t_method():
    res = critical_cor(n=30, r=0.5)
    tc = abs(stats.t.ppf(0.025, 28))
    assert res.test == "t"
    assert res.df == 28
    assert res.qc == pytest.approx(tc)
    assert res.rc == pytest.approx(tc / math.sqrt(28 + tc**2))
    assert res.se_rc == pytest.approx(math.sqrt((1 - res.rc**2) / 28))
    assert res.se_r == pytest.approx(math.sqrt(0.75 / 28))
    assert math.isnan(res.rzc)
    assert math.isnan(res.se_rzc)


def test_critical_r_is_exactly_significant():
    res = critical_cor(n=30)
    t = res.rc / res.se_rc
    assert (1 - stats.t.cdf(t, res.df)) * 2 == pytest.approx(0.05)


def test_observed_r_round_trip_matches_pearsonr():
    x = [1.0, 2.1, 2.9, 4.2, 5.1, 5.8, 7.2, 8.1, 8.8, 10.2, 11.1, 11.7]
    y = [2.0, 1.5, 3.9, 3.1, 6.2, 4.8, 6.9, 9.5, 7.1, 9.0, 12.5, 10.1]
    ref = stats.pearsonr(x, y)
    n = len(x)
    res = critical_cor(r=ref.statistic, n=n)
    t = ref.statistic / res.se_r
    assert 2 * stats.t.sf(abs(t), n - 2) == pytest.approx(ref.pvalue)


def test_se_r_nan_without_observed_r():
    assert math.isnan(critical_cor(n=30).se_r)
    assert math.isnan(critical_cor(n=30, test="z").se_r)


def test_z_method():
    res = critical_cor(n=60, hypothesis="two.sided", test="z")
    zc = abs(stats.norm.ppf(0.025))
    assert res.test == "z"
    assert res.rzc == pytest.approx(math.atanh(math.tanh(zc / math.sqrt(57))))
    assert res.rzc == pytest.approx(zc / math.sqrt(57))
    assert 0 < res.rc < 1
    assert res.se_rzc == pytest.approx(1 / math.sqrt(57))
    assert res.se_rc == pytest.approx(math.sqrt((1 - res.rc**2) / 58))


def test_z_method_reports_critical_se_for_observed_r():
    res = critical_cor(r=0.2, n=60, test="z")
    assert res.se_r == res.se_rc


def test_one_sided_is_less_strict():
    assert critical_cor(n=40, hypothesis="greater").rc < critical_cor(n=40).rc


def test_invalid_arguments():
    with pytest.raises(InvalidArgument):
        critical_cor(n=30, test="f")
    with pytest.raises(InvalidArgument):
        critical_cor(n=3, test="z")
    with pytest.raises(InvalidArgument):
        critical_cor(n=2)
