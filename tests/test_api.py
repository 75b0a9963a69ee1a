import math

import pytest

from criticalvalue import (
    CriticalConfig,
    InvalidArgument,
    OneSampleStatistic,
    OneSampleSummary,
    PairedStatistic,
    TwoSampleSummary,
    critical_one_sample,
    critical_paired,
    critical_t1s,
    critical_t2s,
    critical_two_sample,
)
from criticalvalue.api.critical import apply_hedges_correction
from criticalvalue.core.results import OneSampleResult, TwoSampleResult


def test_config_defaults_and_alpha():
    config = CriticalConfig()
    assert config.hypothesis == "two.sided"
    assert config.conf_level == 0.95
    assert config.alpha == pytest.approx(0.025)
    assert CriticalConfig(hypothesis="less", conf_level=0.99).alpha == pytest.approx(0.01)


@pytest.mark.parametrize(
    "kwargs", [{"hypothesis": "both"}, {"conf_level": 0.0}, {"conf_level": 95}]
)
def test_config_validation(kwargs):
    with pytest.raises(InvalidArgument):
        CriticalConfig(**kwargs).validate()


def test_variant_entry_points_match_keyword_entry_points():
    config = CriticalConfig(hypothesis="greater", conf_level=0.9)
    by_variant = critical_one_sample(OneSampleSummary(m=0.4, s=1.2, n=18), config)
    by_keyword = critical_t1s(m=0.4, s=1.2, n=18, hypothesis="greater", conf_level=0.9)
    assert by_variant == by_keyword


def test_two_sample_variant_entry_point():
    inputs = TwoSampleSummary(m1=1.0, m2=0.2, sd1=1.0, sd2=1.0, n1=12, n2=14)
    res = critical_two_sample(inputs, var_equal=True)
    assert res.df == 24
    assert not res.missing


def test_paired_variant_entry_point_records_diagnostics():
    with pytest.warns(UserWarning):
        res = critical_paired(PairedStatistic(n=12, t=2.0, se=0.3))
    assert [code.value for code in res.diagnostics] == ["r12_defaulted"]


def test_to_dict_is_flat():
    res = critical_one_sample(OneSampleStatistic(n=10, t=1.5, se=0.2))
    assert res.to_dict() == {
        "d": res.d,
        "dc": res.dc,
        "bc": res.bc,
        "se": res.se,
        "df": res.df,
        "qc": res.qc,
        "g": res.g,
        "gc": res.gc,
    }


def test_hedges_correction_keeps_nan():
    raw = OneSampleResult(d=math.nan, dc=0.5, bc=math.nan, se=math.nan, df=9.0, qc=2.26)
    corrected = apply_hedges_correction(raw)
    assert math.isnan(corrected.g)
    assert 0 < corrected.gc < 0.5


def test_critical_value_equals_quantile_times_se():
    res = critical_t2s(m1=3.0, m2=2.4, sd1=1.1, sd2=0.9, n1=40, n2=35, var_equal=True)
    assert isinstance(res, TwoSampleResult)
    assert res.bc == pytest.approx(res.qc * res.se)


def test_results_are_immutable():
    res = critical_t1s(m=0.5, s=1, n=30)
    with pytest.raises(AttributeError):
        res.d = 1.0


def test_config_and_alpha_resolver_share_validation():
    with pytest.raises(InvalidArgument, match="hypothesis must be one of"):
        CriticalConfig(hypothesis="two.tailed").validate()
    with pytest.raises(InvalidArgument, match=r"conf_level must be in \(0, 1\)"):
        CriticalConfig(conf_level=1.5).validate()
