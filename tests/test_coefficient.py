import numpy as np
import pytest
from scipy import stats

from criticalvalue import InvalidArgument, critical_coef


def test_t_method_with_n_and_p():
    res = critical_coef([0.1, 0.25, 0.4], n=50, p=3)
    tc = abs(stats.t.ppf(0.025, 46))
    assert res.test == "t"
    np.testing.assert_allclose(res.bc, tc * np.array([0.1, 0.25, 0.4]))


def test_df_takes_precedence_over_n_and_p():
    res = critical_coef(0.2, n=50, p=3, df=10)
    assert res.bc == pytest.approx(abs(stats.t.ppf(0.025, 10)) * 0.2)


def test_z_method_uses_standard_normal():
    res = critical_coef(np.array([0.5, 1.0]), df=20, test="z", hypothesis="greater")
    np.testing.assert_allclose(res.bc, stats.norm.ppf(0.95) * np.array([0.5, 1.0]))
    assert res.test == "z"


def test_scalar_input_returns_float():
    res = critical_coef(0.3, df=100)
    assert isinstance(res.bc, float)
    assert set(res.to_dict()) == {"bc", "test"}


def test_missing_degrees_of_freedom_is_fatal():
    with pytest.raises(InvalidArgument):
        critical_coef(0.3)
    with pytest.raises(InvalidArgument):
        critical_coef(0.3, n=40)
    with pytest.raises(InvalidArgument):
        critical_coef(0.3, p=2)


def test_unknown_test_method_is_fatal():
    with pytest.raises(InvalidArgument):
        critical_coef(0.3, df=10, test="chisq")


def test_nan_standard_error_is_reported_missing():
    res = critical_coef([0.1, float("nan")], df=30)
    assert res.missing == ("bc",)
    assert critical_coef([0.1, 0.2], df=30).missing == ()
