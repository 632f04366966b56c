"""checks of the normal distribution helpers against scipy.stats.norm and the truncated gaussian corrections"""
import math
import pytest
import numpy as np
from scipy.stats import norm, truncnorm
from tsmatch.utils.math_utils import (
    pdf,
    cdf,
    inverse_cdf,
    draw_margin,
    v_and_w_win_scalar,
    v_and_w_draw_scalar,
)


@pytest.mark.parametrize('x', [-12.0, -3.5, -1.0, 0.0, 0.7, 4.2])
def test_pdf_cdf(x):
    assert pdf(x) == pytest.approx(norm.pdf(x), rel=1e-12)
    assert cdf(x) == pytest.approx(norm.cdf(x), rel=1e-10)


def test_cdf_lower_tail_keeps_precision():
    assert cdf(-30.0) == pytest.approx(4.906713927148187e-198, rel=1e-10)
    assert cdf(-30.0) > 0.0


def test_vectorized():
    xs = np.array([-1.0, 0.0, 1.0])
    np.testing.assert_allclose(cdf(xs), norm.cdf(xs), rtol=1e-12)
    np.testing.assert_allclose(pdf(xs), norm.pdf(xs), rtol=1e-12)


@pytest.mark.parametrize('p', [1e-9, 0.025, 0.5, 0.55, 0.975])
def test_inverse_cdf(p):
    assert inverse_cdf(p) == pytest.approx(norm.ppf(p), rel=1e-10, abs=1e-15)


def test_inverse_cdf_inverts_cdf():
    assert inverse_cdf(cdf(1.3)) == pytest.approx(1.3, rel=1e-12)


def test_draw_margin():
    beta = 25.0 / 6.0
    assert draw_margin(0.1, 4, beta) == pytest.approx(norm.ppf(0.55) * 2.0 * beta, rel=1e-12)
    assert draw_margin(0.0, 4, beta) == 0.0


@pytest.mark.parametrize('eps', [0.0, 0.3])
@pytest.mark.parametrize('t', np.linspace(-5.0, 5.0, 11))
def test_win_w_in_unit_interval(t, eps):
    v, w = v_and_w_win_scalar(t, eps)
    assert v > 0.0
    assert 0.0 < w < 1.0


def test_win_underflow_uses_the_limit():
    v, w = v_and_w_win_scalar(-50.0, 0.0)
    assert v == 50.0
    assert w == 1.0


@pytest.mark.parametrize('diff', np.linspace(-39.0, -36.0, 25))
def test_win_w_continuous_across_underflow(diff):
    v, w = v_and_w_win_scalar(diff, 0.0)
    assert v == pytest.approx(-diff, rel=1e-3)
    assert 0.99 < w <= 1.0


@pytest.mark.parametrize('t', np.concatenate([np.linspace(36.0, 39.0, 25), np.linspace(-39.0, -36.0, 25)]))
def test_draw_w_valid_in_far_tail(t):
    v, w = v_and_w_draw_scalar(t, 0.0889)
    assert math.isfinite(v)
    assert 0.0 < w <= 1.0


def test_win_extreme_upset_is_large_but_finite():
    v, _ = v_and_w_win_scalar(-30.0, 0.0)
    assert v == pytest.approx(norm.pdf(-30.0) / norm.cdf(-30.0), rel=1e-9)
    assert v > 30.0


@pytest.mark.parametrize('eps', [0.1, 0.5, 1.0])
def test_draw_w_exceeds_v_squared_inside_window(eps):
    for t in np.linspace(-eps, eps, 9)[1:-1]:
        v, w = v_and_w_draw_scalar(t, eps)
        assert w > v**2.0
        assert 0.0 < w < 1.0


@pytest.mark.parametrize('t', np.linspace(-5.0, 5.0, 11))
def test_draw_w_in_unit_interval(t):
    _, w = v_and_w_draw_scalar(t, 0.3)
    assert 0.0 < w < 1.0


@pytest.mark.parametrize('t', [0.2, 1.5, 4.0])
def test_draw_v_odd_w_even(t):
    v_pos, w_pos = v_and_w_draw_scalar(t, 0.4)
    v_neg, w_neg = v_and_w_draw_scalar(-t, 0.4)
    assert v_pos < 0.0
    assert v_pos == -v_neg
    assert w_pos == w_neg


def test_draw_without_margin():
    assert v_and_w_draw_scalar(0.4, 0.0) == (-0.4, 1.0)


def test_draw_matches_truncated_normal_moments():
    # a standard normal truncated to [-eps - t, eps - t]
    t, eps = 0.8, 0.5
    lower, upper = -eps - t, eps - t
    v, w = v_and_w_draw_scalar(t, eps)
    assert v == pytest.approx(truncnorm.mean(lower, upper), rel=1e-9)
    assert 1.0 - w == pytest.approx(truncnorm.var(lower, upper), rel=1e-9)
