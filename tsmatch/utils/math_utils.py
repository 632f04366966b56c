"""math utility functions for the TrueSkill updates"""
import logging
import math
import numpy as np
from scipy.special import erfc, erfcinv
from tsmatch.utils.constants import SQRT_2, INV_SQRT_2, SQRT_2PI, MIN_CDF

logger = logging.getLogger(__name__)


def pdf(x):
    """pdf of standard normal"""
    return np.exp(-0.5 * np.square(x)) / SQRT_2PI


def cdf(x):
    """
    cdf of standard normal

    goes through erfc rather than erf so the lower tail keeps its precision
    """
    return 0.5 * erfc(-np.asarray(x) * INV_SQRT_2)


def inverse_cdf(p):
    """quantile function of standard normal, only defined for p in (0, 1)"""
    return -SQRT_2 * erfcinv(2.0 * np.asarray(p))


def draw_margin(draw_probability, num_players, beta):
    """the performance gap below which a match counts as a draw"""
    if draw_probability == 0.0:
        return 0.0
    return float(inverse_cdf((1.0 + draw_probability) / 2.0)) * math.sqrt(num_players) * beta


def v_and_w_win_scalar(t, eps):
    """calculate v and w for a win in a scalar fashion"""
    diff = t - eps
    denom = float(cdf(diff))
    if denom < MIN_CDF:
        # the cdf underflowed, as diff goes to -inf v tends to -diff and w to 1
        logger.debug('win correction underflow at diff=%s', diff)
        return -diff, 1.0
    v = float(pdf(diff)) / denom
    w = v * (v + diff)
    return v, w


def v_and_w_draw_scalar(t, eps):
    """
    calculate v and w for a draw in a scalar fashion

    the truncation window is evaluated for -|t| where the cdf is accurate and v is flipped back,
    v is odd in t and w is even
    """
    abs_t = math.fabs(t)
    sign = math.copysign(1.0, t)
    diff_a = eps - abs_t
    diff_b = -eps - abs_t

    shared_denom = float(cdf(diff_a) - cdf(diff_b))
    if shared_denom >= MIN_CDF:
        pdf_a = float(pdf(diff_a))
        pdf_b = float(pdf(diff_b))
        v = (pdf_b - pdf_a) / shared_denom
        w = (v**2.0) + ((diff_a * pdf_a) - (diff_b * pdf_b)) / shared_denom
        if 0.0 < w <= 1.0:
            return sign * v, w

    # zero width window or one whose cdf values lost their precision
    logger.debug('draw correction underflow at t=%s eps=%s', t, eps)
    return -t + (sign * eps), 1.0
