#!/usr/bin/env/ python
# coding: utf-8


from collections.abc import Mapping

import numpy as np

from ..exceptions import InvalidInput, InsufficientData, InvalidLag, UnsupportedCombination
from ..utils.logging import get_logger
from .functions import mean, sum_of_squares

__all__ = ["compute", "coefficient", "select_formula", "Autocorrelation"]

logger = get_logger(__name__)


def _as_series(data):
    '''
    Coerce data into a one dimensional float array without touching the caller's object.
    '''
    if data is None:
        raise InvalidInput("No value for data for calculating coefficient.")
    if isinstance(data, (str, bytes, Mapping)) or np.isscalar(data):
        raise InvalidInput("data must be a sequence of real numbers, got {}.".format(type(data).__name__))

    try:
        x = np.array(data, dtype=float)
    except (TypeError, ValueError) as err:
        raise InvalidInput("data must be a sequence of real numbers.") from err

    if x.ndim != 1:
        raise InvalidInput("data must be one dimensional, got ndim={}.".format(x.ndim))
    if x.size == 0:
        raise InvalidInput("No data are available for calculating coefficient.")
    if x.size < 2:
        raise InsufficientData("Can't autocorrelate a dataset of only one element.")
    return x


def _as_lag(lag, n):
    if lag is None:
        return 1
    if isinstance(lag, (bool, np.bool_)) or not isinstance(lag, (int, np.integer)):
        raise InvalidLag("lag must be an integer, got {!r}.".format(lag))
    lag = int(lag)
    if lag == 0:
        lag = 1
    if lag < 0 or lag >= n:
        raise InvalidLag("lag must be between 1 and {} for {} data, got {}.".format(n-1, n, lag))
    return lag


def select_formula(exact=False, simple=True, circular=False):
    '''
    Return the name of the formula used for a combination of options.

    Input:
    exact: bool. Kendall's sample coefficient with lag-window means.
    simple: bool. Drop the (N-k)/N divisors of the approximate forms.
    circular: bool. Wrap the lagged partner around the end of the series.

    Output:
    name: one of "approx_simple", "approx_corrected", "exact",
        "circular_simple", "circular_corrected".

    '''
    if exact and circular:
        raise UnsupportedCombination("No formula is defined for exact and circular together.")
    if exact:
        return "exact"
    prefix = "circular" if circular else "approx"
    return prefix + ("_simple" if simple else "_corrected")


# Each formula returns (numerator, denominator) so degenerate
# denominators are detected in one place.

def _approx(x, k, simple):
    # Kendall Eq. 3.36
    n = len(x)
    mu = mean(x)
    sum_resid = np.sum((x[0:n-k] - mu) * (x[k:n] - mu))
    sum_sq = sum_of_squares(x, mu)
    if simple:
        return sum_resid, sum_sq
    return sum_resid / (n-k), sum_sq / n


def _circular(x, k, simple):
    n = len(x)
    mu = mean(x)
    # out of range partners fall back to x[k], not x[(i+k) % n]
    partner = np.arange(n) + k
    partner[partner >= n] = k
    sum_resid = np.sum((x - mu) * (x[partner] - mu))
    sum_sq = sum_of_squares(x, mu)
    if simple:
        return sum_resid, sum_sq
    return sum_resid / (n-k), sum_sq / n


def _exact(x, k):
    # Kendall (1973) Eq. 3.35, p. 40
    n = len(x)
    c0 = 1.0 / (n-k)
    head, tail = x[0:n-k], x[k:n]

    mean_head = c0 * np.sum(head)
    mean_tail = c0 * np.sum(tail)

    numerator = c0 * np.sum((head - mean_head) * (tail - mean_tail))
    denominator = np.sqrt(c0 * np.sum((head - mean_head)**2.0) * c0 * np.sum((tail - mean_tail)**2.0))
    return numerator, denominator


_FORMULAS = {
    "approx_simple": lambda x, k: _approx(x, k, True),
    "approx_corrected": lambda x, k: _approx(x, k, False),
    "exact": _exact,
    "circular_simple": lambda x, k: _circular(x, k, True),
    "circular_corrected": lambda x, k: _circular(x, k, False),
}


def compute(data=None, lag=1, exact=False, simple=True, circular=False):
    '''
    Return the autocorrelation coefficient of a series at a given lag.

    By default this is the population estimate used by most statistics
    packages: residuals are taken about the mean of the whole series, the
    denominator is the variance of the whole series and the divisor factors
    are dropped (Chatfield 1975). Set simple=False to keep the (N-k) and N
    divisors, or exact=True for the sample coefficient of Kendall (1973)
    Eq. 3.35, which uses the means of the first N-k and the last N-k values.

    With circular=True every element is paired with x[i+k], or with x[k]
    once i+k runs past the end of the series. This is not a modular
    wrap-around, and it is only defined for the approximate estimate.

    Input:
        data: array-like[N,], N >= 2. Not modified.
        lag: int, 1 <= lag <= N-1. None or 0 means 1.
        exact: bool. Default False.
        simple: bool. Default True. Ignored when exact is True.
        circular: bool. Default False.

    Output:
        rk: float. Not clipped to [-1, 1]; nan or inf when the series has
            no variance.

    '''
    x = _as_series(data)
    n = len(x)
    k = _as_lag(lag, n)
    name = select_formula(exact=bool(exact), simple=bool(simple), circular=bool(circular))
    logger.debug("formula=%s N=%d lag=%d", name, n, k)

    numerator, denominator = _FORMULAS[name](x, k)
    if denominator == 0:
        logger.warning("Zero variance in %s coefficient for N=%d, lag=%d; result is not finite.", name, n, k)

    with np.errstate(divide="ignore", invalid="ignore"):
        rk = numerator / denominator
    return float(rk)


coefficient = compute


class Autocorrelation():
    def __init__(self):
        '''
        Object access to the coefficient, holding no state between calls.

        acorr = Autocorrelation()
        rk = acorr.coefficient(data=[1, 2, 4, 3], lag=1, exact=False, simple=True)

        '''
        pass

    def coefficient(self, data=None, lag=1, exact=False, simple=True, circular=False):
        return compute(data, lag=lag, exact=exact, simple=simple, circular=circular)

    def compute(self, data=None, lag=1, exact=False, simple=True, circular=False):
        return compute(data, lag=lag, exact=exact, simple=simple, circular=circular)
