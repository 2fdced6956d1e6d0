#!/usr/bin/env/ python
# coding: utf-8


import numpy as np


__all__ = ["mean", "sum_of_squares"]

def mean(x):
    '''
    Return the arithmetic mean of a series.

    Input:
    x: array-like[N,]

    Output:
    mu: float

    '''
    return np.mean(np.asarray(x, dtype=float))


def sum_of_squares(x, mu):
    '''
    Return the sum of squared residuals of a series about mu.

    Input:
    x: array-like[N,]
    mu: float

    Output:
    s: float

    '''
    return np.sum((np.asarray(x, dtype=float) - mu)**2.0)
