#!/usr/bin/env/ python
# coding: utf-8
"""
autocorrelation Exceptions
==========================
Exception hierarchy for the autocorrelation package.

Every error derives from ValueError, so callers that already guard the
tools with ``except ValueError`` keep working.
"""

__all__ = ["AutocorrelationError", "InvalidInput", "InsufficientData",
        "InvalidLag", "UnsupportedCombination"]


class AutocorrelationError(ValueError):
    """Base class for all autocorrelation exceptions."""
    pass


class InvalidInput(AutocorrelationError):
    """Raised when data is missing, empty, or not a one dimensional sequence of numbers."""
    pass


class InsufficientData(AutocorrelationError):
    """Raised when the sequence has fewer than two elements."""
    pass


class InvalidLag(AutocorrelationError):
    """Raised when the lag is not an integer in [1, N-1]."""
    pass


class UnsupportedCombination(AutocorrelationError):
    """Raised when the requested options have no defined formula (circular with exact)."""
    pass
