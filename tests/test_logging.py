import logging
import math

import pytest

from autocorrelation import compute
from autocorrelation.tools import series
from autocorrelation.utils import get_logger


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def records():
    handler = _ListHandler()
    series.logger.addHandler(handler)
    yield handler.records
    series.logger.removeHandler(handler)


def test_get_logger_is_idempotent():
    first = get_logger("autocorrelation.test_scope")
    second = get_logger("autocorrelation.test_scope", console_level=logging.WARNING)
    assert first is second
    assert len(second.handlers) == 1
    assert second.handlers[0].level == logging.WARNING
    assert second.propagate is False


def test_zero_variance_logs_warning(records):
    assert math.isnan(compute([1.0, 1.0, 1.0]))
    warnings = [r for r in records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "approx_simple" in warnings[0].getMessage()


def test_formula_choice_logged_at_debug(records):
    compute([1, 2, 4, 3], lag=2, exact=True)
    debug = [r.getMessage() for r in records if r.levelno == logging.DEBUG]
    assert debug == ["formula=exact N=4 lag=2"]


def test_no_runtime_warning_on_zero_variance(recwarn):
    compute([2, 2, 2, 2], simple=False)
    assert not [w for w in recwarn if issubclass(w.category, RuntimeWarning)]
