import logging

import pytest

from result_demo.processors.divide import divide, describe_result, log_result
from result_demo.errors import Ok, Err, AppError, ErrorKind, DIVIDE_BY_ZERO_MESSAGE


@pytest.mark.parametrize("a,b,q", [
    (7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3),
    (0, 5, 0), (6, 3, 2), (1, 2, 0), (-1, 2, 0),
    (10**30 + 1, 7, (10**30 + 1) // 7),
])
def test_quotient_truncates_toward_zero(a, b, q):
    r = divide(a, b)
    assert isinstance(r, Ok)
    assert r.value == q


@pytest.mark.parametrize("a", [10, 0, -3, 2**63])
def test_zero_divisor_is_err_not_exception(a):
    r = divide(a, 0)
    assert isinstance(r, Err)
    assert r.error == AppError(ErrorKind.DIVISION_BY_ZERO, DIVIDE_BY_ZERO_MESSAGE)
    assert r.error.message == "Cannot divide by zero"


def test_repeated_calls_are_equal():
    assert divide(10, 0) == divide(10, 0)
    assert divide(-9, 4) == divide(-9, 4) == Ok(-2)


def test_result_is_exactly_one_variant():
    for r in (divide(5, 1), divide(5, 0)):
        assert isinstance(r, Ok) != isinstance(r, Err)


def test_describe_result():
    assert describe_result(divide(7, 2)) == "Result: 3"
    assert describe_result(divide(10, 0)) == "Error: Cannot divide by zero"


def test_log_result_levels(caplog):
    caplog.set_level(logging.INFO, logger="result_demo.divide")
    assert log_result(divide(9, 3)) == "Result: 3"
    assert log_result(divide(10, 0)) == "Error: Cannot divide by zero"
    levels = [(rec.levelno, rec.getMessage()) for rec in caplog.records if rec.name == "result_demo.divide"]
    assert levels == [(logging.INFO, "Result: 3"), (logging.WARNING, "Error: Cannot divide by zero")]
