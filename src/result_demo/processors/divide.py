from __future__ import annotations
from typing import Optional
import logging

from result_demo.errors import Ok, Err, Result, AppError, ErrorKind, DIVIDE_BY_ZERO_MESSAGE

LOG_DIVIDE = logging.getLogger("result_demo.divide")


def divide(dividend: int, divisor: int) -> Result[int, AppError]:
    """
    Integer division reported as a Result instead of raising.

    A zero divisor yields Err(DIVISION_BY_ZERO, "Cannot divide by zero").
    Otherwise the quotient is truncated toward zero, so divide(-7, 2) is -3,
    not the -4 that Python's floor division would give.
    """
    if divisor == 0:
        return Err(AppError(ErrorKind.DIVISION_BY_ZERO, DIVIDE_BY_ZERO_MESSAGE))
    q = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        q = -q
    return Ok(q)


def describe_result(result: Result[int, AppError]) -> str:
    """Render a division outcome the way the demo prints it to the console."""
    if isinstance(result, Ok):
        return f"Result: {result.value}"
    err = result.error
    message = err.message if isinstance(err, AppError) else str(err)
    return f"Error: {message}"


def log_result(result: Result[int, AppError], logger: Optional[logging.Logger] = None) -> str:
    """Log the rendered outcome (INFO on Ok, WARNING on Err) and return the line."""
    log = logger or LOG_DIVIDE
    line = describe_result(result)
    if isinstance(result, Ok):
        log.info("%s", line)
    else:
        log.warning("%s", line)
    return line
