import dataclasses

import pytest

from result_demo.errors import Ok, Err, AppError, ErrorKind


def test_app_error_str():
    assert str(AppError(ErrorKind.DIVISION_BY_ZERO, "Cannot divide by zero")) == "DIVISION_BY_ZERO: Cannot divide by zero"
    assert str(AppError(ErrorKind.CONFIG, "bad", "line 3")) == "CONFIG: bad (source: line 3)"


def test_variants_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Ok(1).value = 2  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        Err(AppError(ErrorKind.CONFIG, "x")).error = None  # type: ignore[misc]
