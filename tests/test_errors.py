import io

import pytest

from melp_runtime.errors import (
    ArrayBoundsError,
    MelpRuntimeError,
    panic_array_bounds,
    panic_division_by_zero,
    report,
    runtime_error,
)


def test_runtime_error_raises_with_message():
    with pytest.raises(MelpRuntimeError) as info:
        runtime_error("List index out of bounds")
    assert info.value.message == "List index out of bounds"
    assert info.value.exit_code == 43


def test_runtime_error_without_message_uses_default():
    with pytest.raises(MelpRuntimeError) as info:
        runtime_error(None)
    assert info.value.message == "Unknown error"


def test_division_by_zero_message():
    with pytest.raises(MelpRuntimeError) as info:
        panic_division_by_zero()
    assert str(info.value) == "Division by zero is not allowed!"


def test_array_bounds_error_fields():
    with pytest.raises(ArrayBoundsError) as info:
        panic_array_bounds(7, 3, "tokens")
    err = info.value
    assert err.exit_code == 42
    assert err.index == 7
    assert err.length == 3
    assert err.array_name == "tokens"
    assert err.details[0] == "Array: tokens"
    assert err.details[1] == "Index: 7"


def test_array_bounds_error_is_index_and_runtime_error():
    with pytest.raises(IndexError):
        panic_array_bounds(1, 1, "a")
    with pytest.raises(MelpRuntimeError):
        panic_array_bounds(1, 1, "a")


def test_array_bounds_unknown_name():
    err = ArrayBoundsError(5, 2)
    assert err.array_name == "(unknown)"
    assert "Array: (unknown)" in err.details


def test_report_generic_banner():
    stream = io.StringIO()
    report(MelpRuntimeError("Division by zero is not allowed!"), stream)
    text = stream.getvalue()
    assert text.startswith("\n")
    assert text.endswith("\n\n")
    assert "RUNTIME ERROR" in text
    assert "Division by zero is not allowed!\n" in text
    assert "\033[1;31m" in text
    assert "\033[0m" in text


def test_report_bounds_banner():
    stream = io.StringIO()
    report(ArrayBoundsError(4, 3, "tokens"), stream)
    text = stream.getvalue()
    assert "RUNTIME ERROR: Array Index Out of Bounds" in text
    assert "Array: tokens\n" in text
    assert "Index: 4\n" in text
    lines = text.splitlines()
    valid = [line for line in lines if line.startswith("Valid range: 0 to ")]
    assert valid == ["Valid range: 0 to 2"]


def test_report_rule_lines_are_consistent():
    stream = io.StringIO()
    report(MelpRuntimeError("boom"), stream)
    rules = [line for line in stream.getvalue().splitlines() if "===" in line]
    assert len(rules) == 3
    assert len(set(rules)) == 1


def test_report_foreign_exception():
    stream = io.StringIO()
    report(ValueError("bad value"), stream)
    text = stream.getvalue()
    assert "RUNTIME ERROR" in text
    assert "bad value\n" in text