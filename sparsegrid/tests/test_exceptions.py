import pytest

from sparsegrid.exceptions import (
    DimensionMismatch,
    IndexOutOfBound,
    InvalidValue,
    SparsegridException,
    format_error_message,
)


def test_format_error_message():
    assert format_error_message("Headline!", {"height": 2, "width": 3}) == (
        "Headline!\n\nheight: 2\nwidth: 3\n"
    )
    assert format_error_message("Headline!", {}) == "Headline!\n\n"


def test_dimension_mismatch_payload():
    exc = DimensionMismatch("Cannot do it!", height_a=1, width_a=4)
    assert exc.operation_message == "Cannot do it!"
    assert list(exc.fields) == ["height_a", "width_a"]
    assert exc.message == "Cannot do it!\n\nheight_a: 1\nwidth_a: 4\n"
    assert str(exc) == exc.message
    assert isinstance(exc, ArithmeticError)
    assert isinstance(exc, SparsegridException)


def test_hierarchy():
    assert issubclass(IndexOutOfBound, IndexError)
    assert issubclass(InvalidValue, ValueError)
    with pytest.raises(SparsegridException):
        raise InvalidValue("bad")
