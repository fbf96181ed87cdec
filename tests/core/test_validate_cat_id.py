"""Cat id validation — pure parsing and range checks.

Tests cover:
    - every id in 1..150 is accepted and returned as int
    - 0, 151, negatives and int32 overflow are rejected with the right reason
    - non-digit input (floats, whitespace, hex, unicode digits) is NOT_INTEGER
"""

import pytest

from catapi.core.domain_types import MAX_CAT_ID, MIN_CAT_ID, ValidationFailure
from catapi.core.errors import CatIdValidationError, ErrorKind, InvalidInputError
from catapi.core.validate_cat_id import validate_cat_id


def test_accepts_every_id_in_range():
    for i in range(MIN_CAT_ID, MAX_CAT_ID + 1):
        assert validate_cat_id(str(i)) == i


def test_accepts_explicit_plus_sign():
    assert validate_cat_id("+7") == 7


def test_accepts_leading_zeros():
    assert validate_cat_id("007") == 7


@pytest.mark.parametrize("raw", ["0", "151", "-1", "1000", "2147483647"])
def test_rejects_out_of_range(raw):
    with pytest.raises(CatIdValidationError) as exc_info:
        validate_cat_id(raw)
    assert exc_info.value.reason is ValidationFailure.OUT_OF_RANGE


@pytest.mark.parametrize(
    "raw", ["", "abc", "1.0", " 1", "1 ", "0x10", "1_0", "١", "--1", "9" * 5000],
)
def test_rejects_non_integer(raw):
    with pytest.raises(CatIdValidationError) as exc_info:
        validate_cat_id(raw)
    assert exc_info.value.reason is ValidationFailure.NOT_INTEGER


def test_int32_overflow_is_not_integer():
    with pytest.raises(CatIdValidationError) as exc_info:
        validate_cat_id("2147483648")
    assert exc_info.value.reason is ValidationFailure.NOT_INTEGER


def test_validation_error_is_invalid_input_kind():
    with pytest.raises(InvalidInputError) as exc_info:
        validate_cat_id("0")
    err = exc_info.value
    assert err.kind is ErrorKind.INVALID_INPUT
    assert err.http_status == 400
    assert err.context.details == {"reason": "OUT_OF_RANGE", "field": "id"}


def test_long_input_is_truncated_in_message():
    with pytest.raises(CatIdValidationError) as exc_info:
        validate_cat_id("x" * 500)
    assert len(exc_info.value.message) < 100
