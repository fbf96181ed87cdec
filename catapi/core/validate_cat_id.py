"""Cat Identifier Validation — guards the store from malformed and oversized ids.

Invariants:
    - validate_cat_id is PURE: no IO, no logging, no pool access
    - Only optionally signed ASCII digit runs are integers ("1.0", " 1", "1_0", "٣" are not)
    - Integers outside the 32-bit column range are NOT_INTEGER, like a failed parse
    - Accepted range is MIN_CAT_ID..MAX_CAT_ID inclusive

Design Decisions:
    - Explicit function over Path(ge=, le=): decoupled from FastAPI parameter binding,
      so a bad id surfaces as INVALID_INPUT instead of a framework 422
"""

import re

from catapi.core.domain_types import (
    CatId, INT32_MAX, INT32_MIN, MAX_CAT_ID, MIN_CAT_ID, ValidationFailure,
)
from catapi.core.errors import CatIdValidationError

# 10 digits covers every int32; longer runs are rejected before int()
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]{1,10}")


def validate_cat_id(raw: str) -> CatId:
    """Parse a raw path segment into a CatId or raise CatIdValidationError."""
    if not _INTEGER_PATTERN.fullmatch(raw):
        raise CatIdValidationError(
            raw, ValidationFailure.NOT_INTEGER,
            f"Cat id must be an integer, got '{_truncate(raw)}'",
        )

    value = int(raw)
    if not INT32_MIN <= value <= INT32_MAX:
        raise CatIdValidationError(
            raw, ValidationFailure.NOT_INTEGER,
            f"Cat id must be an integer, got '{_truncate(raw)}'",
        )

    if not MIN_CAT_ID <= value <= MAX_CAT_ID:
        raise CatIdValidationError(
            raw, ValidationFailure.OUT_OF_RANGE,
            f"Cat id must be between {MIN_CAT_ID} and {MAX_CAT_ID}, got {value}",
        )

    return CatId(value)


def _truncate(raw: str, limit: int = 32) -> str:
    return raw if len(raw) <= limit else raw[:limit] + "..."
